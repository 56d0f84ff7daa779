"""RxNorm (RxNav) drug nomenclature client."""

import logging
from typing import Any

from medical_sources.config import get_settings
from medical_sources.data_sources.base_client import BaseClient
from medical_sources.models.model_rxnorm import RxNormDrug

logger = logging.getLogger("medical_sources.data_sources.rxnorm")


class RxNormClient(BaseClient):
    """Client for querying the RxNav REST API."""

    def __init__(self, base_url: str | None = None) -> None:
        super().__init__()
        self.base_url = (base_url or get_settings().rxnav_base_url).rstrip("/")

    @property
    def _source_name(self) -> str:
        return "rxnorm"

    async def search_drugs(self, query: str) -> list[RxNormDrug]:
        """Return RxNorm concepts for a drug name; [] on any failure."""
        try:
            data = await self._get_json(f"{self.base_url}/drugs.json", {"name": query})
        except Exception as e:
            logger.warning("RxNorm search for %r failed: %s", query, e)
            return []
        return self._parse_concepts(data)

    @staticmethod
    def _parse_concepts(data: dict[str, Any]) -> list[RxNormDrug]:
        """Flatten every conceptGroup's conceptProperties into RxNormDrug."""
        groups = (data.get("drugGroup") or {}).get("conceptGroup") or []
        drugs = []
        for group in groups:
            for concept in group.get("conceptProperties") or []:
                if not concept.get("rxcui") or not concept.get("name"):
                    continue
                drugs.append(
                    RxNormDrug(
                        rxcui=concept["rxcui"],
                        name=concept["name"],
                        tty=concept.get("tty") or group.get("tty", ""),
                        language=concept.get("language", ""),
                        synonym=concept.get("synonym", ""),
                    )
                )
        return drugs
