"""World Bank Open Data client for health indicators."""

from __future__ import annotations

import logging
import re
from typing import Any

from medical_sources.config import get_settings
from medical_sources.constants import (
    HEALTH_INDICATOR_CODES,
    HEALTH_INDICATOR_MAX_LIMIT,
    INDICATOR_CODE_PATTERN,
    WORLD_BANK_SOURCE,
)
from medical_sources.data_sources.base_client import BaseClient
from medical_sources.models.model_health import HealthIndicatorPoint

logger = logging.getLogger("medical_sources.data_sources.world_bank")

_CODE_RE = re.compile(INDICATOR_CODE_PATTERN)


def resolve_indicator_code(indicator: str) -> str | None:
    """Map a free-text indicator name or literal code to a World Bank code.

    Keyword containment against HEALTH_INDICATOR_CODES wins first, then a
    literal code such as "SP.DYN.LE00.IN". Returns None when neither applies.
    """
    text = indicator.strip().lower()
    if not text:
        return None
    for keyword, code in HEALTH_INDICATOR_CODES.items():
        if keyword in text:
            return code
    candidate = indicator.strip().upper()
    if _CODE_RE.match(candidate):
        return candidate
    return None


class WorldBankClient(BaseClient):
    """Client for the World Bank v2 indicator API."""

    def __init__(self, base_url: str | None = None) -> None:
        super().__init__()
        self.base_url = (base_url or get_settings().world_bank_base_url).rstrip("/")

    @property
    def _source_name(self) -> str:
        return "world_bank"

    async def get_health_indicators(
        self, indicator: str, country: str | None = None, limit: int = 10
    ) -> list[HealthIndicatorPoint]:
        """Return observations for an indicator, newest first.

        Unknown indicators and any request failure yield an empty list.
        """
        code = resolve_indicator_code(indicator)
        if code is None:
            logger.info("No indicator code for %r", indicator)
            return []

        url = f"{self.base_url}/country/{country or 'all'}/indicator/{code}"
        params = {
            "format": "json",
            "per_page": max(1, min(limit, HEALTH_INDICATOR_MAX_LIMIT)),
        }
        try:
            data = await self._get_json(url, params)
        except Exception as e:
            logger.warning("World Bank request for %s failed: %s", code, e)
            return []

        return self._parse_points(data)

    @staticmethod
    def _parse_points(data: Any) -> list[HealthIndicatorPoint]:
        """Parse the [metadata, rows] response shape, dropping null values.

        Error replies come back as a single-element list with a "message" key.
        """
        if not isinstance(data, list) or len(data) < 2 or not data[1]:
            return []

        points = []
        for row in data[1]:
            if row.get("value") is None:
                continue
            try:
                year = int(row.get("date", ""))
            except ValueError:
                continue
            country = row.get("country") or {}
            indicator = row.get("indicator") or {}
            points.append(
                HealthIndicatorPoint(
                    country=country.get("value", ""),
                    country_code=row.get("countryiso3code") or country.get("id", ""),
                    indicator=indicator.get("value", ""),
                    indicator_code=indicator.get("id", ""),
                    year=year,
                    value=float(row["value"]),
                    unit=row.get("unit") or "",
                    source=WORLD_BANK_SOURCE,
                )
            )
        return points
