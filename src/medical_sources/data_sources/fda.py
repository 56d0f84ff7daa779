"""
openFDA client: drug labels and FAERS adverse event reports.

Label methods:
  1. search_drugs                      : Field-selectable label search (retried, raises DrugSearchError)
  2. search_drugs_by_active_ingredient : Labels containing an ingredient
  3. search_drug_interactions          : Labels whose interactions text mentions a drug
  4. get_drug_by_ndc                   : Single label by National Drug Code

Adverse event methods:
  5. search_adverse_events             : By reaction term or drug name
  6. search_adverse_events_by_drug     : By drug name
  7. get_serious_adverse_events        : Serious reports, optionally for one drug

Only `search_drugs` retries and propagates errors; every other method logs
the failure and returns an empty result.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from medical_sources.config import get_settings
from medical_sources.constants import (
    ADVERSE_EVENT_SEARCH_FIELDS,
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_RETRIES,
    DRUG_SEARCH_FIELDS,
    OPENFDA_DEADLINE,
    OPENFDA_EVENT_PATH,
    OPENFDA_LABEL_PATH,
    OPENFDA_MAX_LIMIT,
    OPENFDA_MIN_LIMIT,
    OPENFDA_RESPONSE_TIMEOUT,
)
from medical_sources.data_sources.base_client import BaseClient, DrugSearchError
from medical_sources.models.model_fda import (
    AdverseEventDrug,
    AdverseEventPatient,
    AdverseEventReaction,
    AdverseEventReport,
    DrugLabel,
)
from medical_sources.utils.retry import with_retry

logger = logging.getLogger("medical_sources.data_sources.fda")


class FDAClient(BaseClient):
    """Client for the openFDA drug label and drug adverse event APIs."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
    ) -> None:
        super().__init__(
            timeout_seconds=OPENFDA_DEADLINE,
            read_timeout_seconds=OPENFDA_RESPONSE_TIMEOUT,
        )
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.openfda_api_key
        self.base_url = (base_url or settings.openfda_base_url).rstrip("/")
        self.max_retries = max_retries
        self.base_delay = base_delay

    @property
    def _source_name(self) -> str:
        return "openfda"

    @property
    def label_url(self) -> str:
        return f"{self.base_url}{OPENFDA_LABEL_PATH}"

    @property
    def event_url(self) -> str:
        return f"{self.base_url}{OPENFDA_EVENT_PATH}"

    # -- Drug labels ----------------------------------------------------------

    async def search_drugs(
        self, query: str, limit: int = 10, search_field: str | None = None
    ) -> list[DrugLabel]:
        """Search drug labels, optionally restricted to one field.

        Transient failures (429, 5xx, connection errors) are retried with
        exponential backoff. Any failure that survives the retries is raised
        as DrugSearchError with the request context attached. An unknown
        `search_field` is raised the same way, before any request is made.
        """
        try:
            search = self.build_search_expression(query, search_field)
        except ValueError as e:
            raise DrugSearchError(
                e,
                query=query,
                search_field=search_field,
                search_expression=query,
                url=self.label_url,
                retry_attempted=False,
            ) from e
        params = self._build_params(search, limit)
        attempts = 0

        async def _fetch() -> dict[str, Any]:
            nonlocal attempts
            attempts += 1
            return await self._get_json(self.label_url, params)

        try:
            data = await with_retry(
                _fetch, max_retries=self.max_retries, base_delay=self.base_delay
            )
        except Exception as e:
            logger.error(
                "Drug search failed query=%r field=%s search=%r: %s",
                query,
                search_field,
                search,
                e,
            )
            raise DrugSearchError(
                e,
                query=query,
                search_field=search_field,
                search_expression=search,
                url=self.label_url,
                retry_attempted=attempts > 1,
            ) from e

        return self._parse_labels(data.get("results", []))

    async def search_drugs_by_active_ingredient(
        self, ingredient: str, limit: int = 10
    ) -> list[DrugLabel]:
        """Return labels whose active ingredient matches `ingredient`."""
        return await self._label_search(f'active_ingredient:"{ingredient}"', limit)

    async def search_drug_interactions(
        self, drug_name: str, limit: int = 10
    ) -> list[DrugLabel]:
        """Return labels whose drug interactions section mentions `drug_name`."""
        return await self._label_search(f'drug_interactions:"{drug_name}"', limit)

    async def get_drug_by_ndc(self, ndc: str) -> DrugLabel | None:
        """Return the label for a National Drug Code, or None."""
        labels = await self._label_search(f'openfda.product_ndc:"{ndc}"', 1)
        return labels[0] if labels else None

    # -- Adverse events -------------------------------------------------------

    async def search_adverse_events(
        self, query: str, search_field: str = "reactionmeddrapt", limit: int = 10
    ) -> list[AdverseEventReport]:
        """Search FAERS by reaction term (default) or medicinal product."""
        field = ADVERSE_EVENT_SEARCH_FIELDS.get(search_field)
        if field is None:
            logger.warning("Unknown adverse event search field %r", search_field)
            return []
        return await self._event_search(f'{field}:"{query}"', limit)

    async def search_adverse_events_by_drug(
        self, drug_name: str, limit: int = 10
    ) -> list[AdverseEventReport]:
        """Return adverse event reports naming `drug_name`."""
        field = ADVERSE_EVENT_SEARCH_FIELDS["medicinalproduct"]
        return await self._event_search(f'{field}:"{drug_name}"', limit)

    async def get_serious_adverse_events(
        self, drug_name: str | None = None, limit: int = 10
    ) -> list[AdverseEventReport]:
        """Return serious reports, optionally restricted to one drug."""
        search = "serious:1"
        if drug_name:
            field = ADVERSE_EVENT_SEARCH_FIELDS["medicinalproduct"]
            search += f' AND {field}:"{drug_name}"'
        return await self._event_search(search, limit)

    # -- Private helpers ------------------------------------------------------

    @staticmethod
    def build_search_expression(query: str, search_field: str | None) -> str:
        """Translate a field selector into an openFDA search expression.

        With no selector the query is passed through unchanged so openFDA
        searches across all fields.
        """
        if search_field is None:
            return query
        field = DRUG_SEARCH_FIELDS.get(search_field)
        if field is None:
            raise ValueError(
                f"Unknown search field {search_field!r}; "
                f"expected one of {sorted(DRUG_SEARCH_FIELDS)}"
            )
        return f'{field}:"{query}"'

    def _build_params(self, search: str, limit: int) -> dict[str, str]:
        """Build common query parameters for the openFDA API."""
        params: dict[str, str] = {
            "search": search,
            "limit": str(max(OPENFDA_MIN_LIMIT, min(limit, OPENFDA_MAX_LIMIT))),
        }
        if self._api_key:
            params["api_key"] = self._api_key
        return params

    async def _label_search(self, search: str, limit: int) -> list[DrugLabel]:
        try:
            data = await self._get_json(self.label_url, self._build_params(search, limit))
        except Exception as e:
            logger.warning("Label search %r failed: %s", search, e)
            return []
        return self._parse_labels(data.get("results", []))

    async def _event_search(self, search: str, limit: int) -> list[AdverseEventReport]:
        try:
            data = await self._get_json(self.event_url, self._build_params(search, limit))
        except Exception as e:
            logger.warning("Adverse event search %r failed: %s", search, e)
            return []
        reports = []
        for raw in data.get("results", []):
            report = self._parse_event(raw)
            if report is not None:
                reports.append(report)
        return reports

    @staticmethod
    def _parse_labels(results: list[dict[str, Any]]) -> list[DrugLabel]:
        """Validate raw label results, skipping records without effective_time."""
        labels = []
        for raw in results:
            try:
                labels.append(DrugLabel.model_validate(raw))
            except ValidationError as e:
                logger.warning("Skipping malformed label %s: %s", raw.get("id"), e)
        return labels

    @staticmethod
    def _parse_event(raw: dict[str, Any]) -> AdverseEventReport | None:
        """Parse a single event result into AdverseEventReport."""
        report_id = raw.get("safetyreportid")
        if not report_id:
            return None

        patient = None
        raw_patient = raw.get("patient")
        if raw_patient:
            patient = AdverseEventPatient(
                onset_age=raw_patient.get("patientonsetage"),
                onset_age_unit=raw_patient.get("patientonsetageunit"),
                sex=raw_patient.get("patientsex"),
                drugs=[
                    AdverseEventDrug(
                        medicinal_product=d.get("medicinalproduct"),
                        drug_indication=d.get("drugindication"),
                        drug_characterization=d.get("drugcharacterization"),
                        active_substance=(d.get("activesubstance") or {}).get(
                            "activesubstancename"
                        ),
                    )
                    for d in raw_patient.get("drug") or []
                ],
                reactions=[
                    AdverseEventReaction(
                        reaction=r.get("reactionmeddrapt"),
                        reaction_outcome=r.get("reactionoutcome"),
                    )
                    for r in raw_patient.get("reaction") or []
                ],
            )

        return AdverseEventReport(
            safety_report_id=str(report_id),
            serious=raw.get("serious"),
            seriousness_death=raw.get("seriousnessdeath"),
            seriousness_hospitalization=raw.get("seriousnesshospitalization"),
            seriousness_life_threatening=raw.get("seriousnesslifethreatening"),
            seriousness_disabling=raw.get("seriousnessdisabling"),
            seriousness_congenital_anomaly=raw.get("seriousnesscongenitalanomali"),
            seriousness_other=raw.get("seriousnessother"),
            receive_date=raw.get("receivedate"),
            occur_country=raw.get("occurcountry"),
            patient=patient,
        )
