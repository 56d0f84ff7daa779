"""
Per-call acquisition entry points.

Each function opens its own client, runs one query and closes the client, so
calls share nothing but the read-only settings and can run concurrently.
"""

from medical_sources.data_sources.fda import FDAClient
from medical_sources.data_sources.pubmed import PubMedClient
from medical_sources.data_sources.rxnorm import RxNormClient
from medical_sources.data_sources.scholar import GoogleScholarScraper
from medical_sources.data_sources.world_bank import WorldBankClient
from medical_sources.models.model_fda import AdverseEventReport, DrugLabel
from medical_sources.models.model_health import HealthIndicatorPoint
from medical_sources.models.model_pubmed import BibliographicArticle
from medical_sources.models.model_rxnorm import RxNormDrug
from medical_sources.models.model_scholar import ScrapedArticle


async def search_drugs(
    query: str, limit: int = 10, search_field: str | None = None
) -> list[DrugLabel]:
    """Raises DrugSearchError when openFDA fails after retries."""
    async with FDAClient() as client:
        return await client.search_drugs(query, limit, search_field)


async def search_drugs_by_active_ingredient(
    ingredient: str, limit: int = 10
) -> list[DrugLabel]:
    async with FDAClient() as client:
        return await client.search_drugs_by_active_ingredient(ingredient, limit)


async def search_drug_interactions(drug_name: str, limit: int = 10) -> list[DrugLabel]:
    async with FDAClient() as client:
        return await client.search_drug_interactions(drug_name, limit)


async def get_drug_by_ndc(ndc: str) -> DrugLabel | None:
    async with FDAClient() as client:
        return await client.get_drug_by_ndc(ndc)


async def search_adverse_events(
    query: str, search_field: str = "reactionmeddrapt", limit: int = 10
) -> list[AdverseEventReport]:
    async with FDAClient() as client:
        return await client.search_adverse_events(query, search_field, limit)


async def search_adverse_events_by_drug(
    drug_name: str, limit: int = 10
) -> list[AdverseEventReport]:
    async with FDAClient() as client:
        return await client.search_adverse_events_by_drug(drug_name, limit)


async def get_serious_adverse_events(
    drug_name: str | None = None, limit: int = 10
) -> list[AdverseEventReport]:
    async with FDAClient() as client:
        return await client.get_serious_adverse_events(drug_name, limit)


async def search_pubmed_articles(
    query: str, max_results: int = 10
) -> list[BibliographicArticle]:
    async with PubMedClient() as client:
        return await client.search_articles(query, max_results)


async def get_health_indicators(
    indicator: str, country: str | None = None, limit: int = 10
) -> list[HealthIndicatorPoint]:
    async with WorldBankClient() as client:
        return await client.get_health_indicators(indicator, country, limit)


async def search_rxnorm_drugs(query: str) -> list[RxNormDrug]:
    async with RxNormClient() as client:
        return await client.search_drugs(query)


async def search_google_scholar(
    query: str, limit: int | None = None
) -> list[ScrapedArticle]:
    return await GoogleScholarScraper().search(query, limit)
