"""Command-line interface for medical-sources."""

import asyncio
import json
from typing import Any, Iterable

import click

from medical_sources import operations
from medical_sources.constants import ADVERSE_EVENT_SEARCH_FIELDS, DRUG_SEARCH_FIELDS
from medical_sources.data_sources.base_client import DrugSearchError
from medical_sources.logging_config import configure_logging


def _echo_records(records: Iterable[Any]) -> None:
    payload = [r.model_dump(exclude_none=True) for r in records]
    click.echo(json.dumps(payload, indent=2))


@click.group()
@click.version_option(package_name="medical-sources")
@click.option("--log-level", default=None, help="Override LOG_LEVEL from settings")
def main(log_level: str | None):
    """medical-sources: query drug, safety, literature and health data sources."""
    configure_logging(log_level)


@main.command()
@click.argument("query")
@click.option("-n", "--limit", default=10, show_default=True, type=click.IntRange(1, 50))
@click.option(
    "-f",
    "--field",
    "search_field",
    type=click.Choice(sorted(DRUG_SEARCH_FIELDS)),
    help="Restrict the search to one label field",
)
def drugs(query: str, limit: int, search_field: str | None):
    """Search openFDA drug labels."""
    try:
        results = asyncio.run(operations.search_drugs(query, limit, search_field))
    except DrugSearchError as e:
        raise click.ClickException(
            f"{e}\n  query={e.query!r} field={e.search_field} "
            f"search={e.search_expression!r} url={e.url} "
            f"status={e.status_code} retried={e.retry_attempted}"
        )
    _echo_records(results)


@main.command("drug-ndc")
@click.argument("ndc")
def drug_ndc(ndc: str):
    """Look up one drug label by National Drug Code."""
    label = asyncio.run(operations.get_drug_by_ndc(ndc))
    _echo_records([label] if label else [])


@main.command("adverse-events")
@click.argument("query", required=False)
@click.option("-n", "--limit", default=10, show_default=True, type=click.IntRange(1, 50))
@click.option(
    "-f",
    "--field",
    "search_field",
    default="reactionmeddrapt",
    show_default=True,
    type=click.Choice(sorted(ADVERSE_EVENT_SEARCH_FIELDS)),
)
@click.option("--serious", is_flag=True, help="Only serious reports (QUERY is a drug name)")
def adverse_events(query: str | None, limit: int, search_field: str, serious: bool):
    """Search FAERS adverse event reports."""
    if serious:
        results = asyncio.run(operations.get_serious_adverse_events(query, limit))
    elif query:
        results = asyncio.run(
            operations.search_adverse_events(query, search_field, limit)
        )
    else:
        raise click.UsageError("QUERY is required unless --serious is given")
    _echo_records(results)


@main.command()
@click.argument("query")
@click.option("-n", "--max-results", default=10, show_default=True, type=click.IntRange(1, 20))
def literature(query: str, max_results: int):
    """Search PubMed articles."""
    _echo_records(asyncio.run(operations.search_pubmed_articles(query, max_results)))


@main.command()
@click.argument("query")
@click.option("-n", "--limit", default=None, type=click.IntRange(1, 20))
def scholar(query: str, limit: int | None):
    """Scrape Google Scholar results."""
    _echo_records(asyncio.run(operations.search_google_scholar(query, limit)))


@main.command()
@click.argument("indicator")
@click.option("-c", "--country", default=None, help="ISO3 country code, e.g. USA")
@click.option("-n", "--limit", default=10, show_default=True, type=click.IntRange(1, 50))
def health(indicator: str, country: str | None, limit: int):
    """Fetch World Bank health indicator values."""
    _echo_records(
        asyncio.run(operations.get_health_indicators(indicator, country, limit))
    )


@main.command()
@click.argument("query")
def rxnorm(query: str):
    """Search RxNorm drug nomenclature."""
    _echo_records(asyncio.run(operations.search_rxnorm_drugs(query)))


if __name__ == "__main__":
    main()
