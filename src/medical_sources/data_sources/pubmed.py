"""
PubMed API client.

Three methods:
  1. search         : Find PMIDs matching a query (esearch, JSON)
  2. fetch_articles : Fetch and parse full records for PMIDs (efetch, XML)
  3. search_articles: search + fetch_articles; empty list on any failure

The efetch XML is read with targeted regular expressions rather than a full
XML parse, so one malformed record only loses that record (or field) instead
of the whole batch.
"""

from __future__ import annotations

import html
import logging
import re

from medical_sources.config import get_settings
from medical_sources.constants import (
    ABSTRACT_PLACEHOLDER,
    DATE_PLACEHOLDER,
    JOURNAL_PLACEHOLDER,
    PUBMED_FETCH_PATH,
    PUBMED_MAX_RESULTS,
    PUBMED_SEARCH_PATH,
)
from medical_sources.data_sources.base_client import BaseClient
from medical_sources.models.model_pubmed import BibliographicArticle
from medical_sources.utils.strategies import first_match, regex_group

logger = logging.getLogger("medical_sources.data_sources.pubmed")

_ARTICLE_BLOCK = re.compile(r"<PubmedArticle>[\s\S]*?</PubmedArticle>")
_PMID = re.compile(r"<PMID[^>]*>(\d+)</PMID>")
_TITLE = re.compile(r"<ArticleTitle[^>]*>([\s\S]*?)</ArticleTitle>")
_ABSTRACT_TEXT = re.compile(r"<AbstractText([^>]*)>([\s\S]*?)</AbstractText>")
_LABEL_ATTR = re.compile(r'Label="([^"]*?)"')
_AUTHOR_BLOCK = re.compile(r"<Author(?:\s[^>]*)?>[\s\S]*?</Author>")
_LAST_NAME = re.compile(r"<LastName>([^<]+)</LastName>")
_FORE_NAME = re.compile(r"<ForeName>([^<]+)</ForeName>")
_JOURNAL_TITLE = re.compile(r"<Title>([^<]+)</Title>")
_PUB_DATE = re.compile(r"<PubDate>[\s\S]*?</PubDate>")
_YEAR = re.compile(r"<Year>(\d{4})</Year>")
_MONTH = re.compile(r"<Month>([^<]+)</Month>")
_INNER_TAG = re.compile(r"<[^>]+>")

_DOI_STRATEGIES = [
    regex_group(r'<ArticleId IdType="doi">([^<]+)</ArticleId>'),
    regex_group(r'<ELocationID EIdType="doi"[^>]*>([^<]+)</ELocationID>'),
]


def _clean(fragment: str) -> str:
    """Strip inline markup (<i>, <sup>, ...) and decode entities."""
    return html.unescape(_INNER_TAG.sub("", fragment)).strip()


def _first(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def parse_abstract(block: str) -> str:
    """Join every AbstractText section, prefixing labelled ones with 'LABEL: '."""
    parts = []
    for attrs, body in _ABSTRACT_TEXT.findall(block):
        label = _first(_LABEL_ATTR, attrs)
        text = _clean(body)
        parts.append(f"{label}: {text}" if label else text)
    return " ".join(parts) or ABSTRACT_PLACEHOLDER


def parse_authors(block: str) -> list[str]:
    """Return authors as 'ForeName LastName', or LastName alone."""
    authors = []
    for author_block in _AUTHOR_BLOCK.findall(block):
        last = html.unescape(_first(_LAST_NAME, author_block))
        fore = html.unescape(_first(_FORE_NAME, author_block))
        name = f"{fore} {last}" if fore else last
        if name:
            authors.append(name)
    return authors


def parse_publication_date(block: str) -> str:
    """Render PubDate as 'Month Year' or 'Year', else the placeholder."""
    pub_date = _PUB_DATE.search(block)
    if not pub_date:
        return DATE_PLACEHOLDER
    year = _first(_YEAR, pub_date.group(0))
    if not year:
        return DATE_PLACEHOLDER
    month = _first(_MONTH, pub_date.group(0))
    return f"{month} {year}" if month else year


def parse_article(block: str) -> BibliographicArticle | None:
    """Parse one <PubmedArticle> block; None when PMID or title is missing."""
    pmid = _first(_PMID, block)
    title = _clean(_first(_TITLE, block))
    if not pmid or not title:
        return None

    journal = _first(_JOURNAL_TITLE, block)
    return BibliographicArticle(
        pmid=pmid,
        title=title,
        abstract=parse_abstract(block),
        authors=parse_authors(block),
        journal=html.unescape(journal) if journal else JOURNAL_PLACEHOLDER,
        publication_date=parse_publication_date(block),
        doi=first_match(_DOI_STRATEGIES, block) or None,
    )


def parse_articles(xml_text: str) -> list[BibliographicArticle]:
    """Split an efetch body into article blocks and parse each one.

    Blocks missing a PMID or title are dropped; the rest are returned in
    document order. Never raises on malformed input.
    """
    articles = []
    for block in _ARTICLE_BLOCK.findall(xml_text or ""):
        article = parse_article(block)
        if article is None:
            logger.debug("Skipping PubmedArticle block without PMID/title")
            continue
        articles.append(article)
    return articles


class PubMedClient(BaseClient):
    """Client for querying PubMed/NCBI E-utilities."""

    def __init__(self, base_url: str | None = None) -> None:
        super().__init__()
        self.base_url = (base_url or get_settings().pubmed_base_url).rstrip("/")

    @property
    def _source_name(self) -> str:
        return "pubmed"

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{PUBMED_SEARCH_PATH}"

    @property
    def fetch_url(self) -> str:
        return f"{self.base_url}{PUBMED_FETCH_PATH}"

    async def search(self, query: str, max_results: int = 10) -> list[str]:
        """Search PubMed and return list of PMIDs, in relevance order."""
        params = {
            "db": "pubmed",
            "term": query,
            "retmode": "json",
            "retmax": max(1, min(max_results, PUBMED_MAX_RESULTS)),
        }
        data = await self._get_json(self.search_url, params)
        return list(data.get("esearchresult", {}).get("idlist", []))

    async def fetch_articles(self, pmids: list[str]) -> list[BibliographicArticle]:
        """Fetch full records for the given PMIDs in one efetch call."""
        if not pmids:
            return []
        params = {
            "db": "pubmed",
            "id": ",".join(pmids),
            "retmode": "xml",
        }
        xml_text = await self._get_text(self.fetch_url, params)
        return parse_articles(xml_text)

    async def search_articles(
        self, query: str, max_results: int = 10
    ) -> list[BibliographicArticle]:
        """Search then fetch. Returns [] on any failure, never a partial error."""
        try:
            pmids = await self.search(query, max_results)
            if not pmids:
                logger.info("No PubMed results for %r", query)
                return []
            return await self.fetch_articles(pmids)
        except Exception as e:
            logger.warning("PubMed search for %r failed: %s", query, e)
            return []
