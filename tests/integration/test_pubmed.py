"""Integration tests for PubMedClient."""

import pytest

from medical_sources.constants import ABSTRACT_PLACEHOLDER

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_search_articles_returns_records(pubmed_client):
    articles = await pubmed_client.search_articles("metformin colorectal cancer", 3)

    assert 1 <= len(articles) <= 3
    for article in articles:
        assert article.pmid.isdigit()
        assert article.title
        assert article.abstract  # text or placeholder, never empty
        assert article.journal
        assert article.publication_date


async def test_fetch_known_pmid(pubmed_client):
    articles = await pubmed_client.fetch_articles(["31978945"])

    assert len(articles) == 1
    article = articles[0]
    assert article.pmid == "31978945"
    assert article.abstract != ABSTRACT_PLACEHOLDER
    assert article.authors


async def test_nonsense_query_returns_empty(pubmed_client):
    assert await pubmed_client.search_articles("qqqxxzzznotarealterm12345") == []
