"""
Google Scholar scraper.

Google Scholar has no API, so each search drives a throwaway headless
Chromium through Playwright:

  1. pause for a random 1-3 s
  2. launch Chromium with automation fingerprints toned down
  3. open the search URL and wait for the network to settle
  4. wait for a result container (several layouts are known)
  5. read each container's fields through ordered selector chains
  6. close the browser, whatever happened

Any failure along the way is logged and reported as an empty result list.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable
from urllib.parse import quote, urljoin

from bs4 import BeautifulSoup, Tag
from playwright.async_api import Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from medical_sources.config import get_settings
from medical_sources.constants import (
    BROWSER_EXTRA_HEADERS,
    BROWSER_LAUNCH_ARGS,
    BROWSER_USER_AGENT,
    BROWSER_VIEWPORT,
    SCHOLAR_MAX_DELAY,
    SCHOLAR_MIN_DELAY,
    SCHOLAR_MIN_TITLE_LENGTH,
    SCHOLAR_NAVIGATION_TIMEOUT_MS,
    SCHOLAR_SELECTOR_TIMEOUT_MS,
)
from medical_sources.data_sources.base_client import DataSourceError
from medical_sources.models.model_scholar import ScrapedArticle
from medical_sources.utils.delay import random_delay
from medical_sources.utils.strategies import first_match, regex_group, regex_over

logger = logging.getLogger("medical_sources.data_sources.scholar")

# -- Page layout ------------------------------------------------------------

RESULT_CONTAINER_SELECTOR = ".gs_r, .gs_ri, [data-rp]"
RESULT_WAIT_SELECTOR = ".gs_r, .gs_ri"
FALLBACK_CONTAINER_SELECTOR = ".gs_r"

TITLE_SELECTORS = [".gs_rt a", ".gs_rt", "h3 a", "a[data-clk]", "h3"]
AUTHOR_SELECTORS = [
    ".gs_a",
    ".gs_authors",
    ".gs_venue",
    '[class*="author"]',
    '[class*="venue"]',
]
ABSTRACT_SELECTORS = [
    ".gs_rs",
    ".gs_rs_a",
    ".gs_snippet",
    '[class*="snippet"]',
    '[class*="abstract"]',
]
CITATION_SELECTORS = [
    '.gs_fl a[href*="cites"]',
    ".gs_fl a",
    ".gs_fl",
    '[class*="citation"]',
    'a[href*="cites"]',
]

YEAR_PATTERN = r"(?<!\d)(\d{4})(?!\d)"
JOURNAL_STRATEGIES = [
    regex_group(r" - ([^-]+)$"),
    regex_group(r", ([^,]+)$"),
    regex_group(r" in ([^,]+)"),
]


class ScrapingError(DataSourceError):
    """The results page did not contain anything recognisable."""

    def __init__(self, message: str):
        super().__init__("google_scholar", message)


# -- Extraction -------------------------------------------------------------


def _selector(css: str) -> Callable[[Tag], Tag | None]:
    return lambda element: element.select_one(css)


def _text(element: Tag | None) -> str:
    if element is None:
        return ""
    return " ".join(element.get_text().split())


def _select_text(container: Tag, selectors: list[str]) -> str:
    found = first_match([_selector(s) for s in selectors], container, default=None)
    return _text(found)


def extract_year(authors: str, title: str, abstract: str) -> str:
    """First 4-digit run in authors/venue, else title, else abstract."""
    return regex_over([authors, title, abstract], YEAR_PATTERN)


def extract_journal(authors: str) -> str:
    """Venue name from the author line: after ' - ', else ', ', else ' in '."""
    return first_match(JOURNAL_STRATEGIES, authors)


def _title_element(container: Tag) -> Tag | None:
    return first_match(
        [_selector(s) for s in TITLE_SELECTORS], container, default=None
    )


def extract_article(container: Tag, base_url: str = "") -> ScrapedArticle | None:
    """Build a ScrapedArticle from one result container.

    Missing fields degrade to None; the record is dropped only when the
    trimmed title is not longer than SCHOLAR_MIN_TITLE_LENGTH.
    """
    title_el = _title_element(container)
    if title_el is None or len(title_el.get_text().strip()) <= SCHOLAR_MIN_TITLE_LENGTH:
        return None
    title = _text(title_el)

    url = ""
    if title_el.name == "a" and title_el.get("href"):
        url = urljoin(base_url, title_el["href"])

    authors = _select_text(container, AUTHOR_SELECTORS)
    abstract = _select_text(container, ABSTRACT_SELECTORS)

    return ScrapedArticle(
        title=title,
        authors=authors,
        abstract=abstract,
        journal=extract_journal(authors),
        year=extract_year(authors, title, abstract),
        citations=_select_text(container, CITATION_SELECTORS),
        url=url,
    )


def extract_articles(html: str, base_url: str = "") -> list[ScrapedArticle]:
    """Run `extract_article` over every result container in a rendered page.

    Containers that resolve to an already seen title element (a `.gs_ri`
    inside its own `.gs_r`) are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    articles = []
    seen: set[int] = set()
    for container in soup.select(RESULT_CONTAINER_SELECTOR):
        title_el = _title_element(container)
        if title_el is None or id(title_el) in seen:
            continue
        seen.add(id(title_el))
        article = extract_article(container, base_url)
        if article is not None:
            articles.append(article)
    return articles


# -- Session ----------------------------------------------------------------


class GoogleScholarScraper:
    """Runs one disposable browser session per `search` call."""

    def __init__(self, base_url: str | None = None, headless: bool | None = None):
        settings = get_settings()
        self.base_url = base_url or settings.google_scholar_base_url
        self.headless = settings.headless if headless is None else headless

    def build_search_url(self, query: str) -> str:
        return f"{self.base_url}?q={quote(query, safe='')}&hl=en"

    @asynccontextmanager
    async def _browser_page(self) -> AsyncIterator[Page]:
        """Launch Chromium and yield a configured page; always closes the browser."""
        async with async_playwright() as pw:
            browser = await pw.chromium.launch(
                headless=self.headless,
                args=[*BROWSER_LAUNCH_ARGS, f"--user-agent={BROWSER_USER_AGENT}"],
            )
            try:
                context = await browser.new_context(
                    user_agent=BROWSER_USER_AGENT,
                    viewport=BROWSER_VIEWPORT,
                    extra_http_headers=BROWSER_EXTRA_HEADERS,
                    locale="en-US",
                )
                page = await context.new_page()
                yield page
            finally:
                await browser.close()
                logger.debug("Browser closed")

    async def _wait_for_results(self, page: Page) -> None:
        try:
            await page.wait_for_selector(
                RESULT_WAIT_SELECTOR, timeout=SCHOLAR_SELECTOR_TIMEOUT_MS
            )
        except PlaywrightTimeoutError:
            if await page.query_selector(FALLBACK_CONTAINER_SELECTOR) is None:
                raise ScrapingError(
                    "No search results found or page structure changed"
                )

    async def search(self, query: str, limit: int | None = None) -> list[ScrapedArticle]:
        """Scrape the first results page for `query`; [] on any failure."""
        url = self.build_search_url(query)
        try:
            await random_delay(SCHOLAR_MIN_DELAY, SCHOLAR_MAX_DELAY)
            async with self._browser_page() as page:
                logger.info("Navigating to %s", url)
                await page.goto(
                    url, wait_until="networkidle", timeout=SCHOLAR_NAVIGATION_TIMEOUT_MS
                )
                await self._wait_for_results(page)
                html = await page.content()
            articles = extract_articles(html, base_url=url)
        except Exception as e:
            logger.error("Error scraping Google Scholar for %r: %s", query, e)
            return []

        logger.info("Scraped %d articles for %r", len(articles), query)
        return articles[:limit] if limit else articles
