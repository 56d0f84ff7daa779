"""Google Scholar search result model."""

from pydantic import BaseModel, ConfigDict, model_validator


class ScrapedArticle(BaseModel):
    """One result row scraped from a Google Scholar listing.

    Only `title` is guaranteed; every other field is None when the page
    did not expose it.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    authors: str | None = None
    abstract: str | None = None
    journal: str | None = None
    year: str | None = None
    citations: str | None = None
    url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, values: dict) -> dict:
        if not isinstance(values, dict):
            return values
        return {
            key: (value.strip() or None) if isinstance(value, str) and key != "title" else value
            for key, value in values.items()
        }
