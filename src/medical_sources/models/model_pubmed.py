"""
Pydantic models for PubMed data.

These are the data contracts between the PubMed client and its callers.
Callers receive these models - they never see raw API responses.
"""

from pydantic import BaseModel, ConfigDict


class BibliographicArticle(BaseModel):
    """A single PubMed article with metadata and abstract."""

    model_config = ConfigDict(frozen=True)

    pmid: str  # PubMed identifier (e.g. "38472913")
    title: str
    abstract: str  # labelled sections joined by a space, or a placeholder
    authors: list[str] = []  # "ForeName LastName" or LastName only
    journal: str
    publication_date: str  # "Jun 2023", "2023", or a placeholder
    doi: str | None = None
