"""Data models for medical-sources."""

from medical_sources.models.model_fda import AdverseEventReport, DrugLabel
from medical_sources.models.model_health import HealthIndicatorPoint
from medical_sources.models.model_pubmed import BibliographicArticle
from medical_sources.models.model_rxnorm import RxNormDrug
from medical_sources.models.model_scholar import ScrapedArticle

__all__ = [
    "AdverseEventReport",
    "BibliographicArticle",
    "DrugLabel",
    "HealthIndicatorPoint",
    "RxNormDrug",
    "ScrapedArticle",
]
