"""medical-sources: resilient acquisition of drug, safety, literature and health data."""

__version__ = "1.0.0"
