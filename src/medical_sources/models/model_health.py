"""World Bank health indicator models."""

from pydantic import BaseModel, ConfigDict


class HealthIndicatorPoint(BaseModel):
    """A single (country, indicator, year) observation."""

    model_config = ConfigDict(frozen=True)

    country: str
    country_code: str
    indicator: str
    indicator_code: str
    year: int
    value: float | None
    unit: str = ""
    source: str
