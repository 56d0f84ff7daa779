"""RxNorm drug nomenclature models."""

from pydantic import BaseModel, ConfigDict


class RxNormDrug(BaseModel):
    """A concept returned by the RxNav /drugs endpoint."""

    model_config = ConfigDict(frozen=True)

    rxcui: str
    name: str
    tty: str = ""  # term type, e.g. "SBD", "SCD"
    language: str = ""
    synonym: str = ""
