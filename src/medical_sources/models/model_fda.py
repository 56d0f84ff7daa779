"""
Pydantic models for openFDA data.

Drug labels come from /drug/label.json, adverse event reports from
/drug/event.json. List-valued fields are either absent (None) or non-empty;
empty lists from the API are dropped on construction.
"""

from pydantic import BaseModel, ConfigDict, model_validator


class _LabelModel(BaseModel):
    """Frozen model whose empty list fields collapse to None."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_empty_lists(cls, values: dict) -> dict:
        if not isinstance(values, dict):
            return values
        return {
            key: (None if isinstance(value, list) and not value else value)
            for key, value in values.items()
        }


# ------------------------------------------------------------------
# Drug labels
# ------------------------------------------------------------------


class OpenFDAFields(_LabelModel):
    """Harmonised `openfda` block of a drug label."""

    brand_name: list[str] | None = None
    generic_name: list[str] | None = None
    manufacturer_name: list[str] | None = None
    route: list[str] | None = None
    dosage_form: list[str] | None = None
    substance_name: list[str] | None = None
    product_ndc: list[str] | None = None
    product_type: list[str] | None = None
    rxcui: list[str] | None = None
    pharm_class_epc: list[str] | None = None


class DrugLabel(_LabelModel):
    """A single structured product label."""

    id: str | None = None
    set_id: str | None = None
    effective_time: str
    openfda: OpenFDAFields = OpenFDAFields()

    # Free-text clinical sections, one entry per paragraph
    purpose: list[str] | None = None
    active_ingredient: list[str] | None = None
    inactive_ingredient: list[str] | None = None
    indications_and_usage: list[str] | None = None
    contraindications: list[str] | None = None
    warnings: list[str] | None = None
    boxed_warning: list[str] | None = None
    warnings_and_cautions: list[str] | None = None
    precautions: list[str] | None = None
    drug_interactions: list[str] | None = None
    adverse_reactions: list[str] | None = None
    dosage_and_administration: list[str] | None = None
    dosage_forms_and_strengths: list[str] | None = None
    overdosage: list[str] | None = None
    description: list[str] | None = None
    clinical_pharmacology: list[str] | None = None
    mechanism_of_action: list[str] | None = None
    pregnancy: list[str] | None = None
    pediatric_use: list[str] | None = None
    geriatric_use: list[str] | None = None
    do_not_use: list[str] | None = None
    ask_doctor: list[str] | None = None
    stop_use: list[str] | None = None
    when_using: list[str] | None = None
    keep_out_of_reach_of_children: list[str] | None = None
    storage_and_handling: list[str] | None = None
    how_supplied: list[str] | None = None

    @property
    def brand_name(self) -> str | None:
        return self.openfda.brand_name[0] if self.openfda.brand_name else None

    @property
    def generic_name(self) -> str | None:
        return self.openfda.generic_name[0] if self.openfda.generic_name else None

    @property
    def manufacturer_name(self) -> str | None:
        names = self.openfda.manufacturer_name
        return names[0] if names else None


# ------------------------------------------------------------------
# Adverse event reports
# ------------------------------------------------------------------


class AdverseEventDrug(_LabelModel):
    """A drug listed on an adverse event report, in report order."""

    medicinal_product: str | None = None
    drug_indication: str | None = None
    drug_characterization: str | None = None  # "1" suspect, "2" concomitant, "3" interacting
    active_substance: str | None = None


class AdverseEventReaction(_LabelModel):
    """A MedDRA reaction term on an adverse event report."""

    reaction: str | None = None
    reaction_outcome: str | None = None


class AdverseEventPatient(_LabelModel):
    """Patient block of an adverse event report."""

    onset_age: str | None = None
    onset_age_unit: str | None = None  # "801" = years
    sex: str | None = None  # "1" male, "2" female, "0" unknown
    drugs: list[AdverseEventDrug] | None = None
    reactions: list[AdverseEventReaction] | None = None


class AdverseEventReport(_LabelModel):
    """Single FAERS safety report.

    `serious` is "1" for serious and "2" otherwise. The seriousness_* flags are
    independent: a serious report need not set any of them.
    """

    safety_report_id: str
    serious: str | None = None
    seriousness_death: str | None = None
    seriousness_hospitalization: str | None = None
    seriousness_life_threatening: str | None = None
    seriousness_disabling: str | None = None
    seriousness_congenital_anomaly: str | None = None
    seriousness_other: str | None = None
    receive_date: str | None = None
    occur_country: str | None = None
    patient: AdverseEventPatient | None = None

    @property
    def suspect_drugs(self) -> list[str]:
        """Medicinal products characterised as suspect ("1")."""
        if not self.patient or not self.patient.drugs:
            return []
        return [
            d.medicinal_product
            for d in self.patient.drugs
            if d.drug_characterization == "1" and d.medicinal_product
        ]
