"""Project-wide constants."""

# -- Shared HTTP defaults ---------------------------------------------------
USER_AGENT: str = "medical-sources/1.0 (https://github.com/medical-sources)"
DEFAULT_MAX_RETRIES: int = 3
DEFAULT_BASE_DELAY: float = 1.0  # seconds

# -- openFDA ----------------------------------------------------------------
OPENFDA_BASE_URL: str = "https://api.fda.gov"
OPENFDA_LABEL_PATH: str = "/drug/label.json"
OPENFDA_EVENT_PATH: str = "/drug/event.json"
OPENFDA_RESPONSE_TIMEOUT: float = 30.0  # seconds, per read
OPENFDA_DEADLINE: float = 60.0  # seconds, whole request
OPENFDA_MIN_LIMIT: int = 1
OPENFDA_MAX_LIMIT: int = 50

# Optional field selector -> openFDA search field
DRUG_SEARCH_FIELDS: dict[str, str] = {
    "brand_name": "openfda.brand_name",
    "generic_name": "openfda.generic_name",
    "active_ingredient": "active_ingredient",
    "substance_name": "openfda.substance_name",
    "manufacturer_name": "openfda.manufacturer_name",
    "drug_interactions": "drug_interactions",
    "indications_and_usage": "indications_and_usage",
    "route": "openfda.route",
    "dosage_form": "openfda.dosage_form",
}

ADVERSE_EVENT_SEARCH_FIELDS: dict[str, str] = {
    "reactionmeddrapt": "patient.reaction.reactionmeddrapt",
    "medicinalproduct": "patient.drug.medicinalproduct",
}

# -- PubMed / NCBI ----------------------------------------------------------
PUBMED_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
PUBMED_SEARCH_PATH: str = "/esearch.fcgi"
PUBMED_FETCH_PATH: str = "/efetch.fcgi"
PUBMED_MAX_RESULTS: int = 20

ABSTRACT_PLACEHOLDER: str = "Abstract not available"
JOURNAL_PLACEHOLDER: str = "Journal information not available"
DATE_PLACEHOLDER: str = "Date not available"

# -- World Bank -------------------------------------------------------------
WORLD_BANK_BASE_URL: str = "https://api.worldbank.org/v2"
WORLD_BANK_SOURCE: str = "World Bank"
HEALTH_INDICATOR_MAX_LIMIT: int = 50

# Free-text keyword -> World Bank indicator code. Order matters: the first
# keyword contained in the query wins, so specific phrases come first.
HEALTH_INDICATOR_CODES: dict[str, str] = {
    "female life expectancy": "SP.DYN.LE00.FE.IN",
    "male life expectancy": "SP.DYN.LE00.MA.IN",
    "life expectancy": "SP.DYN.LE00.IN",
    "infant mortality": "SP.DYN.IMRT.IN",
    "neonatal mortality": "SH.DYN.NMRT",
    "under-5 mortality": "SH.DYN.MORT",
    "child mortality": "SH.DYN.MORT",
    "maternal mortality": "SH.STA.MMRT",
    "mortality rate": "SP.DYN.IMRT.IN",
    "birth rate": "SP.DYN.CBRT.IN",
    "death rate": "SP.DYN.CDRT.IN",
    "fertility rate": "SP.DYN.TFRT.IN",
    "population growth": "SP.POP.GROW",
    "population": "SP.POP.TOTL",
    "health expenditure": "SH.XPD.CHEX.GD.ZS",
    "immunization": "SH.IMM.MEAS",
    "tuberculosis": "SH.TBS.INCD",
    "hiv": "SH.DYN.AIDS.ZS",
    "physicians": "SH.MED.PHYS.ZS",
    "hospital beds": "SH.MED.BEDS.ZS",
}
INDICATOR_CODE_PATTERN: str = r"^[A-Z]{2,3}(\.[A-Z0-9]+)+$"

# -- RxNorm -----------------------------------------------------------------
RXNAV_BASE_URL: str = "https://rxnav.nlm.nih.gov/REST"

# -- Google Scholar ---------------------------------------------------------
GOOGLE_SCHOLAR_BASE_URL: str = "https://scholar.google.com/scholar"
SCHOLAR_NAVIGATION_TIMEOUT_MS: int = 30_000
SCHOLAR_SELECTOR_TIMEOUT_MS: int = 15_000
SCHOLAR_MIN_DELAY: float = 1.0  # seconds
SCHOLAR_MAX_DELAY: float = 3.0  # seconds
SCHOLAR_MIN_TITLE_LENGTH: int = 5

BROWSER_USER_AGENT: str = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
BROWSER_VIEWPORT: dict[str, int] = {"width": 1920, "height": 1080}
BROWSER_LAUNCH_ARGS: list[str] = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
    "--disable-web-security",
    "--disable-features=VizDisplayCompositor",
]
BROWSER_EXTRA_HEADERS: dict[str, str] = {
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}
