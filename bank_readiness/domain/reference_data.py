"""Fixed reference lists and ordinal tables used by the readiness engine"""

from typing import Dict, Iterable

JURISDICTIONS = ("mainland", "freezone")
BUSINESS_MODELS = ("trading", "service", "consulting", "tech", "other")
RISK_CATEGORIES = ("low", "medium", "high")

# Monthly inflow bands in ascending order
MONTHLY_INFLOW_BANDS = (
    "Below AED 50,000",
    "AED 50,000 - 100,000",
    "AED 100,000 - 500,000",
    "AED 500,000 - 1,000,000",
    "AED 1,000,000 - 5,000,000",
    "Above AED 5,000,000",
)
LOWEST_INFLOW_BAND = MONTHLY_INFLOW_BANDS[0]
HIGHEST_INFLOW_BAND = MONTHLY_INFLOW_BANDS[-1]

TURNOVER_BAND_RANKS: Dict[str, int] = {band: rank for rank, band in enumerate(MONTHLY_INFLOW_BANDS, start=1)}
DEFAULT_TURNOVER_RANK = 2  # unknown bands compare as "AED 50,000 - 100,000"

SOURCE_OF_FUNDS_OPTIONS = (
    "Business Revenue",
    "Investment Returns",
    "Salary/Employment",
    "Sale of Property",
    "Inheritance",
    "Loan/Financing",
    "Savings",
    "Gift",
    "Other",
)
HIGH_RISK_SOURCES_OF_FUNDS = frozenset({"Gift", "Other", "Loan/Financing"})
MEDIUM_RISK_SOURCES_OF_FUNDS = frozenset({"Inheritance", "Sale of Property"})

HIGH_RISK_NATIONALITIES = frozenset(
    {"Iran", "Syria", "North Korea", "Russia", "Belarus", "Myanmar", "Cuba", "Venezuela"}
)
MEDIUM_RISK_NATIONALITIES = frozenset(
    {"Iraq", "Afghanistan", "Yemen", "Libya", "Sudan", "Somalia", "Pakistan", "Nigeria"}
)

# Sanctioned / high-risk and medium-risk origins of incoming payments
HIGH_RISK_COUNTRIES = frozenset(
    {"Iran", "Syria", "North Korea", "Russia", "Belarus", "Cuba", "Venezuela", "Myanmar"}
)
MEDIUM_RISK_COUNTRIES = frozenset(
    {"Iraq", "Afghanistan", "Yemen", "Libya", "Sudan", "Somalia", "Nigeria", "Pakistan"}
)

# Licence activity keywords, matched as case-insensitive substrings
HIGH_RISK_ACTIVITY_KEYWORDS = (
    "crypto",
    "bitcoin",
    "virtual asset",
    "forex",
    "money exchange",
    "remittance",
    "hawala",
    "gambling",
    "casino",
    "betting",
    "weapons",
    "firearms",
    "ammunition",
    "adult",
    "tobacco",
)
MEDIUM_RISK_ACTIVITY_KEYWORDS = (
    "real estate",
    "gold",
    "jewel",
    "precious metals",
    "diamond",
    "used cars",
    "car trading",
    "scrap",
    "construction",
    "import export",
    "general trading",
)

# Activities an Islamic bank cannot finance
SHARIA_RESTRICTED_KEYWORDS = (
    "alcohol",
    "pork",
    "gambling",
    "entertainment",
    "conventional finance",
)


def turnover_rank(band: str) -> int:
    """Ordinal rank (1-6) of a monthly inflow band"""
    return TURNOVER_BAND_RANKS.get(band, DEFAULT_TURNOVER_RANK)


def has_high_risk_nationality(nationality: str) -> bool:
    return nationality in HIGH_RISK_NATIONALITIES


def has_high_risk_payment_country(countries: Iterable[str]) -> bool:
    return any(country in HIGH_RISK_COUNTRIES for country in countries)


def has_medium_risk_payment_country(countries: Iterable[str]) -> bool:
    return any(country in MEDIUM_RISK_COUNTRIES for country in countries)
