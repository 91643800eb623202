"""Bank profile catalog - curated UAE bank appetite data

The catalog is loaded once at import time and never mutated. Ordering is
significant: the avoidance list is reported in catalog order.
"""

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from bank_readiness.domain.exceptions import BankNotFoundError
from bank_readiness.domain.models import BankProfile

MAINLAND = frozenset({"mainland"})
FREEZONE = frozenset({"freezone"})
BOTH = frozenset({"both"})

BANK_CATALOG: Tuple[BankProfile, ...] = (
    BankProfile(
        name="Emirates NBD",
        code="ENBD",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"service", "consulting", "tech"}),
        preferred_activity_keywords=("consulting", "technology", "software", "healthcare", "education"),
        avoid_activity_keywords=("crypto", "bitcoin", "blockchain", "nft", "forex", "gambling"),
        min_monthly_turnover_band="AED 100,000 - 500,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("Largest branch network in the UAE", "Strong digital business banking", "Trade finance capability"),
        weaknesses=("Strict KYC for new companies", "High minimum balance requirements"),
        processing_speed="medium",
        typical_approval_days=14,
        special_conditions=("Minimum average balance of AED 50,000",),
    ),
    BankProfile(
        name="First Abu Dhabi Bank",
        code="FAB",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=MAINLAND,
        preferred_business_models=frozenset({"trading", "service", "consulting"}),
        preferred_activity_keywords=("oil", "gas", "construction", "contracting", "logistics"),
        avoid_activity_keywords=("crypto", "gambling", "money exchange", "adult"),
        min_monthly_turnover_band="AED 500,000 - 1,000,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("Largest bank by assets", "Strong corporate and government relationships", "International network"),
        weaknesses=("Prefers mainland companies", "Strict compliance review for SMEs"),
        processing_speed="slow",
        typical_approval_days=21,
        special_conditions=("Relationship manager meeting required",),
    ),
    BankProfile(
        name="Abu Dhabi Commercial Bank",
        code="ADCB",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"service", "consulting", "tech", "trading"}),
        preferred_activity_keywords=("consulting", "retail", "technology", "marketing"),
        avoid_activity_keywords=("crypto", "forex", "gambling", "weapons"),
        min_monthly_turnover_band="AED 50,000 - 100,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("SME-friendly account packages", "Competitive fees", "Good online banking"),
        weaknesses=("Lengthy review for general trading licences",),
        processing_speed="medium",
        typical_approval_days=10,
    ),
    BankProfile(
        name="Mashreq Bank",
        code="MASHREQ",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"tech", "service", "consulting", "trading"}),
        preferred_activity_keywords=("technology", "software", "e-commerce", "import", "export"),
        avoid_activity_keywords=("crypto", "gambling", "adult"),
        min_monthly_turnover_band="AED 50,000 - 100,000",
        accepts_non_residents=True,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("Fast digital onboarding", "Strong trade finance desk", "Startup friendly"),
        weaknesses=("Account freezes reported after onboarding reviews",),
        processing_speed="fast",
        typical_approval_days=7,
    ),
    BankProfile(
        name="RAKBANK",
        code="RAKBANK",
        type="conventional",
        tier="tier2",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"trading", "service", "other"}),
        preferred_activity_keywords=("general trading", "trading", "retail", "logistics", "contracting"),
        avoid_activity_keywords=("crypto", "gambling", "weapons"),
        min_monthly_turnover_band="Below AED 50,000",
        accepts_non_residents=True,
        accepts_high_risk_nationalities=False,
        risk_tolerance="high",
        strengths=("Higher risk tolerance", "SME focused", "Flexible documentation"),
        weaknesses=("Higher fees for low balances",),
        processing_speed="medium",
        typical_approval_days=10,
        special_conditions=("Case-by-case review for complex profiles",),
    ),
    BankProfile(
        name="Commercial Bank of Dubai",
        code="CBD",
        type="conventional",
        tier="tier2",
        preferred_jurisdictions=MAINLAND,
        preferred_business_models=frozenset({"trading", "service"}),
        preferred_activity_keywords=("import", "export", "trading", "wholesale"),
        avoid_activity_keywords=("crypto", "forex", "gambling"),
        min_monthly_turnover_band="AED 100,000 - 500,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("Trading company experience", "Good for importers", "Personal relationship banking"),
        weaknesses=("Limited freezone appetite",),
        processing_speed="medium",
        typical_approval_days=14,
    ),
    BankProfile(
        name="Dubai Islamic Bank",
        code="DIB",
        type="islamic",
        tier="tier1",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"trading", "service", "consulting"}),
        preferred_activity_keywords=("halal", "food", "textile", "real estate", "contracting"),
        avoid_activity_keywords=("alcohol", "pork", "gambling", "interest", "conventional finance", "crypto"),
        min_monthly_turnover_band="AED 100,000 - 500,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("Largest Islamic bank in the UAE", "Sharia-compliant trade finance", "Wide branch network"),
        weaknesses=("Strict Sharia screening of activities", "Slow onboarding"),
        processing_speed="slow",
        typical_approval_days=21,
    ),
    BankProfile(
        name="Emirates Islamic",
        code="EI",
        type="islamic",
        tier="tier2",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"service", "consulting", "tech"}),
        preferred_activity_keywords=("consulting", "education", "healthcare", "technology"),
        avoid_activity_keywords=("alcohol", "pork", "gambling", "entertainment", "crypto"),
        min_monthly_turnover_band="AED 50,000 - 100,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("Sharia-compliant business accounts", "Part of the Emirates NBD group", "Competitive SME packages"),
        weaknesses=("Limited trading account support",),
        processing_speed="medium",
        typical_approval_days=14,
    ),
    BankProfile(
        name="Abu Dhabi Islamic Bank",
        code="ADIB",
        type="islamic",
        tier="tier1",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"service", "trading", "consulting"}),
        preferred_activity_keywords=("halal", "food", "healthcare", "contracting"),
        avoid_activity_keywords=("alcohol", "pork", "gambling", "tobacco", "crypto"),
        min_monthly_turnover_band="AED 100,000 - 500,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("Strong Islamic finance products", "Good for family businesses", "Stable relationship management"),
        weaknesses=("Strict documentation requirements",),
        processing_speed="slow",
        typical_approval_days=20,
    ),
    BankProfile(
        name="HSBC UAE",
        code="HSBC",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"trading", "consulting", "tech"}),
        preferred_activity_keywords=("import", "export", "logistics", "consulting", "technology"),
        avoid_activity_keywords=("crypto", "gambling", "money exchange", "weapons", "adult"),
        min_monthly_turnover_band="AED 500,000 - 1,000,000",
        accepts_non_residents=True,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("International banking network", "Freezone expertise", "Global trade finance"),
        weaknesses=("Very strict compliance", "High minimum balance"),
        processing_speed="slow",
        typical_approval_days=30,
        special_conditions=("International group structure preferred",),
    ),
    BankProfile(
        name="Standard Chartered",
        code="SCB",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=MAINLAND,
        preferred_business_models=frozenset({"trading", "consulting"}),
        preferred_activity_keywords=("commodities", "import", "export", "shipping"),
        avoid_activity_keywords=("crypto", "gambling", "money exchange", "forex", "adult"),
        min_monthly_turnover_band="AED 1,000,000 - 5,000,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("Strong Asia and Africa corridors", "Corporate trade finance"),
        weaknesses=("Very strict compliance", "High rejection rate for complex trading cases"),
        processing_speed="slow",
        typical_approval_days=30,
    ),
    BankProfile(
        name="Citibank UAE",
        code="CITI",
        type="conventional",
        tier="tier1",
        preferred_jurisdictions=MAINLAND,
        preferred_business_models=frozenset({"consulting", "tech"}),
        preferred_activity_keywords=("technology", "consulting", "financial services"),
        avoid_activity_keywords=("crypto", "gambling", "money exchange", "general trading", "used cars"),
        min_monthly_turnover_band="Above AED 5,000,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="low",
        strengths=("Multinational corporate banking", "Global cash management"),
        weaknesses=("Corporate focus only", "Strict KYC for new businesses"),
        processing_speed="slow",
        typical_approval_days=30,
    ),
    BankProfile(
        name="Ajman Bank",
        code="AJMAN",
        type="islamic",
        tier="tier3",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"trading", "service", "other"}),
        preferred_activity_keywords=("trading", "retail", "contracting", "transport"),
        avoid_activity_keywords=("alcohol", "pork", "gambling", "crypto"),
        min_monthly_turnover_band="Below AED 50,000",
        accepts_non_residents=True,
        accepts_high_risk_nationalities=True,
        risk_tolerance="high",
        strengths=("Considers complex cases", "Personal service", "Low minimum balance"),
        weaknesses=("Limited international reach",),
        processing_speed="medium",
        typical_approval_days=12,
    ),
    BankProfile(
        name="National Bank of Fujairah",
        code="NBF",
        type="conventional",
        tier="tier2",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"trading", "service"}),
        preferred_activity_keywords=("shipping", "marine", "logistics", "commodities", "trading"),
        avoid_activity_keywords=("crypto", "gambling", "adult"),
        min_monthly_turnover_band="AED 100,000 - 500,000",
        accepts_non_residents=True,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("Strong trade and shipping finance", "Relationship driven"),
        weaknesses=("Small branch network",),
        processing_speed="medium",
        typical_approval_days=14,
    ),
    BankProfile(
        name="United Arab Bank",
        code="UAB",
        type="conventional",
        tier="tier3",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"trading", "service", "consulting", "other"}),
        preferred_activity_keywords=("trading", "contracting", "services"),
        avoid_activity_keywords=("crypto", "gambling", "weapons"),
        min_monthly_turnover_band="Below AED 50,000",
        accepts_non_residents=True,
        accepts_high_risk_nationalities=True,
        risk_tolerance="high",
        strengths=("Flexible onboarding", "Considers previously rejected applicants", "Low minimum balance"),
        weaknesses=("Limited digital banking",),
        processing_speed="medium",
        typical_approval_days=12,
        special_conditions=("Enhanced due diligence for high-risk profiles",),
    ),
    BankProfile(
        name="Wio Bank",
        code="WIO",
        type="conventional",
        tier="digital",
        preferred_jurisdictions=FREEZONE,
        preferred_business_models=frozenset({"tech", "consulting", "service"}),
        preferred_activity_keywords=("technology", "software", "consulting", "e-commerce", "media", "design"),
        avoid_activity_keywords=("crypto", "forex", "gambling", "money exchange", "general trading", "gold"),
        min_monthly_turnover_band="Below AED 50,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("Fully digital onboarding", "No minimum balance", "Fast account opening"),
        weaknesses=("Not suitable for trading businesses", "No branch access"),
        processing_speed="fast",
        typical_approval_days=3,
        special_conditions=("UAE residency required for signatories",),
    ),
    BankProfile(
        name="Mashreq NEO Biz",
        code="NEOBIZ",
        type="conventional",
        tier="digital",
        preferred_jurisdictions=BOTH,
        preferred_business_models=frozenset({"tech", "consulting", "service"}),
        preferred_activity_keywords=("technology", "software", "consulting", "marketing", "e-commerce"),
        avoid_activity_keywords=("crypto", "gambling", "money exchange", "gold", "used cars"),
        min_monthly_turnover_band="Below AED 50,000",
        accepts_non_residents=False,
        accepts_high_risk_nationalities=False,
        risk_tolerance="medium",
        strengths=("Digital onboarding in days", "Low cost SME account"),
        weaknesses=("Limited trading account support",),
        processing_speed="fast",
        typical_approval_days=5,
    ),
)

BANKS_BY_CODE: Mapping[str, BankProfile] = MappingProxyType({bank.code: bank for bank in BANK_CATALOG})


def get_bank(code: str, catalog: Sequence[BankProfile] = BANK_CATALOG) -> BankProfile:
    """
    Look up a bank profile by code (case-insensitive).

    Raises:
        BankNotFoundError: If no bank carries the code
    """
    wanted = (code or "").upper()
    for bank in catalog:
        if bank.code.upper() == wanted:
            return bank
    raise BankNotFoundError(code)
