"""Document checklists and interview preparation guidance

Each generator appends a base list, then gated blocks in a fixed order:
elevated risk, high risk, trading model, high-risk nationality, previous
rejection, free zone, high-risk payment countries. Output order is rendered as
a numbered checklist, so it must stay stable.
"""

from typing import List

from bank_readiness.domain.models import CaseInput
from bank_readiness.domain.reference_data import (
    has_high_risk_nationality,
    has_high_risk_payment_country,
)


def required_documents(case: CaseInput, category: str) -> List[str]:
    """Documents the bank will ask for before opening the account"""
    docs = [
        "Trade License copy",
        "Memorandum and Articles of Association",
        "Passport copies of all shareholders and signatories",
        "Emirates ID and residence visa (if UAE resident)",
        "Proof of residential address",
        "Share certificate or shareholder register",
    ]

    if category != "low":
        docs.append("Personal and company bank statements (6 months)")
        docs.append("Source of funds declaration with evidence")
        docs.append("Business plan with projected turnover")

    if category == "high":
        docs.append("Audited financial statements")
        docs.append("Reference letter from existing bank")
        docs.append("Detailed CV of each shareholder")

    if case.business_model == "trading":
        docs.append("Supplier contracts")
        docs.append("Customer contracts or purchase orders")
        docs.append("Sample invoices")

    if has_high_risk_nationality(case.applicant_nationality):
        docs.append("Second passport or foreign residence permit (if held)")
        docs.append("Enhanced due diligence questionnaire")

    if case.previous_rejection:
        docs.append("Copy of previous rejection letter (if available)")

    if case.company_jurisdiction == "freezone":
        docs.append("Free zone lease or flexi-desk agreement")
        docs.append("Free zone establishment card")

    if has_high_risk_payment_country(case.incoming_payment_countries):
        docs.append("List of counterparties in higher-risk jurisdictions")
        docs.append("Sanctions compliance declaration")

    return docs


def helpful_documents(case: CaseInput, category: str) -> List[str]:
    """Optional documents that strengthen the application"""
    docs = [
        "Business profile or company presentation",
        "Company website and social media links",
        "Client testimonials or references",
    ]

    if category != "low":
        docs.append("Explanation letter for any concerns")
        docs.append("Previous tax returns or VAT registration")
        docs.append("Proof of existing banking relationships")

    if category == "high":
        docs.append("Internal AML and compliance policy")
        docs.append("Professional reference from auditor or lawyer")

    if case.business_model == "trading":
        docs.append("Shipping and logistics documents (bills of lading)")
        docs.append("Customs registration certificate")

    if has_high_risk_nationality(case.applicant_nationality):
        docs.append("Evidence of long-term business ties to the UAE")

    if case.previous_rejection:
        docs.append("Explanation letter for previous rejection")
        docs.append("Evidence of steps taken to address rejection reasons")

    if case.company_jurisdiction == "freezone":
        docs.append("Free zone authority letter of good standing")

    if has_high_risk_payment_country(case.incoming_payment_countries):
        docs.append("Payment flow diagram showing origin of funds")

    return docs


def interview_guidance(case: CaseInput, category: str) -> List[str]:
    """Preparation tips for the bank compliance interview"""
    guidance = [
        "Be prepared to explain your business model clearly",
        "Have all documents organized and accessible",
        "Know your expected transaction volumes",
    ]

    if category != "low":
        guidance.append("Prepare to explain source of funds in detail")
        guidance.append("Be ready to discuss your client base")
        guidance.append("Have a clear explanation for any red flags")

    if category == "high":
        guidance.append("Expect enhanced due diligence questions and a possible site visit")
        guidance.append("Bring the main shareholder or signatory to the meeting")

    if case.business_model == "trading":
        guidance.append("Be ready to walk through a full trade cycle with sample documents")

    if has_high_risk_nationality(case.applicant_nationality):
        guidance.append("Be prepared to discuss sanctions exposure and ties to your home country")

    if case.previous_rejection:
        guidance.append("Be upfront about previous rejection")
        guidance.append("Explain what has changed since then")

    if case.company_jurisdiction == "freezone":
        guidance.append("Explain why the free zone was chosen and where operations take place")

    if has_high_risk_payment_country(case.incoming_payment_countries):
        guidance.append("Be prepared to explain international payment flows")
        guidance.append("Have compliance documentation ready")

    return guidance
