"""
Shared fixtures: a small in-code catalog covering every difficulty bucket.

Frameworks (declaration order):
    Customer Service Automation  "Low to Medium"  (Customer Service, Virtual Assistant)
    Risk and Compliance          "High"           (Fraud Detection)
    Research and Discovery       "Very High"      (Drug Discovery)
    Content Generation           "Low"            (Marketing Content)

Use cases (dataset order):
    klarna-customer-service      Financial Services  -> Customer Service Automation
    jpmorgan-payment-validation  Banking             -> Risk and Compliance
    mastercard-fraud-scoring     Payments            -> Risk and Compliance
    insilico-drug-discovery      Healthcare          -> Research and Discovery
    heinz-ai-ketchup             Consumer Goods      -> Content Generation
    dhl-demand-planning          Logistics           -> (no framework)
    bank-of-america-erica        Banking             -> Customer Service Automation
"""

import pytest

from genai_atlas.contexts.catalog import Catalog, Framework, UseCase
from genai_atlas.contexts.targeting import FrameworkMatcher

FRAMEWORK_RECORDS = [
    {
        "intervention_type": "Customer Service Automation",
        "sub_category": "Conversational AI",
        "value_proposition": "Faster answers for routine customer questions",
        "typical_use_cases": "Customer Service, Virtual Assistant, Chatbots",
        "difficulty_level": "Low to Medium",
        "time_to_value": "3-6 months",
        "investment_level": "Medium",
        "key_success_factors": "Clear escalation paths, Curated knowledge base",
        "common_challenges": "Hallucinated answers, Customer trust",
        "ROI_timeline": "6-12 months",
        "examples": ["Klarna", "Bank of America"],
    },
    {
        "intervention_type": "Risk and Compliance",
        "sub_category": "Financial Crime",
        "value_proposition": "Lower fraud losses",
        "typical_use_cases": "Fraud Detection, Compliance Monitoring",
        "difficulty_level": "High",
        "time_to_value": "9-12 months",
        "investment_level": "High",
        "key_success_factors": "Clean transaction data, Model governance",
        "common_challenges": "Regulatory approval, False positives",
        "ROI_timeline": "18-24 months",
        "examples": ["JPMorgan Chase"],
    },
    {
        "intervention_type": "Research and Discovery",
        "sub_category": "Scientific Discovery",
        "value_proposition": "Shorter research cycles",
        "typical_use_cases": "Drug Discovery, Materials Research",
        "difficulty_level": "Very High",
        "examples": [],
    },
    {
        "intervention_type": "Content Generation",
        "sub_category": "Creative",
        "value_proposition": "More campaign variants",
        "typical_use_cases": "Marketing Content, Copywriting",
        "difficulty_level": "Low",
        "examples": ["Coca-Cola"],
    },
]

USE_CASE_RECORDS = [
    {
        "id": "klarna-customer-service",
        "organization": "Klarna",
        "sector": "Private",
        "industry": "Financial Services",
        "use_case_category": "Customer Service",
        "specific_application": "AI assistant for customer chats",
        "challenge": "High volume of customer inquiries",
        "solution": "An AI assistant answers chats in 35 languages",
        "results": [
            "Handled 2.3 million conversations in the first month",
            "Work equivalent to 700 full-time agents",
            "Resolution time dropped from 11 minutes to 2 minutes",
            "Customer satisfaction on par with human agents",
        ],
        "key_insight": "Routine questions are the first to automate",
        "sources": [{"url": "https://example.com/klarna", "publisher": "Klarna"}],
        "last_reviewed": "2025-01-15",
    },
    {
        "id": "jpmorgan-payment-validation",
        "organization": "JPMorgan Chase",
        "sector": "Private",
        "industry": "Banking",
        "use_case_category": "Fraud Detection",
        "specific_application": "Payment validation screening",
        "challenge": "Manual validation of payments",
        "solution": "Large language models screen payments",
        "results": ["Reduced account validation rejection rates by 20%", "Lowered fraud levels"],
        "last_reviewed": "2024-11-01",
    },
    {
        "id": "mastercard-fraud-scoring",
        "organization": "Mastercard",
        "sector": "Private",
        "industry": "Payments",
        "use_case_category": "Fraud Detection",
        "specific_application": "Transaction fraud scoring",
        "challenge": "Card fraud costs",
        "solution": "Generative model scores transactions",
        "results": [
            "Improved fraud detection rates by 20% on average",
            "Reduced false positives by up to 200%",
        ],
    },
    {
        "id": "insilico-drug-discovery",
        "organization": "Insilico Medicine",
        "sector": "Private",
        "industry": "Healthcare",
        "use_case_category": "Drug Discovery",
        "specific_application": "Generative chemistry for novel targets",
        "challenge": "Slow and costly research",
        "solution": "Generative chemistry designs candidate molecules",
        "results": [
            "Identified a preclinical candidate in 18 months",
            "Reduced discovery cost to $2.6 million",
        ],
        "last_reviewed": "2025-03-01",
    },
    {
        "id": "heinz-ai-ketchup",
        "organization": "Heinz",
        "sector": "Private",
        "industry": "Consumer Goods",
        "use_case_category": "Marketing Content",
        "specific_application": "AI-generated campaign imagery",
        "challenge": "Standing out",
        "solution": "Image generation at scale",
        "results": [
            "Campaign earned 850 million impressions",
            "Delivered 38% better engagement than past campaigns",
        ],
        "last_reviewed": "2024-08-20",
    },
    {
        "id": "dhl-demand-planning",
        "organization": "DHL",
        "sector": "Private",
        "industry": "Logistics",
        "use_case_category": "Demand Forecasting",
        "specific_application": "Demand planning assistant",
        "challenge": "Forecasting takes too much time",
        "solution": "Forecast model suggests volumes",
        "results": ["Planning cycle cut from weeks to days"],
    },
    {
        "id": "bank-of-america-erica",
        "organization": "Bank of America",
        "sector": "Private",
        "industry": "Banking",
        "use_case_category": "Virtual Assistant",
        "specific_application": "Erica virtual financial assistant",
        "challenge": "Long wait times for routine banking questions",
        "solution": "Voice and chat assistant in the mobile app",
        "results": ["Served 42 million clients", "Handled over 2 billion interactions"],
        "last_reviewed": "2025-02-10",
    },
]


@pytest.fixture
def frameworks():
    return [Framework.from_dict(record) for record in FRAMEWORK_RECORDS]


@pytest.fixture
def use_cases():
    return [UseCase.from_dict(record) for record in USE_CASE_RECORDS]


@pytest.fixture
def matcher(frameworks):
    return FrameworkMatcher(frameworks)


@pytest.fixture
def catalog(use_cases, frameworks):
    return Catalog(use_cases, frameworks)


@pytest.fixture
def case(catalog):
    """Look up a fixture use case by id."""

    def _get(use_case_id):
        use_case = catalog.get_use_case_by_id(use_case_id)
        assert use_case is not None, f"Unknown fixture use case '{use_case_id}'"
        return use_case

    return _get