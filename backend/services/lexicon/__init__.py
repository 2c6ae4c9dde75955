"""Static lexicon data: industry keywords, action verbs and section rules.

Everything here is built once at import and exposed read-only.
"""

import logging

from services.lexicon.base import KeywordEntry, SectionRule
from services.lexicon.industries import DEFAULT_INDUSTRY, INDUSTRY_KEYWORDS
from services.lexicon.sections import SECTION_PATTERNS
from services.lexicon.verbs import ACTION_VERBS

logger = logging.getLogger(__name__)

# Industries whose display label is not just the title-cased key
_LABEL_OVERRIDES: dict[str, str] = {
    "tech": "Technology",
    "non_profit": "Non-Profit",
    "creative_design_arts": "Creative, Design & Arts",
    "hospitality_tourism": "Hospitality & Tourism",
    "logistics_supply_chain": "Logistics & Supply Chain",
    "manufacturing_engineering": "Manufacturing & Engineering",
    "government_public_sector": "Government & Public Sector",
    "science_research": "Science & Research",
    "media_entertainment": "Media & Entertainment",
    "cross_industry_general": "Cross-Industry (General)",
}


def resolve_industry(industry: str | None) -> str:
    """Map a requested industry to a known lexicon key, falling back to tech.

    Keys are compared after trimming and lower-casing, so " FINANCE " resolves
    to finance instead of falling back. Only keys that still miss fall back.
    """
    key = (industry or "").strip().lower()
    if key in INDUSTRY_KEYWORDS:
        return key
    if key:
        logger.info("Unknown industry %r, falling back to %r", industry, DEFAULT_INDUSTRY)
    return DEFAULT_INDUSTRY


def get_industry_keywords(industry: str | None) -> tuple[KeywordEntry, ...]:
    return INDUSTRY_KEYWORDS[resolve_industry(industry)]


def industry_label(key: str) -> str:
    return _LABEL_OVERRIDES.get(key, key.replace("_", " ").title())


def list_industries() -> list[tuple[str, str, int]]:
    """Return (key, label, term_count) for every industry, in table order."""
    return [
        (key, industry_label(key), len(entries))
        for key, entries in INDUSTRY_KEYWORDS.items()
    ]


__all__ = [
    "ACTION_VERBS",
    "DEFAULT_INDUSTRY",
    "INDUSTRY_KEYWORDS",
    "SECTION_PATTERNS",
    "KeywordEntry",
    "SectionRule",
    "get_industry_keywords",
    "industry_label",
    "list_industries",
    "resolve_industry",
]
