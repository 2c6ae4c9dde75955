import re

import pytest

from services.lexicon import (
    ACTION_VERBS,
    DEFAULT_INDUSTRY,
    INDUSTRY_KEYWORDS,
    SECTION_PATTERNS,
    industry_label,
    list_industries,
    resolve_industry,
)

EXPECTED_INDUSTRIES = [
    "tech", "finance", "marketing", "healthcare", "education",
    "manufacturing_engineering", "sales", "human_resources", "legal",
    "creative_design_arts", "hospitality_tourism", "logistics_supply_chain",
    "construction", "energy", "government_public_sector", "non_profit",
    "science_research", "retail", "media_entertainment", "consulting",
    "cross_industry_general",
]

EXPECTED_SECTIONS = {
    "contact", "summary", "skills", "experience", "education", "certifications",
    "projects", "languages", "references", "achievements", "volunteer",
}


def test_all_industries_present():
    assert list(INDUSTRY_KEYWORDS) == EXPECTED_INDUSTRIES
    assert DEFAULT_INDUSTRY in INDUSTRY_KEYWORDS


@pytest.mark.parametrize("industry", EXPECTED_INDUSTRIES)
def test_keyword_entries_are_well_formed(industry):
    entries = INDUSTRY_KEYWORDS[industry]
    assert entries
    for entry in entries:
        assert entry.term == entry.term.lower().strip()
        assert entry.term
        assert 1 <= entry.weight <= 3
        assert entry.category


def test_lexicon_is_read_only():
    with pytest.raises(TypeError):
        INDUSTRY_KEYWORDS["new"] = ()
    with pytest.raises(AttributeError):
        INDUSTRY_KEYWORDS["tech"][0].weight = 1


def test_section_patterns_cover_all_sections():
    assert set(SECTION_PATTERNS) == EXPECTED_SECTIONS
    for rules in SECTION_PATTERNS.values():
        assert rules
        for rule in rules:
            assert 0 < rule.weight <= 1
            assert rule.compiled.flags & re.IGNORECASE


def test_action_verbs_unique_and_lowercase():
    assert len(ACTION_VERBS) == len(set(ACTION_VERBS))
    assert all(v == v.lower() for v in ACTION_VERBS)


def test_resolve_industry():
    assert resolve_industry("finance") == "finance"
    assert resolve_industry(" Finance ") == "finance"
    assert resolve_industry("not_a_real_industry") == "tech"
    assert resolve_industry("") == "tech"
    assert resolve_industry(None) == "tech"


def test_industry_labels():
    assert industry_label("tech") == "Technology"
    assert industry_label("human_resources") == "Human Resources"


def test_list_industries():
    rows = list_industries()
    assert [key for key, _, _ in rows] == EXPECTED_INDUSTRIES
    assert dict((k, n) for k, _, n in rows)["tech"] == len(INDUSTRY_KEYWORDS["tech"])


def test_resolve_industry_ignores_case():
    assert resolve_industry("FINANCE") == "finance"
    assert resolve_industry("\tHealthcare\n") == "healthcare"
