"""Keyword matcher output: industry term matches and category coverage."""

from models.schemas.base import CamelModel


class SkillMatch(CamelModel):
    """One lexicon term and how many times it occurs in the CV."""
    term: str
    count: int = 0
    category: str
    weight: int


class KeywordAnalysis(CamelModel):
    """Every lexicon term lands in exactly one of ``found`` or ``missing``.

    ``coverage`` maps each lexicon category to the fraction of its terms found.
    """
    found: list[SkillMatch] = []
    missing: list[SkillMatch] = []
    coverage: dict[str, float] = {}
