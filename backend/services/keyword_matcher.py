"""Industry keyword matching and category coverage.

Terms are matched literally as whole words, case-insensitively. Lexicon
terms often carry regex metacharacters ("c++", "ci/cd", "a/b testing"),
so every term is escaped before it becomes a pattern. Word boundaries are
expressed as lookarounds rather than ``\\b`` so that a term ending in a
non-word character ("c#") can still be followed by a space or comma.
"""

import logging
import re
from collections.abc import Sequence
from functools import lru_cache

from models.schemas.keywords import KeywordAnalysis, SkillMatch
from services.lexicon import KeywordEntry, get_industry_keywords

logger = logging.getLogger(__name__)


@lru_cache(maxsize=2048)
def _term_pattern(term: str) -> re.Pattern:
    return re.compile(rf"(?<!\w){re.escape(term.lower())}(?!\w)", re.IGNORECASE)


def count_term(term: str, text: str) -> int:
    """Count whole-word, case-insensitive occurrences of a literal term."""
    if not term:
        return 0
    return len(_term_pattern(term).findall(text))


def compute_coverage(
    entries: Sequence[KeywordEntry], found: Sequence[SkillMatch]
) -> dict[str, float]:
    """Fraction of each category's terms that were found.

    Entries are counted individually, so a term listed twice counts twice.
    """
    totals: dict[str, int] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, 0) + 1

    hits: dict[str, int] = {category: 0 for category in totals}
    for match in found:
        hits[match.category] += 1

    return {category: hits[category] / total for category, total in totals.items()}


def match_keywords(
    text: str,
    industry: str | None = "tech",
    lexicon: Sequence[KeywordEntry] | None = None,
) -> KeywordAnalysis:
    """Partition an industry lexicon into found and missing terms.

    ``lexicon`` overrides the industry table. The analysis pipeline never
    passes it; it is the injection point tests use to match against small
    hand-built term lists. Output order follows the lexicon.
    """
    entries = lexicon if lexicon is not None else get_industry_keywords(industry)
    lowered = text.lower()

    found: list[SkillMatch] = []
    missing: list[SkillMatch] = []
    for entry in entries:
        count = count_term(entry.term, lowered)
        match = SkillMatch(
            term=entry.term,
            count=count,
            category=entry.category,
            weight=entry.weight,
        )
        if count > 0:
            found.append(match)
        else:
            missing.append(match)

    logger.debug("Keyword match: %d found, %d missing", len(found), len(missing))
    return KeywordAnalysis(
        found=found,
        missing=missing,
        coverage=compute_coverage(entries, found),
    )


def weight_ratio(analysis: KeywordAnalysis) -> float:
    """Found weight over total lexicon weight; 0.5 (neutral) for an empty lexicon."""
    found_weight = sum(m.weight for m in analysis.found)
    total_weight = found_weight + sum(m.weight for m in analysis.missing)
    if total_weight == 0:
        return 0.5
    return found_weight / total_weight


def weak_categories(analysis: KeywordAnalysis, threshold: float = 0.3) -> list[str]:
    """Categories whose coverage falls below ``threshold``, in lexicon order."""
    return [category for category, ratio in analysis.coverage.items() if ratio < threshold]
