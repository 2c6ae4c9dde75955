"""Row types shared by the static lexicon tables."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class KeywordEntry:
    """A weighted industry term.

    ``weight`` is 1 (nice to have) to 3 (core to the field). ``category``
    groups terms for coverage reporting.
    """

    term: str
    weight: int
    category: str


@dataclass(frozen=True)
class SectionRule:
    """One detection rule for a CV section: a regex and the confidence it adds."""

    pattern: str
    weight: float
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(self.pattern, re.IGNORECASE))


def keyword_group(category: str, weight: int, *terms: str) -> tuple[KeywordEntry, ...]:
    """Build entries for several terms sharing a category and weight."""
    return tuple(KeywordEntry(term=t, weight=weight, category=category) for t in terms)


def build_lexicon(*groups: tuple[KeywordEntry, ...]) -> tuple[KeywordEntry, ...]:
    """Flatten keyword groups, keeping declaration order."""
    return tuple(entry for group in groups for entry in group)
