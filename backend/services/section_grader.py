"""Heuristic quality grading for detected CV sections.

A section body is approximated as the span from the section's first
detection pattern up to the next blank line (or the end of the text).
This is a heuristic: when the anchor pattern does not occur (the section
was detected through a secondary rule) no body is found and the section
is skipped rather than guessed at.
"""

import logging
import re
from collections.abc import Sequence

from models.schemas.sections import DetectedSection, SectionAnalysis
from services.action_verbs import analyze_action_verbs
from services.lexicon import SECTION_PATTERNS

logger = logging.getLogger(__name__)

BASE_SECTION_SCORE = 85

_BULLET_RE = re.compile(r"[•\-*]")
_LIST_DELIMITER_RE = re.compile(r"[,•\-*\n]")
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

# Section-body anchors: first rule pattern, extended lazily to a blank line
_BODY_PATTERNS: dict[str, re.Pattern] = {
    name: re.compile(rf"(?:{rules[0].pattern})[\s\S]*?(?=\n\s*\n|$)", re.IGNORECASE)
    for name, rules in SECTION_PATTERNS.items()
    if rules
}


def extract_section_body(name: str, text: str) -> str | None:
    """Approximate the body of a section, or None if its anchor is absent."""
    pattern = _BODY_PATTERNS.get(name)
    if pattern is None:
        return None
    match = pattern.search(text)
    return match.group(0) if match else None


def grade_section(name: str, body: str) -> SectionAnalysis:
    """Apply section-specific heuristics to one section body.

    Penalties accumulate; the score is not floored per section.
    """
    score = BASE_SECTION_SCORE
    issues: list[str] = []
    recommendations: list[str] = []
    word_count = len(body.split())

    if name == "summary":
        if word_count < 30:
            score -= 20
            issues.append("too brief")
            recommendations.append(
                "Expand your summary to 3-5 sentences covering your strengths and goals"
            )
        elif word_count > 150:
            score -= 15
            issues.append("too verbose")
            recommendations.append("Condense your summary to the most relevant highlights")

    elif name == "experience":
        if len(_BULLET_RE.findall(body)) < 3:
            score -= 15
            issues.append("insufficient detail")
            recommendations.append("Add bullet points describing your accomplishments in each role")
        if analyze_action_verbs(body).count < 3:
            score -= 15
            issues.append("lacks action verbs")
            recommendations.append(
                "Start bullet points with action verbs such as led, developed or improved"
            )

    elif name == "skills":
        if len(_LIST_DELIMITER_RE.findall(body)) < 5:
            score -= 20
            issues.append("limited skills listed")
            recommendations.append("List more relevant technical and soft skills")

    elif name == "education":
        if not _YEAR_RE.search(body):
            score -= 10
            issues.append("missing graduation years")
            recommendations.append("Add graduation years to your education entries")

    if name != "contact" and word_count < 10:
        score -= 25
        issues.append("too short")
        recommendations.append("Expand this section with more relevant detail")

    return SectionAnalysis(
        name=name,
        score=score,
        issues=issues,
        recommendations=recommendations,
        word_count=word_count,
    )


def grade_sections(sections: Sequence[DetectedSection], text: str) -> list[SectionAnalysis]:
    """Grade every detected section whose body can be located in ``text``."""
    results = []
    for section in sections:
        body = extract_section_body(section.name, text)
        if body is None:
            logger.debug("No body found for section %r, skipping grade", section.name)
            continue
        results.append(grade_section(section.name, body))
    return results
