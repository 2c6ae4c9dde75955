"""CV content analysis: the composite quality report.

Pipeline:
1. Normalize whitespace
2. Section detection (structural signals)
3. Industry keyword matching
4. Action-verb usage
5. Per-section quality grading
6. Length check
7. Compose the score against a 70-point baseline and collect issues

The analysis is a pure function of (text, industry): no I/O, no shared
state, and no exceptions for any string input. Poor input shows up as a
low score with issues, never as an error.
"""

import logging
import math
import re

from models.responses import AnalysisDetails, CVAnalysisResult
from services.action_verbs import analyze_action_verbs
from services.keyword_matcher import match_keywords, weak_categories, weight_ratio
from services.length_analyzer import analyze_length
from services.lexicon import DEFAULT_INDUSTRY, industry_label, resolve_industry
from services.section_detector import detect_sections
from services.section_grader import grade_sections

logger = logging.getLogger(__name__)

BASE_SCORE = 70
CRITICAL_SECTIONS = ("summary", "experience", "education", "skills")
MISSING_SECTION_PENALTY = 5
MAX_MISSING_SECTIONS_PENALTY = 20
KEYWORD_ADJUSTMENT_SCALE = 20
WEAK_CATEGORY_THRESHOLD = 0.3
MIN_ACTION_VERBS = 5
ACTION_VERB_PENALTY = 5
MAX_ACTION_VERB_PENALTY = 10
WEAK_SECTION_THRESHOLD = 70
WEAK_SECTION_PENALTY = 3
MAX_WEAK_SECTION_PENALTY = 15

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _humanize(key: str) -> str:
    return key.replace("_", " ")


def analyze_cv_content(text: str, industry: str | None = DEFAULT_INDUSTRY) -> CVAnalysisResult:
    """Score a CV's plain text and collect issues and recommendations."""
    industry_key = resolve_industry(industry)
    normalized = normalize_text(text)

    # --- Layer 1: Structural and lexical signals ---
    sections = detect_sections(normalized)
    section_names = [s.name for s in sections]
    keyword_analysis = match_keywords(normalized, industry_key)
    verb_analysis = analyze_action_verbs(normalized)
    # Grading needs the raw text: body extraction stops at blank lines
    section_analysis = grade_sections(sections, text)
    length_analysis = analyze_length(normalized)

    score = BASE_SCORE
    issues: list[str] = []
    recommendations: list[str] = []

    # --- Layer 2: Critical sections ---
    missing_sections = [s for s in CRITICAL_SECTIONS if s not in section_names]
    if missing_sections:
        penalty = min(len(missing_sections) * MISSING_SECTION_PENALTY, MAX_MISSING_SECTIONS_PENALTY)
        score -= penalty
        issues.append(f"Missing important sections: {', '.join(missing_sections)}")
        recommendations.append(
            f"Add the following sections to your CV: {', '.join(missing_sections)}"
        )
        logger.debug("Missing sections %s: -%d", missing_sections, penalty)

    # --- Layer 3: Industry keywords ---
    adjustment = _round_half_up((weight_ratio(keyword_analysis) - 0.5) * KEYWORD_ADJUSTMENT_SCALE)
    score += adjustment
    logger.debug("Keyword adjustment for %s: %+d", industry_key, adjustment)
    if adjustment < 0:
        missing_categories = weak_categories(keyword_analysis, WEAK_CATEGORY_THRESHOLD)
        issues.append("Low industry-relevant keyword density")
        label = industry_label(industry_key)
        if missing_categories:
            recommendations.append(
                f"Include more {label} keywords, particularly in: "
                f"{', '.join(_humanize(c) for c in missing_categories)}"
            )
        else:
            recommendations.append(f"Include more {label} keywords relevant to your target roles")

    # --- Layer 4: Action verbs ---
    if verb_analysis.count < MIN_ACTION_VERBS:
        score -= min(ACTION_VERB_PENALTY, MAX_ACTION_VERB_PENALTY)
        issues.append("Limited use of action verbs")
        recommendations.append(
            "Use more action verbs (e.g. led, developed, implemented) to describe your accomplishments"
        )

    # --- Layer 5: Length ---
    if length_analysis.issue:
        score -= length_analysis.penalty
        issues.append(length_analysis.issue)
        if length_analysis.recommendation:
            recommendations.append(length_analysis.recommendation)

    # --- Layer 6: Weak sections ---
    for analysis in section_analysis:
        if analysis.score < WEAK_SECTION_THRESHOLD:
            score -= min(WEAK_SECTION_PENALTY, MAX_WEAK_SECTION_PENALTY)
            title = analysis.name.capitalize()
            issues.append(f"{title} section needs improvement: {', '.join(analysis.issues)}")
            recommendations.append(
                f"Improve {title} section: {'; '.join(analysis.recommendations)}"
            )

    overall_score = min(100, max(0, round(score)))
    logger.info(
        "CV analyzed: industry=%s sections=%s score=%d",
        industry_key, section_names, overall_score,
    )

    return CVAnalysisResult(
        overall_score=overall_score,
        sections=section_names,
        issues=issues,
        recommendations=recommendations,
        details=AnalysisDetails(
            section_analysis=section_analysis,
            keyword_analysis=keyword_analysis,
            action_verb_count=verb_analysis.count,
            content_length=len(normalized),
            word_count=len(normalized.split()),
        ),
    )
