"""CV section detection.

Every section rule is tried against the whole text; matched rule weights
add up to a confidence score. Overlapping hits are not resolved, so one
heading ("Professional Experience Summary") can lend confidence to several
sections at once.
"""

from models.schemas.sections import DetectedSection
from services.lexicon import SECTION_PATTERNS


def section_confidence(name: str, text: str) -> float:
    """Sum of matched rule weights for one section, capped at 1.0."""
    total = 0.0
    for rule in SECTION_PATTERNS[name]:
        if rule.compiled.search(text):
            total += rule.weight
    # rounding only strips float noise (0.30000000000000004); it never moves the cap
    return round(min(total, 1.0), 3)


def detect_sections(text: str) -> list[DetectedSection]:
    """Return sections with non-zero confidence, in lexicon order."""
    detected = []
    for name in SECTION_PATTERNS:
        confidence = section_confidence(name, text)
        if confidence > 0:
            detected.append(DetectedSection(name=name, confidence=confidence))
    return detected
