"""Overall CV length check."""

from models.schemas.text_signals import LengthAnalysis

MIN_WORDS = 200
MAX_WORDS = 1000

SHORT_PENALTY = 15
LONG_PENALTY = 5


def analyze_length(text: str) -> LengthAnalysis:
    """Classify document length; only out-of-range lengths carry a penalty."""
    word_count = len(text.split())

    if word_count < MIN_WORDS:
        return LengthAnalysis(
            issue="CV is too short",
            recommendation=(
                "Expand your CV with more detail about your experience, skills and achievements"
            ),
            penalty=SHORT_PENALTY,
        )
    if word_count > MAX_WORDS:
        return LengthAnalysis(
            issue="CV may be too lengthy",
            recommendation="Condense your CV to focus on the most relevant and recent experience",
            penalty=LONG_PENALTY,
        )
    return LengthAnalysis()
