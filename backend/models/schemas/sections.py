"""Section detector and section grader outputs."""

from models.schemas.base import CamelModel


class DetectedSection(CamelModel):
    """A section recognized in the CV with its detection confidence."""
    name: str
    confidence: float  # 0.0-1.0, sum of matched rule weights capped at 1


class SectionAnalysis(CamelModel):
    """Heuristic quality grade for one detected section."""
    name: str
    score: int  # starts at 85, penalties accumulate
    issues: list[str] = []
    recommendations: list[str] = []
    word_count: int = 0
