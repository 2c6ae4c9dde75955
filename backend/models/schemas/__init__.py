"""Pydantic contracts passed between the CV analysis stages."""

from models.schemas.keywords import KeywordAnalysis, SkillMatch
from models.schemas.sections import DetectedSection, SectionAnalysis
from models.schemas.text_signals import ActionVerbAnalysis, LengthAnalysis

__all__ = [
    "ActionVerbAnalysis",
    "DetectedSection",
    "KeywordAnalysis",
    "LengthAnalysis",
    "SectionAnalysis",
    "SkillMatch",
]
