"""Whole-document signals: action-verb usage and overall length."""

from models.schemas.base import CamelModel


class ActionVerbAnalysis(CamelModel):
    count: int = 0  # distinct verbs, not occurrences
    verbs: list[str] = []


class LengthAnalysis(CamelModel):
    issue: str | None = None
    recommendation: str | None = None
    penalty: int = 0
