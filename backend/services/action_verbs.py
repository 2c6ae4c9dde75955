"""Action-verb usage: which distinct verbs from the global list appear."""

from models.schemas.text_signals import ActionVerbAnalysis
from services.keyword_matcher import count_term
from services.lexicon import ACTION_VERBS


def analyze_action_verbs(text: str) -> ActionVerbAnalysis:
    """Count distinct action verbs in ``text``; repeats count once."""
    verbs = [verb for verb in ACTION_VERBS if count_term(verb, text) > 0]
    return ActionVerbAnalysis(count=len(verbs), verbs=verbs)
