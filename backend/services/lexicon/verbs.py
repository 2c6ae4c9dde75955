"""Global action-verb list.

Past-tense achievement verbs used to detect results-oriented bullet points.
Declaration order is the order the analyzer reports found verbs in.
"""

ACTION_VERBS: tuple[str, ...] = (
    "achieved", "administered", "advanced", "analyzed", "architected",
    "automated", "built", "coached", "collaborated", "conducted",
    "configured", "consolidated", "contributed", "coordinated", "created",
    "cut", "decreased", "delivered", "deployed", "designed",
    "developed", "directed", "drove", "eliminated", "enabled",
    "engineered", "enhanced", "established", "evaluated", "executed",
    "expanded", "facilitated", "founded", "generated", "grew",
    "identified", "implemented", "improved", "increased", "influenced",
    "initiated", "innovated", "integrated", "introduced", "launched",
    "led", "leveraged", "maintained", "managed", "mentored",
    "migrated", "modernized", "negotiated", "optimized", "orchestrated",
    "organized", "overhauled", "oversaw", "partnered", "pioneered",
    "planned", "presented", "produced", "programmed", "proposed",
    "published", "raised", "rebuilt", "recruited", "reduced",
    "refactored", "redesigned", "resolved", "restructured", "revamped",
    "scaled", "secured", "simplified", "spearheaded", "standardized",
    "streamlined", "strengthened", "supervised", "surpassed", "tested",
    "trained", "transformed", "tripled", "upgraded", "won",
)
