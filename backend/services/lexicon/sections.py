"""Section-detection rules.

Each section name maps to an ordered tuple of rules. A rule whose pattern
matches anywhere in the text adds its weight to the section's confidence.
The first rule doubles as the anchor the section grader uses to locate the
section body, so it should be the section's heading form.
"""

from types import MappingProxyType

from services.lexicon.base import SectionRule as R

SECTION_PATTERNS: "MappingProxyType[str, tuple[R, ...]]" = MappingProxyType({
    "contact": (
        R(r"[\w.+-]+@[\w-]+\.[\w.-]+", 0.5),
        R(r"\+?\d[\d\s().-]{7,}\d", 0.3),
        R(r"\b(?:contact|phone|e-?mail|address)\b", 0.2),
        R(r"linkedin\.com/in/[\w-]+", 0.2),
    ),
    "summary": (
        R(r"\b(?:professional\s+|executive\s+|career\s+)?summary\b", 0.6),
        R(r"\b(?:career\s+)?objective\b", 0.5),
        R(r"\bprofile\b", 0.4),
        R(r"\babout\s+me\b", 0.4),
    ),
    "skills": (
        R(r"\b(?:technical\s+|core\s+|key\s+)?skills\b", 0.7),
        R(r"\bcompetenc(?:ies|e)\b", 0.4),
        R(r"\bproficienc(?:ies|y)\b", 0.3),
        R(r"\btechnologies\b", 0.3),
    ),
    "experience": (
        R(r"\b(?:work\s+|professional\s+)?experience\b", 0.7),
        R(r"\bemployment(?:\s+history)?\b", 0.5),
        R(r"\bwork\s+history\b", 0.5),
        R(r"\bcareer\s+history\b", 0.4),
    ),
    "education": (
        R(r"\beducation\b", 0.7),
        R(r"\b(?:university|college|institute|academy)\b", 0.3),
        R(r"\b(?:bachelor|master|ph\.?d|degree|diploma)", 0.3),
    ),
    "certifications": (
        R(r"\bcertifications?\b", 0.7),
        R(r"\bcertified\b", 0.3),
        R(r"\blicen[cs]es?\b", 0.3),
    ),
    "projects": (
        R(r"\bprojects?\b", 0.6),
        R(r"\bportfolio\b", 0.3),
    ),
    "languages": (
        R(r"\blanguages?\b", 0.6),
        R(r"\b(?:fluent|native|bilingual)\b", 0.3),
    ),
    "references": (
        R(r"\breferences?\b", 0.7),
        R(r"\bavailable\s+(?:up)?on\s+request\b", 0.3),
    ),
    "achievements": (
        R(r"\bachievements?\b", 0.6),
        R(r"\b(?:awards?|honou?rs)\b", 0.4),
        R(r"\baccomplishments?\b", 0.4),
    ),
    "volunteer": (
        R(r"\bvolunteer(?:ing)?\b", 0.7),
        R(r"\bcommunity\s+service\b", 0.3),
    ),
})
