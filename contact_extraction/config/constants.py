"""
Constants used across the extraction pipeline.
Pinned for determinism.
"""
from typing import Dict, List

# =============================================================================
# BIO tagging
# =============================================================================
OUTSIDE_TAG: str = "O"
BEGIN_PREFIX: str = "B"
INSIDE_PREFIX: str = "I"

# WordPiece continuation marker (stripped, piece glued to the previous one)
CONTINUATION_MARKER: str = "##"

# SentencePiece / byte-BPE word-start markers (rendered as one space)
WORD_START_MARKERS: tuple = ("▁", "Ġ")

# =============================================================================
# Entity types
# =============================================================================
PERSON: str = "PERSON"
ORGANIZATION: str = "ORGANIZATION"

ENTITY_TYPE_ALIASES: Dict[str, str] = {
    "PER": PERSON,
    "PERS": PERSON,
    "PERSON": PERSON,
    "ORG": ORGANIZATION,
    "ORGANIZATION": ORGANIZATION,
    "ORGANISATION": ORGANIZATION,
}

# =============================================================================
# Contact field defaults (match the contact form defaults)
# =============================================================================
DEFAULT_PHONE_TYPE: str = "mobile"
DEFAULT_EMAIL_TYPE: str = "personal"

# =============================================================================
# Job-title vocabulary (ordered; first substring match wins)
# =============================================================================
POSITION_KEYWORDS: List[str] = [
    "مدیرعامل",
    "مدیر",
    "معاون",
    "رئیس",
    "سرپرست",
    "کارشناس",
    "مهندس",
    "دکتر",
    "مشاور",
    "حسابدار",
    "برنامه‌نویس",
    "توسعه‌دهنده",
    "طراح",
    "وکیل",
    "استاد",
    "مدرس",
    "نماینده",
    "فروشنده",
    "کارمند",
    "بنیان‌گذار",
    "CEO",
    "CTO",
    "Manager",
    "Engineer",
    "Developer",
    "Designer",
]
