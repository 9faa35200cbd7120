"""
RegEx Matcher — phone numbers and email addresses.

Runs over the original text, independently of the NER model. Matches are
returned in order of appearance; repeats are kept.
"""
import logging
import re
from typing import Dict, List

from contact_extraction.models.contact_info import EmailAddress, PhoneNumber
from contact_extraction.models.entity import EntitySpan

logger = logging.getLogger(__name__)

PHONE_LABEL = "PHONE"
EMAIL_LABEL = "EMAIL"


def extract_entities_regex(
    text: str,
    regex_lexicon: Dict[str, List[dict]],
) -> List[EntitySpan]:
    """
    Extract spans using regex patterns from an entity lexicon.

    Args:
        text: Original input text.
        regex_lexicon: {
            "PHONE": [{"regex_pattern": r"...", "label": "PHONE"}, ...],
            "EMAIL": [{"regex_pattern": r"...", "label": "EMAIL"}, ...],
            ...
        }

    Returns:
        EntitySpan list (source="regex") sorted by position.
    """
    spans: List[EntitySpan] = []

    for entity_label, entries in regex_lexicon.items():
        for entry in entries:
            pattern = entry["regex_pattern"]
            label = entry.get("label", entity_label)

            try:
                compiled = re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                logger.warning("Invalid regex pattern '%s': %s", pattern, e)
                continue

            for match in compiled.finditer(text):
                spans.append(
                    EntitySpan(
                        entity_type=label,
                        text=match.group(0),
                        start=match.start(),
                        end=match.end(),
                        source="regex",
                    )
                )

    spans.sort(key=lambda s: s.start)
    return spans


def extract_phone_numbers(text: str, regex_lexicon: Dict[str, List[dict]] | None = None) -> List[PhoneNumber]:
    """Domestic mobile numbers, e.g. 09123456789."""
    lexicon = regex_lexicon if regex_lexicon is not None else DEFAULT_REGEX_LEXICON
    return [
        PhoneNumber(number=span.text)
        for span in extract_entities_regex(text, {PHONE_LABEL: lexicon.get(PHONE_LABEL, [])})
    ]


def extract_email_addresses(text: str, regex_lexicon: Dict[str, List[dict]] | None = None) -> List[EmailAddress]:
    lexicon = regex_lexicon if regex_lexicon is not None else DEFAULT_REGEX_LEXICON
    return [
        EmailAddress(address=span.text)
        for span in extract_entities_regex(text, {EMAIL_LABEL: lexicon.get(EMAIL_LABEL, [])})
    ]


# ==========================================================================
# Default regex lexicon
# ==========================================================================
DEFAULT_REGEX_LEXICON: Dict[str, List[dict]] = {
    PHONE_LABEL: [
        {
            # 11 ASCII digits starting with 09, not glued to other digits
            "regex_pattern": r"(?<![0-9])09[0-9]{9}(?![0-9])",
            "label": PHONE_LABEL,
        },
    ],
    EMAIL_LABEL: [
        {
            "regex_pattern": r"[A-Za-z0-9._-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+",
            "label": EMAIL_LABEL,
        },
    ],
}
