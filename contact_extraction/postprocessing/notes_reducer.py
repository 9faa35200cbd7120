"""
Notes Reducer — what is left of the text after removing extracted values.

Only the first occurrence of each value is removed, so a repeated phone
number (for example) stays in the notes once.
"""
import re
from typing import Iterable

_WHITESPACE_RUN = re.compile(r"\s+")


def reduce_notes(text: str, extracted_values: Iterable[str]) -> str:
    """
    Remove the first occurrence of every non-empty value, then collapse
    whitespace runs to a single space and trim.

    Args:
        text: Original input text.
        extracted_values: Values in removal order (name parts, company,
                          position, phone numbers, email addresses).
    """
    notes = text
    for value in extracted_values:
        if not value:
            continue
        notes = notes.replace(value, "", 1).strip()

    return _WHITESPACE_RUN.sub(" ", notes).strip()
