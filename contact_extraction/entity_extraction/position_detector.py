"""
Position Detector — keyword lookup for a job title.

A cheap lexical heuristic: the first vocabulary keyword that occurs
anywhere in the text wins. Coverage is only as good as the vocabulary.
"""
from typing import List, Optional

from contact_extraction.config.constants import POSITION_KEYWORDS


def detect_position(text: str, keywords: Optional[List[str]] = None) -> str:
    """Return the first keyword (in vocabulary order) found in ``text``, or ""."""
    if keywords is None:
        keywords = POSITION_KEYWORDS

    for keyword in keywords:
        if keyword and keyword in text:
            return keyword
    return ""
