"""
Token model — one sub-word unit emitted by the NER model adapter.
"""
from dataclasses import dataclass
from typing import Tuple

from contact_extraction.config.constants import OUTSIDE_TAG


@dataclass(frozen=True)
class Token:
    """A BIO-tagged sub-word token with offsets into the original text."""

    text: str
    tag: str                # "O" | "B-<TYPE>" | "I-<TYPE>"
    start: int
    end: int

    def split_tag(self) -> Tuple[str, str]:
        """
        Split the tag into (prefix, entity type).

        "B-PER" -> ("B", "PER"), "O" -> ("O", ""), a bare "PER" -> ("", "PER").
        """
        if self.tag == OUTSIDE_TAG or not self.tag:
            return OUTSIDE_TAG, ""
        prefix, sep, entity_type = self.tag.partition("-")
        if not sep:
            return "", self.tag
        return prefix.upper(), entity_type

    def __repr__(self) -> str:
        return f"Token('{self.text}', {self.tag}, [{self.start},{self.end}])"
