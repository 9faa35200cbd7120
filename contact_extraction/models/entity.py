"""
EntitySpan model — a merged run of tokens (NER) or a pattern match (regex).
"""
from dataclasses import dataclass


@dataclass
class EntitySpan:
    """A single contiguous entity span with provenance."""

    entity_type: str
    text: str
    start: int
    end: int
    source: str = "ner"     # "ner" | "regex"

    def __repr__(self) -> str:
        return f"EntitySpan('{self.text}', {self.entity_type}, [{self.start},{self.end}], {self.source})"
