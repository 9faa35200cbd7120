"""
Entity Classifier — maps merged spans onto name and company fields.

First-match-wins:
    - 1st PERSON span: first word -> first_name, the rest -> last_name.
    - 2nd PERSON span: used whole as last_name if still unset.
    - 1st ORGANIZATION span -> company.
Everything after that is ignored.
"""
from dataclasses import dataclass
from typing import List

from contact_extraction.config.constants import ORGANIZATION, PERSON
from contact_extraction.models.entity import EntitySpan


@dataclass
class ClassifiedEntities:
    """Name/company fields filled from NER spans."""

    first_name: str = ""
    last_name: str = ""
    company: str = ""

    def values(self) -> List[str]:
        """Extracted values in notes-removal order."""
        return [self.first_name, self.last_name, self.company]


def classify_entities(spans: List[EntitySpan]) -> ClassifiedEntities:
    result = ClassifiedEntities()
    person_spans_seen = 0

    for span in spans:
        text = span.text.strip()
        if not text:
            continue

        if span.entity_type == PERSON:
            person_spans_seen += 1
            if person_spans_seen == 1:
                parts = text.split()
                result.first_name = parts[0]
                result.last_name = " ".join(parts[1:])
            elif person_spans_seen == 2 and not result.last_name:
                result.last_name = text

        elif span.entity_type == ORGANIZATION and not result.company:
            result.company = text

    return result
