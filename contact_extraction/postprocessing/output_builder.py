"""
Output Builder — assembles ExtractedContactInfo from the stage results.
"""
from typing import List

from contact_extraction.entity_extraction.entity_classifier import ClassifiedEntities
from contact_extraction.models.contact_info import (
    EmailAddress,
    ExtractedContactInfo,
    PhoneNumber,
)


def removal_order(
    entities: ClassifiedEntities,
    position: str,
    phone_numbers: List[PhoneNumber],
    email_addresses: List[EmailAddress],
) -> List[str]:
    """Values to strip from the notes, in removal order."""
    return (
        entities.values()
        + [position]
        + [p.number for p in phone_numbers]
        + [e.address for e in email_addresses]
    )


def build_contact_info(
    entities: ClassifiedEntities,
    position: str,
    phone_numbers: List[PhoneNumber],
    email_addresses: List[EmailAddress],
    notes: str,
) -> ExtractedContactInfo:
    return ExtractedContactInfo(
        first_name=entities.first_name,
        last_name=entities.last_name,
        company=entities.company,
        position=position,
        phone_numbers=list(phone_numbers),
        email_addresses=list(email_addresses),
        social_links=[],
        notes=notes,
    )
