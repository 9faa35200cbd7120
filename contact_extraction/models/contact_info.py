"""
Typed Pydantic models for the extraction output contract.

ExtractedContactInfo is what the contact form pre-fill step (and the
AI-suggestion workflow) consume. Attributes are snake_case; the wire shape
uses camelCase aliases, so serialize with ``model_dump(by_alias=True)``.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from contact_extraction.config.constants import DEFAULT_EMAIL_TYPE, DEFAULT_PHONE_TYPE


class PhoneNumber(BaseModel):
    """A phone number found in the text. The engine never sets an extension."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(DEFAULT_PHONE_TYPE, description="Phone category, never inferred from context.")
    number: str
    extension: Optional[str] = None


class EmailAddress(BaseModel):
    """An email address found in the text."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(DEFAULT_EMAIL_TYPE, description="Email category, never inferred from context.")
    address: str


class SocialLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    url: str


class ExtractedContactInfo(BaseModel):
    """
    Final output of one extraction call.

    Immutable once built. ``social_links`` is reserved and always empty.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    first_name: str = ""
    last_name: str = ""
    company: str = ""
    position: str = ""
    phone_numbers: List[PhoneNumber] = Field(default_factory=list)
    email_addresses: List[EmailAddress] = Field(default_factory=list)
    social_links: List[SocialLink] = Field(default_factory=list)
    notes: str = ""

    @classmethod
    def failed(cls, text: str) -> "ExtractedContactInfo":
        """All-empty result that keeps the caller's text in ``notes``."""
        return cls(notes=text)

    def to_form_data(self) -> dict:
        """Map onto the contact form's pre-fill field names."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "company": self.company,
            "position": self.position,
            "phone_numbers": [
                {
                    "phone_type": p.type,
                    "phone_number": p.number,
                    "extension": p.extension,
                }
                for p in self.phone_numbers
            ],
            "email_addresses": [
                {"email_type": e.type, "email_address": e.address}
                for e in self.email_addresses
            ],
            "social_links": [{"type": s.type, "url": s.url} for s in self.social_links],
            "notes": self.notes,
        }
