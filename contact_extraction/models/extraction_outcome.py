"""
ExtractionOutcome — result of one extraction call plus its status flag.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from contact_extraction.models.contact_info import ExtractedContactInfo


class ExtractionStage(str, Enum):
    """Per-call state machine. ASSEMBLED and FAILED are terminal."""

    IDLE = "idle"
    MODEL_INVOKED = "model_invoked"
    TOKENS_RECEIVED = "tokens_received"
    SPANS_COMPUTED = "spans_computed"
    ENTITIES_CLASSIFIED = "entities_classified"
    PATTERNS_EXTRACTED = "patterns_extracted"
    NOTES_REDUCED = "notes_reduced"
    ASSEMBLED = "assembled"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractionOutcome:
    """Extraction result with an out-of-band success indication."""

    info: ExtractedContactInfo
    success: bool
    stage: ExtractionStage
    failed_stage: Optional[ExtractionStage] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "stage": self.stage.value,
            "failed_stage": self.failed_stage.value if self.failed_stage else None,
            "error": self.error,
            "info": self.info.model_dump(by_alias=True),
        }
