"""
Pipeline Orchestrator — single entry point for contact extraction.

Stages:
    1. NER model call (tokens)
    2. Span merging (BIO decode)
    3. Entity classification (name / company)
    4. Pattern + keyword extraction (phone, email, position)
    5. Notes reduction
    6. Assembly

All or nothing on model failure: if stages 1-3 fail, no pattern results
are returned and the caller gets an all-empty result with the original
text in ``notes``. No exception leaves ``extract()``.
"""
import logging
import time
from typing import Dict, List, Optional

from contact_extraction.entity_extraction.entity_classifier import classify_entities
from contact_extraction.entity_extraction.ner_adapter import (
    NerModelError,
    NerModelHandle,
    NerModelNotReadyError,
    get_default_handle,
)
from contact_extraction.entity_extraction.position_detector import detect_position
from contact_extraction.entity_extraction.regex_matcher import (
    extract_email_addresses,
    extract_phone_numbers,
)
from contact_extraction.entity_extraction.span_merger import merge_tokens_into_spans
from contact_extraction.models.contact_info import ExtractedContactInfo
from contact_extraction.models.extraction_outcome import ExtractionOutcome, ExtractionStage
from contact_extraction.postprocessing import metrics
from contact_extraction.postprocessing.notes_reducer import reduce_notes
from contact_extraction.postprocessing.output_builder import build_contact_info, removal_order

logger = logging.getLogger(__name__)


class ContactExtractor:
    """
    Extracts contact fields from free text.

    Holds no per-call state, so one instance can serve concurrent calls.
    The NER handle is shared and initialized once.
    """

    def __init__(
        self,
        ner_model: Optional[NerModelHandle] = None,
        position_keywords: Optional[List[str]] = None,
        strict_continuation: Optional[bool] = None,
        regex_lexicon: Optional[Dict[str, List[dict]]] = None,
    ) -> None:
        self.ner_model = ner_model or get_default_handle()
        self.position_keywords = position_keywords
        self.strict_continuation = strict_continuation
        self.regex_lexicon = regex_lexicon

    async def extract(self, text: str) -> ExtractionOutcome:
        with metrics.extraction_timer():
            outcome = await self._run(text)

        metrics.record_extraction("success" if outcome.success else "failed")
        if outcome.success:
            info = outcome.info
            metrics.record_fields({
                "first_name": int(bool(info.first_name)),
                "last_name": int(bool(info.last_name)),
                "company": int(bool(info.company)),
                "position": int(bool(info.position)),
                "phone_numbers": len(info.phone_numbers),
                "email_addresses": len(info.email_addresses),
            })
        return outcome

    async def _run(self, text: str) -> ExtractionOutcome:
        start_time = time.monotonic()

        if not text or not text.strip():
            return ExtractionOutcome(
                info=ExtractedContactInfo(),
                success=True,
                stage=ExtractionStage.ASSEMBLED,
            )

        stage = ExtractionStage.IDLE
        try:
            # ==============================================================
            # Stage 1: NER model
            # ==============================================================
            stage = ExtractionStage.MODEL_INVOKED
            tokens = await self.ner_model.tag(text)
            stage = ExtractionStage.TOKENS_RECEIVED

            # ==============================================================
            # Stage 2-3: Span merging + classification
            # ==============================================================
            spans = merge_tokens_into_spans(tokens, strict=self.strict_continuation)
            stage = ExtractionStage.SPANS_COMPUTED

            entities = classify_entities(spans)
            stage = ExtractionStage.ENTITIES_CLASSIFIED

            # ==============================================================
            # Stage 4: Patterns + keyword
            # ==============================================================
            phone_numbers = extract_phone_numbers(text, self.regex_lexicon)
            email_addresses = extract_email_addresses(text, self.regex_lexicon)
            position = detect_position(text, self.position_keywords)
            stage = ExtractionStage.PATTERNS_EXTRACTED

            # ==============================================================
            # Stage 5: Notes
            # ==============================================================
            notes = reduce_notes(
                text,
                removal_order(entities, position, phone_numbers, email_addresses),
            )
            stage = ExtractionStage.NOTES_REDUCED

            info = build_contact_info(entities, position, phone_numbers, email_addresses, notes)

        except NerModelNotReadyError as e:
            logger.error("Contact extraction skipped, NER model not ready: %s", e)
            return self._failed(text, stage, e)
        except NerModelError as e:
            logger.error("Contact extraction failed at %s: %s", stage.value, e)
            return self._failed(text, stage, e)
        except Exception as e:
            logger.exception("Unexpected error during contact extraction at %s", stage.value)
            return self._failed(text, stage, e)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            "Contact extracted in %d ms: %d tokens, %d spans, %d phones, %d emails, notes %d chars",
            elapsed_ms,
            len(tokens),
            len(spans),
            len(phone_numbers),
            len(email_addresses),
            len(notes),
        )

        return ExtractionOutcome(info=info, success=True, stage=ExtractionStage.ASSEMBLED)

    @staticmethod
    def _failed(text: str, stage: ExtractionStage, error: Exception) -> ExtractionOutcome:
        metrics.record_failure(stage.value, type(error).__name__)
        return ExtractionOutcome(
            info=ExtractedContactInfo.failed(text),
            success=False,
            stage=ExtractionStage.FAILED,
            failed_stage=stage,
            error=str(error) or type(error).__name__,
        )


async def extract_contact_info(
    text: str,
    ner_model: Optional[NerModelHandle] = None,
) -> ExtractionOutcome:
    """Extract contact fields from ``text`` with a default-configured extractor."""
    return await ContactExtractor(ner_model=ner_model).extract(text)
