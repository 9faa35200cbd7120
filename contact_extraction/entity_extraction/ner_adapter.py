"""
Transformers NER Model Adapter.

Wraps a Hugging Face token-classification pipeline and turns its raw,
non-aggregated output into BIO-tagged Token objects.

The model is loaded lazily, at most once per handle. Concurrent first
callers share a single load through an asyncio.Lock. Loading and inference
both run in a worker thread so the event loop stays responsive.
"""
import asyncio
import logging
from typing import Callable, List, Optional

from jsonschema import ValidationError, validate

from contact_extraction.config import settings
from contact_extraction.config.schemas import NER_OUTPUT_SCHEMA
from contact_extraction.models.token import Token

logger = logging.getLogger(__name__)

# text -> [{"word": ..., "entity": ..., "start": ..., "end": ...}, ...]
NerCallable = Callable[[str], List[dict]]


class NerModelError(Exception):
    """Raised when the NER model fails or returns malformed output."""


class NerModelNotReadyError(NerModelError):
    """Raised when the NER model could not be initialized."""


def load_transformers_pipeline(
    model_name: Optional[str] = None,
    device: Optional[int] = None,
) -> NerCallable:
    """
    Build a token-level NER pipeline.

    No aggregation strategy is applied: sub-word pieces keep their "##"
    marker and their own B-/I- tag, and merging is done by the span merger.
    "O" tokens are kept so that they close open spans.
    """
    from transformers import pipeline

    return pipeline(
        "token-classification",
        model=model_name or settings.NER_MODEL_NAME,
        device=settings.NER_DEVICE if device is None else device,
        ignore_labels=[],
    )


class NerModelHandle:
    """Injectable, initialize-once handle around a NER callable."""

    def __init__(
        self,
        loader: Optional[Callable[[], NerCallable]] = None,
        model_name: Optional[str] = None,
    ) -> None:
        self.model_name = model_name or settings.NER_MODEL_NAME
        self._loader = loader or (lambda: load_transformers_pipeline(self.model_name))
        self._model: Optional[NerCallable] = None
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _load_lock(self) -> asyncio.Lock:
        """Lock for the running loop; a handle reused under a new loop gets a new lock."""
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    @property
    def is_ready(self) -> bool:
        return self._model is not None

    async def ensure_loaded(self) -> bool:
        """
        Load the model if needed. Returns True when the model is usable.

        A failed load leaves the handle unready; the next call tries again.
        """
        if self._model is not None:
            return True

        async with self._load_lock():
            if self._model is not None:
                return True
            try:
                self._model = await asyncio.to_thread(self._loader)
                logger.info("Loaded NER model: %s", self.model_name)
            except Exception as e:
                logger.warning("NER model '%s' could not be loaded: %s", self.model_name, e)
                self._model = None

        return self._model is not None

    async def tag(self, text: str) -> List[Token]:
        """
        Run the model over ``text`` and return its tokens in order.

        Raises:
            NerModelNotReadyError: The model could not be loaded.
            NerModelError: The model raised or returned malformed records.
        """
        await self.ensure_loaded()
        model = self._model
        if model is None:
            raise NerModelNotReadyError(f"NER model '{self.model_name}' is not available")
        try:
            raw = await asyncio.to_thread(model, text)
        except Exception as e:
            raise NerModelError(f"NER model call failed: {e}") from e

        records = list(raw or [])
        try:
            validate(instance=records, schema=NER_OUTPUT_SCHEMA)
        except ValidationError as e:
            raise NerModelError(f"Malformed NER output: {e.message}") from e

        return [
            Token(text=r["word"], tag=r["entity"], start=int(r["start"]), end=int(r["end"]))
            for r in records
        ]


_default_handle: Optional[NerModelHandle] = None


def get_default_handle() -> NerModelHandle:
    """Process-wide handle for callers that do not inject their own."""
    global _default_handle
    if _default_handle is None:
        _default_handle = NerModelHandle()
    return _default_handle
