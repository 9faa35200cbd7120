"""
BIO Span Merger — decodes a tagged token stream into entity spans.

Rules:
    1. B-<TYPE> closes the open span and opens a new one.
    2. A continuation token appends its text and extends the end offset.
    3. Anything else (O, type mismatch, I- with no open span) closes the
       open span and opens nothing.

Continuation is strict by default: only I-<same type>. The loose mode
accepts any non-B tag whose raw label ends with the open span's raw type.
"""
from typing import List, Optional

from contact_extraction.config import settings
from contact_extraction.config.constants import (
    BEGIN_PREFIX,
    CONTINUATION_MARKER,
    ENTITY_TYPE_ALIASES,
    INSIDE_PREFIX,
    WORD_START_MARKERS,
)
from contact_extraction.models.entity import EntitySpan
from contact_extraction.models.token import Token


def normalize_entity_type(raw_type: str) -> str:
    """Map model-specific labels (PER, ORG, ...) onto domain types."""
    return ENTITY_TYPE_ALIASES.get(raw_type.upper(), raw_type)


def _clean_piece(piece: str) -> str:
    """Strip sub-word markers; a word-start marker becomes one leading space."""
    if piece.startswith(CONTINUATION_MARKER):
        return piece[len(CONTINUATION_MARKER):]
    for marker in WORD_START_MARKERS:
        if piece.startswith(marker):
            return " " + piece[len(marker):]
    return piece


def merge_tokens_into_spans(
    tokens: List[Token],
    strict: Optional[bool] = None,
) -> List[EntitySpan]:
    """
    Merge BIO-tagged tokens into contiguous entity spans.

    Args:
        tokens: Ordered tokens from the NER model adapter.
        strict: Require I-<same type> for continuation. Defaults to
                settings.NER_STRICT_CONTINUATION.

    Returns:
        Spans in token order, with normalized entity types.
    """
    if strict is None:
        strict = settings.NER_STRICT_CONTINUATION

    spans: List[EntitySpan] = []
    current: Optional[EntitySpan] = None
    current_raw_type = ""

    def close() -> None:
        nonlocal current
        if current is not None:
            current.text = current.text.strip()
            spans.append(current)
            current = None

    for token in tokens:
        prefix, raw_type = token.split_tag()

        if prefix == BEGIN_PREFIX:
            close()
            current = EntitySpan(
                entity_type=normalize_entity_type(raw_type),
                text=_clean_piece(token.text).lstrip(),
                start=token.start,
                end=token.end,
            )
            current_raw_type = raw_type
            continue

        if current is not None and _continues(token, prefix, raw_type, current, current_raw_type, strict):
            current.text += _clean_piece(token.text)
            current.end = token.end
            continue

        close()

    close()
    return spans


def _continues(
    token: Token,
    prefix: str,
    raw_type: str,
    open_span: EntitySpan,
    open_raw_type: str,
    strict: bool,
) -> bool:
    if strict:
        return prefix == INSIDE_PREFIX and normalize_entity_type(raw_type) == open_span.entity_type
    return bool(raw_type) and token.tag.endswith(open_raw_type)
