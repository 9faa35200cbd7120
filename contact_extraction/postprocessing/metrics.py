"""
Prometheus Metrics — extraction observability.

Exposes counters and a histogram for:
- Extraction outcomes (success / failed)
- Failures per stage and error type
- Pipeline latency
- Number of values extracted per field

Usage
-----
    from contact_extraction.postprocessing.metrics import (
        record_extraction,
        record_failure,
        extraction_timer,
    )

    with extraction_timer():
        outcome = await extractor.extract(text)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Extraction calls, labelled by terminal status.
EXTRACTIONS: Counter = Counter(
    "contact_extraction_total",
    "Contact extraction calls by outcome",
    ["status"],
)

# Failed extractions, labelled by the stage reached and the error class.
EXTRACTION_FAILURES: Counter = Counter(
    "contact_extraction_failures_total",
    "Failed contact extractions by stage and error type",
    ["stage", "error_type"],
)

# Values extracted, labelled by field (first_name, phone_numbers, ...).
FIELDS_EXTRACTED: Counter = Counter(
    "contact_extraction_fields_total",
    "Extracted contact values by field",
    ["field"],
)

EXTRACTION_LATENCY: Histogram = Histogram(
    "contact_extraction_duration_seconds",
    "Wall-clock time of one extraction call",
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def record_extraction(status: str) -> None:
    EXTRACTIONS.labels(status=status).inc()


def record_failure(stage: str, error_type: str) -> None:
    """Count a failed extraction and the stage it stopped at."""
    EXTRACTION_FAILURES.labels(stage=stage, error_type=error_type).inc()
    logger.debug("Metric recorded: failure stage=%s error_type=%s", stage, error_type)


def record_fields(counts: dict) -> None:
    """Increment per-field counters from a {field: count} mapping."""
    for field_name, count in counts.items():
        if count:
            FIELDS_EXTRACTED.labels(field=field_name).inc(count)


@contextmanager
def extraction_timer() -> Generator[None, None, None]:
    """Time the enclosed block into EXTRACTION_LATENCY."""
    with EXTRACTION_LATENCY.time():
        yield
