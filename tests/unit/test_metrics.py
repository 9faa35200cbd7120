"""
Unit tests for contact_extraction.postprocessing.metrics.
"""
from __future__ import annotations

from prometheus_client import REGISTRY

from contact_extraction.postprocessing.metrics import (
    extraction_timer,
    record_extraction,
    record_failure,
    record_fields,
)


def sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricHelpers:

    def test_record_extraction(self):
        before = sample("contact_extraction_total", {"status": "success"})
        record_extraction("success")
        assert sample("contact_extraction_total", {"status": "success"}) == before + 1

    def test_record_failure(self):
        labels = {"stage": "model_invoked", "error_type": "NerModelError"}
        before = sample("contact_extraction_failures_total", labels)
        record_failure("model_invoked", "NerModelError")
        assert sample("contact_extraction_failures_total", labels) == before + 1

    def test_record_fields_skips_zero_counts(self):
        before_phone = sample("contact_extraction_fields_total", {"field": "phone_numbers"})
        before_company = sample("contact_extraction_fields_total", {"field": "company"})

        record_fields({"phone_numbers": 2, "company": 0})

        assert sample("contact_extraction_fields_total", {"field": "phone_numbers"}) == before_phone + 2
        assert sample("contact_extraction_fields_total", {"field": "company"}) == before_company

    def test_extraction_timer_observes(self):
        before = sample("contact_extraction_duration_seconds_count")
        with extraction_timer():
            pass
        assert sample("contact_extraction_duration_seconds_count") == before + 1
