"""
Shared test fixtures for the contact extraction test suite.
"""
from typing import List, Tuple

import pytest

from contact_extraction.entity_extraction.ner_adapter import NerModelHandle


def make_ner_records(text: str, pieces: List[Tuple[str, str]]) -> List[dict]:
    """
    Build raw pipeline records for ``pieces`` ([(word, tag), ...]).

    Offsets are found left to right in ``text``; a "##" piece is located
    without its marker.
    """
    records = []
    pos = 0
    for index, (word, tag) in enumerate(pieces, start=1):
        surface = word[2:] if word.startswith("##") else word
        start = text.index(surface, pos)
        end = start + len(surface)
        records.append(
            {
                "entity": tag,
                "score": 0.99,
                "index": index,
                "word": word,
                "start": start,
                "end": end,
            }
        )
        pos = end
    return records


class FakeNerModel:
    """Callable stand-in for a transformers token-classification pipeline."""

    def __init__(self, pieces: List[Tuple[str, str]] | None = None) -> None:
        self.pieces = pieces or []
        self.calls: List[str] = []

    def __call__(self, text: str) -> List[dict]:
        self.calls.append(text)
        return make_ner_records(text, self.pieces)


# ==========================================================================
# Sample text
# ==========================================================================

@pytest.fixture
def business_card_text():
    return (
        "علی رضایی\n"
        "مدیر فروش   آلفاتک\n"
        "موبایل: 09123456789\n"
        "ایمیل: ali.rezaei@alfatech.ir\n"
        "ساعات کاری: شنبه تا چهارشنبه"
    )


@pytest.fixture
def business_card_pieces():
    return [
        ("علی", "B-PER"),
        ("رضایی", "B-PER"),
        ("مدیر", "O"),
        ("فروش", "O"),
        ("آلفا", "B-ORG"),
        ("##تک", "I-ORG"),
        ("موبایل", "O"),
    ]


# ==========================================================================
# NER handles
# ==========================================================================

@pytest.fixture
def fake_ner_model(business_card_pieces):
    return FakeNerModel(business_card_pieces)


@pytest.fixture
def ner_handle(fake_ner_model):
    return NerModelHandle(loader=lambda: fake_ner_model, model_name="fake-ner")


@pytest.fixture
def empty_ner_handle():
    return NerModelHandle(loader=lambda: FakeNerModel([]), model_name="fake-ner-empty")


@pytest.fixture
def broken_loader_handle():
    def loader():
        raise OSError("model files not found")

    return NerModelHandle(loader=loader, model_name="missing-model")


@pytest.fixture
def raising_ner_handle():
    def model(_text):
        raise RuntimeError("CUDA out of memory")

    return NerModelHandle(loader=lambda: model, model_name="raising-model")


# ==========================================================================
# Helper factories
# ==========================================================================

@pytest.fixture
def fake_ner():
    return FakeNerModel
