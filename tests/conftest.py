"""Shared fixtures."""

from __future__ import annotations

import pytest

from sentiment_rate import model
from sentiment_rate.lexicon_model import Lexicon, load_lexicon


@pytest.fixture()
def afinn() -> Lexicon:
    """The bundled AFINN word list."""
    return load_lexicon()


@pytest.fixture()
def small_lexicon() -> Lexicon:
    return Lexicon({"good": 3, "bad": -3, "wrong": -2, "Happy": 3})


@pytest.fixture()
def shared_lexicon(afinn: Lexicon):
    """Install the bundled lexicon as the process-wide one for a test."""
    model.set_lexicon(afinn)
    yield afinn
    model.set_lexicon(None)
