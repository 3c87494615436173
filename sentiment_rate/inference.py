"""Batch entry point over the shared lexicon; one integer per input text."""

from .model import get_lexicon

def rate_many(texts):
    lex = get_lexicon()
    return [lex.score(t) for t in texts]
