"""Process-wide lexicon: loaded once on first use, shared read-only by every caller."""

import threading
from typing import List, Optional, Tuple

from .config import SETTINGS
from .lexicon_model import Lexicon, load_lexicon

_LEX: Optional[Lexicon] = None
_LOCK = threading.Lock()

def get_lexicon() -> Lexicon:
    global _LEX
    lex = _LEX
    if lex is None:
        with _LOCK:
            if _LEX is None:
                _LEX = load_lexicon(SETTINGS.lexicon_path, strict=SETTINGS.strict_lexicon)
            lex = _LEX
    return lex

def set_lexicon(lex: Optional[Lexicon]) -> None:
    """Swap the shared lexicon (None forces a reload on next use)."""
    global _LEX
    with _LOCK:
        _LEX = lex

def score(text: str) -> int:
    return get_lexicon().score(text)

def explain(text: str) -> Tuple[int, List[Tuple[str, int]]]:
    hits = get_lexicon().match(text)
    return sum(s for _, s in hits), hits
