"""
AFINN lexicon: parse, load once, score.

WHAT:
  - the bundled resource is one long comma-separated list of `word score`
    records; first whitespace field is the word, last one the integer score.
  - text is split on runs of non-word characters and every token is looked up
    exactly (case-sensitive); matched scores are summed.

WHY:
  - the table never changes after load, so it is handed out as a read-only
    mapping and scoring needs no locking.
"""

import os, re
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import LexiconFormatError, ResourceLoadError
from .logging_setup import get_logger

log = get_logger("sentiment.lexicon")

DEFAULT_RESOURCE = "affinwords.txt"
DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

# ASCII word characters only; accented letters split tokens
_SPLIT_RE = re.compile(r"\W+", re.ASCII)

def tokens(text: Optional[str]) -> List[str]:
    return [t for t in _SPLIT_RE.split(text or "") if t]

def parse_records(raw: str) -> Dict[str, int]:
    """Comma-separated `word [...] score` records -> {word: score}; last write wins."""
    table: Dict[str, int] = {}
    for i, record in enumerate(raw.split(",")):
        fields = record.split()
        if not fields:
            continue
        try:
            table[fields[0].strip()] = int(fields[-1].strip())
        except ValueError:
            raise LexiconFormatError(record.strip(), i) from None
    return table

def resource_path(name: str = DEFAULT_RESOURCE) -> str:
    return os.path.join(DATA_DIR, name)

def read_resource(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise ResourceLoadError(f"Failed to load {os.path.basename(path)}: {e}") from e


class Lexicon:
    def __init__(self, entries: Optional[Mapping[str, int]] = None, source: str = "<memory>"):
        self._table: Mapping[str, int] = MappingProxyType(dict(entries or {}))
        self.source = source

    @classmethod
    def from_text(cls, raw: str, source: str = "<memory>") -> "Lexicon":
        return cls(parse_records(raw), source)

    @classmethod
    def empty(cls) -> "Lexicon":
        return cls(source="<empty>")

    @property
    def entries(self) -> Mapping[str, int]:
        return self._table

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, word) -> bool:
        return word in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def get(self, word: str) -> int:
        return self._table.get(word, 0)

    def match(self, text: Optional[str]) -> List[Tuple[str, int]]:
        """Matched (token, score) pairs in input order; repeats are kept."""
        table = self._table
        return [(t, table[t]) for t in tokens(text) if t in table]

    def score(self, text: Optional[str]) -> int:
        table = self._table
        return sum(table.get(t, 0) for t in tokens(text))

    def __repr__(self) -> str:
        return f"Lexicon(source={self.source!r}, entries={len(self._table)})"


def load_lexicon(path: Optional[str] = None, strict: bool = False) -> Lexicon:
    """
    Load the lexicon from `path` (default: the bundled affinwords.txt).

    A missing, unreadable or malformed resource is logged and degrades to an
    empty lexicon, so every score becomes 0. With strict=True the
    ResourceLoadError / LexiconFormatError propagates instead.
    """
    path = path or resource_path()
    try:
        lex = Lexicon.from_text(read_resource(path), source=path)
    except ResourceLoadError as e:
        if strict:
            raise
        log.error("lexicon_load_failed", path=path, error=str(e))
        return Lexicon.empty()
    log.info("lexicon_loaded", path=path, entries=len(lex))
    return lex
