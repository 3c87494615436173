from dataclasses import dataclass
import os
from dotenv import load_dotenv
load_dotenv()

DEFAULT_DB_FILE = os.path.join("data", "sentiment.db")

@dataclass(frozen=True)
class Settings:
    token: str
    lexicon_path: str | None
    strict_lexicon: bool
    db_file: str
    retention_days: int
    alert_threshold: int
    log_level: str
    log_format: str

def _to_int(x, default):
    try: return int(x) if x else default
    except ValueError: return default

def _to_bool(x, default=False):
    if x is None or not x.strip(): return default
    return x.strip().lower() in ("1", "true", "yes", "on")

def load_settings() -> Settings:
    fmt = os.getenv("LOG_FORMAT", "console").strip().lower()
    return Settings(
        token=os.getenv("DISCORD_TOKEN", ""),
        lexicon_path=os.getenv("SENTIMENT_LEXICON_PATH") or None,
        strict_lexicon=_to_bool(os.getenv("SENTIMENT_STRICT_LEXICON")),
        db_file=os.getenv("SENTIMENT_DB_FILE") or DEFAULT_DB_FILE,
        retention_days=_to_int(os.getenv("RETENTION_DAYS"), 30),
        alert_threshold=_to_int(os.getenv("SENTIMENT_ALERT_THRESHOLD"), -5),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=fmt if fmt in ("console", "json") else "console",
    )

SETTINGS = load_settings()
