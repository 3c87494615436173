"""sqlite persistence for per-message ratings.
Stores the integer rating and ids only, never the message text."""

import os, sqlite3, time
from contextlib import closing
from typing import List, Optional, Tuple

from .config import SETTINGS

def _conn(db_file: Optional[str] = None):
    path = db_file or SETTINGS.db_file
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    con = sqlite3.connect(path)
    con.execute("PRAGMA journal_mode=WAL;")
    return con

def init_db(db_file: Optional[str] = None):
    with closing(_conn(db_file)) as con:
        con.execute("""
        CREATE TABLE IF NOT EXISTS ratings(
            id TEXT PRIMARY KEY,
            user_id TEXT, channel_id TEXT, guild_id TEXT,
            created_at INTEGER, rating INTEGER
        );
        """)
        con.execute("CREATE INDEX IF NOT EXISTS ratings_user ON ratings(user_id, guild_id, created_at);")
        con.commit()

def record_rating(mid, uid, cid, gid, rating: int, db_file: Optional[str] = None, now: Optional[int] = None):
    with closing(_conn(db_file)) as con:
        con.execute("INSERT OR REPLACE INTO ratings VALUES(?,?,?,?,?,?)",
                    (mid, uid, cid, gid, int(now if now is not None else time.time()), int(rating)))
        con.commit()

def fetch_recent_user_ratings(uid: str, gid: str, days: int = 7, db_file: Optional[str] = None) -> List[Tuple[int, int]]:
    cutoff = int(time.time()) - days*86400
    with closing(_conn(db_file)) as con:
        cur = con.execute("SELECT created_at, rating FROM ratings WHERE user_id=? AND guild_id=? AND created_at>=? ORDER BY created_at ASC",
                          (uid, gid, cutoff))
        return [(int(ts), int(r)) for (ts, r) in cur.fetchall()]

def purge_older_than(days: int = 30, db_file: Optional[str] = None) -> int:
    cutoff = int(time.time()) - days*86400
    with closing(_conn(db_file)) as con:
        n = con.execute("DELETE FROM ratings WHERE created_at < ?", (cutoff,)).rowcount
        con.commit()
    return n
