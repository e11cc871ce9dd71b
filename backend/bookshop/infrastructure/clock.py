"""Clock — the one place wall time is read.

Naive UTC: the wire format carries no zone and SQLite drops tzinfo anyway,
so every stored timestamp is naive UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
