"""Identifier and timestamp helpers shared by the data-access layer."""

import threading
import uuid
from datetime import UTC, datetime, timedelta

_clock_lock = threading.Lock()
_last_stamp: datetime | None = None


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string.

    Successive calls within the process always return strictly increasing
    values, so ordering rows by their timestamp reproduces insertion order.
    """
    global _last_stamp
    with _clock_lock:
        now = datetime.now(UTC)
        if _last_stamp is not None and now <= _last_stamp:
            now = _last_stamp + timedelta(microseconds=1)
        _last_stamp = now
    return now.isoformat(timespec="microseconds")


def new_conversation_id() -> str:
    return f"conv_{uuid.uuid4().hex[:16]}"


def new_message_id() -> str:
    return f"msg_{uuid.uuid4().hex[:16]}"
