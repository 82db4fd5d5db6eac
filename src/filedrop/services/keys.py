import re
import time
from typing import Optional

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def now_ms() -> int:
    return int(time.time() * 1000)


def clean_filename(name: str) -> str:
    """
    Last path component of `name`, with ASCII control characters removed.
    Spaces, unicode and dots are kept as sent by the client.
    """
    name = re.split(r"[\\/]", name or "")[-1]
    return _CONTROL_CHARS.sub("", name).strip()


def build_key(filename: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Storage key "<unix ms>-<filename>".

    Same name in the same millisecond gives the same key; callers overwrite.
    """
    name = clean_filename(filename)
    if not name:
        raise ValueError("Empty filename")
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    return f"{timestamp_ms}-{name}"
