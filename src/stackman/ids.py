"""Identifier and timestamp sources for workspace records."""

import time
import uuid


def new_id() -> str:
    """Return a fresh collision-free identifier."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def ms_to_seconds(ms: int) -> float:
    """Convert an epoch-millisecond timestamp to epoch seconds.

    1763712401000 → 1763712401.0
    """
    return ms / 1000


def seconds_to_ms(seconds: float) -> int:
    """Convert epoch seconds to epoch milliseconds, truncating.

    1763712401.5 → 1763712401500
    """
    return int(seconds * 1000)
