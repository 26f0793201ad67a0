"""Wall-clock helpers."""

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Return the current time in the local timezone."""
    return datetime.now().astimezone()
