import time
import uuid
from typing import Callable

IdGenerator = Callable[[], str]
Clock = Callable[[], int]


def new_id() -> str:
    return str(uuid.uuid4())


def now_ns() -> int:
    """Nanoseconds since the Unix epoch."""
    return time.time_ns()
