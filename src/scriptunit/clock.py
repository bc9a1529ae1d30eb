"""Wall-clock time source for check and run durations."""

from __future__ import annotations

import time
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class Clock:
    """Millisecond epoch time and ISO-8601 timestamps with a numeric UTC offset."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def timestamp(self) -> str:
        return datetime.now().astimezone().strftime(TIMESTAMP_FORMAT)
