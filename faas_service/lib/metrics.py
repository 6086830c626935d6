"""Thread-safe counters backing request accounting and the metrics endpoint."""

from __future__ import annotations

import threading
from collections import Counter
from typing import Dict


class RequestCounter:
    """Monotonic process-lifetime counter.

    ``increment`` is a fetch-and-add performed under a lock: the read and the
    write happen in one critical section, so concurrent callers never lose an
    update and every caller observes a distinct total.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> int:
        """Add one and return the new total."""

        with self._lock:
            self._value += 1
            return self._value

    def snapshot(self) -> int:
        with self._lock:
            return self._value


class MetricsRegistry:
    """Named counters, one per service operation."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Counter[str] = Counter()

    def increment(self, name: str) -> None:
        with self._lock:
            self._counters[name] += 1

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counters)
