"""Record key generation."""

from __future__ import annotations

import secrets
import threading


class KeyGenerator:
    """Produce increasing, collision-resistant keys for new records.

    Keys look like ``000000000042-9f86d081``: a zero-padded process-local
    sequence followed by a random suffix. The sequence makes keys strictly
    increasing (also lexicographically) within one generator; the suffix keeps
    keys from separate instances apart.
    """

    def __init__(self, suffix_bytes: int = 4) -> None:
        self._lock = threading.Lock()
        self._sequence = 0
        self._suffix_bytes = suffix_bytes

    def next_key(self) -> str:
        with self._lock:
            self._sequence += 1
            sequence = self._sequence
        return f"{sequence:012d}-{secrets.token_hex(self._suffix_bytes)}"

    def __call__(self) -> str:
        return self.next_key()
