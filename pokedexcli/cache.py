"""A thread-safe, time-limited in-memory cache for raw response bodies."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

CACHE_TIME = 5.0
"""Default lifetime of a cache entry, in seconds."""


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Maps keys to byte strings and drops entries older than ``interval`` seconds.

    A background daemon thread reaps expired entries once every interval.
    """

    def __init__(self, interval: float = CACHE_TIME) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        entry = _Entry(created_at=time.monotonic(), value=bytes(value))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None if there are none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self) -> None:
        """Remove every entry created more than one interval ago."""
        cutoff = time.monotonic() - self.interval
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.created_at < cutoff]
            for key in expired:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap()