"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class _Entry:
    val: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Byte-value cache that drops entries older than ``interval`` seconds.

    A background thread runs every ``interval`` seconds and removes stale
    entries. Call :meth:`close` (or use the cache as a context manager) to
    stop it.
    """

    def __init__(self, interval: float) -> None:
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

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier value."""
        entry = _Entry(bytes(val))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def reap(self, now: float, last: float) -> None:
        """Remove entries created before ``now - last`` (monotonic seconds)."""
        cutoff = now - last
        with self._lock:
            stale = [k for k, e in self._entries.items() if e.created_at < cutoff]
            for key in stale:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper thread."""
        self._stopped.set()
        if self._reaper.is_alive() and threading.current_thread() is not self._reaper:
            self._reaper.join()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap(time.monotonic(), self.interval)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()