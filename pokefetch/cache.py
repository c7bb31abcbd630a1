"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import logging
import threading
import time

log = logging.getLogger(__name__)


class Cache:
    """Maps keys to bytes; entries older than ``interval`` seconds are purged.

    Unless ``start_reaper`` is false, a background thread purges expired
    entries every ``interval`` seconds.
    """

    def __init__(self, interval: float, start_reaper: bool = True) -> None:
        if interval < 0 or (start_reaper and interval == 0):
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, tuple[float, bytes]] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper: threading.Thread | None = None
        if start_reaper:
            self._reaper = threading.Thread(target=self._reap, daemon=True)
            self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``."""
        with self._lock:
            self._entries[key] = (time.monotonic(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value under ``key``, or None."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry[1]

    def remove_expired(self) -> list[str]:
        """Drop expired entries and return their keys."""
        cutoff = time.monotonic() - self.interval
        with self._lock:
            stale = [k for k, (created, _) in self._entries.items() if created <= cutoff]
            for key in stale:
                del self._entries[key]
        for key in stale:
            log.debug("Removing the cached entry: %s", key)
        return stale

    def close(self) -> None:
        """Stop the reaper thread, if any."""
        self._stop.set()
        if self._reaper is not None and self._reaper is not threading.current_thread():
            self._reaper.join()
        self._reaper = None

    def _reap(self) -> None:
        while not self._stop.wait(self.interval):
            self.remove_expired()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()