"""In-memory path cache adapter.

Implements RevalidationPort for the invoices component. Cached views are
keyed by path; revalidating a path drops its entry so the next read
recomputes it.
"""

from collections.abc import Callable
from threading import Lock
from typing import Any


class InMemoryPathCache:
    """Path-keyed view cache - suitable for single-process deployments."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        # Bumped on every revalidation of a path
        self._generations: dict[str, int] = {}
        self._lock = Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            return self._entries.get(path)

    def set(self, path: str, value: Any) -> None:
        with self._lock:
            self._entries[path] = value

    def get_or_compute(self, path: str, compute: Callable[[], Any]) -> Any:
        """
        Return the cached value for path, computing it on a miss.

        compute runs outside the lock. Its result is only stored if path
        was not revalidated meanwhile, so a snapshot read before a
        mutation is never kept as fresh.
        """
        with self._lock:
            if path in self._entries:
                return self._entries[path]
            generation = self._generations.get(path, 0)

        value = compute()

        with self._lock:
            if self._generations.get(path, 0) == generation:
                self._entries[path] = value
        return value

    def is_stale(self, path: str) -> bool:
        with self._lock:
            return path not in self._entries

    def revalidate_path(self, path: str) -> bool:
        """Mark cached content for path stale."""
        with self._lock:
            self._entries.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        return True
