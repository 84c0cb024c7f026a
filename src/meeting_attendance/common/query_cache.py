from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Hashable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryCache:
    """Read-through cache for store queries.

    Keys are tuples whose first element names the resource, e.g.
    ``("attendance", event_id)``. After a mutation on a resource the service
    calls ``invalidate(resource)``, so the next read goes back to the store.
    """

    def __init__(self, *, enabled: bool = True):
        self._enabled = bool(enabled)
        self._entries: dict[tuple, Any] = {}
        self._generations: dict[Hashable, int] = {}
        self._lock = threading.Lock()

    def get_or_load(self, key: tuple[Hashable, ...], loader: Callable[[], T]) -> T:
        if not self._enabled:
            return loader()

        resource = key[0]
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            generation = self._generations.get(resource, 0)

        value = loader()
        with self._lock:
            # A mutation that landed while loading makes this value stale.
            if self._generations.get(resource, 0) == generation:
                self._entries[key] = value
        return value

    def invalidate(self, *resources: str) -> None:
        with self._lock:
            for resource in resources:
                self._generations[resource] = self._generations.get(resource, 0) + 1
            stale = [k for k in self._entries if k[0] in resources]
            for k in stale:
                del self._entries[k]
        logger.debug("invalidated %d cached reads for %s", len(stale), ", ".join(resources))

    def __contains__(self, key: tuple) -> bool:
        with self._lock:
            return key in self._entries
