"""
utils/cache.py — In-memory query cache for GET requests.

Entries are keyed by (path, sorted params) and stay fresh for a TTL. While a
fetch for a key is in flight, concurrent callers await the same task instead
of issuing a duplicate request. Mutations call invalidate(prefix) so the next
read of that resource refetches from the server; a load that was in flight
when its key was invalidated still answers its waiters but is never stored.
"""

from __future__ import annotations

import asyncio
import time
import weakref
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

log = structlog.get_logger(__name__)


def make_key(path: str, params: dict[str, Any] | None = None) -> str:
    if not params:
        return path
    query = "&".join(f"{k}={params[k]}" for k in sorted(params) if params[k] is not None)
    return f"{path}?{query}" if query else path


class QueryCache:
    """Dict-based TTL cache with in-flight de-duplication."""

    def __init__(self, default_ttl: float = 30.0) -> None:
        self._store: dict[str, tuple[Any, float]] = {}
        self._inflight: dict[str, asyncio.Task[Any]] = {}
        self._stale: weakref.WeakSet[asyncio.Task[Any]] = weakref.WeakSet()
        self._default_ttl = default_ttl

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if time.monotonic() > expires_at:
            del self._store[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        expires_at = time.monotonic() + (ttl if ttl is not None else self._default_ttl)
        self._store[key] = (value, expires_at)

    async def fetch(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        ttl: float | None = None,
    ) -> Any:
        """
        Return the cached value for `key`, or run `loader` once and cache it.

        Failures are not cached; every waiter on a failed in-flight load
        receives the same exception.
        """
        cached = self.get(key)
        if cached is not None:
            log.debug("cache_hit", key=key)
            return cached

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(loader())
            self._inflight[key] = task
            task.add_done_callback(lambda t: self._forget(key, t))
        else:
            log.debug("cache_join_inflight", key=key)

        value = await asyncio.shield(task)
        if task in self._stale:
            log.debug("cache_skip_stale_load", key=key)
        elif self._default_ttl > 0 or ttl:
            self.set(key, value, ttl)
        return value

    def _forget(self, key: str, task: asyncio.Task[Any]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    def _drop_inflight(self, prefix: str) -> None:
        for key in [k for k in self._inflight if k.startswith(prefix)]:
            self._stale.add(self._inflight.pop(key))

    def invalidate(self, prefix: str) -> int:
        """
        Drop every entry whose key starts with `prefix`. Returns count dropped.

        Loads in flight for matching keys are detached: their result is not
        stored and the next fetch starts a new load.
        """
        self._drop_inflight(prefix)
        stale = [k for k in self._store if k.startswith(prefix)]
        for k in stale:
            del self._store[k]
        if stale:
            log.debug("cache_invalidated", prefix=prefix, count=len(stale))
        return len(stale)

    def clear(self) -> None:
        self._drop_inflight("")
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
