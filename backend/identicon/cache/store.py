"""Response cache: rendered PNG bytes keyed by request URI.

The render core never touches the cache; the HTTP layer looks a request up
here before rendering and stores the bytes verbatim afterwards, so a hit
returns exactly what a fresh render would.

Backends: NullCache (off), MemoryCache (per process) and MemcacheCache
(shared across workers and hosts).
"""

from __future__ import annotations

import hashlib
import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from pymemcache.client.hash import HashClient

if TYPE_CHECKING:
    from identicon.config import Settings

logger = logging.getLogger(__name__)


def cache_key(uri: str) -> str:
    """MD5 hex digest of the full request URI (path plus query string)."""
    return hashlib.md5(uri.encode("utf-8")).hexdigest()


class ResponseCache(Protocol):
    name: str

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, data: bytes, expire: int = 0) -> None: ...


class NullCache:
    """Cache that never stores anything."""

    name = "disabled"

    def get(self, key: str) -> bytes | None:
        return None

    def set(self, key: str, data: bytes, expire: int = 0) -> None:
        return None


@dataclass
class _Entry:
    data: bytes
    # Absolute deadline on the cache clock, None = no expiry
    expires_at: float | None


class MemoryCache:
    """Thread-safe in-process LRU cache with per-entry expiry."""

    name = "memory"

    def __init__(
        self,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at is not None and self._clock() >= entry.expires_at:
                del self._entries[key]
                logger.debug("Cache entry %s expired", key)
                return None
            self._entries.move_to_end(key)
            return entry.data

    def set(self, key: str, data: bytes, expire: int = 0) -> None:
        """Store ``data``. ``expire`` is in seconds; 0 keeps the entry until evicted."""
        if expire < 0:
            raise ValueError(f"expire must be >= 0, got {expire}")
        expires_at = self._clock() + expire if expire else None
        with self._lock:
            self._entries[key] = _Entry(data=data, expires_at=expires_at)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Cache evicted %s", evicted)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


DEFAULT_MEMCACHE_PORT = 11211


def parse_hosts(value: str) -> list[tuple[str, int]]:
    """Split ``"host[:port],host[:port]"`` into (host, port) pairs."""
    servers = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        host, sep, port = item.rpartition(":")
        if not sep:
            servers.append((item, DEFAULT_MEMCACHE_PORT))
        else:
            servers.append((host, int(port)))
    return servers


class MemcacheCache:
    """Shared cache on one or more memcached servers.

    Values are stored as raw bytes; no serializer is configured on the client.
    """

    name = "memcached"

    def __init__(self, client: Any) -> None:
        self._client = client

    def get(self, key: str) -> bytes | None:
        return self._client.get(key)

    def set(self, key: str, data: bytes, expire: int = 0) -> None:
        if expire < 0:
            raise ValueError(f"expire must be >= 0, got {expire}")
        if not self._client.set(key, data, expire=expire, noreply=False):
            logger.warning("memcached refused to store %s", key)


def create_memcache_client(servers: list[tuple[str, int]], timeout: float) -> HashClient:
    return HashClient(servers, connect_timeout=timeout, timeout=timeout)


def build_cache(settings: Settings) -> ResponseCache:
    servers = parse_hosts(settings.identicon_memcache_hosts)
    if servers:
        logger.info(
            "Response cache on memcached %s, expire %ss",
            ", ".join(f"{h}:{p}" for h, p in servers),
            settings.identicon_cache_expire,
        )
        return MemcacheCache(create_memcache_client(servers, settings.identicon_memcache_timeout))
    if not settings.identicon_cache_enabled:
        return NullCache()
    logger.info(
        "Response cache enabled: %d entries, expire %ss",
        settings.identicon_cache_max_entries,
        settings.identicon_cache_expire,
    )
    return MemoryCache(max_entries=settings.identicon_cache_max_entries)
