"""Bounded, thread-safe cache for formatter instances.

Building a formatter compiles a locale pattern, so formatters are built
once per (locale, options) key and reused. Two process-wide caches exist,
one for absolute date/time formatters and one for relative-time
formatters. Each is created on first use and lives until
reset_formatter_caches() or process exit.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable, Generic, TypeVar

from horae._internal.constants import DEFAULT_CACHE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FormatterCache(Generic[T]):
    """LRU cache keyed by a serialized (locale, options) string.

    Population is guarded by a lock so two threads asking for the same
    key get the same instance and the factory runs once.

    Examples:
        >>> cache = FormatterCache(maxsize=2)
        >>> cache.get_or_create("es-{}", lambda: object()) is cache.get("es-{}")
        True
    """

    def __init__(self, name: str = "formatters", maxsize: int = DEFAULT_CACHE_SIZE):
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.name = name
        self.maxsize = maxsize
        self._entries: OrderedDict[str, T] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> T | None:
        with self._lock:
            if key in self._entries:
                # Move to end (most recently used)
                self._entries.move_to_end(key)
                return self._entries[key]
        return None

    def put(self, key: str, value: T) -> None:
        with self._lock:
            self._put_locked(key, value)

    def _put_locked(self, key: str, value: T) -> None:
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("%s cache evicted %s", self.name, evicted)
        self._entries[key] = value

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value for key, building it with factory on a miss."""
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self.hits += 1
                return self._entries[key]

            self.misses += 1
            logger.debug("%s cache miss for %s", self.name, key)
            value = factory()
            self._put_locked(key, value)
            return value

    def remove(self, key: str) -> bool:
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                return True
            return False

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"FormatterCache(name={self.name!r}, size={len(self)}, "
            f"maxsize={self.maxsize})"
        )


_registry_lock = threading.Lock()
_formatter_cache: FormatterCache | None = None
_relative_formatter_cache: FormatterCache | None = None


def get_formatter_cache() -> FormatterCache:
    """Return the process-wide cache of absolute date/time formatters."""
    global _formatter_cache
    with _registry_lock:
        if _formatter_cache is None:
            _formatter_cache = FormatterCache("datetime")
        return _formatter_cache


def get_relative_formatter_cache() -> FormatterCache:
    """Return the process-wide cache of relative-time formatters."""
    global _relative_formatter_cache
    with _registry_lock:
        if _relative_formatter_cache is None:
            _relative_formatter_cache = FormatterCache("relative")
        return _relative_formatter_cache


def reset_formatter_caches() -> None:
    """Drop both process-wide caches; they are rebuilt on next use."""
    global _formatter_cache, _relative_formatter_cache
    with _registry_lock:
        _formatter_cache = None
        _relative_formatter_cache = None


__all__ = [
    "FormatterCache",
    "get_formatter_cache",
    "get_relative_formatter_cache",
    "reset_formatter_caches",
]
