# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Process-lifetime caches for detection results and translations.

Both caches are explicit objects owned by a LanguageManager rather than module
state, so tests and callers can run with isolated instances.

Defaults reproduce the classic behaviour: unbounded, no expiry, cleared only by
an explicit clear(). A bound (oldest entry evicted first) and a TTL can be
configured when memory has to be capped.

Example:
    >>> cache = DetectionCache(max_entries=1000)
    >>> cache.get("Hello") is None
    True
    >>> cache.metrics.misses
    1
"""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

from polyglotflow.core.models import DetectionResult, SupportedLanguage

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheMetrics:
    """Hit/miss counters for cache monitoring.

    Attributes:
        hits: Lookups answered from the cache
        misses: Lookups that found nothing (or an expired entry)
        evictions: Entries dropped because of the size bound or TTL
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Share of lookups answered from the cache."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total

    def reset(self) -> None:
        """Reset all counters."""
        self.hits = 0
        self.misses = 0
        self.evictions = 0


class _KeyedStore(Generic[K, V]):
    """Insertion-ordered store with optional size bound and TTL.

    Every read and write happens under one lock, so a concurrent writer can
    never leave a half-written entry behind.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[K, tuple[V, float]] = OrderedDict()
        self._lock = threading.Lock()
        self.metrics = CacheMetrics()

    def _lookup(self, key: K) -> V | None:
        with self._lock:
            item = self._entries.get(key)
            if item is None:
                self.metrics.misses += 1
                return None
            value, stored_at = item
            if self.ttl_seconds is not None and self._clock() - stored_at >= self.ttl_seconds:
                del self._entries[key]
                self.metrics.evictions += 1
                self.metrics.misses += 1
                return None
            self.metrics.hits += 1
            return value

    def _store(self, key: K, value: V) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock())
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)
                    self.metrics.evictions += 1

    def _values(self) -> list[V]:
        with self._lock:
            return [value for value, _ in self._entries.values()]

    def _keys(self) -> list[K]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Drop every entry. Counters are kept."""
        with self._lock:
            self._entries.clear()


class DetectionCache(_KeyedStore[str, DetectionResult]):
    """Detection results keyed by the exact input string."""

    def get(self, text: str) -> DetectionResult | None:
        """Return the cached result for text, or None on a miss."""
        return self._lookup(text)

    def put(self, text: str, result: DetectionResult) -> None:
        """Memoize a detection result."""
        self._store(text, result)


class TranslationCache(_KeyedStore[tuple[str, SupportedLanguage], str]):
    """Translations keyed by (source text, target language)."""

    def get(self, text: str, language: SupportedLanguage) -> str | None:
        """Return the cached translation of text into language, or None."""
        return self._lookup((text, language))

    def put(self, text: str, language: SupportedLanguage, translation: str) -> None:
        """Memoize a translation. Last writer wins."""
        self._store((text, language), translation)

    @property
    def source_count(self) -> int:
        """Number of distinct source texts with at least one translation."""
        return len({text for text, _ in self._keys()})

    @property
    def total_size(self) -> int:
        """Size of all cached translations in UTF-16 bytes."""
        return sum(len(value.encode("utf-16-le")) for value in self._values())
