"""
Analysis Cache

Bounded LRU cache for network analysis results, keyed by the content
signature of the analysed snapshot. Identical network content maps to the
same key, so repeated analysis of an unchanged network is served from
memory. Safe for concurrent callers.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional

from boardnet.domain.models.analysis.results import NetworkAnalysisResult


@dataclass
class CacheStats:
    """Statistics for cache performance."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class AnalysisCache:
    """
    In-memory LRU cache of analysis results.

    A ``max_size`` of 0 disables caching: every lookup misses and nothing
    is stored.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self.max_size = max_size
        self._entries: OrderedDict[str, NetworkAnalysisResult] = OrderedDict()
        self._lock = threading.Lock()
        self.stats = CacheStats()
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str) -> Optional[NetworkAnalysisResult]:
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self.stats.misses += 1
                return None
            self._entries.move_to_end(key)
            self.stats.hits += 1
        self._logger.debug("Analysis cache hit (key=%s...)", key[:12])
        return result

    def put(self, key: str, result: NetworkAnalysisResult) -> None:
        if self.max_size == 0:
            return
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self.stats.evictions += 1
                self._logger.debug("Evicted analysis (key=%s...)", evicted[:12])

    def invalidate(self, key: str) -> bool:
        """Drop one entry; returns whether it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Drop every entry and return how many were removed."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            size = len(self._entries)
        return {
            "hit_rate": f"{self.stats.hit_rate:.1%}",
            "hits": self.stats.hits,
            "misses": self.stats.misses,
            "evictions": self.stats.evictions,
            "cache_size": size,
            "max_size": self.max_size,
        }
