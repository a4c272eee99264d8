"""Cache and TLB descriptions shared by every architecture."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

MAX_CACHE_LEVEL = 10
"""Largest number of cache levels a :class:`CacheInfo` holds."""


class CacheType(enum.IntEnum):
    """Kind of a cache or translation buffer."""

    NULL = 0
    DATA = 1
    INSTRUCTION = 2
    UNIFIED = 3
    TLB = 4
    DTLB = 5
    STLB = 6
    PREFETCH = 7

    def label(self) -> str:
        """Lower-case name used when the cache type is displayed."""
        return self.name.lower()


@dataclass(frozen=True)
class CacheLevelInfo:
    """One cache level; ``ways`` is 0 when undefined and 0xFF when fully associative."""

    level: int
    cache_type: CacheType
    cache_size: int
    ways: int
    line_size: int
    tlb_entries: int
    partitioning: int


@dataclass
class CacheInfo:
    """Ordered collection of at most ``MAX_CACHE_LEVEL`` cache levels."""

    levels: list[CacheLevelInfo] = field(default_factory=list)

    def __post_init__(self) -> None:
        supplied: Iterable[CacheLevelInfo] = self.levels
        self.levels = []
        for level in supplied:
            self.add(level)

    def add(self, level: CacheLevelInfo) -> None:
        """Append a level, raising ``OverflowError`` once the collection is full."""
        if len(self.levels) >= MAX_CACHE_LEVEL:
            raise OverflowError(
                f"cannot hold more than {MAX_CACHE_LEVEL} cache levels"
            )
        self.levels.append(level)

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[CacheLevelInfo]:
        return iter(self.levels)

    def __getitem__(self, index: int) -> CacheLevelInfo:
        return self.levels[index]