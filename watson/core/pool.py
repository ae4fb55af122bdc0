"""Free-list object pool for the triangles and edges of one engine.

Instances are built once through a zero-argument ``factory`` and then
recycled: ``acquire(*args)`` re-initializes a free instance through its
``init(*args)`` method and ``release(instance)`` calls ``reset()`` before
pushing it back. Each engine owns its own pools so independent
triangulations never share instances.
"""
from __future__ import annotations

from typing import Callable, Generic, Iterable, List, Set, TypeVar

from .errors import PoolError

T = TypeVar('T')

__all__ = ['ObjectPool']


class ObjectPool(Generic[T]):
    """Stack of reusable instances.

    Parameters
    ----------
    factory : callable
        Builds a blank instance exposing ``init(*args)`` and ``reset()``.
    prewarm : int
        Number of blank instances created on first ``acquire`` so steady-state
        insertion does not allocate.
    """

    def __init__(self, factory: Callable[[], T], prewarm: int = 0):
        self._factory = factory
        self._prewarm = max(0, int(prewarm))
        self._warmed = self._prewarm == 0
        self._free: List[T] = []
        self._free_ids: Set[int] = set()
        self.created = 0
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._free)

    def warm(self, count: int = None) -> None:
        """Push ``count`` (default: the configured prewarm size) fresh instances."""
        n = self._prewarm if count is None else int(count)
        for _ in range(n):
            inst = self._factory()
            self.created += 1
            self._free.append(inst)
            self._free_ids.add(id(inst))
        self._warmed = True

    def acquire(self, *args) -> T:
        if not self._warmed:
            self.warm()
        if self._free:
            inst = self._free.pop()
            self._free_ids.discard(id(inst))
            self.hits += 1
        else:
            inst = self._factory()
            self.created += 1
            self.misses += 1
        try:
            inst.init(*args)
        except Exception:
            # init rejected the arguments; the instance was never handed out
            inst.reset()
            self._free.append(inst)
            self._free_ids.add(id(inst))
            raise
        return inst

    def release(self, inst: T) -> None:
        key = id(inst)
        if key in self._free_ids:
            raise PoolError(f"{type(inst).__name__} released twice")
        inst.reset()
        self._free.append(inst)
        self._free_ids.add(key)

    def release_all(self, instances: Iterable[T]) -> None:
        for inst in instances:
            self.release(inst)
