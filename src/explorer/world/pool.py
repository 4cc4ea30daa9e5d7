"""Arena-backed entity pools.

Every category owns an arena of records addressed by integer handle, an
unordered list of active handles and a stack of free handles. Acquiring a
record pops a free handle (or grows the arena up to capacity); releasing it
removes the handle from the active list with swap-and-pop and pushes it
back on the free stack. Nothing is allocated once the arena has grown to
its working size.

Iteration order over active records is unspecified: removal moves the last
active record into the vacated slot.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List

from explorer.world.entities import RECORD_TYPES, Entity

logger = logging.getLogger(__name__)


class PoolExhaustedError(RuntimeError):
    """Raised when acquiring from a category that is already at capacity."""


class EntityPool:
    """Object pool for the records of a single category.

    Args:
        category: Category name, used for logging.
        capacity: Maximum number of simultaneously active records.
        factory: Zero-argument callable that allocates a fresh record.
    """

    def __init__(self, category: str, capacity: int, factory: Callable[[], Entity]):
        self.category = category
        self.capacity = max(0, int(capacity))
        self._factory = factory
        self._records: List[Entity] = []
        self._active: List[int] = []
        self._free: List[int] = []
        # handle -> index into _active, or -1 while free
        self._slot: List[int] = []

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[Entity]:
        records = self._records
        for handle in self._active:
            yield records[handle]

    @property
    def full(self) -> bool:
        return len(self._active) >= self.capacity

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def arena_size(self) -> int:
        return len(self._records)

    def entity_at(self, index: int) -> Entity:
        """Return the active record stored at position ``index``."""
        return self._records[self._active[index]]

    def acquire(self) -> Entity:
        """Activate a record, reusing a freed one when possible.

        The returned record still holds whatever state it had when it was
        released; callers are expected to assign every field.
        """
        if self.full:
            raise PoolExhaustedError(
                f"{self.category} pool is at capacity ({self.capacity})"
            )
        if self._free:
            handle = self._free.pop()
        else:
            handle = len(self._records)
            record = self._factory()
            record.handle = handle
            self._records.append(record)
            self._slot.append(-1)
            logger.debug("%s arena grew to %d records", self.category, handle + 1)
        self._slot[handle] = len(self._active)
        self._active.append(handle)
        return self._records[handle]

    def release(self, record: Entity) -> None:
        """Deactivate ``record`` and push its handle onto the free stack.

        Releasing a record that is not active in this pool is a no-op.
        """
        handle = record.handle
        if handle < 0 or handle >= len(self._slot) or self._slot[handle] < 0:
            return
        if self._records[handle] is not record:
            return
        self.remove_at(self._slot[handle])

    def remove_at(self, index: int) -> Entity:
        """Swap-and-pop the active record at ``index``; returns it."""
        active = self._active
        handle = active[index]
        last = active[-1]
        active[index] = last
        self._slot[last] = index
        active.pop()
        self._slot[handle] = -1
        self._free.append(handle)
        return self._records[handle]

    def clear(self) -> None:
        """Release every active record; the arena itself is kept."""
        slot = self._slot
        for handle in reversed(self._active):
            slot[handle] = -1
            self._free.append(handle)
        self._active.clear()

    def get_stats(self) -> dict:
        return {
            "active_count": len(self._active),
            "free_count": len(self._free),
            "arena_size": len(self._records),
            "capacity": self.capacity,
        }


class PoolSet:
    """One :class:`EntityPool` per category, built from a capacity table."""

    def __init__(self, capacities: Dict[str, int]):
        self._pools: Dict[str, EntityPool] = {
            category: EntityPool(category, capacities.get(category, 0), record_type)
            for category, record_type in RECORD_TYPES.items()
        }

    def __getitem__(self, category: str) -> EntityPool:
        return self._pools[category]

    def __iter__(self) -> Iterator[EntityPool]:
        return iter(self._pools.values())

    def items(self):
        return self._pools.items()

    def clear(self) -> None:
        for pool in self._pools.values():
            pool.clear()

    def get_stats(self) -> Dict[str, dict]:
        return {category: pool.get_stats() for category, pool in self._pools.items()}
