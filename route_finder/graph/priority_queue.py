"""List-backed priority queue used as the Dijkstra frontier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class PriorityQueue(Generic[T]):
    """Ordered container of ``(element, priority)`` pairs.

    Insertion is a linear scan, so ``enqueue`` is O(n). Elements with equal
    priority come out in insertion order. There is no decrease-key: the same
    element may be queued several times with different priorities.
    """

    _items: List[Tuple[T, float]] = field(default_factory=list, repr=False)

    def enqueue(self, element: T, priority: float) -> None:
        """Insert ``element`` before the first item with a greater priority."""
        for index, (_, queued_priority) in enumerate(self._items):
            if priority < queued_priority:
                self._items.insert(index, (element, priority))
                return
        self._items.append((element, priority))

    def dequeue(self) -> Optional[T]:
        """Remove and return the minimum-priority element, or None if empty."""
        entry = self.dequeue_with_priority()
        return entry[0] if entry is not None else None

    def dequeue_with_priority(self) -> Optional[Tuple[T, float]]:
        if not self._items:
            return None
        return self._items.pop(0)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
