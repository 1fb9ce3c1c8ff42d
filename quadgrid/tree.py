"""A generic quadtree over a fixed rectangular area."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

from .node import Item, Node
from .rect import Rect


@dataclass(frozen=True)
class Entry:
    """A stored value with its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float
    value: Any

    @classmethod
    def _from_item(cls, item: Item) -> Entry:
        r = item.rect
        return cls(r.x0, r.y0, r.width, r.height, item.value)


class QuadTree:
    """A quadtree covering the area (0, 0)-(width, height), split ``depth`` levels deep."""

    def __init__(self, width: float, height: float, depth: int) -> None:
        self._root = Node(Rect.from_size(0, 0, width, height))
        self._root.grow(depth, 0)

    def size(self) -> int:
        """Number of stored items."""
        return self._root.size()

    def __len__(self) -> int:
        return self.size()

    def add(self, x: float, y: float, w: float, h: float, value: Any) -> bool:
        """Store ``value`` at the given rectangle; False if it lies outside the area."""
        return self._root.insert(Rect.from_size(x, y, w, h), value)

    def get(self, x: float, y: float, w: float, h: float, default: Any = None) -> Any:
        """Return the value of the first item overlapping the region, or ``default``."""
        for item in self._root.search(self._area(x, y, w, h)):
            return item.value
        return default

    def delete(self, x: float, y: float) -> bool:
        """Remove one item containing the point; True if one was removed."""
        return self._root.delete(x, y) is not None

    def move(self, x: float, y: float, new_x: float, new_y: float) -> bool:
        """Move the item containing (x, y) so its top-left corner is at (new_x, new_y)."""
        item = self._root.delete(x, y)
        if item is None:
            return False
        return self.add(new_x, new_y, item.rect.width, item.rect.height, item.value)

    def query(self, x: float, y: float, w: float, h: float) -> Iterator[Entry]:
        """Yield the items overlapping the region."""
        for item in self._root.search(self._area(x, y, w, h)):
            yield Entry._from_item(item)

    def k_nearest(
        self, x: float, y: float, distance: float, k: int
    ) -> Iterator[Entry]:
        """Yield up to ``k`` items whose centres lie within ``distance`` of (x, y)."""
        area = Rect.from_size(x, y, x, y).pad(distance).clip(self._root.rect)
        found = 0
        for item in self._root.search(area):
            cx, cy = item.rect.center
            if math.hypot(cx - x, cy - y) <= distance:
                yield Entry._from_item(item)
                found += 1
            if found >= k:
                return

    def _area(self, x: float, y: float, w: float, h: float) -> Rect:
        return Rect.from_size(x, y, w, h).clip(self._root.rect)