"""Tree nodes holding items and a fixed set of child quadrants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .rect import Rect


@dataclass
class Item:
    """A value stored under its bounding rectangle."""

    rect: Rect
    value: Any


@dataclass
class Node:
    """A region of the tree; items that fit no child quadrant stay here."""

    rect: Rect
    children: list[Node] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)

    def grow(self, want: int, cur: int) -> None:
        """Subdivide recursively until level ``want`` has been split."""
        if cur > want:
            return
        self.children = [Node(quarter) for quarter in self.rect.split()]
        for child in self.children:
            child.grow(want, cur + 1)

    def insert(self, rect: Rect, value: Any) -> bool:
        """Store ``value`` in the deepest node containing ``rect``."""
        if not self.rect.contains_rect(rect):
            return False
        for child in self.children:
            if child.rect.contains_rect(rect):
                return child.insert(rect, value)
        self.items.append(Item(rect, value))
        return True

    def search(self, area: Rect) -> Iterator[Item]:
        """Yield items that overlap ``area``."""
        if not self.rect.overlaps(area):
            return
        yield from (item for item in self.items if item.rect.overlaps(area))
        for child in self.children:
            if area.contains_rect(child.rect):
                yield from child.walk()
            elif child.rect.overlaps(area):
                yield from child.search(area)

    def walk(self) -> Iterator[Item]:
        """Yield every item in this node and below it."""
        yield from self.items
        for child in self.children:
            yield from child.walk()

    def size(self) -> int:
        return len(self.items) + sum(child.size() for child in self.children)

    def delete(self, x: float, y: float) -> Item | None:
        """Remove and return the first item containing the point, if any."""
        if not self.rect.contains_point(x, y):
            return None
        for i, item in enumerate(self.items):
            if item.rect.contains_point(x, y):
                last = self.items.pop()
                if i < len(self.items):
                    self.items[i] = last
                return item
        for child in self.children:
            removed = child.delete(x, y)
            if removed is not None:
                return removed
        return None