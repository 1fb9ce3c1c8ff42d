"""Axis-aligned rectangles used to partition and query the tree."""

from __future__ import annotations

from dataclasses import dataclass, replace

_HALF = 2.0


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left (x0, y0) and bottom-right (x1, y1) corners."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_size(cls, x: float, y: float, w: float, h: float) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def pad(self, d: float) -> Rect:
        """Return a copy grown by ``d`` on every side."""
        return Rect(self.x0 - d, self.y0 - d, self.x1 + d, self.y1 + d)

    def clip(self, bounds: Rect) -> Rect:
        """Return a copy whose edges do not reach past those of ``bounds``."""
        return replace(
            self,
            x0=max(self.x0, bounds.x0),
            y0=max(self.y0, bounds.y0),
            x1=min(self.x1, bounds.x1),
            y1=min(self.y1, bounds.y1),
        )

    @property
    def center(self) -> tuple[float, float]:
        return self.x0 + self.width / _HALF, self.y0 + self.height / _HALF

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point lies inside the rectangle or on its edge."""
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def contains_rect(self, other: Rect) -> bool:
        """True if both corners of ``other`` lie within this rectangle."""
        return self.contains_point(other.x0, other.y0) and self.contains_point(
            other.x1, other.y1
        )

    def overlaps(self, other: Rect) -> bool:
        return (
            self.x0 < other.x1
            and self.x1 >= other.x0
            and self.y0 < other.y1
            and self.y1 >= other.y0
        )

    def split(self) -> tuple[Rect, Rect, Rect, Rect]:
        """Split into upper-left, upper-right, lower-left and lower-right quarters."""
        dx, dy = self.width / _HALF, self.height / _HALF
        return (
            Rect(self.x0, self.y0, self.x0 + dx, self.y0 + dy),
            Rect(self.x0 + dx, self.y0, self.x1, self.y1 - dy),
            Rect(self.x0, self.y0 + dy, self.x0 + dx, self.y1),
            Rect(self.x0 + dx, self.y0 + dy, self.x1, self.y1),
        )