"""Screen constants and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass

WIN_WIDTH = 600
WIN_HEIGHT = 768
SCALE_FACTOR = 1.5


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def right(self) -> float:
        """Return the x coordinate of the right edge."""
        return self.left + self.width

    def bottom(self) -> float:
        """Return the y coordinate of the bottom edge."""
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap by a non-zero area."""
        inter_left = max(self.left, other.left)
        inter_top = max(self.top, other.top)
        inter_right = min(self.right(), other.right())
        inter_bottom = min(self.bottom(), other.bottom())
        return inter_left < inter_right and inter_top < inter_bottom

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; left/top edges are inclusive."""
        return self.left <= x < self.right() and self.top <= y < self.bottom()