"""A pair of pipes with a gap the bird must fly through."""

from __future__ import annotations

from flapgame.geometry import SCALE_FACTOR, WIN_WIDTH, Rect

PIPE_DISTANCE = 170
MOVE_SPEED = 400


class Pipe:
    """Two pipes sharing an x position; the lower one's top is at ``y_pos``.

    ``width`` and ``height`` are the pipe texture's size before scaling.
    """

    def __init__(self, y_pos: float, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("pipe size must be positive")
        self.width = width * SCALE_FACTOR
        self.height = height * SCALE_FACTOR
        self.x = float(WIN_WIDTH)
        self.lower_top = float(y_pos)
        self.upper_top = y_pos - PIPE_DISTANCE - self.height

    def upper_bounds(self) -> Rect:
        """Return the rectangle of the pipe hanging from the top."""
        return Rect(self.x, self.upper_top, self.width, self.height)

    def lower_bounds(self) -> Rect:
        """Return the rectangle of the pipe rising from the bottom."""
        return Rect(self.x, self.lower_top, self.width, self.height)

    def right_bound(self) -> float:
        """Return the x coordinate of the pipes' right edge."""
        return self.upper_bounds().right()

    def update(self, dt: float) -> None:
        """Scroll the pipes left for ``dt`` seconds."""
        self.x -= MOVE_SPEED * dt