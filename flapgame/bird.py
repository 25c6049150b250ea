"""The player's bird: falling, flapping and wing animation."""

from __future__ import annotations

from flapgame.geometry import SCALE_FACTOR, Rect

START_X = 100.0
START_Y = 50.0
FLOOR_TOP = 548.0
GRAVITY = 10
FLAP_SPEED = 250
FRAMES_PER_WING_BEAT = 5


class Bird:
    """A bird sprite whose texture is ``width`` x ``height`` pixels before scaling."""

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("bird size must be positive")
        self.width = width * SCALE_FACTOR
        self.height = height * SCALE_FACTOR
        self.should_fly = False
        self.frame = 0
        self._next_frame = 1
        self._anim_counter = 0
        self.x = START_X
        self.y = START_Y
        self.velocity_y = 0.0

    def bounds(self) -> Rect:
        """Return the bird's on-screen rectangle."""
        return Rect(self.x, self.y, self.width, self.height)

    def right_bound(self) -> float:
        """Return the x coordinate of the bird's right edge."""
        return self.bounds().right()

    def update(self, dt: float) -> None:
        """Advance the bird by ``dt`` seconds while it is flying above the floor."""
        if not (self.y < FLOOR_TOP and self.should_fly):
            return
        if self._anim_counter == FRAMES_PER_WING_BEAT:
            self.frame = self._next_frame
            self._next_frame = 1 - self._next_frame
            self._anim_counter = 0
        self._anim_counter += 1

        self.velocity_y += GRAVITY * dt
        self.y += self.velocity_y
        if self.y < 0:
            self.x, self.y = START_X, 0.0

    def flap(self, dt: float) -> None:
        """Give the bird an upward kick scaled by the frame time."""
        self.velocity_y = -FLAP_SPEED * dt

    def reset_position(self) -> None:
        """Put the bird back at its starting point, at rest."""
        self.x = START_X
        self.y = START_Y
        self.velocity_y = 0.0