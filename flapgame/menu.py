"""The difficulty selection menu."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from flapgame.geometry import Rect

TITLE = "Select Difficulty"
TITLE_POSITION = (100, 180)
ITEM_POSITIONS = ((120, 280), (120, 340), (120, 400))


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2


LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}


class Menu:
    """Tracks the highlighted difficulty.

    ``item_bounds`` holds the on-screen rectangles of the Easy, Medium and
    Hard entries, in that order, used for mouse selection.
    """

    def __init__(self, item_bounds: Sequence[Rect]) -> None:
        bounds = tuple(item_bounds)
        if len(bounds) != len(Difficulty):
            raise ValueError(f"expected {len(Difficulty)} item bounds, got {len(bounds)}")
        self._items = dict(zip(Difficulty, bounds))
        self._option = Difficulty.EASY

    def handle_key(self, key: str) -> None:
        """Move the highlight with ``"up"`` or ``"down"``, wrapping around."""
        step = {"up": -1, "down": 1}.get(key.lower())
        if step is not None:
            self._option = Difficulty((self._option + step) % len(Difficulty))

    def handle_click(self, x: float, y: float) -> None:
        """Highlight the entry under a left click, if any."""
        for difficulty, rect in self._items.items():
            if rect.contains(x, y):
                self._option = difficulty
                return

    def difficulty(self) -> Difficulty:
        """Return the highlighted difficulty."""
        return self._option