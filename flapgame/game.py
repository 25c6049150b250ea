"""Game state: scrolling, pipe spawning, collisions, scoring and highscores."""

from __future__ import annotations

import contextlib
import random
import re
from dataclasses import dataclass
from pathlib import Path

from flapgame.bird import Bird
from flapgame.geometry import SCALE_FACTOR
from flapgame.menu import Difficulty
from flapgame.pipe import Pipe

GROUND_Y = 578.0
DEATH_TOP = 540.0
PIPE_Y_MIN = 250
PIPE_Y_MAX = 550
INITIAL_PIPE_COUNTER = 71


@dataclass(frozen=True)
class DifficultySettings:
    """How often pipes appear (in frames) and how fast the ground scrolls."""

    pipe_spawn_time: int
    move_speed: float


_SETTINGS = {
    Difficulty.EASY: DifficultySettings(100, 150.0),
    Difficulty.MEDIUM: DifficultySettings(70, 200.0),
    Difficulty.HARD: DifficultySettings(50, 250.0),
}
_DEFAULT_SETTINGS = DifficultySettings(70, 200.0)


def settings_for(difficulty: int) -> DifficultySettings:
    """Return the settings for a difficulty; unknown values get the medium ones."""
    return _SETTINGS.get(difficulty, _DEFAULT_SETTINGS)


_FILENAMES = {
    Difficulty.EASY: "EasyHighscore.txt",
    Difficulty.HARD: "HardHighscore.txt",
}
_MEDIUM_FILENAME = "MediumHighscore.txt"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class HighscoreStore:
    """Keeps one highscore file per difficulty in ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def filename(self, difficulty: int) -> str:
        """Return the file name used for a difficulty."""
        return _FILENAMES.get(difficulty, _MEDIUM_FILENAME)

    def load(self, difficulty: int) -> int:
        """Return the stored highscore, or 0 if there is none readable."""
        try:
            text = (self.directory / self.filename(difficulty)).read_text()
        except OSError:
            return 0
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def save(self, difficulty: int, value: int) -> None:
        """Store a highscore; a file that cannot be written is left alone."""
        with contextlib.suppress(OSError):
            (self.directory / self.filename(difficulty)).write_text(str(value))


class Game:
    """The rules of play, independent of drawing and input devices.

    ``bird_size``, ``pipe_size`` and ``ground_width`` are texture sizes
    before scaling.
    """

    def __init__(self, bird_size, pipe_size, ground_width, highscores, rng=None) -> None:
        if ground_width <= 0:
            raise ValueError("ground width must be positive")
        self.bird = Bird(*bird_size)
        self.pipe_size = tuple(pipe_size)
        self.ground_width = ground_width * SCALE_FACTOR
        self.ground_positions = [0.0, self.ground_width]
        self.highscores = highscores
        self.rng = rng if rng is not None else random.Random()
        self.pipes: list[Pipe] = []
        self.in_menu = True
        self.is_enter_pressed = False
        self.run_game = True
        self.show_space = True
        self.pipe_counter = INITIAL_PIPE_COUNTER
        self.settings = DifficultySettings(70, 270.0)
        self.difficulty = Difficulty.EASY
        self.score = 0
        self.highscore = 0
        self._inside_pipe = False

    def select_difficulty(self, difficulty: int) -> None:
        """Leave the menu with the chosen difficulty, ready to start."""
        self.difficulty = Difficulty(difficulty)
        self.settings = settings_for(self.difficulty)
        self.in_menu = False
        self.is_enter_pressed = True
        self.bird.should_fly = True
        self.highscore = self.highscores.load(self.difficulty)
        self.restart()

    def start(self) -> None:
        """Begin the round if it is waiting for the start key."""
        if self.run_game and not self.is_enter_pressed:
            self.is_enter_pressed = True
            self.show_space = False
            self.bird.should_fly = True

    def flap(self, dt: float) -> bool:
        """Flap the bird during a running round; return True if it flapped."""
        if self.run_game and self.is_enter_pressed:
            self.bird.flap(dt)
            return True
        return False

    def step(self, dt: float) -> bool:
        """Advance one frame of ``dt`` seconds; return True if the bird died."""
        died = False
        if self.is_enter_pressed:
            self._move_ground(dt)
            if self.pipe_counter > self.settings.pipe_spawn_time:
                y_pos = self.rng.randint(PIPE_Y_MIN, PIPE_Y_MAX)
                self.pipes.append(Pipe(y_pos, *self.pipe_size))
                self.pipe_counter = 0
            self.pipe_counter += 1

            for pipe in self.pipes:
                pipe.update(dt)
            self.pipes = [pipe for pipe in self.pipes if pipe.right_bound() >= 0]

            died = self._check_collisions()
            self._update_score()
        self.bird.update(dt)
        return died

    def restart(self) -> None:
        """Reset the bird, pipes and score for a new round."""
        self.bird.reset_position()
        self.bird.should_fly = False
        self.run_game = True
        self.pipe_counter = INITIAL_PIPE_COUNTER
        self.pipes.clear()
        self.is_enter_pressed = False
        self.score = 0
        self.highscore = self.highscores.load(self.difficulty)

    def return_to_menu(self) -> None:
        """Go back to the difficulty menu."""
        self.in_menu = True
        self.run_game = True

    def summary(self) -> str:
        """Return the end-of-round score text."""
        return f"Score: {self.score}\nHigh Score: {self.highscore}"

    def _move_ground(self, dt: float) -> None:
        shift = self.settings.move_speed * dt
        first, second = (x - shift for x in self.ground_positions)
        if first + self.ground_width < 0:
            first = second + self.ground_width
        if second + self.ground_width < 0:
            second = first + self.ground_width
        self.ground_positions = [first, second]

    def _check_collisions(self) -> bool:
        if not self.pipes:
            return False
        pipe = self.pipes[0]
        bird = self.bird.bounds()
        if (
            pipe.upper_bounds().intersects(bird)
            or pipe.lower_bounds().intersects(bird)
            or bird.top >= DEATH_TOP
        ):
            self.is_enter_pressed = False
            self.run_game = False
            return True
        return False

    def _update_score(self) -> None:
        if not self.pipes:
            return
        pipe = self.pipes[0]
        bird_left = self.bird.bounds().left
        if not self._inside_pipe:
            if bird_left > pipe.lower_bounds().left and self.bird.right_bound() < pipe.right_bound():
                self._inside_pipe = True
        elif bird_left > pipe.right_bound():
            self.score += 1
            self._inside_pipe = False
            if self.score > self.highscore:
                self.highscore = self.score
                self.highscores.save(self.difficulty, self.highscore)