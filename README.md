# flapgame

A small side-scrolling arcade game: guide a bird through an endless stream
of pipes by flapping its wings. Each pipe you clear scores a point, and the
best score is remembered separately for every difficulty level.

## Installing

```
pip install .
```

The game draws with pygame, which is installed along with it.

## Playing

Start the game with:

```
flapgame
```

By default the game looks for its images, sounds and font in an `assets`
directory under the current working directory. Point it elsewhere with
`--assets`:

```
flapgame --assets /path/to/assets
```

The directory must hold `bg.png`, `ground.png`, `birddown.png`,
`birdup.png`, `pipe.png` and `pipedown.png`; a missing image stops the game
with an error. The sounds (`sfx/flap.wav`, `sfx/dead.wav`) and background
music (`sfx/bgm.ogg`) are optional: without them, or without a working
audio device, the game runs silently. Without `flappy-font.ttf` pygame's
default font is used.

### Menu

- **Up** / **Down** moves the highlight between Easy, Medium and Hard,
  wrapping around at either end.
- **Enter** starts the game at the highlighted difficulty. A left click
  highlights the entry under the pointer, if any, and starts the game.

| Difficulty | Pipe spacing (frames) | Scroll speed |
|------------|-----------------------|--------------|
| Easy       | 100                   | 150          |
| Medium     | 70                    | 200          |
| Hard       | 50                    | 250          |

### In the game

- **Enter** sets the bird flying.
- **Space** flaps.
- **M** turns the background music on or off, at any time.

Touching a pipe or the ground ends the round. The score and high score are
shown; click **Restart** or press **Enter** or **Space** to play again, or
click **Menu** to choose another difficulty.

### High scores

High scores are stored as plain text files in the working directory:
`EasyHighscore.txt`, `MediumHighscore.txt` and `HardHighscore.txt`. A file
is rewritten whenever a round's score passes the stored high score.

## Using the game rules without a window

The rules of play live in modules that do not need pygame:

- `flapgame.geometry` — the window size, scale factor and `Rect`.
- `flapgame.bird` — `Bird`, falling under gravity and flapping.
- `flapgame.pipe` — `Pipe`, a pair of pipes scrolling left.
- `flapgame.menu` — `Difficulty` and `Menu`, the difficulty selection.
- `flapgame.game` — `Game`, `HighscoreStore`, `DifficultySettings` and
  `settings_for`.

```python
import random

from flapgame.game import Game, HighscoreStore
from flapgame.menu import Difficulty

# texture sizes before scaling: bird (w, h), pipe (w, h), ground width
game = Game((34, 24), (52, 320), 336, HighscoreStore("."), random.Random(1))
game.select_difficulty(Difficulty.HARD)
game.start()
died = game.step(1 / 60)   # advance one frame; True when the bird hits something
game.flap(1 / 60)
print(game.score, game.summary())
```

`flapgame.app` holds `App`, which draws a `Game` in a pygame window, and
`main`, the entry point of the `flapgame` command.

## Running the tests

```
pip install .[test]
pytest
```