"""The windowed game: loads assets, handles input and draws each frame."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

import pygame

from flapgame.game import GROUND_Y, Game, HighscoreStore
from flapgame.geometry import SCALE_FACTOR, WIN_HEIGHT, WIN_WIDTH, Rect
from flapgame.menu import ITEM_POSITIONS, LABELS, TITLE, TITLE_POSITION, Difficulty, Menu

FRAME_RATE = 60
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
BLACK = (0, 0, 0)
BACKGROUND_POSITION = (0, -250)
RESTART_POSITION = (210, 440)
MENU_BUTTON_POSITION = (210, 500)
MUSIC_ON = "Music ( 'M' to toggle ) : On"
MUSIC_OFF = "Music ( 'M' to toggle ) : Off"


class App:
    """Runs the game in ``screen`` with images, sounds and font from ``assets``."""

    def __init__(self, screen: pygame.Surface, assets: str | Path) -> None:
        self.screen = screen
        self.assets = Path(assets)
        pygame.font.init()
        self._fonts: dict[int, pygame.font.Font] = {}

        self.background = self._scaled(self._load_image("bg.png"))
        ground = self._load_image("ground.png")
        bird_down = self._load_image("birddown.png")
        pipe_up = self._load_image("pipe.png")
        self.ground = self._scaled(ground)
        self.bird_frames = (self._scaled(bird_down), self._scaled(self._load_image("birdup.png")))
        self.pipe_up = self._scaled(pipe_up)
        self.pipe_down = self._scaled(self._load_image("pipedown.png"))

        self._audio = self._init_audio()
        self.flap_sound = self._load_sound("sfx/flap.wav")
        self.dead_sound = self._load_sound("sfx/dead.wav")
        self._music = self._start_music()
        self.muted = False
        self.music_label = "Music ( 'M' to toggle) : On"

        self.game = Game(
            bird_down.get_size(),
            pipe_up.get_size(),
            ground.get_width(),
            HighscoreStore(Path.cwd()),
            random.Random(),
        )
        item_font = self._font(40)
        self.menu = Menu(
            [Rect(x, y, *item_font.size(LABELS[d])) for d, (x, y) in zip(Difficulty, ITEM_POSITIONS)]
        )
        self.restart_bounds = Rect(*RESTART_POSITION, *item_font.size("Restart"))
        self.menu_button_bounds = Rect(*MENU_BUTTON_POSITION, *item_font.size("Menu"))
        self._running = False

    def run(self) -> None:
        """Run frames until the window is closed."""
        clock = pygame.time.Clock()
        self._running = True
        while self._running:
            dt = clock.tick(FRAME_RATE) / 1000
            for event in pygame.event.get():
                self._handle_event(event, dt)
            if self.game.in_menu:
                self.screen.blit(self.background, BACKGROUND_POSITION)
                self._draw_menu()
                self._draw_text(self.music_label, 20, WHITE, (300, 20), 2)
            else:
                if self.game.step(dt):
                    self._play(self.dead_sound)
                self._draw_game()
            pygame.display.flip()

    def _handle_event(self, event: pygame.event.Event, dt: float) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_m:
            self._toggle_music()

        is_key = event.type == pygame.KEYDOWN
        is_left_click = event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
        game = self.game

        if game.in_menu:
            if is_key and event.key == pygame.K_UP:
                self.menu.handle_key("up")
            elif is_key and event.key == pygame.K_DOWN:
                self.menu.handle_key("down")
            elif is_left_click:
                self.menu.handle_click(*event.pos)
            if (is_key and event.key == pygame.K_RETURN) or is_left_click:
                game.select_difficulty(self.menu.difficulty())
            return

        if is_key and game.run_game:
            if event.key == pygame.K_RETURN and not game.is_enter_pressed:
                game.start()
            if event.key == pygame.K_SPACE and game.flap(dt):
                self._play(self.flap_sound)
        if (is_left_click or is_key) and not game.run_game:
            if (is_left_click and self.restart_bounds.contains(*event.pos)) or (
                is_key and event.key in (pygame.K_RETURN, pygame.K_SPACE)
            ):
                game.restart()
            if is_left_click and self.menu_button_bounds.contains(*event.pos):
                game.return_to_menu()

    def _toggle_music(self) -> None:
        if self.muted:
            if self._music:
                pygame.mixer.music.unpause()
            self.muted = False
            self.music_label = MUSIC_ON
        else:
            if self._music:
                pygame.mixer.music.pause()
            self.muted = True
            self.music_label = MUSIC_OFF

    def _draw_menu(self) -> None:
        self._draw_text(TITLE, 50, WHITE, TITLE_POSITION, 3)
        selected = self.menu.difficulty()
        for difficulty, position in zip(Difficulty, ITEM_POSITIONS):
            color = YELLOW if difficulty == selected else WHITE
            self._draw_text(LABELS[difficulty], 40, color, position, 2)

    def _draw_game(self) -> None:
        game = self.game
        self.screen.blit(self.background, BACKGROUND_POSITION)
        for pipe in game.pipes:
            self.screen.blit(self.pipe_down, (pipe.x, pipe.upper_top))
            self.screen.blit(self.pipe_up, (pipe.x, pipe.lower_top))
        for x in game.ground_positions:
            self.screen.blit(self.ground, (x, GROUND_Y))
        self.screen.blit(self.bird_frames[game.bird.frame], (game.bird.x, game.bird.y))

        if not game.run_game:
            self._draw_text("Restart", 40, YELLOW, RESTART_POSITION, 5)
            self._draw_text(game.summary(), 50, WHITE, (150, 210), 5)
            self._draw_text("Menu", 40, YELLOW, MENU_BUTTON_POSITION, 5)
            self._draw_text(self.music_label, 20, WHITE, (300, 20), 2)
        if not game.is_enter_pressed and not game.in_menu:
            self._draw_text("Press 'ENTER' to start", 30, WHITE, (130, 630), 5)
        if game.show_space:
            self._draw_text("Press 'SPACE' to Flap", 30, WHITE, (130, 430), 5)
        if game.run_game:
            self._draw_text(str(game.score), 40, WHITE, (280, 30), 5)

    def _draw_text(self, text: str, size: int, color, position, outline: int) -> None:
        font = self._font(size)
        x, y = position
        offsets = [(dx, dy) for dx in (-outline, 0, outline) for dy in (-outline, 0, outline) if dx or dy]
        for line_number, line in enumerate(text.split("\n")):
            line_y = y + line_number * font.get_linesize()
            if not line:
                continue
            shadow = font.render(line, True, BLACK)
            for dx, dy in offsets:
                self.screen.blit(shadow, (x + dx, line_y + dy))
            self.screen.blit(font.render(line, True, color), (x, line_y))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = self.assets / "flappy-font.ttf"
            self._fonts[size] = pygame.font.Font(str(path) if path.is_file() else None, size)
        return self._fonts[size]

    def _load_image(self, name: str) -> pygame.Surface:
        path = self.assets / name
        if not path.is_file():
            raise FileNotFoundError(f"missing image: {path}")
        return pygame.image.load(str(path)).convert_alpha()

    @staticmethod
    def _scaled(image: pygame.Surface) -> pygame.Surface:
        width, height = image.get_size()
        size = (round(width * SCALE_FACTOR), round(height * SCALE_FACTOR))
        return pygame.transform.scale(image, size)

    @staticmethod
    def _init_audio() -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error:
            return False
        return True

    def _load_sound(self, name: str):
        path = self.assets / name
        if not self._audio or not path.is_file():
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error:
            return None

    def _start_music(self) -> bool:
        path = self.assets / "sfx" / "bgm.ogg"
        if not self._audio or not path.is_file():
            return False
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.set_volume(0.25)
            pygame.mixer.music.play(-1)
        except pygame.error:
            return False
        return True

    @staticmethod
    def _play(sound) -> None:
        if sound is not None:
            sound.play()


def main(argv=None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="flapgame", description="A side-scrolling bird game.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="directory holding the game assets")
    args = parser.parse_args(argv)
    if not args.assets.is_dir():
        parser.error(f"assets directory not found: {args.assets}")

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        App(screen, args.assets).run()
    finally:
        pygame.quit()
    return 0