import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from flapgame.app import App, main  # noqa: E402
from flapgame.bird import Bird  # noqa: E402
from flapgame.game import settings_for  # noqa: E402
from flapgame.menu import Difficulty  # noqa: E402
from flapgame.pipe import Pipe  # noqa: E402

IMAGE_SIZES = {
    "bg.png": (40, 60),
    "ground.png": (50, 10),
    "birddown.png": (20, 14),
    "birdup.png": (20, 14),
    "pipe.png": (30, 300),
    "pipedown.png": (30, 300),
}


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((600, 768))
    yield surface
    pygame.quit()


@pytest.fixture
def assets(tmp_path, screen):
    directory = tmp_path / "assets"
    directory.mkdir()
    for name, size in IMAGE_SIZES.items():
        image = pygame.Surface(size)
        image.fill((10, 200, 30))
        pygame.image.save(image, str(directory / name))
    return directory


@pytest.fixture
def app(screen, assets, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return App(screen, assets)


def post_keys(*keys):
    pygame.event.clear()
    for key in keys:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))
    pygame.event.post(pygame.event.Event(pygame.QUIT))


def test_sizes_come_from_images(app):
    assert app.game.bird.width == Bird(20, 14).width
    assert app.game.pipe_size == (30, 300)
    assert app.game.ground_width == pytest.approx(app.ground.get_width())


def test_missing_image_raises(screen, tmp_path):
    with pytest.raises(FileNotFoundError):
        App(screen, tmp_path)


def test_run_stops_on_quit_and_stays_in_menu(app):
    post_keys()
    app.run()
    assert app.game.in_menu is True


def test_menu_selection_starts_game(app):
    post_keys(pygame.K_DOWN, pygame.K_RETURN)
    app.run()
    assert app.game.in_menu is False
    assert app.game.difficulty == Difficulty.MEDIUM
    assert app.game.settings == settings_for(Difficulty.MEDIUM)


def test_enter_then_start_key_begins_round(app):
    post_keys(pygame.K_UP, pygame.K_RETURN, pygame.K_RETURN)
    app.run()
    assert app.game.difficulty == Difficulty.HARD
    assert app.game.is_enter_pressed is True
    assert app.game.bird.should_fly is True
    assert all(isinstance(pipe, Pipe) for pipe in app.game.pipes)
    assert len(app.game.pipes) == 1


def test_m_toggles_music(app):
    post_keys(pygame.K_m)
    app.run()
    assert app.muted is True
    assert app.music_label.endswith("Off")
    post_keys(pygame.K_m)
    app.run()
    assert app.muted is False
    assert app.music_label.endswith("On")


def test_main_rejects_missing_assets(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--assets", str(tmp_path / "missing")])
    assert excinfo.value.code == 2