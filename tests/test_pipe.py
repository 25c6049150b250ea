import pytest

from flapgame.geometry import SCALE_FACTOR, WIN_WIDTH
from flapgame.pipe import MOVE_SPEED, PIPE_DISTANCE, Pipe


def test_gap_and_speed_match_game_values():
    pipe = Pipe(400, 52, 320)
    assert pipe.lower_bounds().top - pipe.upper_bounds().bottom() == 170
    before = pipe.right_bound()
    pipe.update(1.0)
    assert before - pipe.right_bound() == pytest.approx(400)


def test_spawns_at_right_edge_of_window():
    pipe = Pipe(300, 52, 320)
    assert pipe.upper_bounds().left == WIN_WIDTH
    assert pipe.lower_bounds().left == WIN_WIDTH


def test_lower_pipe_top_is_y_pos():
    assert Pipe(300, 52, 320).lower_bounds().top == 300


def test_gap_between_pipes():
    pipe = Pipe(420, 52, 320)
    assert pipe.lower_bounds().top - pipe.upper_bounds().bottom() == PIPE_DISTANCE


def test_pipes_are_scaled():
    pipe = Pipe(300, 52, 320)
    for rect in (pipe.upper_bounds(), pipe.lower_bounds()):
        assert rect.width / 52 == pytest.approx(SCALE_FACTOR)
        assert rect.height / 320 == pytest.approx(SCALE_FACTOR)


def test_right_bound_is_right_edge():
    pipe = Pipe(300, 52, 320)
    assert pipe.right_bound() == pipe.upper_bounds().right()
    assert pipe.right_bound() > WIN_WIDTH


def test_update_scrolls_left_at_fixed_speed():
    pipe = Pipe(300, 52, 320)
    before = pipe.right_bound()
    pipe.update(0.25)
    assert before - pipe.right_bound() == pytest.approx(MOVE_SPEED * 0.25)
    assert pipe.upper_bounds().left == pipe.lower_bounds().left


def test_update_keeps_vertical_positions():
    pipe = Pipe(300, 52, 320)
    upper, lower = pipe.upper_bounds().top, pipe.lower_bounds().top
    pipe.update(1.0)
    assert (pipe.upper_bounds().top, pipe.lower_bounds().top) == (upper, lower)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Pipe(300, 52, -1)