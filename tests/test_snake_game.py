import random

import pytest

from consolegames.highscores import HighScores, Mode
from consolegames.snake import DEATH_SCORE, SNAKE_INITIAL_LENGTH, Direction, GridCondition
from consolegames.snake_game import (
    DEATH_COUNT_MAXIMUM,
    MAX_ITEMS,
    Control,
    EndPage,
    SnakeGame,
    key_direction,
)


def _rng():
    return random.Random(1234)


@pytest.mark.parametrize(
    "key, extended, current, expected",
    [
        ("w", False, Direction.RIGHT, Direction.UP),
        ("W", False, Direction.RIGHT, Direction.UP),
        ("w", False, Direction.DOWN, Direction.DOWN),
        ("a", False, Direction.UP, Direction.LEFT),
        ("d", False, Direction.LEFT, Direction.LEFT),
        ("H", True, Direction.LEFT, Direction.UP),
        ("M", True, Direction.UP, Direction.RIGHT),
        ("K", True, Direction.RIGHT, Direction.RIGHT),
        ("x", False, Direction.UP, Direction.UP),
        ("w", True, Direction.RIGHT, Direction.RIGHT),
    ],
)
def test_key_direction(key, extended, current, expected):
    assert key_direction(key, extended, current) is expected


def test_generate_grid_fills_up_to_maximum():
    control = Control(Mode.BASIC, rng=_rng())
    placed = control.generate_grid(GridCondition.GOOD_FOOD)
    assert len(placed) == MAX_ITEMS[GridCondition.GOOD_FOOD]
    assert control.board.count(GridCondition.GOOD_FOOD) == len(placed)
    assert control.board.food[GridCondition.GOOD_FOOD] == len(placed)
    assert control.generate_grid(GridCondition.GOOD_FOOD) == []


def test_generate_grid_limited_by_blank_cells():
    control = Control(Mode.BASIC, rows=3, cols=3, rng=_rng())
    assert control.generate_grid(GridCondition.OBSTACLE) == [(1, 1)]
    assert control.generate_grid(GridCondition.BAD_FOOD) == []


def test_generate_grid_rejects_other_conditions():
    control = Control(Mode.BASIC, rng=_rng())
    with pytest.raises(ValueError):
        control.generate_grid(GridCondition.WALL)


def test_control_rejects_menu_entries():
    with pytest.raises(ValueError):
        Control(Mode.QUIT)


def test_refresh_map_recounts_and_restores_walls():
    control = Control(Mode.BASIC, rng=_rng())
    board = control.board
    board.set(0, 3, GridCondition.GOOD_FOOD)
    board.set(2, 2, GridCondition.GREAT_FOOD)
    board.set(2, 3, GridCondition.GREAT_FOOD)
    control.refresh_map()
    assert board[0, 3] == GridCondition.WALL
    assert board.food[GridCondition.GREAT_FOOD] == 2
    assert board.food[GridCondition.GOOD_FOOD] == 0


def test_highest_score():
    control = Control(Mode.HUMAN_VS_HUMAN, rng=_rng())
    control.snake_a.score = 40
    control.snake_b.score = 70
    assert control.highest_score() == 70


def test_info_text_shows_clock():
    control = Control(Mode.BASIC, rng=_rng())
    text = control.info_text(65)
    assert text.startswith("[Basic mode]")
    assert text.endswith("01:05")


def test_info_text_expert_shows_deaths():
    control = Control(Mode.EXPERT, rng=_rng())
    control.snake_a.death = 3
    assert "Deaths: 3" in control.info_text(0)


def test_new_game_places_snake():
    game = SnakeGame(Mode.BASIC, rng=_rng())
    assert game.control.snake_a.length == SNAKE_INITIAL_LENGTH
    assert game.over is False


def test_basic_mode_ends_on_wall():
    game = SnakeGame(Mode.BASIC, rng=_rng())
    assert game.tick(Direction.UP) is False
    assert game.over is True
    assert game.finish() is EndPage.DEFAULT


def test_tick_after_end_raises():
    game = SnakeGame(Mode.BASIC, rng=_rng())
    game.tick(Direction.UP)
    with pytest.raises(RuntimeError):
        game.tick()


def test_advanced_mode_turns_body_into_walls():
    game = SnakeGame(Mode.ADVANCED, rng=_rng())
    assert game.tick(Direction.UP) is True
    snake = game.control.snake_a
    assert snake.death == 1
    assert snake.score == DEATH_SCORE
    assert snake.length == SNAKE_INITIAL_LENGTH
    assert game.control.board[1, 3] == GridCondition.WALL


def test_expert_mode_ends_after_maximum_deaths():
    game = SnakeGame(Mode.EXPERT, rng=_rng())
    for _ in range(5000):
        if not game.tick(Direction.UP):
            break
    assert game.over is True
    assert game.control.snake_a.death == DEATH_COUNT_MAXIMUM


def test_full_board_ends_game():
    game = SnakeGame(Mode.BASIC, rows=3, cols=7, rng=_rng())
    assert game.over is False
    assert game.tick() is False
    assert game.over is True


def test_no_room_for_snake_ends_at_once():
    game = SnakeGame(Mode.BASIC, rows=3, cols=3, rng=_rng())
    assert game.over is True


def test_human_vs_human_b_dies_a_wins():
    game = SnakeGame(Mode.HUMAN_VS_HUMAN, rng=_rng())
    assert game.control.snake_b.direction is Direction.RIGHT
    assert game.control.snake_a.direction is Direction.DOWN
    assert game.tick(None, Direction.UP) is False
    assert game.finish() is EndPage.HUMAN_SNAKE_A


def test_human_vs_ai_ends_with_a_winner():
    game = SnakeGame(Mode.HUMAN_VS_AI, rng=_rng())
    for _ in range(500):
        if not game.tick(Direction.RIGHT):
            break
    assert game.over is True
    assert game.end_page in (EndPage.AI_SNAKE_B, EndPage.HUMAN_SNAKE_A)


def test_finish_records_better_score(tmp_path):
    scores = HighScores(tmp_path / "scores.dat")
    scores.reset()
    game = SnakeGame(Mode.BASIC, rng=_rng(), high_scores=scores)
    game.tick(Direction.UP)
    game.control.snake_a.score = 30
    game.finish()
    assert scores.read(Mode.BASIC) == 30
    assert scores.read(Mode.EXPERT) == 0


def test_finish_keeps_higher_record(tmp_path):
    scores = HighScores(tmp_path / "scores.dat")
    scores.reset()
    scores.update(Mode.BASIC, 500)
    game = SnakeGame(Mode.BASIC, rng=_rng(), high_scores=scores)
    game.tick(Direction.UP)
    game.finish()
    assert scores.read(Mode.BASIC) == 500