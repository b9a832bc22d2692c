import random

import pytest

from consolegames.color_linez import COLORS, COLS, ROWS, ColorLinez, Statistic, find_path


def _empty_grid():
    return [[0] * COLS for _ in range(ROWS)]


def _check_path(grid, path, start, target):
    assert path[0] == start
    assert path[-1] == target
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    for r, c in path[1:]:
        assert not grid[r][c]


def test_find_path_same_cell():
    assert find_path(_empty_grid(), (4, 4), (4, 4)) == [(4, 4)]


def test_find_path_on_empty_grid_is_shortest():
    grid = _empty_grid()
    path = find_path(grid, (0, 0), (5, 7))
    _check_path(grid, path, (0, 0), (5, 7))
    assert len(path) == 5 + 7 + 1


def test_find_path_goes_around_wall():
    grid = _empty_grid()
    for r in range(ROWS - 1):
        grid[r][4] = 1
    path = find_path(grid, (0, 0), (0, 8))
    _check_path(grid, path, (0, 0), (0, 8))
    assert (ROWS - 1, 4) in path


def test_find_path_unreachable():
    grid = _empty_grid()
    for r in range(ROWS):
        grid[r][4] = 1
    assert find_path(grid, (0, 0), (0, 8)) is None


def test_find_path_blocked_target():
    grid = _empty_grid()
    grid[3][3] = 2
    assert find_path(grid, (0, 0), (3, 3)) is None


def test_find_path_start_may_be_occupied():
    grid = _empty_grid()
    grid[0][0] = 5
    assert find_path(grid, (0, 0), (0, 1)) == [(0, 0), (0, 1)]


def test_new_board_is_empty():
    game = ColorLinez(random.Random(1))
    assert game.blank_count() == ROWS * COLS
    assert game.score == 0
    assert game.is_empty(0, 0)


def test_initial_generation():
    game = ColorLinez(random.Random(2))
    placed = game.generate(5, True)
    assert len(placed) == 5
    assert game.blank_count() == ROWS * COLS - 5
    for r, c, value in placed:
        assert 1 <= value <= COLORS
        assert game.grid[r][c] == value
        assert not game.is_empty(r, c)
    assert len(game.next_balls) == 3
    assert all(1 <= v <= COLORS for v in game.next_balls)


def test_generation_uses_preview():
    game = ColorLinez(random.Random(3))
    game.generate(5, True)
    preview = list(game.next_balls)
    placed = game.generate(3)
    assert [value for _, _, value in placed] == preview
    assert game.blank_count() == ROWS * COLS - 8


def test_generation_without_preview_raises():
    game = ColorLinez(random.Random(4))
    with pytest.raises(ValueError):
        game.generate(1)


def test_generation_on_full_board_raises():
    game = ColorLinez(random.Random(5))
    game.grid = [[1] * COLS for _ in range(ROWS)]
    with pytest.raises(ValueError):
        game.generate(1, True)


def test_is_empty_off_board():
    game = ColorLinez()
    with pytest.raises(IndexError):
        game.is_empty(ROWS, 0)


def test_horizontal_line_of_five():
    game = ColorLinez()
    for c in range(2, 7):
        game.grid[4][c] = 3
    assert game.find_eliminations(4, 4) == {(4, c) for c in range(2, 7)}


def test_line_of_four_not_cleared():
    game = ColorLinez()
    for c in range(4):
        game.grid[0][c] = 2
    assert game.find_eliminations(0, 3) == set()


def test_diagonal_line_of_five():
    game = ColorLinez()
    for i in range(5):
        game.grid[i][i] = 6
    assert game.find_eliminations(0, 0) == {(i, i) for i in range(5)}


def test_only_long_axis_is_cleared():
    game = ColorLinez()
    for c in range(5):
        game.grid[4][c] = 1
    game.grid[3][2] = 1
    game.grid[5][2] = 1
    game.grid[4][7] = 2
    cleared = game.find_eliminations(4, 2)
    assert cleared == {(4, c) for c in range(5)}


def test_find_eliminations_empty_cell_raises():
    game = ColorLinez()
    with pytest.raises(ValueError):
        game.find_eliminations(0, 0)


def test_eliminate_scores_and_counts():
    game = ColorLinez()
    for c in range(5):
        game.grid[8][c] = 7
    cells = game.find_eliminations(8, 0)
    game.eliminate(cells)
    assert game.score == 10 * len(cells)
    assert game.blank_count() == ROWS * COLS
    stats = game.statistics()
    assert stats[6].deleted == 5
    assert all(s.deleted == 0 for s in stats[:6])


def test_statistics_match_board():
    game = ColorLinez(random.Random(6))
    game.generate(5, True)
    game.generate(3)
    stats = game.statistics()
    assert len(stats) == COLORS
    assert all(isinstance(s, Statistic) for s in stats)
    assert sum(s.number for s in stats) == ROWS * COLS - game.blank_count()
    assert sum(s.proportion for s in stats) == pytest.approx(
        100 * (ROWS * COLS - game.blank_count()) / (ROWS * COLS)
    )


def test_statistics_full_color():
    game = ColorLinez()
    game.grid = [[4] * COLS for _ in range(ROWS)]
    stats = game.statistics()
    assert stats[3].number == ROWS * COLS
    assert stats[3].proportion == pytest.approx(100.0)
    assert stats[0].number == 0