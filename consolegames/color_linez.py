"""Color Linez: move balls across a 9 by 9 board and clear lines of five or more."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass

ROWS = 9
COLS = 9
COLORS = 7
PREVIEW = 3
POINTS_PER_BALL = 10
LINE_LENGTH = 5

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
# Pairs of opposite directions: vertical, horizontal and the two diagonals.
_AXES = (
    ((1, 0), (-1, 0)),
    ((0, 1), (0, -1)),
    ((-1, -1), (1, 1)),
    ((1, -1), (-1, 1)),
)


@dataclass
class Statistic:
    """Counts for one ball colour."""

    number: int = 0
    deleted: int = 0
    proportion: float = 0.0


def find_path(grid, start, target):
    """Shortest path of cells from ``start`` to ``target``, both included.

    Cells whose value is truthy block the way; ``start`` itself may be
    occupied. Returns ``None`` when ``target`` cannot be reached.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    start = tuple(start)
    target = tuple(target)
    previous = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == target:
            path = []
            while current is not None:
                path.append(current)
                current = previous[current]
            path.reverse()
            return path
        r, c = current
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            nr, nc = nxt
            if 0 <= nr < rows and 0 <= nc < cols and nxt not in previous and not grid[nr][nc]:
                previous[nxt] = current
                queue.append(nxt)
    return None


class ColorLinez:
    """Board, score, the preview of the next balls and per-colour statistics."""

    def __init__(self, rng=None):
        self.grid = [[0] * COLS for _ in range(ROWS)]
        self.score = 0
        self.next_balls = []
        self._deleted = [0] * COLORS
        self._rng = rng if rng is not None else random.Random()

    def _in_board(self, row, col):
        return 0 <= row < ROWS and 0 <= col < COLS

    def generate(self, n, initialize=False):
        """Drop ``n`` balls on random empty cells and draw a new preview.

        The balls get random colours when ``initialize`` is set, otherwise
        the colours of the current preview. Returns the placed balls as
        (row, col, colour).
        """
        if n < 0:
            raise ValueError("cannot place a negative number of balls")
        if n > self.blank_count():
            raise ValueError(f"only {self.blank_count()} empty cells for {n} balls")
        if not initialize and n > len(self.next_balls):
            raise ValueError("no preview balls to place")
        placed = []
        for i in range(n):
            empty = [
                (r, c)
                for r, line in enumerate(self.grid)
                for c, value in enumerate(line)
                if value == 0
            ]
            row, col = self._rng.choice(empty)
            value = self._rng.randint(1, COLORS) if initialize else self.next_balls[i]
            self.grid[row][col] = value
            placed.append((row, col, value))
        self.next_balls = [self._rng.randint(1, COLORS) for _ in range(PREVIEW)]
        return placed

    def is_empty(self, row, col):
        """Whether no ball lies on the cell."""
        if not self._in_board(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return self.grid[row][col] == 0

    def statistics(self):
        """Return one :class:`Statistic` per colour, colour 1 first."""
        counts = [0] * COLORS
        for line in self.grid:
            for value in line:
                if value:
                    counts[value - 1] += 1
        return [
            Statistic(number, deleted, number * 100 / (ROWS * COLS))
            for number, deleted in zip(counts, self._deleted)
        ]

    def _run(self, row, col, dr, dc, value):
        cells = []
        r, c = row + dr, col + dc
        while self._in_board(r, c) and self.grid[r][c] == value:
            cells.append((r, c))
            r, c = r + dr, c + dc
        return cells

    def find_eliminations(self, row, col):
        """Cells cleared by the ball at (row, col), or an empty set if none.

        A line through the ball counts when it holds at least five balls of
        its colour; the ball itself is cleared with every such line.
        """
        if self.is_empty(row, col):
            raise ValueError(f"cell ({row}, {col}) holds no ball")
        value = self.grid[row][col]
        cleared = set()
        for forward, backward in _AXES:
            line = self._run(row, col, *forward, value) + self._run(row, col, *backward, value)
            if len(line) >= LINE_LENGTH - 1:
                cleared.update(line)
        if cleared:
            cleared.add((row, col))
        return cleared

    def eliminate(self, cells):
        """Remove the balls on ``cells``, scoring each and counting it as deleted."""
        for row, col in cells:
            value = self.grid[row][col]
            if not value:
                continue
            self._deleted[value - 1] += 1
            self.grid[row][col] = 0
            self.score += POINTS_PER_BALL
        return self.score

    def blank_count(self):
        """Number of empty cells."""
        return sum(value == 0 for line in self.grid for value in line)