"""The 2048 sliding-tile game on a board of up to 8 by 8 cells."""

from __future__ import annotations

import argparse
import random
from enum import Enum

GAME_TARGET = 2048
MIN_SIZE = 4
MAX_SIZE = 8

_MERGE_SCORES = {
    4: 4,
    8: 16,
    16: 48,
    32: 128,
    64: 320,
    128: 768,
    256: 1792,
    512: 4096,
    1024: 9216,
    2048: 20480,
}

_KEYS = {
    "w": "UP",
    "up": "UP",
    "s": "DOWN",
    "down": "DOWN",
    "a": "LEFT",
    "left": "LEFT",
    "d": "RIGHT",
    "right": "RIGHT",
}


def calculate_score(num):
    """Return the points awarded for creating a tile of value ``num``."""
    return _MERGE_SCORES.get(num, 0)


class Direction(Enum):
    """Direction in which the tiles are pushed."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Status(Enum):
    """State of a game after a move."""

    SUCCESS = 1
    CONTINUE = 2
    FAILURE = 3


class Game2048:
    """A 2048 board with its running score."""

    def __init__(self, rows=4, cols=4, rng=None):
        if not (1 <= rows <= MAX_SIZE and 1 <= cols <= MAX_SIZE):
            raise ValueError(f"board size must be between 1 and {MAX_SIZE}")
        self.rows = rows
        self.cols = cols
        self.grid = [[0] * cols for _ in range(rows)]
        self.score = 0
        self._rng = rng if rng is not None else random.Random()

    def generate(self):
        """Place a 2 or a 4 on a random empty cell and return (row, col, value)."""
        empty = [
            (r, c)
            for r, line in enumerate(self.grid)
            for c, value in enumerate(line)
            if value == 0
        ]
        if not empty:
            raise ValueError("no empty cell left on the board")
        row, col = self._rng.choice(empty)
        value = 2 if self._rng.randrange(2) else 4
        self.grid[row][col] = value
        return row, col, value

    def _lines(self, direction):
        rows = range(self.rows)
        cols = range(self.cols)
        if direction is Direction.UP:
            return [[(r, c) for r in rows] for c in cols]
        if direction is Direction.DOWN:
            return [[(r, c) for r in reversed(rows)] for c in cols]
        if direction is Direction.LEFT:
            return [[(r, c) for c in cols] for r in rows]
        return [[(r, c) for c in reversed(cols)] for r in rows]

    @staticmethod
    def _collapse(values):
        """Push a line towards index 0 in place; return the points earned."""
        gained = 0
        for start, value in enumerate(values):
            if not value:
                continue
            pos = start
            while pos > 0 and values[pos - 1] == 0:
                values[pos - 1], values[pos] = value, 0
                pos -= 1
            # A merged tile may merge again with a later equal tile.
            if pos > 0 and values[pos - 1] == value:
                values[pos - 1] *= 2
                values[pos] = 0
                gained += calculate_score(2 * value)
        return gained

    def move(self, direction):
        """Push every tile towards ``direction``; return the points gained."""
        direction = Direction(direction)
        gained = 0
        for line in self._lines(direction):
            values = [self.grid[r][c] for r, c in line]
            gained += self._collapse(values)
            for (r, c), value in zip(line, values):
                self.grid[r][c] = value
        self.score += gained
        return gained

    def status(self):
        """Report whether the target was reached, play goes on, or the game is lost."""
        cells = [value for line in self.grid for value in line]
        if GAME_TARGET in cells:
            return Status.SUCCESS
        if 0 in cells:
            return Status.CONTINUE
        return Status.FAILURE

    def render(self):
        """Return the board and score as text."""
        lines = [f"Target: {GAME_TARGET}  Score: {self.score}"]
        border = "+" + "------+" * self.cols
        lines.append(border)
        for line in self.grid:
            cells = "".join(f"{value if value else '.':>5} |" for value in line)
            lines.append("|" + cells)
            lines.append(border)
        return "\n".join(lines)


def _ask_size(prompt):
    while True:
        answer = input(prompt).strip()
        if len(answer) == 1 and answer.isdigit() and MIN_SIZE <= int(answer) <= MAX_SIZE:
            return int(answer)


def _play(game):
    game.generate()
    game.generate()
    while True:
        print(game.render())
        status = game.status()
        if status is not Status.CONTINUE:
            outcome = "You win!" if status is Status.SUCCESS else "Game over!"
            print(f"{outcome} Score: {game.score}")
            input("Press Enter to return to the menu")
            return
        key = input("[w/a/s/d to move, q to leave] ").strip().lower()
        if key in ("q", "esc"):
            return
        if key in _KEYS:
            game.move(Direction[_KEYS[key]])
            if game.status() is Status.CONTINUE:
                game.generate()


def main(argv=None):
    """Run the interactive game in the terminal."""
    parser = argparse.ArgumentParser(prog="game2048", description="Play 2048.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        while True:
            print("2048 Game")
            rows = _ask_size(f"Rows ({MIN_SIZE}~{MAX_SIZE}): ")
            cols = _ask_size(f"Columns ({MIN_SIZE}~{MAX_SIZE}): ")
            _play(Game2048(rows, cols, rng))
    except (EOFError, KeyboardInterrupt):
        print()
        return 0