"""Conway's Game of Life on a bounded grid, updated cell by cell in place."""

from __future__ import annotations

import random

GRID_ROWS = 75
GRID_COLS = 150
GRID_SIDE_LENGTH = 10
GRID_SPACE = 1
TOP_MARGIN = 0
LEFT_MARGIN = 0
DELAY_MS = 50
INITIAL_ALIVE = GRID_ROWS * GRID_COLS // 15

_NEIGHBOURS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def cell_rect(row, col):
    """Return the pixel rectangle (x1, y1, x2, y2) that a cell occupies."""
    pitch = GRID_SIDE_LENGTH + GRID_SPACE
    x = LEFT_MARGIN + col * pitch + GRID_SPACE
    y = TOP_MARGIN + row * pitch + GRID_SPACE
    return x, y, x + GRID_SIDE_LENGTH - 1, y + GRID_SIDE_LENGTH - 1


class Life:
    """A grid of live and dead cells."""

    def __init__(self, rows=GRID_ROWS, cols=GRID_COLS, initial_alive=INITIAL_ALIVE, rng=None):
        if rows < 1 or cols < 1:
            raise ValueError("grid must have at least one row and one column")
        if initial_alive < 0:
            raise ValueError("initial_alive must not be negative")
        self.rows = rows
        self.cols = cols
        self.grid = [[False] * cols for _ in range(rows)]
        rng = rng if rng is not None else random.Random()
        cells = [(r, c) for r in range(rows) for c in range(cols)]
        for r, c in rng.sample(cells, min(initial_alive, len(cells))):
            self.grid[r][c] = True

    def is_alive(self, row, col):
        """Whether the cell is alive; cells outside the grid are dead."""
        return 0 <= row < self.rows and 0 <= col < self.cols and self.grid[row][col]

    def count_alive(self, row, col):
        """Number of live neighbours of a cell."""
        return sum(self.is_alive(row + dr, col + dc) for dr, dc in _NEIGHBOURS)

    def step(self):
        """Advance one generation and return the changed cells as (row, col, alive).

        Cells are visited row by row and updated immediately, so later cells
        see the new state of earlier ones.
        """
        changes = []
        for r, line in enumerate(self.grid):
            for c, alive in enumerate(line):
                n = self.count_alive(r, c)
                if alive and (n < 2 or n > 3):
                    line[c] = False
                    changes.append((r, c, False))
                elif not alive and n == 3:
                    line[c] = True
                    changes.append((r, c, True))
        return changes

    def render(self):
        """Return the grid as text, '#' for live cells and '.' for dead ones."""
        return "\n".join("".join("#" if alive else "." for alive in line) for line in self.grid)