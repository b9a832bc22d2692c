"""The snake of the gluttonous snake game and the board it crawls on."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum

GRID_ROWS = 32
GRID_COLS = 64
SNAKE_INITIAL_LENGTH = 5
GOOD_SCORE = 10
GREAT_SCORE = 50
BAD_SCORE = -20
BOOM_SCORE = -40
OBSTACLE_SCORE = -30
DEATH_SCORE = -100


class GridCondition(IntEnum):
    """What occupies a cell of the board."""

    BLANK = 0
    WALL = 1
    SNAKE_HEAD = 2
    SNAKE_BODY = 3
    GOOD_FOOD = 4
    GREAT_FOOD = 5
    BAD_FOOD = 6
    BOOM_FOOD = 7
    OBSTACLE = 8


class Direction(Enum):
    """Direction in which a snake segment travels."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self):
        """The direction pointing the other way."""
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_MOVE = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# A new tail segment goes behind the current tail, against its direction.
_TRAIL = {direction: (-dr, -dc) for direction, (dr, dc) in _MOVE.items()}

# Search order of the path finder: up, down, left, right.
_SEARCH = ((-1, 0), (1, 0), (0, -1), (0, 1))

_COUNTED = (
    GridCondition.GOOD_FOOD,
    GridCondition.GREAT_FOOD,
    GridCondition.BAD_FOOD,
    GridCondition.BOOM_FOOD,
    GridCondition.OBSTACLE,
)

_BLOCKING = (GridCondition.WALL, GridCondition.SNAKE_HEAD, GridCondition.SNAKE_BODY)


class SnakeCategory(Enum):
    """Which of the two snakes a snake is."""

    A = "A"
    B = "B"


class Board:
    """A walled grid of cells with counters of food and obstacles on it.

    ``on_change`` is called as ``on_change(row, col, condition, category,
    direction)`` whenever a cell is written, so a display can follow.
    """

    def __init__(self, rows=GRID_ROWS, cols=GRID_COLS, on_change=None):
        if rows < 3 or cols < 3:
            raise ValueError("board needs at least three rows and three columns")
        self.rows = rows
        self.cols = cols
        self.on_change = on_change
        self.grid = [[GridCondition.BLANK] * cols for _ in range(rows)]
        self.food = {condition: 0 for condition in _COUNTED}
        self.set_walls()

    def __getitem__(self, cell):
        row, col = cell
        return self.grid[row][col]

    def set(self, row, col, condition, category=None, direction=None):
        """Write ``condition`` into a cell and report the change."""
        condition = GridCondition(condition)
        self.grid[row][col] = condition
        if self.on_change is not None:
            self.on_change(row, col, condition, category, direction)

    def set_walls(self):
        """Put walls on every border cell."""
        for row in range(self.rows):
            self.set(row, 0, GridCondition.WALL)
            self.set(row, self.cols - 1, GridCondition.WALL)
        for col in range(self.cols):
            self.set(0, col, GridCondition.WALL)
            self.set(self.rows - 1, col, GridCondition.WALL)

    def count(self, condition):
        """Number of cells inside the walls holding ``condition``."""
        condition = GridCondition(condition)
        return sum(
            value == condition
            for line in self.grid[1:-1]
            for value in line[1:-1]
        )


def find_next_step(blocked, start, target):
    """First cell on a shortest path from ``start`` to ``target``.

    Cells whose value in ``blocked`` is truthy cannot be entered. Returns
    ``None`` when the target is unreachable or already reached.
    """
    rows = len(blocked)
    cols = len(blocked[0]) if rows else 0
    start = tuple(start)
    target = tuple(target)
    parent = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == target:
            if current == start:
                return None
            while parent[current] != start:
                current = parent[current]
            return current
        r, c = current
        for dr, dc in _SEARCH:
            nxt = (r + dr, c + dc)
            nr, nc = nxt
            if 0 <= nr < rows and 0 <= nc < cols and not blocked[nr][nc] and nxt not in parent:
                parent[nxt] = current
                queue.append(nxt)
    return None


@dataclass
class _Segment:
    row: int
    col: int
    direction: Direction


class Snake:
    """A snake made of segments, head first, living on a shared board."""

    def __init__(self, board, category=SnakeCategory.A):
        self.board = board
        self.category = SnakeCategory(category)
        self.score = 0
        self.length = 1
        self.death = 0
        self._segments = []

    @property
    def cells(self):
        """Positions of the segments as (row, col), head first."""
        return [(seg.row, seg.col) for seg in self._segments]

    @property
    def head(self):
        """Position of the head as (row, col)."""
        seg = self._head_segment()
        return seg.row, seg.col

    @property
    def direction(self):
        """Direction the head travels in."""
        return self._head_segment().direction

    def _head_segment(self):
        if not self._segments:
            raise RuntimeError("the snake has not been generated")
        return self._segments[0]

    def _draw(self, seg, condition):
        self.board.set(seg.row, seg.col, condition, self.category, self.direction)

    def _add_segment(self, direction):
        tail = self._segments[-1]
        dr, dc = _TRAIL[direction]
        seg = _Segment(tail.row + dr, tail.col + dc, direction)
        self._segments.append(seg)
        self._draw(seg, GridCondition.SNAKE_BODY)
        self.length += 1

    def _delete_segment(self):
        if self.length <= 1:
            return
        self._draw(self._segments[-1], GridCondition.BLANK)
        if len(self._segments) > 1:
            self._segments.pop()
        self.length -= 1

    def _find_empty_space(self, multiplayer):
        board = self.board
        size = SNAKE_INITIAL_LENGTH
        blank = GridCondition.BLANK
        if not multiplayer or self.category is SnakeCategory.B:
            for i in range(1, board.rows - 1):
                for j in range(1, board.cols - size):
                    if all(board.grid[i][j + k] == blank for k in range(size)):
                        return i, j + size - 1, Direction.RIGHT
        if not multiplayer or self.category is SnakeCategory.A:
            for i in range(1, board.rows - size):
                for j in range(1, board.cols - 1):
                    if all(board.grid[i + k][j] == blank for k in range(size)):
                        return i + size - 1, j, Direction.DOWN
        return None

    def generate(self, multiplayer=False):
        """Lay a new snake on the first free straight stretch; False if none.

        Alone, a snake looks for a horizontal stretch first and then a
        vertical one; with two players snake A lies vertically and snake B
        horizontally.
        """
        found = self._find_empty_space(multiplayer)
        if found is None:
            return False
        row, col, direction = found
        head = _Segment(row, col, direction)
        self._segments = [head]
        self._draw(head, GridCondition.SNAKE_HEAD)
        for _ in range(1, SNAKE_INITIAL_LENGTH):
            self._add_segment(self._segments[-1].direction)
        return True

    def refresh(self):
        """Forget the body after a death, counting the death and its penalty."""
        self._segments = []
        self.length = 1
        self.death += 1
        self.score += DEATH_SCORE

    def change_grid_condition(self, condition):
        """Turn every cell the snake covers into ``condition``."""
        for seg in self._segments:
            self.board.set(seg.row, seg.col, condition)

    def correct(self, length):
        """Overwrite the recorded length."""
        self.length = length

    def step(self, direction):
        """Move one cell towards ``direction``; return False if the snake dies.

        The snake dies on hitting a wall or a snake, or when it shrinks to a
        single segment. Food and obstacles change its score and length.
        """
        direction = Direction(direction)
        segments = self._segments
        head = self._head_segment()
        tail = segments[-1]
        tail_direction = tail.direction
        self._draw(head, GridCondition.SNAKE_BODY)
        self._draw(tail, GridCondition.BLANK)

        positions = [(seg.row, seg.col) for seg in segments]
        old_directions = [seg.direction for seg in segments]
        dr, dc = _MOVE[direction]
        head.row += dr
        head.col += dc
        head.direction = direction
        for seg, (row, col) in zip(segments[1:], positions):
            seg.row, seg.col = row, col
        for seg, new_direction in zip(segments[1:], [direction] + old_directions[1:]):
            seg.direction = new_direction

        next_condition = self.board[head.row, head.col]
        self._draw(head, GridCondition.SNAKE_HEAD)

        food = self.board.food
        if next_condition in _BLOCKING:
            return False
        if next_condition is GridCondition.GOOD_FOOD:
            self._add_segment(tail_direction)
            self.score += GOOD_SCORE
            food[next_condition] -= 1
        elif next_condition is GridCondition.BAD_FOOD:
            self.score += BAD_SCORE
            food[next_condition] -= 1
        elif next_condition is GridCondition.OBSTACLE:
            self._delete_segment()
            self._delete_segment()
            self.score += OBSTACLE_SCORE
            food[next_condition] -= 1
        elif next_condition is GridCondition.GREAT_FOOD:
            self.score += GREAT_SCORE
            food[next_condition] -= 1
        elif next_condition is GridCondition.BOOM_FOOD:
            for _ in range(self.length // 2):
                self._delete_segment()
            self.score += BOOM_SCORE
            food[next_condition] -= 1
        return self.length > 1

    def find_closest_target(self):
        """Nearest good or great food in growing square rings around the head."""
        board = self.board
        head_row, head_col = self.head
        wanted = (GridCondition.GOOD_FOOD, GridCondition.GREAT_FOOD)
        for distance in range(1, max(board.rows, board.cols) - 2):
            for r in range(max(head_row - distance, 1), min(head_row + distance, board.rows - 2) + 1):
                for c in range(max(head_col - distance, 1), min(head_col + distance, board.cols - 2) + 1):
                    on_ring = (
                        r in (head_row - distance, head_row + distance)
                        or c in (head_col - distance, head_col + distance)
                    )
                    if on_ring and board.grid[r][c] in wanted:
                        return r, c
        return None

    def choose_direction(self):
        """Direction towards the nearest food, never straight back."""
        current = self.direction
        target = self.find_closest_target()
        if target is None:
            return current
        blocked = [[value in _BLOCKING for value in line] for line in self.board.grid]
        head_row, head_col = self.head
        blocked[target[0]][target[1]] = False
        blocked[head_row][head_col] = False
        step = find_next_step(blocked, (head_row, head_col), target)
        if step is None:
            return current
        next_row, next_col = step
        if next_row < head_row and current is not Direction.DOWN:
            return Direction.UP
        if next_row > head_row and current is not Direction.UP:
            return Direction.DOWN
        if next_col < head_col and current is not Direction.RIGHT:
            return Direction.LEFT
        if next_col > head_col and current is not Direction.LEFT:
            return Direction.RIGHT
        return current