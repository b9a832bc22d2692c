"""Rules of a gluttonous snake match: food placement, modes, deaths and the end page."""

from __future__ import annotations

import random
from enum import Enum

from consolegames.highscores import MODE_NUMBER, Mode
from consolegames.snake import (
    GRID_COLS,
    GRID_ROWS,
    Board,
    Direction,
    GridCondition,
    Snake,
    SnakeCategory,
)

DATA_LENGTH = 6
DEATH_COUNT_MAXIMUM = 5
TIME_THRESHOLD_MS = 180
TIME_AI_THRESHOLD_MS = 10

MAX_ITEMS = {
    GridCondition.GOOD_FOOD: 12,
    GridCondition.GREAT_FOOD: 4,
    GridCondition.BAD_FOOD: 6,
    GridCondition.BOOM_FOOD: 2,
    GridCondition.OBSTACLE: 4,
}

# Order in which items are topped up on every tick.
_GENERATED = (
    GridCondition.GOOD_FOOD,
    GridCondition.GREAT_FOOD,
    GridCondition.BAD_FOOD,
    GridCondition.BOOM_FOOD,
    GridCondition.OBSTACLE,
)

_SINGLE = (Mode.BASIC, Mode.ADVANCED, Mode.EXPERT)
_MULTI = (Mode.HUMAN_VS_HUMAN, Mode.HUMAN_VS_AI, Mode.AI_VS_AI)

_PLAIN_KEYS = {"w": Direction.UP, "s": Direction.DOWN, "a": Direction.LEFT, "d": Direction.RIGHT}
_EXTENDED_KEYS = {"H": Direction.UP, "P": Direction.DOWN, "K": Direction.LEFT, "M": Direction.RIGHT}


class EndPage(Enum):
    """Which closing page a match ends on."""

    DEFAULT = "default"
    HUMAN_SNAKE_A = "human_snake_A"
    HUMAN_SNAKE_B = "human_snake_B"
    AI_SNAKE_A = "AI_snake_A"
    AI_SNAKE_B = "AI_snake_B"


def key_direction(key, extended, current):
    """Direction chosen by a key press, or ``current`` if the key does not turn.

    Plain keys are W/A/S/D in either case; extended keys are the arrow scan
    codes H, P, K and M. Turning straight back is refused.
    """
    current = Direction(current)
    table = _EXTENDED_KEYS if extended else _PLAIN_KEYS
    wanted = table.get(key if extended else str(key).lower())
    if wanted is None or wanted is current.opposite:
        return current
    return wanted


def _playable(mode):
    mode = Mode(mode)
    if mode >= MODE_NUMBER:
        raise ValueError(f"{mode.name} is not a playable mode")
    return mode


class Control:
    """The board of a match, its two snakes and the food on it."""

    def __init__(self, mode, rows=GRID_ROWS, cols=GRID_COLS, rng=None, on_change=None):
        self.mode = _playable(mode)
        self.board = Board(rows, cols, on_change)
        self.snake_a = Snake(self.board, SnakeCategory.A)
        self.snake_b = Snake(self.board, SnakeCategory.B)
        self._rng = rng if rng is not None else random.Random()

    def _blanks(self):
        board = self.board
        return [
            (r, c)
            for r in range(1, board.rows - 1)
            for c in range(1, board.cols - 1)
            if board.grid[r][c] == GridCondition.BLANK
        ]

    def generate_grid(self, condition):
        """Top up food or obstacles of one kind to their maximum; return the new cells."""
        condition = GridCondition(condition)
        if condition not in MAX_ITEMS:
            raise ValueError(f"{condition.name} cannot be generated")
        blanks = self._blanks()
        wanted = min(MAX_ITEMS[condition] - self.board.food[condition], len(blanks))
        placed = []
        for _ in range(max(wanted, 0)):
            cell = self._rng.choice(blanks)
            blanks.remove(cell)
            self.board.set(*cell, condition)
            self.board.food[condition] += 1
            placed.append(cell)
        return placed

    def info_text(self, elapsed):
        """Status line of the match after ``elapsed`` seconds."""
        seconds = int(elapsed)
        clock = f"Time: {seconds // 60:02d}:{seconds % 60:02d}"
        a, b = self.snake_a, self.snake_b
        w = DATA_LENGTH
        if self.mode is Mode.BASIC:
            return f"[Basic mode]  Score: {a.score:<{w}}Length: {a.length:<{w}}{clock}"
        if self.mode in (Mode.ADVANCED, Mode.EXPERT):
            label = "Advanced mode" if self.mode is Mode.ADVANCED else "Expert mode"
            return (
                f"[{label}]  Score: {a.score:<{w}}Length: {a.length:<{w}}"
                f"Deaths: {a.death:<{w}}{clock}"
            )
        names = {
            Mode.HUMAN_VS_HUMAN: ("Human vs human", "Blue", "Pink"),
            Mode.HUMAN_VS_AI: ("Human vs AI", "Blue", "Pink (AI)"),
            Mode.AI_VS_AI: ("AI vs AI", "Blue (AI)", "Pink (AI)"),
        }
        label, blue, pink = names[self.mode]
        return (
            f"[{label}]  {blue} score: {a.score:<{w}}{blue} length: {a.length:<{w}}"
            f"{pink} score: {b.score:<{w}}{pink} length: {b.length:<{w}}{clock}"
        )

    def refresh_map(self):
        """Restore the walls and recount food and obstacles."""
        self.board.set_walls()
        for condition in _GENERATED:
            self.board.food[condition] = self.board.count(condition)

    def highest_score(self):
        """The better of the two snakes' scores."""
        return max(self.snake_a.score, self.snake_b.score)


def _steer(snake, requested):
    if requested is None:
        return snake.direction
    requested = Direction(requested)
    if requested is snake.direction.opposite:
        return snake.direction
    return requested


class SnakeGame:
    """A whole match, advanced one move at a time with :meth:`tick`."""

    def __init__(self, mode, rows=GRID_ROWS, cols=GRID_COLS, rng=None,
                 high_scores=None, on_change=None):
        self.control = Control(mode, rows, cols, rng, on_change)
        self.mode = self.control.mode
        self.high_scores = high_scores
        self.end_page = EndPage.DEFAULT
        self.over = False
        self._last_length = 1
        self._start_life()

    @property
    def multiplayer(self):
        """Whether two snakes take part."""
        return self.mode in _MULTI

    @property
    def delay_ms(self):
        """Pause between two moves, in milliseconds."""
        return TIME_AI_THRESHOLD_MS if self.mode is Mode.AI_VS_AI else TIME_THRESHOLD_MS

    def _start_life(self):
        control = self.control
        if self.multiplayer:
            made_a = control.snake_a.generate(True)
            made_b = control.snake_b.generate(True)
            if not (made_a and made_b):
                self.over = True
            return
        if not control.snake_a.generate():
            if self.mode is Mode.ADVANCED:
                control.snake_a.correct(self._last_length)
            self.over = True

    def _after_death(self):
        control = self.control
        snake = control.snake_a
        if self.mode is Mode.BASIC:
            self.over = True
            return
        remains = GridCondition.WALL if self.mode is Mode.ADVANCED else GridCondition.GOOD_FOOD
        snake.change_grid_condition(remains)
        control.refresh_map()
        self._last_length = snake.length
        snake.refresh()
        if self.mode is Mode.EXPERT and snake.death >= DEATH_COUNT_MAXIMUM:
            snake.correct(self._last_length)
            self.over = True
            return
        self._start_life()

    def _board_full(self):
        board = self.control.board
        occupied = self.control.snake_a.length
        if self.multiplayer:
            occupied += self.control.snake_b.length
        return occupied == (board.rows - 2) * (board.cols - 2)

    def tick(self, direction_a=None, direction_b=None):
        """Make one move; return True while the match goes on.

        Human snakes follow the given direction (``None`` keeps their course,
        turning straight back is ignored); AI snakes choose their own.
        """
        if self.over:
            raise RuntimeError("the match is over")
        control = self.control
        if self._board_full():
            if self.multiplayer:
                self.over = True
            else:
                self._after_death()
            return not self.over

        for condition in _GENERATED:
            control.generate_grid(condition)

        a, b = control.snake_a, control.snake_b
        if not self.multiplayer:
            if not a.step(_steer(a, direction_a)):
                self._after_death()
            return not self.over

        if self.mode is Mode.AI_VS_AI:
            move_a = a.choose_direction()
        else:
            move_a = _steer(a, direction_a)
        if self.mode is Mode.HUMAN_VS_HUMAN:
            move_b = _steer(b, direction_b)
        else:
            move_b = b.choose_direction()

        if not a.step(move_a):
            self.over = True
            self.end_page = (
                EndPage.HUMAN_SNAKE_B if self.mode is Mode.HUMAN_VS_HUMAN else EndPage.AI_SNAKE_B
            )
            return False
        if not b.step(move_b):
            self.over = True
            self.end_page = (
                EndPage.AI_SNAKE_A if self.mode is Mode.AI_VS_AI else EndPage.HUMAN_SNAKE_A
            )
            return False
        return True

    def finish(self):
        """Record a new best score if there is one and return the end page."""
        if self.high_scores is not None:
            best = self.control.highest_score()
            if best > self.high_scores.read(self.mode):
                self.high_scores.update(self.mode, best)
        return self.end_page