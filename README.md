# consolegames

A collection of small games and graphical toys that run in a terminal or
work on plain in-memory data:

- **2048** (`consolegames.game2048`): slide and merge tiles on a board of
  up to 8 rows and columns until a 2048 tile appears or no empty cell is
  left. Comes with a terminal command.
- **Game of Life** (`consolegames.life`): Conway's cellular automaton on a
  bounded grid (75 × 150 by default) with a random starting population.
  Cells are updated one by one in place during a step.
- **Color Linez** (`consolegames.color_linez`): the rules of the 9 × 9 ball
  game: random placement with a preview of the next three balls, shortest
  free paths (`find_path`), detection of lines of five or more, scoring
  and per-colour statistics.
- **Snake** (`consolegames.snake`, `consolegames.snake_game`): boards,
  snakes, food and obstacles; basic, advanced and expert single-player
  modes, human-vs-human, human-vs-AI and AI-vs-AI matches, with AI snakes
  steered by a breadth-first search.
- **High scores** (`consolegames.highscores`): one best score per snake
  mode, stored as six little-endian 32-bit integers in
  `data/highest_score.dat` (or any path you give).
- **Clock drawing** (`consolegames.clock_sdf`): anti-aliased lines and
  rings drawn with signed distance fields onto a `Canvas`, plus the hand
  angles for a given time of day.
- **ASCII images** (`consolegames.ascii_image`): downsample a picture,
  convert it to grey levels and render it as characters, in monochrome,
  colour or inverse colour; frames can be saved to and loaded from disk.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Playing 2048

```
consolegames-2048
consolegames-2048 --seed 42
```

The game asks for the number of rows and columns (4 to 8). Each turn, type
`w`, `a`, `s` or `d` (or `up`, `left`, `down`, `right`) and press Enter to
slide the tiles; `q` or `esc` goes back to the size prompt. End of input
or Ctrl-C quits.

## Using the library

```python
from consolegames.game2048 import Game2048, Direction, Status

game = Game2048(4, 4)
game.generate()
game.generate()
game.move(Direction.UP)
print(game.render())
if game.status() is Status.SUCCESS:
    print("You reached 2048")
```

```python
from consolegames.life import Life

life = Life()
changes = life.step()   # list of (row, col, alive)
print(life.render())    # '#' for live cells, '.' for dead ones
```

```python
from consolegames.snake_game import SnakeGame
from consolegames.highscores import HighScores, Mode

scores = HighScores("scores.dat")
scores.reset()
game = SnakeGame(Mode.AI_VS_AI, high_scores=scores)
while game.tick():
    pass
print(game.finish(), game.control.highest_score())
```

```python
from consolegames.clock_sdf import Canvas, draw_circle, draw_line

canvas = Canvas(101, 101, origin=(50, 50))
draw_circle(canvas, 0, 0, 40, 2, (50, 130, 184))
draw_line(canvas, 0, 0, 30, 0, 1, (26, 50, 99))
```

```python
from consolegames.ascii_image import load_image

frame = load_image("picture.jpg", color=True, inverse=False)
print(frame.to_ansi())
```

## What is not included

Only 2048 has a command. Game of Life, Color Linez, snake and the clock are
provided as game logic and drawing routines: there is no window, mouse
handling or interactive screen for them. There is no video player, and no
element-wise integer-array type or matrix calculator.