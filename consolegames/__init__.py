"""Terminal games and toys: 2048, Game of Life, Color Linez, snake, a clock and ASCII images."""

__version__ = "0.1.0"
__all__ = [
    "ascii_image",
    "clock_sdf",
    "color_linez",
    "game2048",
    "highscores",
    "life",
    "snake",
    "snake_game",
]