"""Anti-aliased lines and circles drawn with signed distance fields, for an analogue clock."""

from __future__ import annotations

import math

PI = 3.1415926535
CONSOLE_HEIGHT = 801
CONSOLE_WIDTH = 801
DIAL_RADIUS = 380
EDGE_WIDTH = 5
MAJOR_TICK_INNER_RADIUS = 360
MAJOR_TICK_OUTER_RADIUS = 345
MAJOR_TICK_WIDTH = 2
MINOR_TICK_INNER_RADIUS = 358
MINOR_TICK_OUTER_RADIUS = 347
MINOR_TICK_WIDTH = 1
NUMBER_CENTER_RADIUS = 315
NUMBER_HEIGHT = 70
NUMBER_WEIGHT = 500
HOUR_HAND_LENGTH = 215
HOUR_HAND_NEGATIVE_LENGTH = 40
HOUR_HAND_WIDTH = 4
HOUR_HAND_CENTER_RADIUS = 15
HOUR_HAND_END_RADIUS = 7
MINUTE_HAND_LENGTH = 250
MINUTE_HAND_NEGATIVE_LENGTH = 60
MINUTE_HAND_WIDTH = 3
MINUTE_HAND_CENTER_RADIUS = 10
MINUTE_HAND_END_RADIUS = 5
SECOND_HAND_LENGTH = 285
SECOND_HAND_NEGATIVE_LENGTH = 80
SECOND_HAND_WIDTH = 2
SECOND_HAND_CENTER_RADIUS = 5
SECOND_HAND_END_RADIUS = 3
REFRESH_TIME = 30

_OUTSIDE = (0, 0, 0)


def line_distance(x, y, x1, y1, x2, y2, d):
    """Signed distance from (x, y) to a segment of half-width ``d``."""
    dx, dy = x2 - x1, y2 - y1
    px, py = x - x1, y - y1
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return math.sqrt(px * px + py * py) - d
    projection = (px * dx + py * dy) / length
    if projection < 0:
        return math.sqrt(px * px + py * py) - d
    if projection > length:
        qx, qy = x - x2, y - y2
        return math.sqrt(qx * qx + qy * qy) - d
    return abs(px * dy - py * dx) / length - d


def _channel(value):
    return min(max(int(value), 0), 255)


class Canvas:
    """An RGB pixel buffer addressed relative to a movable origin."""

    def __init__(self, width, height, background=(255, 255, 255), origin=(0, 0)):
        if width < 1 or height < 1:
            raise ValueError("canvas must be at least one pixel wide and high")
        self.width = width
        self.height = height
        self.origin = tuple(origin)
        fill = tuple(_channel(c) for c in background)
        self._pixels = [[fill] * width for _ in range(height)]

    def _locate(self, x, y):
        col, row = x + self.origin[0], y + self.origin[1]
        if 0 <= col < self.width and 0 <= row < self.height:
            return row, col
        return None

    def get_pixel(self, x, y):
        """Colour at (x, y); points off the canvas read as black."""
        where = self._locate(x, y)
        if where is None:
            return _OUTSIDE
        row, col = where
        return self._pixels[row][col]

    def put_pixel(self, x, y, color):
        """Set the colour at (x, y); points off the canvas are ignored."""
        where = self._locate(x, y)
        if where is None:
            return
        row, col = where
        self._pixels[row][col] = tuple(_channel(c) for c in color)


def _blend(canvas, x, y, distance, color):
    if distance >= 2:
        return
    alpha = min(max(0.5 * distance, 0.0), 1.0)
    target = canvas.get_pixel(x, y)
    canvas.put_pixel(x, y, tuple(c * (1 - alpha) + t * alpha for c, t in zip(color, target)))


def draw_line(canvas, x1, y1, x2, y2, d, color):
    """Draw an anti-aliased segment of half-width ``d``."""
    for i in range(min(x1, x2) - d, max(x1, x2) + d + 1):
        for j in range(min(y1, y2) - d, max(y1, y2) + d + 1):
            _blend(canvas, i, j, line_distance(i, j, x1, y1, x2, y2, d) + 1, color)


def draw_circle(canvas, x, y, r, d, color):
    """Draw an anti-aliased ring of radius ``r`` and half-width ``d``."""
    for i in range(x - r - d, x + r + d + 1):
        for j in range(y - r - d, y + r + d + 1):
            radial = math.sqrt((i - x) * (i - x) + (j - y) * (j - y))
            _blend(canvas, i, j, abs(radial - r) - d + 1, color)


def hand_angles(seconds):
    """Return the (hour, minute, second) hand angles for a time of day in seconds.

    An angle of zero points to three o'clock; angles grow clockwise.
    """
    whole = int(seconds) % 43200
    hour = (whole - 25200) * PI / 21600
    minute = (whole - 900) * PI / 1800
    second = (seconds % 60 - 15) * PI / 30
    return hour, minute, second