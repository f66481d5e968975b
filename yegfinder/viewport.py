"""The visible window onto the city map, the cursor on it and the user's settings."""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .geo import constrain, lat_to_y, lon_to_x

DISPLAY_WIDTH = 480
DISPLAY_HEIGHT = 320
SIDEBAR_WIDTH = 60
MAP_VIEW_WIDTH = DISPLAY_WIDTH - SIDEBAR_WIDTH
YEG_SIZE = 2048
CURSOR_SIZE = 9
JOY_CENTER = 512
JOY_DEADZONE = 64
JOY_SPEED_DIVISOR = 20
MAX_RATING = 5

MAX_MAP_X = YEG_SIZE - MAP_VIEW_WIDTH
MAX_MAP_Y = YEG_SIZE - DISPLAY_HEIGHT

_HALF_CURSOR = CURSOR_SIZE // 2


def _toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


class Direction(enum.IntEnum):
    """The screen edge the cursor ran into."""

    RIGHT = 1
    UP = 2
    LEFT = 3
    DOWN = 4


class SortMethod(enum.IntEnum):
    """Which sorting algorithm orders the restaurant list."""

    QSORT = 0
    ISORT = 1
    BOTH = 2

    @property
    def label(self) -> str:
        return self.name


@dataclass
class MapView:
    """Map window origin, cursor position, minimum star rating and sort method."""

    map_x: int = YEG_SIZE // 2 - DISPLAY_WIDTH // 2
    map_y: int = YEG_SIZE // 2 - DISPLAY_HEIGHT // 2
    cursor_x: int = MAP_VIEW_WIDTH // 2
    cursor_y: int = DISPLAY_HEIGHT // 2
    rating: int = 1
    sort_method: SortMethod = SortMethod.QSORT

    def _center_cursor(self) -> None:
        self.cursor_x = MAP_VIEW_WIDTH // 2
        self.cursor_y = DISPLAY_HEIGHT // 2

    def shift(self, direction: Direction) -> None:
        """Move the window one screen towards ``direction`` and recentre the cursor."""
        if direction is Direction.RIGHT:
            self.map_x += MAP_VIEW_WIDTH
        elif direction is Direction.UP:
            self.map_y -= DISPLAY_HEIGHT
        elif direction is Direction.LEFT:
            self.map_x -= MAP_VIEW_WIDTH
        elif direction is Direction.DOWN:
            self.map_y += DISPLAY_HEIGHT
        self._center_cursor()
        self.map_x = constrain(self.map_x, 0, MAX_MAP_X)
        self.map_y = constrain(self.map_y, 0, MAX_MAP_Y)

    def move_cursor(self, x_val: int, y_val: int) -> bool:
        """Move the cursor by a joystick reading; return whether the stick left the dead zone.

        The horizontal reading grows as the stick is pushed left.
        """
        low = JOY_CENTER - JOY_DEADZONE
        high = JOY_CENTER + JOY_DEADZONE
        moved = not (low <= x_val <= high and low <= y_val <= high)

        if y_val < low:
            self.cursor_y += _toward_zero(y_val - low, JOY_SPEED_DIVISOR)
        elif y_val > high:
            self.cursor_y += _toward_zero(y_val - high, JOY_SPEED_DIVISOR)

        if x_val > high:
            self.cursor_x -= _toward_zero(x_val - high, JOY_SPEED_DIVISOR)
        elif x_val < low:
            self.cursor_x -= _toward_zero(x_val - low, JOY_SPEED_DIVISOR)

        self.cursor_x = constrain(
            self.cursor_x, _HALF_CURSOR, MAP_VIEW_WIDTH - 1 - _HALF_CURSOR
        )
        self.cursor_y = constrain(self.cursor_y, _HALF_CURSOR, DISPLAY_HEIGHT - _HALF_CURSOR)
        return moved

    def edge_direction(self) -> Optional[Direction]:
        """The direction the map should scroll because the cursor touches an edge, if any."""
        if self.cursor_x <= _HALF_CURSOR and self.map_x != 0:
            return Direction.LEFT
        if (
            self.cursor_x >= MAP_VIEW_WIDTH - 1 - _HALF_CURSOR
            and self.map_x + MAP_VIEW_WIDTH != YEG_SIZE
        ):
            return Direction.RIGHT
        if self.cursor_y <= _HALF_CURSOR and self.map_y != 0:
            return Direction.UP
        if (
            self.cursor_y >= DISPLAY_HEIGHT - _HALF_CURSOR
            and self.map_y + DISPLAY_HEIGHT != YEG_SIZE
        ):
            return Direction.DOWN
        return None

    def center_on(self, restaurant) -> None:
        """Move the window so the restaurant sits under the cursor, centred where possible."""
        rx = lon_to_x(restaurant.lon)
        ry = lat_to_y(restaurant.lat)
        half_w = MAP_VIEW_WIDTH // 2
        half_h = DISPLAY_HEIGHT // 2

        if rx > YEG_SIZE:
            self.map_x, self.cursor_x = MAX_MAP_X, MAP_VIEW_WIDTH
        elif rx < 0:
            self.map_x, self.cursor_x = 0, 0
        elif rx + half_w > YEG_SIZE:
            self.map_x, self.cursor_x = MAX_MAP_X, rx - MAX_MAP_X
        elif rx - half_w < 0:
            self.map_x, self.cursor_x = 0, rx
        else:
            self.map_x, self.cursor_x = rx - half_w, half_w

        if ry > YEG_SIZE:
            self.map_y, self.cursor_y = MAX_MAP_Y, DISPLAY_HEIGHT
        elif ry < 0:
            self.map_y, self.cursor_y = 0, 0
        elif ry + half_h > YEG_SIZE:
            self.map_y, self.cursor_y = MAX_MAP_Y, ry - MAX_MAP_Y
        elif ry - half_h < 0:
            self.map_y, self.cursor_y = 0, ry
        else:
            self.map_y, self.cursor_y = ry - half_h, half_h

    def cycle_rating(self) -> int:
        """Step the minimum star rating through 1..5 and return the new value."""
        self.rating = self.rating % MAX_RATING + 1
        return self.rating

    def cycle_sort(self) -> SortMethod:
        """Step to the next sort method and return it."""
        self.sort_method = SortMethod((self.sort_method + 1) % len(SortMethod))
        return self.sort_method

    def dot_position(self, lat: int, lon: int) -> Optional[Tuple[int, int]]:
        """Screen position of a map location, or None when it lies outside the window."""
        x = lon_to_x(lon) - self.map_x
        y = lat_to_y(lat) - self.map_y
        if 0 < x < MAP_VIEW_WIDTH and 0 < y < DISPLAY_HEIGHT:
            return x, y
        return None

    def map_cursor(self) -> Tuple[int, int]:
        """The cursor position in whole-map coordinates."""
        return self.map_x + self.cursor_x, self.map_y + self.cursor_y