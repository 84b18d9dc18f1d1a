"""Colours, enums and geometry shared by the checkers screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple

import pygame

Vec2 = tuple[float, float]

BUNGEE_SPICE_FONT = "resources/fonts/BungeeSpice-Regular.ttf"
KADWA_FONT = "resources/fonts/Kadwa-Regular.ttf"
ROBOTO_FONT = "resources/fonts/Roboto-Regular.ttf"

_FALLBACK_DISPLAY_SIZE: Vec2 = (1920.0, 1080.0)


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)


class MenuButton(Enum):
    """Buttons available on the main menu."""

    START = 0
    SETTINGS = 1
    BACK = 2
    EXIT = 3


class TileState(IntEnum):
    """Which player, if any, owns a board tile."""

    NONE = 0
    PLAYER1 = 1
    PLAYER2 = 2


@dataclass(frozen=True)
class Pattern:
    """The two alternating colours of a checkerboard."""

    color_a: Color = BLACK
    color_b: Color = WHITE

    def swapped(self) -> Pattern:
        """Return the pattern with its two colours exchanged."""
        return Pattern(self.color_b, self.color_a)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        x, y = point
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= x < max_x and min_y <= y < max_y


def display_size() -> Vec2:
    """Return the desktop resolution as floats, or a common default if unknown."""
    try:
        if not pygame.display.get_init():
            pygame.display.init()
        sizes = pygame.display.get_desktop_sizes()
    except pygame.error:
        return _FALLBACK_DISPLAY_SIZE
    if not sizes:
        return _FALLBACK_DISPLAY_SIZE
    width, height = sizes[0]
    if width <= 0 or height <= 0:
        return _FALLBACK_DISPLAY_SIZE
    return float(width), float(height)