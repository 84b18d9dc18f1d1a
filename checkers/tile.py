"""A square board tile."""

from __future__ import annotations

import copy as _copy

import pygame

from checkers.common import (
    BLACK,
    TRANSPARENT,
    YELLOW,
    Color,
    Rect,
    TileState,
    Vec2,
    display_size,
)

_DEFAULT_SIZE = 50.0


class Tile:
    """A square cell with fill, outline and highlight colours, an owner and a stored pawn."""

    def __init__(self, color: Color = BLACK, position: Vec2 | None = None) -> None:
        self._size = _DEFAULT_SIZE
        self.origin: Vec2 = (self._size / 2, self._size / 2)
        if position is None:
            width, height = display_size()
            position = (width / 2, height / 2)
        self.position: Vec2 = (float(position[0]), float(position[1]))
        self.outline_thickness = 3.0

        self._color = color
        self._outline_color = TRANSPARENT
        self.highlight_color = YELLOW
        self.highlighted = False
        self.visible = True
        self.outline_visible = False

        self.owner = TileState.NONE
        self.pawn = 0

        self._shape_fill = self._color
        self._shape_outline = self._outline_color

    @property
    def size(self) -> float:
        """Side length of the square, outline excluded."""
        return self._size

    @size.setter
    def size(self, size: float) -> None:
        self._size = float(size)

    @property
    def color(self) -> Color:
        """The stored fill colour."""
        return self._color

    @color.setter
    def color(self, color: Color) -> None:
        self._color = color
        self._shape_fill = color

    @property
    def outline_color(self) -> Color:
        """The stored outline colour."""
        return self._outline_color

    @property
    def shape_fill(self) -> Color:
        """The fill colour currently rendered."""
        return self._shape_fill

    @property
    def shape_outline(self) -> Color:
        """The outline colour currently rendered."""
        return self._shape_outline

    @property
    def is_visible(self) -> bool:
        return self.visible

    @property
    def is_highlighted(self) -> bool:
        return self.highlighted

    @property
    def global_bounds(self) -> Rect:
        """Screen-space bounding box, outline included."""
        t = self.outline_thickness
        left = self.position[0] - self.origin[0] - t
        top = self.position[1] - self.origin[1] - t
        side = self._size + 2 * t
        return Rect(left, top, side, side)

    def paint_outline(self, color: Color) -> None:
        """Render the outline in a colour without changing the stored outline colour."""
        self._shape_outline = color
        self.outline_visible = True

    def draw(self, surface: pygame.Surface) -> None:
        """Render the tile onto the surface if it is visible."""
        if not self.visible:
            return
        left = self.position[0] - self.origin[0]
        top = self.position[1] - self.origin[1]
        t = self.outline_thickness
        if self._shape_outline.a > 0 and t > 0:
            outer = pygame.Rect(
                round(left - t), round(top - t), round(self._size + 2 * t), round(self._size + 2 * t)
            )
            pygame.draw.rect(surface, self._shape_outline, outer)
        if self._shape_fill.a > 0:
            inner = pygame.Rect(round(left), round(top), round(self._size), round(self._size))
            pygame.draw.rect(surface, self._shape_fill, inner)

    def move(self, offset: Vec2) -> None:
        """Shift the tile by the given offset."""
        self.position = (self.position[0] + offset[0], self.position[1] + offset[1])

    def resize(self, size: int) -> None:
        """Change the side length without touching the origin."""
        self._size = float(size)

    def invert(self) -> None:
        """Swap fill and outline colours."""
        self._color, self._outline_color = self._outline_color, self._color
        self._shape_fill = self._color
        self._shape_outline = self._outline_color

    def toggle_outline(self, toggle: bool) -> None:
        """Show the stored outline colour, or hide the outline."""
        self.outline_visible = toggle
        self._shape_outline = self._outline_color if toggle else TRANSPARENT

    def toggle_highlight(self, toggle: bool) -> None:
        """Render the outline in the highlight colour, or restore the stored one."""
        self.highlighted = toggle
        self._shape_outline = self.highlight_color if toggle else self._outline_color

    def toggle_visible(self, toggle: bool) -> None:
        """Show the tile in its stored colours, or make it fully transparent."""
        self.visible = toggle
        if toggle:
            self._shape_fill = self._color
            self._shape_outline = self._outline_color
        else:
            self._shape_fill = TRANSPARENT
            self._shape_outline = TRANSPARENT

    def contains(self, point: Vec2) -> bool:
        """True if the point lies within the tile's bounding box."""
        return self.global_bounds.contains(point)

    def copy(self) -> Tile:
        """Return an independent copy of the tile, owner and pawn included."""
        return _copy.copy(self)

    def assign(self, other: Tile) -> Tile:
        """Take over the appearance and geometry of another tile, keeping owner and pawn."""
        self._color = other._color
        self._outline_color = other._outline_color
        self.highlight_color = other.highlight_color
        self.highlighted = other.highlighted
        self.visible = other.visible
        self.outline_visible = other.outline_visible

        self._size = other._size
        self.origin = other.origin
        self.position = other.position
        self._shape_fill = self._color
        self._shape_outline = self._outline_color
        self.outline_thickness = other.outline_thickness
        return self