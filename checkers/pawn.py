"""A round checkers piece."""

from __future__ import annotations

import math

import pygame

from checkers.common import TRANSPARENT, WHITE, YELLOW, Color, Rect, Vec2, display_size


class Pawn:
    """A circular piece with fill, outline and highlight colours."""

    def __init__(self, color: Color = WHITE, size: int = 50, position: Vec2 | None = None) -> None:
        self._radius = float(size)
        self.point_count = int(self._radius * 2)
        self.origin: Vec2 = (self._radius / 2, self._radius / 2)
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

        self._shape_fill = self._color
        self._shape_outline = self._outline_color

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, radius: float) -> None:
        """Set the radius, recentring the origin and refining the outline."""
        self._radius = float(radius)
        self.origin = (self._radius / 2, self._radius / 2)
        self.point_count = int(self._radius * 2)

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, color: Color) -> None:
        self._color = color
        self._shape_fill = color

    @property
    def outline_color(self) -> Color:
        return self._outline_color

    @outline_color.setter
    def outline_color(self, color: Color) -> None:
        self._outline_color = color
        self._shape_outline = color

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
        side = 2 * self._radius + 2 * t
        return Rect(left, top, side, side)

    def _polygon(self, radius: float) -> list[tuple[float, float]]:
        count = max(self.point_count, 3)
        cx = self.position[0] - self.origin[0] + self._radius
        cy = self.position[1] - self.origin[1] + self._radius
        return [
            (
                cx + radius * math.cos(i * 2 * math.pi / count - math.pi / 2),
                cy + radius * math.sin(i * 2 * math.pi / count - math.pi / 2),
            )
            for i in range(count)
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Render the pawn onto the surface if it is visible."""
        if not self.visible:
            return
        fill_shown = self._shape_fill.a > 0
        t = self.outline_thickness
        if self._shape_outline.a > 0 and t > 0:
            outer = self._polygon(self._radius + t)
            if fill_shown:
                pygame.draw.polygon(surface, self._shape_outline, outer)
            else:
                pygame.draw.polygon(surface, self._shape_outline, outer, max(1, round(t)))
        if fill_shown:
            pygame.draw.polygon(surface, self._shape_fill, self._polygon(self._radius))

    def move(self, offset: Vec2) -> None:
        """Shift the pawn by the given offset."""
        self.position = (self.position[0] + offset[0], self.position[1] + offset[1])

    def resize(self, size: int) -> None:
        """Change the radius without touching origin or point count."""
        self._radius = float(size)

    def invert(self) -> None:
        """Swap fill and outline colours."""
        self._color, self._outline_color = self._outline_color, self._color
        self._shape_fill = self._color
        self._shape_outline = self._outline_color

    def toggle_outline(self, toggle: bool) -> None:
        """Switching on hides the rendered outline; switching off restores it."""
        self.outline_visible = toggle
        self._shape_outline = TRANSPARENT if toggle else self._outline_color

    def toggle_highlight(self, toggle: bool) -> None:
        self.highlighted = toggle
        self._shape_outline = self.highlight_color if toggle else self._outline_color

    def toggle_visible(self, toggle: bool) -> None:
        self.visible = toggle
        if toggle:
            self._shape_fill = self._color
            self._shape_outline = self._outline_color
        else:
            self._shape_fill = TRANSPARENT
            self._shape_outline = TRANSPARENT

    def contains(self, point: Vec2) -> bool:
        """True if the point lies within the pawn's bounding box."""
        return self.global_bounds.contains(point)