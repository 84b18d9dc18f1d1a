"""A text label drawn over a rectangular background."""

from __future__ import annotations

import pygame

from checkers.common import (
    BLACK,
    BUNGEE_SPICE_FONT,
    TRANSPARENT,
    WHITE,
    Color,
    Rect,
    Vec2,
)

_DEFAULT_CHARACTER_SIZE = 30
_BACKGROUND_HEIGHT_FACTOR = 1.75
_TEXT_ORIGIN_HEIGHT_DIVISOR = 1.2


class FontLoadError(OSError):
    """Raised when the font for a text box cannot be loaded."""


class Textbox:
    """A string rendered in a font, centred on a filled and outlined rectangle."""

    def __init__(
        self,
        text: str = "sample text",
        color: Color = WHITE,
        position: Vec2 = (1280.0, 720.0),
        *,
        font_path: str | None = BUNGEE_SPICE_FONT,
    ) -> None:
        self._font_path = font_path
        self._string = text
        self._character_size = _DEFAULT_CHARACTER_SIZE
        self._font = self._load_font(self._character_size)

        self._text_color = BLACK
        self._background_color = color
        self.outline_color = BLACK
        self.visible = True
        self.outline_visible = False

        pos = (float(position[0]), float(position[1]))
        self._position: Vec2 = pos
        self._text_position: Vec2 = pos
        self._background_position: Vec2 = pos
        self.outline_thickness = 3.0

        self._text_fill = self._text_color
        self._background_fill = self._background_color
        self._background_outline = TRANSPARENT

        self._text_origin: Vec2 = (0.0, 0.0)
        self._background_size: Vec2 = (0.0, 0.0)
        self._background_origin: Vec2 = (0.0, 0.0)
        self._center_text_origin()
        self._fit_background()

    def _load_font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            return pygame.font.Font(self._font_path, size)
        except (OSError, pygame.error) as exc:
            raise FontLoadError(f"failed to load font {self._font_path!r}") from exc

    def _text_extent(self) -> Vec2:
        width, height = self._font.size(self._string)
        return float(width), float(height)

    def _center_text_origin(self) -> None:
        width, height = self._text_extent()
        self._text_origin = (width / 2, height / _TEXT_ORIGIN_HEIGHT_DIVISOR)

    def _fit_background(self) -> None:
        size = float(self._character_size)
        width = len(self._string) * size
        height = size * _BACKGROUND_HEIGHT_FACTOR
        self._background_size = (width, height)
        self._background_origin = (width / 2, height / 2)

    @property
    def text(self) -> str:
        """The displayed string; changing it leaves the layout as it was."""
        return self._string

    @text.setter
    def text(self, text: str) -> None:
        self._string = text

    @property
    def character_size(self) -> int:
        return self._character_size

    @property
    def position(self) -> Vec2:
        """The position last set or moved by."""
        return self._position

    @position.setter
    def position(self, position: Vec2) -> None:
        pos = (float(position[0]), float(position[1]))
        self._text_position = pos
        self._background_position = pos
        self._position = pos

    @property
    def text_position(self) -> Vec2:
        return self._text_position

    @property
    def text_origin(self) -> Vec2:
        return self._text_origin

    @property
    def background_position(self) -> Vec2:
        return self._background_position

    @property
    def background_size(self) -> Vec2:
        return self._background_size

    @property
    def background_origin(self) -> Vec2:
        return self._background_origin

    @property
    def text_color(self) -> Color:
        return self._text_color

    @text_color.setter
    def text_color(self, color: Color) -> None:
        self._text_color = color
        self._text_fill = color

    @property
    def background_color(self) -> Color:
        return self._background_color

    @background_color.setter
    def background_color(self, color: Color) -> None:
        self._background_color = color
        self._background_fill = color

    @property
    def text_fill(self) -> Color:
        """The text colour currently rendered."""
        return self._text_fill

    @property
    def background_fill(self) -> Color:
        """The background fill currently rendered."""
        return self._background_fill

    @property
    def background_outline(self) -> Color:
        """The background outline colour currently rendered."""
        return self._background_outline

    @property
    def is_visible(self) -> bool:
        return self.visible

    @property
    def background_bounds(self) -> Rect:
        """Screen-space bounding box of the background, outline included."""
        t = self.outline_thickness
        width, height = self._background_size
        left = self._background_position[0] - self._background_origin[0] - t
        top = self._background_position[1] - self._background_origin[1] - t
        return Rect(left, top, width + 2 * t, height + 2 * t)

    def paint_outline(self, color: Color) -> None:
        """Render the background outline in a colour, leaving the stored one alone."""
        self._background_outline = color

    def draw(self, surface: pygame.Surface) -> None:
        """Render the background and the text if the box is visible."""
        if not self.visible:
            return
        width, height = self._background_size
        left = self._background_position[0] - self._background_origin[0]
        top = self._background_position[1] - self._background_origin[1]
        t = self.outline_thickness
        if self._background_outline.a > 0 and t > 0:
            outer = pygame.Rect(
                round(left - t), round(top - t), round(width + 2 * t), round(height + 2 * t)
            )
            pygame.draw.rect(surface, self._background_outline, outer)
        if self._background_fill.a > 0:
            inner = pygame.Rect(round(left), round(top), round(width), round(height))
            pygame.draw.rect(surface, self._background_fill, inner)
        if self._text_fill.a > 0 and self._string:
            image = self._font.render(self._string, True, tuple(self._text_fill[:3]))
            x = self._text_position[0] - self._text_origin[0]
            y = self._text_position[1] - self._text_origin[1]
            surface.blit(image, (round(x), round(y)))

    def move(self, offset: Vec2) -> None:
        """Shift text and background by the offset, recording the offset as the position."""
        dx, dy = float(offset[0]), float(offset[1])
        bx, by = self._background_position
        tx, ty = self._text_position
        self._background_position = (bx + dx, by + dy)
        self._text_position = (tx + dx, ty + dy)
        self._position = (dx, dy)

    def resize(self, size: int) -> None:
        """Change the character size and refit text origin and background."""
        self._character_size = int(size)
        self._font = self._load_font(self._character_size)
        self._center_text_origin()
        self._fit_background()

    def invert(self) -> None:
        """Swap the text and background colours."""
        self._text_color, self._background_color = self._background_color, self._text_color
        self._text_fill = self._text_color
        self._background_fill = self._background_color

    def toggle_outline(self, toggle: bool) -> None:
        """Show the stored outline colour, or hide the outline."""
        self.outline_visible = toggle
        self._background_outline = self.outline_color if toggle else TRANSPARENT

    def toggle_visible(self, toggle: bool) -> None:
        """Show the box in its stored colours, or make text and background transparent."""
        self.visible = toggle
        if toggle:
            self._text_fill = self._text_color
            self._background_fill = self._background_color
        else:
            self._text_fill = TRANSPARENT
            self._background_fill = TRANSPARENT