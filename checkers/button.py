"""A clickable text box that can be highlighted."""

from __future__ import annotations

from checkers.common import (
    BUNGEE_SPICE_FONT,
    TRANSPARENT,
    WHITE,
    YELLOW,
    Color,
    Vec2,
    display_size,
)
from checkers.textbox import Textbox


class Button(Textbox):
    """A text box whose outline lights up when highlighted."""

    def __init__(
        self,
        text: str = "Sample Text",
        color: Color = WHITE,
        position: Vec2 | None = None,
        *,
        font_path: str | None = BUNGEE_SPICE_FONT,
    ) -> None:
        if position is None:
            position = display_size()
        super().__init__(text, color, position, font_path=font_path)
        self.highlight_color = YELLOW
        self.highlighted = False

    @property
    def is_highlighted(self) -> bool:
        return self.highlighted

    def toggle_highlight(self, toggle: bool) -> None:
        """Outline the button in the highlight colour, or hide the outline."""
        self.highlighted = toggle
        self.paint_outline(self.highlight_color if toggle else TRANSPARENT)

    def contains(self, point: Vec2) -> bool:
        """True if the point lies within the button's background."""
        return self.background_bounds.contains(point)