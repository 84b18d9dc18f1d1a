"""The settings screen."""

from __future__ import annotations

import pygame

from checkers.button import Button
from checkers.common import BUNGEE_SPICE_FONT, RED, Vec2
from checkers.game import Closable
from checkers.textbox import Textbox

_BUTTON_SIZE = 35
_TITLE_SIZE = 75


class Settings:
    """A title and buttons for choosing backgrounds, boards and pawns."""

    def __init__(self, *, font_path: str | None = BUNGEE_SPICE_FONT) -> None:
        self.highlight = RED
        self.visible = False

        self.title = Textbox("Settings", font_path=font_path)
        self.title.resize(_TITLE_SIZE)
        self.title.position = (1280.0, 200.0)

        self.backgrounds = self._button("Backgrounds", (1280.0, 400.0), font_path)
        self.boards = self._button("Checkerboards", (1280.0, 500.0), font_path)
        self.pawns = self._button("Pawns", (1280.0, 600.0), font_path)

    def _button(self, text: str, position: Vec2, font_path: str | None) -> Button:
        button = Button(text, position=position, font_path=font_path)
        button.resize(_BUTTON_SIZE)
        button.highlight_color = self.highlight
        return button

    @property
    def buttons(self) -> tuple[Button, Button, Button]:
        return (self.backgrounds, self.boards, self.pawns)

    @property
    def is_visible(self) -> bool:
        return self.visible

    def draw(self, surface: pygame.Surface) -> None:
        """Render the title and buttons if the screen is visible."""
        if not self.visible:
            return
        self.title.draw(surface)
        for button in self.buttons:
            button.draw(surface)

    def highlights(self, mouse_pos: Vec2) -> None:
        """Highlight the button under the mouse while the screen is visible."""
        for button in self.buttons:
            button.toggle_highlight(button.contains(mouse_pos) and self.visible)

    def events(self, mouse_pos: Vec2, window: Closable) -> bool:
        """Handle a click; returns whether it landed on a button of the visible screen."""
        return self.visible and any(button.contains(mouse_pos) for button in self.buttons)

    def toggle_visible(self, toggle: bool) -> None:
        """Show or hide the title and every button."""
        self.title.toggle_visible(toggle)
        for button in self.buttons:
            button.toggle_visible(toggle)
        self.visible = toggle