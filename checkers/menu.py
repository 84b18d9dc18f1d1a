"""The main menu screen."""

from __future__ import annotations

import pygame

from checkers.button import Button
from checkers.common import BUNGEE_SPICE_FONT, RED, Vec2
from checkers.game import Closable, Game
from checkers.settings import Settings
from checkers.textbox import Textbox

_BUTTON_SIZE = 35
_TITLE_SIZE = 150


class Menu:
    """A title with start, settings and exit buttons, plus a back button for other screens."""

    def __init__(self, title: str, *, font_path: str | None = BUNGEE_SPICE_FONT) -> None:
        self.highlight = RED
        self.visible = True

        self.title = Textbox(title, font_path=font_path)
        self.title.resize(_TITLE_SIZE)

        self.start = self._button("start", (1280.0, 940.0), font_path)
        self.options = self._button("settings", (1280.0, 1040.0), font_path)
        self.back = self._button("back", (100.0, 1340.0), font_path)
        self.back.toggle_visible(False)
        self.exit = self._button("exit", (1280.0, 1140.0), font_path)

    def _button(self, text: str, position: Vec2, font_path: str | None) -> Button:
        button = Button(text, position=position, font_path=font_path)
        button.resize(_BUTTON_SIZE)
        button.highlight_color = self.highlight
        return button

    @property
    def buttons(self) -> tuple[Button, Button, Button, Button]:
        return (self.start, self.options, self.back, self.exit)

    @property
    def is_visible(self) -> bool:
        return self.visible

    def draw(self, surface: pygame.Surface) -> None:
        """Render the menu if visible; the back button draws whenever it is shown."""
        if self.visible:
            self.title.draw(surface)
            self.start.draw(surface)
            self.options.draw(surface)
            self.exit.draw(surface)
        self.back.draw(surface)

    def highlights(self, mouse_pos: Vec2) -> None:
        """Highlight the visible button under the mouse and clear the others."""
        for button in self.buttons:
            button.toggle_highlight(button.contains(mouse_pos) and button.is_visible)

    def events(self, mouse_pos: Vec2, window: Closable, game: Game, settings: Settings) -> None:
        """Switch screens or close the window depending on the button clicked."""
        if self.start.contains(mouse_pos) and self.start.is_visible:
            self.toggle_visible(False)
            settings.toggle_visible(False)
            game.toggle_visible(True)

        if self.options.contains(mouse_pos) and self.options.is_visible:
            self.toggle_visible(False)
            game.toggle_visible(False)
            settings.toggle_visible(True)

        if self.back.contains(mouse_pos) and self.back.is_visible:
            game.toggle_visible(False)
            settings.toggle_visible(False)
            self.toggle_visible(True)

        if self.exit.contains(mouse_pos) and self.exit.is_visible:
            window.close()

    def toggle_visible(self, toggle: bool) -> None:
        """Show the menu and hide the back button, or the other way round."""
        self.visible = toggle
        self.title.toggle_visible(toggle)
        self.start.toggle_visible(toggle)
        self.options.toggle_visible(toggle)
        self.back.toggle_visible(not toggle)
        self.exit.toggle_visible(toggle)