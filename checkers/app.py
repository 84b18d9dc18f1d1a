"""The application window that drives the menu, game and settings screens."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from checkers.common import BLACK, BUNGEE_SPICE_FONT, Vec2, display_size
from checkers.game import Game
from checkers.menu import Menu
from checkers.settings import Settings
from checkers.textbox import FontLoadError

FRAMERATE_LIMIT = 90
DEFAULT_TITLE = "Prototype"
CHECKERS_TITLE = "|  Checkers  |"
_KEY_REPEAT_DELAY_MS = 500
_KEY_REPEAT_INTERVAL_MS = 30
_LEFT_MOUSE_BUTTON = 1


class CheckersApp:
    """Owns the window and the three screens, and runs the event loop."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        dimensions: Vec2 | None = None,
        *,
        font_path: str | None = BUNGEE_SPICE_FONT,
        surface: pygame.Surface | None = None,
    ) -> None:
        self.title = title
        self.menu = Menu(title, font_path=font_path)
        self.game = Game()
        self.settings = Settings(font_path=font_path)
        self.window_dimensions: Vec2 = dimensions if dimensions is not None else display_size()

        self._owns_display = surface is None
        if surface is None:
            pygame.display.init()
            surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            pygame.display.set_caption(title)
            pygame.key.set_repeat(_KEY_REPEAT_DELAY_MS, _KEY_REPEAT_INTERVAL_MS)
            pygame.mouse.set_visible(True)
        self.surface = surface
        self.is_open = True
        self._clock = pygame.time.Clock()

    def close(self) -> None:
        """Ask the event loop to stop."""
        self.is_open = False

    def poll_event(self, event: pygame.event.Event, mouse_pos: Vec2) -> None:
        """React to a single window event."""
        if event.type == pygame.QUIT:
            self.close()
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.close()
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == _LEFT_MOUSE_BUTTON:
            self.menu.events(mouse_pos, self, self.game, self.settings)
            self.game.events(mouse_pos, self)
            self.settings.events(mouse_pos, self)

    def poll_highlights(self, mouse_pos: Vec2) -> None:
        """Update hover highlights on every screen."""
        self.menu.highlights(mouse_pos)
        self.game.highlights(mouse_pos)
        self.settings.highlights(mouse_pos)

    def update_frame(self) -> None:
        """Clear the window and draw every screen."""
        self.surface.fill(BLACK)
        self.menu.draw(self.surface)
        self.game.draw(self.surface)
        self.settings.draw(self.surface)
        if self._owns_display:
            pygame.display.flip()

    def run(self) -> None:
        """Process events and redraw until the window is closed."""
        try:
            while self.is_open:
                x, y = pygame.mouse.get_pos()
                mouse_pos = (float(x), float(y))
                for event in pygame.event.get():
                    self.poll_event(event, mouse_pos)
                    self.poll_highlights(mouse_pos)
                self.update_frame()
                self._clock.tick(FRAMERATE_LIMIT)
        finally:
            if self._owns_display:
                pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the checkers window; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="checkers", description="Play checkers.")
    parser.add_argument(
        "--font",
        default=BUNGEE_SPICE_FONT,
        help="font file used for titles and buttons",
    )
    args = parser.parse_args(argv)
    try:
        app = CheckersApp(CHECKERS_TITLE, font_path=args.font)
    except FontLoadError:
        print("failed to load font", file=sys.stderr)
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())