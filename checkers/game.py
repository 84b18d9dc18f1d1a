"""The game screen: the checkerboard and both players' pawns."""

from __future__ import annotations

from typing import Protocol

import pygame

from checkers.board import Board, Cell
from checkers.common import BLUE, RED, WHITE, YELLOW, Pattern, Vec2
from checkers.player import Player
from checkers.tile import Tile

BOARD_POSITION: Vec2 = (725.0, 175.0)


class Closable(Protocol):
    """Anything the screens can ask to close, such as the application window."""

    def close(self) -> None: ...


class Game:
    """The playing screen, holding a board and two players."""

    def __init__(self) -> None:
        self.board = Board(BOARD_POSITION)
        self.player1 = Player(self.board, BLUE)
        self.player2 = Player(self.board, YELLOW)
        self.highlight = YELLOW
        self.visible = False
        self.toggle_visible(False)
        self.board.pattern = Pattern(RED, WHITE)

    @property
    def is_visible(self) -> bool:
        return self.visible

    def draw(self, surface: pygame.Surface) -> None:
        """Render the board and then both players' pawns."""
        self.board.draw(surface)
        self.player1.draw(surface)
        self.player2.draw(surface)

    def highlights(self, mouse_pos: Vec2) -> None:
        """Highlight the board tile under the mouse."""
        self.board.toggle_highlight(mouse_pos)

    def events(self, mouse_pos: Vec2, window: Closable) -> bool:
        """Handle a click; returns whether it landed on the visible board."""
        return self.board.contains(mouse_pos)

    def select(self, cell: Cell) -> Tile:
        """Return a copy of the tile at the cell, raising IndexError off the board."""
        return self.board.cell(cell)

    def toggle_visible(self, toggle: bool) -> None:
        """Show or hide the board and both players together."""
        self.board.toggle_visible(toggle)
        self.player1.toggle_visible(toggle)
        self.player2.toggle_visible(toggle)
        self.visible = toggle