"""A player's set of pawns."""

from __future__ import annotations

import copy

import pygame

from checkers.board import BOARD_SIZE, Board
from checkers.common import BLACK, BLUE, WHITE, Color, Vec2
from checkers.pawn import Pawn

PAWN_COUNT = 12
_PAWN_RADIUS = 50
_PAWN_OFFSET = 12.0


class Player:
    """Twelve pawns placed on one side of a board."""

    def __init__(self, board: Board, color: Color = WHITE) -> None:
        self.pawn_color = color
        self.pawns_remaining = PAWN_COUNT
        self._active = [True] * PAWN_COUNT
        self._pawns: list[Pawn] = []
        for _ in range(PAWN_COUNT):
            pawn = Pawn(position=(0.0, 0.0))
            pawn.radius = _PAWN_RADIUS
            pawn.outline_color = color
            pawn.color = BLACK
            pawn.toggle_visible(False)
            self._pawns.append(pawn)

        rows = range(0, 3) if color == BLUE else range(5, 8)
        cells = [
            (i, j) for i in rows for j in range(BOARD_SIZE) if i % 2 == j % 2
        ]
        for pawn, cell in zip(self._pawns, cells):
            x, y = board.cell(cell).position
            pawn.position = (x + _PAWN_OFFSET, y + _PAWN_OFFSET)

    def _check(self, index: int) -> None:
        if not 0 <= index < PAWN_COUNT:
            raise IndexError(f"pawn index {index} out of range")

    @property
    def active(self) -> tuple[bool, ...]:
        """Which pawns are still in play."""
        return tuple(self._active)

    def draw(self, surface: pygame.Surface) -> None:
        """Render every active pawn."""
        for pawn, active in zip(self._pawns, self._active):
            if active:
                pawn.draw(surface)

    def move_pawn(self, pawn: int, position: Vec2) -> None:
        """Place a pawn on the tile at the given position."""
        self._check(pawn)
        self._pawns[pawn].position = (position[0] + _PAWN_OFFSET, position[1] + _PAWN_OFFSET)

    def remove_pawn(self, index: int) -> None:
        """Take a pawn out of play."""
        self._check(index)
        self._active[index] = False
        self.pawns_remaining -= 1

    def toggle_visible(self, toggle: bool) -> None:
        for pawn in self._pawns:
            pawn.toggle_visible(toggle)

    def toggle_status(self, toggle: bool) -> None:
        """Mark every pawn as in play or out of play."""
        self._active = [toggle] * PAWN_COUNT

    def recolor_pawns(self, color: Color) -> None:
        """Set the fill colour of every pawn."""
        for pawn in self._pawns:
            pawn.color = color

    def pawn(self, index: int) -> Pawn:
        """Return a copy of the pawn at the index."""
        self._check(index)
        return copy.copy(self._pawns[index])