"""The 8x8 checkerboard."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

from checkers.common import BLACK, WHITE, Pattern, TileState, Vec2
from checkers.tile import Tile

BOARD_SIZE = 8
_INITIAL_TILE_SIZE = 125
_INITIAL_SPACING = 150.0

Cell = tuple[int, int]


class Board:
    """An 8x8 grid of tiles coloured in an alternating pattern."""

    def __init__(self, position: Vec2) -> None:
        self._pattern = Pattern(WHITE, BLACK)
        self.visible = False
        x, y = float(position[0]), float(position[1])
        self._grid: list[list[Tile]] = []
        for i in range(BOARD_SIZE):
            column = []
            for j in range(BOARD_SIZE):
                tile = Tile(position=(x + i * _INITIAL_SPACING, y + j * _INITIAL_SPACING))
                tile.resize(_INITIAL_TILE_SIZE)
                column.append(tile)
            self._grid.append(column)
        self._recolor()

    def _tiles(self) -> Iterator[tuple[int, int, Tile]]:
        for i, column in enumerate(self._grid):
            for j, tile in enumerate(column):
                yield i, j, tile

    def _recolor(self) -> None:
        for i, j, tile in self._tiles():
            even = (i + j) % 2 == 0
            tile.color = self._pattern.color_a if even else self._pattern.color_b

    def _layout(self, origin: Vec2) -> None:
        x, y = origin
        x_offset = 0.0
        for column in self._grid:
            y_offset = 0.0
            for tile in column:
                tile.position = (x + x_offset, y + y_offset)
                y_offset += tile.size + tile.size / 2
            x_offset += column[0].size + column[0].size / 2

    def _tile(self, cell: Cell) -> Tile:
        x, y = cell
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise IndexError(f"cell {cell!r} is outside the board")
        return self._grid[x][y]

    @property
    def pattern(self) -> Pattern:
        """The board's colour pattern."""
        return self._pattern

    @pattern.setter
    def pattern(self, pattern: Pattern) -> None:
        self._pattern = pattern
        self._recolor()

    @property
    def is_visible(self) -> bool:
        return self.visible

    def draw(self, surface: pygame.Surface) -> None:
        """Render every tile if the board is visible."""
        if not self.visible:
            return
        for _, _, tile in self._tiles():
            tile.draw(surface)

    def move(self, position: Vec2) -> None:
        """Place the first tile at the position and lay the rest out from it."""
        self._layout((float(position[0]), float(position[1])))

    def resize(self, size: float) -> None:
        """Give every tile a new size, keeping the first tile in place."""
        origin = self._grid[0][0].position
        for _, _, tile in self._tiles():
            tile.size = size
        self._layout(origin)

    def invert(self) -> None:
        """Swap the two pattern colours."""
        self.pattern = self._pattern.swapped()

    def set_cell(self, cell: Cell, owner: TileState, pawn: int) -> None:
        """Record the owner and stored pawn of a cell."""
        tile = self._tile(cell)
        tile.owner = owner
        tile.pawn = pawn

    def cell(self, cell: Cell) -> Tile:
        """Return a copy of the tile at the cell."""
        return self._tile(cell).copy()

    def toggle_visible(self, toggle: bool) -> None:
        self.visible = toggle
        for _, _, tile in self._tiles():
            tile.toggle_visible(toggle)

    def toggle_highlight(self, mouse_pos: Vec2) -> None:
        """Highlight the visible tile under the mouse and clear all others."""
        for _, _, tile in self._tiles():
            tile.toggle_highlight(tile.contains(mouse_pos) and tile.visible)

    def contains(self, point: Vec2) -> bool:
        """True if the board is visible and the point lies on one of its tiles."""
        return self.visible and any(tile.contains(point) for _, _, tile in self._tiles())