# checkers

A full-screen checkers prototype built on pygame. It opens on a main menu
with **start**, **settings** and **exit** buttons:

- **start** hides the menu and shows the game screen: an 8×8 board of red
  and white squares with two sets of twelve pawns, one outlined in blue and
  one in yellow.
- **settings** hides the menu and shows the settings screen, which has a
  title and the buttons Backgrounds, Checkerboards and Pawns.
- **back**, shown once you leave the menu, hides the game and settings
  screens and brings the menu back.
- **exit** closes the window.

Hovering the mouse over a visible button or board square highlights it.
Pressing `Escape` or closing the window quits.

## Installation

```
pip install .
```

This needs `pygame`.

## Running

```
checkers
```

The window opens full screen and is redrawn at up to 90 frames per second.

Text is drawn with the font file `resources/fonts/BungeeSpice-Regular.ttf`,
looked up relative to the working directory. Another font file can be given
with `--font`:

```
checkers --font path/to/font.ttf
```

If the font cannot be loaded, the command prints `failed to load font` to
standard error and exits with status 1.

## What it does not do

This is a prototype of the screens, not a playable game:

- Clicking on the board does nothing; pawns cannot be selected or moved,
  and there are no rules, captures, turns or winner.
- The settings buttons highlight on hover but change nothing.
- Nothing is saved between runs.

## Using the pieces in code

The objects can also be used on their own. The board and the game screen
need no font:

```python
from checkers.board import Board
from checkers.common import TileState

board = Board((725, 175))
board.set_cell((2, 3), TileState.PLAYER1, 5)
print(board.cell((2, 3)).owner)  # TileState.PLAYER1
```

`Board.cell` returns a copy of the tile and raises `IndexError` for a cell
off the 8×8 grid.

Text boxes, buttons, the menu, the settings screen and `CheckersApp` take a
keyword-only `font_path`; passing `None` uses pygame's built-in font.
`CheckersApp` also accepts a `surface` to draw on instead of opening a
full-screen window.

Modules:

- `checkers.common`: `Color` and named colours, `TileState`, `MenuButton`,
  `Pattern`, `Rect`, `display_size()`
- `checkers.tile`: `Tile`, a square cell with an owner and a stored pawn
- `checkers.board`: `Board`, the 8×8 grid of tiles
- `checkers.pawn`: `Pawn`, a round piece
- `checkers.player`: `Player`, twelve pawns set out on one side of a board
- `checkers.textbox`: `Textbox` and `FontLoadError`
- `checkers.button`: `Button`, a text box that can be highlighted and hit-tested
- `checkers.game`, `checkers.settings`, `checkers.menu`: `Game`, `Settings`
  and `Menu`, the three screens
- `checkers.app`: `CheckersApp` and the `main()` entry point

## Tests

```
pip install .[test]
pytest
```