# termsweeper

The building blocks of a minesweeper game for the terminal: the board and its
rules, character canvases with a colour role per cell, layout helpers, curses
rendering that can redraw only what changed, frame timing, keyboard polling,
and small on-disk stores for settings and best times.

The package uses only the standard library. The curses-based parts
(`termsweeper.colors.init_terminal_colors`, the drawing functions in
`termsweeper.layout`, `termsweeper.keyboard`) need a Python with the `curses`
module, as found on Linux and macOS.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The board

```python
from termsweeper.board import Board2D
from termsweeper.canvas import Vector2D

board = Board2D.with_percentage(Vector2D(8, 8), 0.2, False)
board.first_move(Vector2D(3, 3))   # places mines away from the first cell
board.reveal_all()                 # runs the pending flood fill to the end
board.toggle_flag(Vector2D(0, 0))
print(board.cell(Vector2D(3, 3)).representation(False))
print(board.is_won, board.is_lost, board.flagged_count, board.total_moves_count)
```

`Board2D(size, mines)` takes an exact mine count (it must be smaller than the
number of cells; otherwise `ValueError`), and `Board2D.with_percentage` takes
a fraction of the cells (at most 1). Mines are placed on the first move and
are kept off the chosen cell and its neighbours; pass `force_mines=True` to
place them at construction instead. A `rng=` keyword on the constructor
accepts a `random.Random` for reproducible layouts.

`reveal_next` reveals one cell as a player move; when that cell has no
neighbouring mines its neighbours are queued, and `reveal_step(max_count)`
reveals queued cells a few at a time for animation. `mine_positions` lists
every mine in row-major order. The game is won once every safe cell is
revealed and the number of flags equals the number of mines.

`termsweeper.cell.Cell` holds one cell's state, and `termsweeper.grid.Grid2D`
is the row-major grid beneath the board, with `all_adjacent` (eight
neighbours) and `close_adjacent` (four neighbours).

## Canvases and layout

`termsweeper.canvas.CanvasElement` is a rectangle of characters with a
`ColorRole` per cell, sized by a `Vector2D`. Build one from text with
`CanvasElement.from_text` (lines padded to the longest, aligned with
`TextAlignment`), or with `filled` and `empty`. Join canvases in place with
`merge_right`, `merge_left`, `merge_below` and `merge_above` (mismatched
sizes raise `ValueError`), pad with `fill_to_size`, and print with
`to_printable_string`.

`termsweeper.layout.position_canvas_element` places a canvas inside a larger
area at one of the nine `Position` anchors; `position_element_on_canvas`
draws one canvas onto another, leaving cells that hold the alpha character
`"\x7f"` untouched.

## Drawing with curses

`termsweeper.colors.ColorTable` maps colour roles to curses colour pairs;
`init_terminal_colors(table)` registers the pairs and switches the table to
coloured output, and `set_monochrome` uses one pair for everything.
`layout.render_full` clears a window and draws a whole canvas, while
`layout.BufferedRenderer` draws only the cells that differ from the previous
frame (`changed_cells` reports them). `layout.show_temporary_message` shows
a centred message for a given number of milliseconds.

`termsweeper.keyboard.KeyboardController` drains pending keys from a window
with `get_buffered`; while text input mode is on, keys go to a callback
instead. `termsweeper.timing.DeltaTimer` measures frame times and
`LoopedExecutionWrapper` calls a function once per elapsed period.

## Persistence

`termsweeper.settings.SettingsManager` keeps `Settings` (show milliseconds,
use colour) in a two-byte file, loading it on creation and overwriting an
invalid file. `termsweeper.score_board.ScoreBoardManager` keeps the five
fastest `ScoreBoardEntry` times (names up to ten bytes) for each size and
difficulty, one file per combination in a directory.
`termsweeper.files.FileManager` reads and writes whole files.

## Other helpers

`termsweeper.text_encoding` converts leniently between UTF-16 code units,
UTF-8 bytes and wide characters, substituting U+FFFD for malformed input.
`termsweeper.math_helper` has `digits`, degree/radian conversion and
`rotate_around`; `termsweeper.utils` has the shared random generator and
`insert_and_drop_last`.

## What this package does not do

There is no playable game here: no command to start, no main loop, no menus,
scenes, dialogues or widgets. The package supplies the board rules, drawing
and storage pieces such a game would be assembled from.