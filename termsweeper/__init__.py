"""Terminal minesweeper core: board rules, canvases, layout, curses drawing and persistence."""

__version__ = "0.1.0"