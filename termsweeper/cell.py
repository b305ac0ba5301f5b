"""A single minesweeper cell."""

from __future__ import annotations

from dataclasses import dataclass

MINE_GLYPH = "X"
FLAG_GLYPH = "\u25B2"
HIDDEN_GLYPH = "\u2593"
EMPTY_GLYPH = "."


@dataclass
class Cell:
    """State of one board cell: mine, revealed and flagged flags plus its neighbour count."""

    has_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    def reveal(self) -> None:
        """Reveal the cell unless it is flagged."""
        if not self.is_flagged:
            self.is_revealed = True

    def toggle_flag(self) -> None:
        """Flip the flag, unless the cell is already revealed."""
        if not self.is_revealed:
            self.is_flagged = not self.is_flagged

    def set_mine(self) -> None:
        self.has_mine = True

    def representation(self, force_mine_visibility: bool = False) -> str:
        """The character drawn for this cell."""
        if not self.is_revealed:
            if self.has_mine and force_mine_visibility:
                return MINE_GLYPH
            return FLAG_GLYPH if self.is_flagged else HIDDEN_GLYPH
        if self.has_mine:
            return MINE_GLYPH
        if self.adjacent_mines == 0:
            return EMPTY_GLYPH
        return chr(ord("0") + self.adjacent_mines)