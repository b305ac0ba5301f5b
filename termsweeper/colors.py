"""Mapping of colour roles to terminal colour pairs."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from typing import Union

from termsweeper.canvas import ColorRole

_ROLE_COUNT = int(ColorRole.Count)

# Colour pair number used for each role when colours are enabled.
_COLORED_PAIRS = {
    ColorRole.Default: 1,
    ColorRole.Hidden: 2,
    ColorRole.Mine: 3,
    ColorRole.Flag: 4,
    ColorRole.Cursor: 5,
    ColorRole.Number1: 6,
    ColorRole.Number2: 7,
    ColorRole.Number3: 8,
    ColorRole.Number4: 9,
    ColorRole.Number5: 10,
    ColorRole.Number6: 11,
    ColorRole.Number7: 12,
    ColorRole.Number8: 13,
    ColorRole.Text: 1,
    ColorRole.Transition: 1,
}


@dataclass
class ColorTable:
    """The colour pair assigned to every colour role."""

    pairs: list[int] = field(default_factory=lambda: [0] * _ROLE_COUNT)

    def color_for_role(self, role: Union[int, ColorRole]) -> int:
        """The pair for ``role``; unknown roles fall back to the default role's pair."""
        index = int(role)
        if 0 <= index < len(self.pairs):
            return self.pairs[index]
        return self.pairs[int(ColorRole.Default)]

    def set_colored(self) -> None:
        """Give each role its own colour pair."""
        for role, pair in _COLORED_PAIRS.items():
            self.pairs[int(role)] = pair

    def set_monochrome(self, pair: int) -> None:
        """Use a single colour pair for every role."""
        self.pairs = [pair] * _ROLE_COUNT


def init_terminal_colors(table: ColorTable) -> None:
    """Register the terminal colour pairs and switch ``table`` to coloured output.

    Does nothing when the terminal has no colour support.
    """
    if not curses.has_colors():
        return

    curses.start_color()
    curses.use_default_colors()

    foregrounds = [
        -1,
        curses.COLOR_WHITE,    # hidden
        curses.COLOR_RED,      # mine
        curses.COLOR_YELLOW,   # flag
        curses.COLOR_YELLOW,   # cursor
        curses.COLOR_CYAN,     # 1
        curses.COLOR_GREEN,    # 2
        curses.COLOR_RED,      # 3
        curses.COLOR_BLUE,     # 4
        curses.COLOR_MAGENTA,  # 5
        curses.COLOR_CYAN,     # 6
        curses.COLOR_BLACK,    # 7
        curses.COLOR_WHITE,    # 8
    ]
    for pair_number, foreground in enumerate(foregrounds, start=1):
        curses.init_pair(pair_number, foreground, -1)

    table.set_monochrome(1)
    table.set_colored()


def get_all_colors() -> list[ColorRole]:
    """One role for each distinct terminal colour."""
    return [
        ColorRole.Default,
        ColorRole.Mine,     # red
        ColorRole.Flag,     # yellow
        ColorRole.Number2,  # green
        ColorRole.Number1,  # cyan
        ColorRole.Number4,  # blue
        ColorRole.Number5,  # magenta
        ColorRole.Number7,  # black
        ColorRole.Hidden,   # white
    ]


def get_all_colors_except_black() -> list[ColorRole]:
    """Like :func:`get_all_colors` without the black role."""
    return [role for role in get_all_colors() if role is not ColorRole.Number7]