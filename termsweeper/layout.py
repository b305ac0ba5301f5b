"""Placing canvases inside larger canvases and drawing them with curses."""

from __future__ import annotations

import curses
import os
import sys
from enum import IntEnum
from typing import Union

from termsweeper.canvas import CanvasElement, ColorRole, Vector2D
from termsweeper.colors import ColorTable

ALPHA_CHAR = "\x7f"
_UNSET_ROLE = 0xFF


class Position(IntEnum):
    """Placement of an element; two bits each weigh bottom, top, right and left padding."""

    TOP_LEFT = 0b10001000
    TOP_CENTER = 0b10000101
    TOP_RIGHT = 0b10000010
    MIDDLE_LEFT = 0b01011000
    MIDDLE_CENTER = 0b01010101
    MIDDLE_RIGHT = 0b01010010
    BOTTOM_LEFT = 0b00101000
    BOTTOM_CENTER = 0b00100101
    BOTTOM_RIGHT = 0b00100010


def get_terminal_size() -> Vector2D:
    """The drawable terminal size in cells."""
    columns = getattr(curses, "COLS", None)
    lines = getattr(curses, "LINES", None)
    if columns is not None and lines is not None:
        return Vector2D(columns, lines)
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError):
        return Vector2D(80, 25)
    return Vector2D(size.columns - 40, size.lines)


def repeat_string(k: int, s: str) -> str:
    """``s`` repeated ``k`` times."""
    return s * k if k > 0 else ""


def position_canvas_element(
    element: CanvasElement,
    position: Position,
    canvas_size: Vector2D,
    blank_char: str = " ",
) -> CanvasElement:
    """A canvas of ``canvas_size`` with ``element`` placed at ``position``.

    An element larger than the canvas in either dimension yields a blank canvas.
    """
    if element.size > canvas_size:
        return CanvasElement.empty(canvas_size, " ")
    if element.size == canvas_size:
        return CanvasElement(element.chars, list(element.roles), element.size)

    weights = int(position)
    left_weight = weights & 0b11
    right_weight = (weights >> 2) & 0b11
    top_weight = (weights >> 4) & 0b11
    bottom_weight = (weights >> 6) & 0b11

    default = int(ColorRole.Default)
    width = element.width
    half_width = (canvas_size.x - width) // 2

    body_chars: list[str] = []
    body_roles: list[int] = []
    for row in range(element.height):
        start = row * width
        left = left_weight * half_width
        right = right_weight * half_width
        line = blank_char * left + element.chars[start:start + width] + blank_char * right
        remaining = max(canvas_size.x - len(line), 0)
        body_chars.append(line + blank_char * remaining)
        body_roles.extend([default] * left)
        body_roles.extend(element.roles[start:start + width])
        body_roles.extend([default] * (right + remaining))

    height_diff, additional = divmod(canvas_size.y - element.height, 2)
    extra_at_top = bottom_weight == 0
    top_rows = top_weight * height_diff + (additional if extra_at_top else 0)
    bottom_rows = bottom_weight * height_diff + (0 if extra_at_top else additional)

    blank_row = blank_char * canvas_size.x
    chars = blank_row * top_rows + "".join(body_chars) + blank_row * bottom_rows
    roles = (
        [default] * (canvas_size.x * top_rows)
        + body_roles
        + [default] * (canvas_size.x * bottom_rows)
    )
    return CanvasElement(chars, roles, canvas_size)


def position_element_on_canvas(
    element: CanvasElement, position: Position, canvas: CanvasElement
) -> None:
    """Draw ``element`` onto ``canvas`` in place; cells holding the alpha character stay as they were."""
    if element.width > canvas.width or element.height > canvas.height:
        return

    overlay = position_canvas_element(element, position, canvas.size, ALPHA_CHAR)
    chars = list(canvas.chars)
    roles = list(canvas.roles)
    for index, (char, role) in enumerate(zip(overlay.chars, overlay.roles)):
        if char == ALPHA_CHAR:
            continue
        chars[index] = char
        roles[index] = role
    canvas.chars = "".join(chars)
    canvas.roles = roles


def _put(window, y: int, x: int, char: str) -> None:
    try:
        window.addstr(y, x, char)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


class _ColorState:
    """Switches colour pair attributes only when the pair changes."""

    def __init__(self, window, colors: ColorTable) -> None:
        self._window = window
        self._colors = colors
        self._current = None

    def use(self, role: int) -> None:
        color = self._colors.color_for_role(role)
        if color == self._current:
            return
        self.off()
        self._window.attron(curses.color_pair(color))
        self._current = color

    def off(self) -> None:
        if self._current is not None:
            self._window.attroff(curses.color_pair(self._current))
            self._current = None


def render_full(window, element: CanvasElement, colors: ColorTable) -> None:
    """Clear ``window`` and draw every cell of ``element``."""
    window.clear()
    state = _ColorState(window, colors)
    width = element.width
    for index, (char, role) in enumerate(zip(element.chars, element.roles)):
        state.use(role)
        _put(window, index // width, index % width, char)
    state.off()
    window.refresh()


class BufferedRenderer:
    """Draws only the cells that differ from the previously rendered frame."""

    def __init__(self) -> None:
        self._last_chars = ""
        self._last_roles: list[int] = []

    def _baseline(self, total: int) -> tuple[str, list[int]]:
        if len(self._last_chars) != total:
            return ALPHA_CHAR * total, [_UNSET_ROLE] * total
        return self._last_chars, self._last_roles

    def changed_cells(self, element: CanvasElement) -> list[tuple[int, int, str, int]]:
        """``(x, y, char, role)`` for every cell that differs from the last frame."""
        width = element.width
        last_chars, last_roles = self._baseline(element.total_length)
        return [
            (index % width, index // width, char, role)
            for index, (char, role, old_char, old_role) in enumerate(
                zip(element.chars, element.roles, last_chars, last_roles)
            )
            if char != old_char or role != old_role
        ]

    def render(self, window, element: CanvasElement, colors: ColorTable) -> None:
        """Draw the changed cells of ``element`` and remember it as the last frame."""
        state = _ColorState(window, colors)
        for x, y, char, role in self.changed_cells(element):
            state.use(role)
            _put(window, y, x, char)
        state.off()

        self._last_chars = element.chars
        self._last_roles = list(element.roles)

        window.noutrefresh()
        curses.doupdate()


def show_temporary_message(
    window, message: Union[str, bytes], duration_ms: int = 2000
) -> None:
    """Clear the screen, show ``message`` centred and wait ``duration_ms`` milliseconds."""
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    height, width = window.getmaxyx()
    length = len(message.encode("utf-8"))

    window.clear()
    y = height // 2
    x = max((width - length) // 2, 0)
    try:
        window.addnstr(y, x, message, length)
    except curses.error:
        pass
    window.refresh()
    curses.napms(duration_ms)