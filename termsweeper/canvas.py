"""Rectangular character canvases with per-cell colour roles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True)
class Vector2D:
    """An integer 2D vector, also used as a size (x = width, y = height)."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    # The ordering operators are deliberately "either component" comparisons:
    # a size is larger than another if it exceeds it in any dimension.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x < other.x or self.y < other.y

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x <= other.x or self.y <= other.y

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x > other.x or self.y > other.y

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x >= other.x or self.y >= other.y

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __floordiv__(self, divisor: int) -> Vector2D:
        """Divide both components, truncating toward zero."""
        return Vector2D(_trunc_div(self.x, divisor), _trunc_div(self.y, divisor))

    def __mod__(self, other: Vector2D) -> Vector2D:
        """Component-wise remainder with the sign of the dividend."""
        return Vector2D(_trunc_mod(self.x, other.x), _trunc_mod(self.y, other.y))

    def area(self) -> int:
        return self.x * self.y


class TextAlignment(IntEnum):
    """Horizontal text alignment; bits 2-3 weight left padding, bits 0-1 right."""

    Left = 0b00000010
    Center = 0b00000101
    Right = 0b00001000


class ColorRole(IntEnum):
    """Semantic colour of a canvas cell."""

    Default = 0
    Hidden = 1
    Mine = 2
    Flag = 3
    Cursor = 4
    Number1 = 5
    Number2 = 6
    Number3 = 7
    Number4 = 8
    Number5 = 9
    Number6 = 10
    Number7 = 11
    Number8 = 12
    Text = 13
    Transition = 14
    Count = 15


@dataclass
class CanvasElement:
    """A width x height block of characters stored row by row, with a colour role per cell."""

    chars: str
    roles: list[int]
    size: Vector2D

    @classmethod
    def from_text(
        cls,
        text: str,
        delimiter: str = "\n",
        role: ColorRole = ColorRole.Text,
        alignment: TextAlignment = TextAlignment.Left,
    ) -> CanvasElement:
        """Lay out delimited lines as a box padded to the longest line."""
        if not text:
            return cls("", [], Vector2D(0, 0))

        lines = text.split(delimiter)
        longest = max(len(line) for line in lines)
        left_weight = (int(alignment) >> 2) & 0b11
        right_weight = int(alignment) & 0b11

        padded = []
        for line in lines:
            total = longest - len(line)
            half = total // 2
            left = left_weight * half
            right = right_weight * half
            odd = total % 2 != 0
            if odd and right == 0:
                left += 1
            elif odd:
                right += 1
            padded.append(" " * left + line + " " * right)

        size = Vector2D(longest, len(lines))
        return cls("".join(padded), [int(role)] * size.area(), size)

    @classmethod
    def filled(
        cls, chars: str, size: Vector2D, role: ColorRole = ColorRole.Text
    ) -> CanvasElement:
        """Wrap ready-made row-major characters, giving every cell one role."""
        return cls(chars, [int(role)] * size.area(), size)

    @classmethod
    def empty(cls, size: Vector2D, empty_char: str = " ") -> CanvasElement:
        """A canvas of the given size filled with one character."""
        return cls(empty_char * size.area(), [int(ColorRole.Default)] * size.area(), size)

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    @property
    def total_length(self) -> int:
        return self.size.area()

    def rows(self) -> Iterator[str]:
        """Yield the character rows from top to bottom."""
        width = self.size.x
        for start in range(0, width * self.size.y, width or 1):
            yield self.chars[start:start + width]
        if width == 0:
            return

    def _row_strings(self) -> list[str]:
        width = self.size.x
        return [self.chars[row * width:(row + 1) * width] for row in range(self.size.y)]

    def _row_roles(self) -> list[list[int]]:
        width = self.size.x
        return [self.roles[row * width:(row + 1) * width] for row in range(self.size.y)]

    def to_printable_string(self, break_char: str = "\n") -> str:
        """All rows, each followed by ``break_char``."""
        return "".join(row + break_char for row in self._row_strings())

    def fill_to_size(self, size: Vector2D, fill_char: str = " ") -> CanvasElement:
        """A copy padded right and below up to ``size``; unchanged copy if already larger."""
        if self.size > size:
            return CanvasElement(self.chars, list(self.roles), self.size)

        extra_x = size.x - self.size.x
        default = int(ColorRole.Default)
        chars: list[str] = []
        roles: list[int] = []
        for line, line_roles in zip(self._row_strings(), self._row_roles()):
            chars.append(line + fill_char * extra_x)
            roles.extend(line_roles)
            roles.extend([default] * extra_x)

        bottom = (size.y - self.size.y) * size.x
        chars.append(fill_char * bottom)
        roles.extend([default] * bottom)
        return CanvasElement("".join(chars), roles, size)

    def merge_below(self, other: CanvasElement) -> None:
        """Append ``other`` underneath; widths must match."""
        if self.width != other.width:
            raise ValueError("cannot stack canvases of different widths")
        self.chars += other.chars
        self.roles = self.roles + list(other.roles)
        self.size = Vector2D(self.size.x, self.size.y + other.height)

    def merge_above(self, other: CanvasElement) -> None:
        """Prepend ``other`` on top; widths must match."""
        if self.width != other.width:
            raise ValueError("cannot stack canvases of different widths")
        self.chars = other.chars + self.chars
        self.roles = list(other.roles) + self.roles
        self.size = Vector2D(self.size.x, self.size.y + other.height)

    def merge_right(self, other: CanvasElement) -> None:
        """Place ``other`` to the right; heights must match."""
        self._merge_side(other, other_first=False)

    def merge_left(self, other: CanvasElement) -> None:
        """Place ``other`` to the left; heights must match."""
        self._merge_side(other, other_first=True)

    def _merge_side(self, other: CanvasElement, other_first: bool) -> None:
        if self.height != other.height:
            raise ValueError("cannot join canvases of different heights")
        chars: list[str] = []
        roles: list[int] = []
        for mine, mine_roles, theirs, their_roles in zip(
            self._row_strings(), self._row_roles(), other._row_strings(), other._row_roles()
        ):
            if other_first:
                chars.append(theirs + mine)
                roles.extend(their_roles + mine_roles)
            else:
                chars.append(mine + theirs)
                roles.extend(mine_roles + their_roles)
        self.chars = "".join(chars)
        self.roles = roles
        self.size = Vector2D(self.size.x + other.width, self.size.y)

    def __str__(self) -> str:
        return "".join(c if ord(c) <= 0x7F else "?" for c in self.chars)