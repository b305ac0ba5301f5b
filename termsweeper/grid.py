"""A fixed-size 2D grid stored row by row."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar, Union

from termsweeper.canvas import Vector2D

T = TypeVar("T")


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a >= 0) != (b > 0):
        quotient = -quotient
    return quotient, a - b * quotient


class Grid2D(Generic[T]):
    """A width x height grid of values, optionally offset in position space."""

    def __init__(
        self,
        size: Vector2D,
        factory: Callable[[], T],
        offset: Vector2D = Vector2D(0, 0),
    ) -> None:
        self.size = size
        self.offset = offset
        self._data: list[T] = [factory() for _ in range(size.area())]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, key: Union[int, Vector2D]) -> T:
        if isinstance(key, Vector2D):
            return self._data[self.index_of(key)]
        return self._data[key]

    def __setitem__(self, key: Union[int, Vector2D], value: T) -> None:
        if isinstance(key, Vector2D):
            self._data[self.index_of(key)] = value
        else:
            self._data[key] = value

    def index_of(self, pos: Vector2D) -> int:
        x, y = pos - self.offset
        return x + y * self.size.x

    def position_of(self, index: int) -> Vector2D:
        row, column = _trunc_divmod(index, self.size.x)
        return Vector2D(column + self.offset.x, row + self.offset.y)

    def modulo_position(self, pos: Vector2D) -> Vector2D:
        return pos % self.size

    def in_bounds(self, pos: Union[int, Vector2D]) -> bool:
        """Whether a position (or a flat index) lies inside the grid."""
        if not isinstance(pos, Vector2D):
            pos = self.position_of(pos)
        x, y = pos - self.offset
        return 0 <= x < self.size.x and 0 <= y < self.size.y

    def _neighbours(self, pos: Vector2D, keep: Callable[[int, int], bool]) -> list[tuple[Vector2D, T]]:
        found = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if not keep(dx, dy):
                    continue
                new_pos = Vector2D(pos.x + dx, pos.y + dy)
                if not self.in_bounds(new_pos):
                    continue
                found.append((new_pos + self.offset, self._data[self.index_of(new_pos)]))
        return found

    def close_adjacent(self, pos: Vector2D) -> list[tuple[Vector2D, T]]:
        """The up to four orthogonal neighbours with their values."""
        return self._neighbours(pos, lambda dx, dy: abs(dx + dy) == 1)

    def all_adjacent(self, pos: Vector2D) -> list[tuple[Vector2D, T]]:
        """The up to eight surrounding neighbours with their values."""
        return self._neighbours(pos, lambda dx, dy: (dx, dy) != (0, 0))