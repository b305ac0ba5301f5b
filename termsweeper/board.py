"""Minesweeper board logic: mine placement, reveal flooding, flags and win/loss."""

from __future__ import annotations

import random
import struct
from collections import deque
from typing import Optional, Union

from termsweeper.canvas import Vector2D
from termsweeper.cell import Cell
from termsweeper.grid import Grid2D
from termsweeper.utils import get_rng


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Board2D:
    """A rectangular minesweeper board."""

    def __init__(
        self,
        size: Vector2D,
        mines: int,
        force_mines: bool = False,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        if mines >= size.area():
            raise ValueError("mine count must be smaller than the number of cells")
        self._setup(size, mines, force_mines, rng)

    @classmethod
    def with_percentage(
        cls,
        size: Vector2D,
        mines_percentage: float,
        force_mines: bool = False,
    ) -> Board2D:
        """A board whose mine count is a fraction of its cells, rounded down."""
        if mines_percentage > 1:
            raise ValueError("mine percentage must not exceed 1")
        mines = int(_f32(_f32(mines_percentage) * float(size.area())))
        board = cls.__new__(cls)
        board._setup(size, mines, force_mines, None)
        return board

    def _setup(
        self,
        size: Vector2D,
        mines: int,
        force_mines: bool,
        rng: Optional[random.Random],
    ) -> None:
        self._grid: Grid2D[Cell] = Grid2D(size, Cell)
        self._rng = rng if rng is not None else get_rng()
        self._mine_count = mines
        self._flagged_count = 0
        self._moves_count = 0
        self._is_lost = False
        self._is_won = False
        self._safe_cells_remaining = size.area() - mines
        self._frontier: deque[Vector2D] = deque()
        if force_mines:
            self._place_mines(mines, -1)

    @property
    def is_won(self) -> bool:
        return self._is_won

    @property
    def is_lost(self) -> bool:
        return self._is_lost

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def total_moves_count(self) -> int:
        return self._moves_count

    @property
    def grid_size(self) -> Vector2D:
        return self._grid.size

    def first_move(self, pos: Vector2D) -> None:
        """Place mines away from ``pos``, number all cells, then reveal ``pos``."""
        self._place_mines(self._mine_count, pos)
        self._calculate_all_adjacent_mines()
        self.reveal_next(pos)

    def _count_revealed_safe(self, cell: Cell) -> None:
        if cell.has_mine:
            self._is_lost = True
        elif self._safe_cells_remaining > 0:
            self._safe_cells_remaining -= 1
            self._check_win()

    def reveal_next(self, pos: Vector2D) -> list[Vector2D]:
        """Reveal one cell as a player move; queue its neighbours if it has no adjacent mines."""
        if not self._grid.in_bounds(pos):
            return []
        cell = self._grid[pos]
        if cell.is_flagged or cell.is_revealed:
            return []
        self._moves_count += 1

        cell.reveal()
        self._count_revealed_safe(cell)

        if cell.has_mine:
            self._frontier.clear()
            return [pos]

        if cell.adjacent_mines == 0:
            self._frontier.clear()
            for neighbour, _ in self._grid.all_adjacent(pos):
                self._push_if_unrevealed_and_unflagged(neighbour)
        return [pos]

    def reveal_step(self, max_count: int = 1) -> list[Vector2D]:
        """Reveal up to ``max_count`` queued cells, extending the flood through empty cells."""
        revealed: list[Vector2D] = []
        while self._frontier and len(revealed) < max_count:
            pos = self._frontier.popleft()
            cell = self._grid[pos]
            if cell.is_revealed or cell.is_flagged or cell.has_mine:
                continue

            cell.reveal()
            revealed.append(pos)
            self._count_revealed_safe(cell)

            if cell.adjacent_mines == 0:
                for neighbour, other in self._grid.all_adjacent(pos):
                    if not other.is_revealed and not other.is_flagged:
                        self._frontier.append(neighbour)
        return revealed

    def reveal_all(self) -> list[Vector2D]:
        """Run the pending flood to completion."""
        revealed: list[Vector2D] = []
        while self._frontier:
            part = self.reveal_step(256)
            if not part:
                break
            revealed.extend(part)
        return revealed

    def _push_if_unrevealed_and_unflagged(self, pos: Vector2D) -> None:
        if not self._grid.in_bounds(pos):
            return
        cell = self._grid[pos]
        if not cell.is_revealed and not cell.is_flagged:
            self._frontier.append(pos)

    def toggle_flag(self, pos: Vector2D) -> None:
        cell = self._grid[pos]
        was_flagged = cell.is_flagged
        cell.toggle_flag()
        if was_flagged:
            self._flagged_count -= 1
        else:
            self._flagged_count += 1
            self._check_win()

    def cell(self, pos: Vector2D) -> Cell:
        return self._grid[pos]

    def _place_mines(self, count: int, start: Union[int, Vector2D]) -> None:
        start_index = self._grid.index_of(start) if isinstance(start, Vector2D) else start
        excluded = {start_index}
        excluded.update(
            self._grid.index_of(pos)
            for pos, _ in self._grid.all_adjacent(self._grid.position_of(start_index))
        )
        placeable = [index for index in range(len(self._grid)) if index not in excluded]
        self._rng.shuffle(placeable)
        for _ in range(count):
            if not placeable:
                break
            self._grid[placeable.pop()].set_mine()

    def _check_win(self) -> None:
        if self._safe_cells_remaining == 0 and self._flagged_count == self._mine_count:
            self._is_won = True

    def _calculate_all_adjacent_mines(self) -> None:
        for index, cell in enumerate(self._grid):
            pos = self._grid.position_of(index)
            cell.adjacent_mines = sum(
                1 for _, other in self._grid.all_adjacent(pos) if other.has_mine
            )

    def mine_positions(self) -> list[Vector2D]:
        """Positions of every mine in row-major order."""
        return [
            self._grid.position_of(index)
            for index, cell in enumerate(self._grid)
            if cell.has_mine
        ]