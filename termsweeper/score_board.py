"""Best times per board size and difficulty, stored one file per combination."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from termsweeper.files import FileManager
from termsweeper.utils import insert_and_drop_last

SCORE_BOARD_NUMBER = 5
MAX_NAME_LENGTH = 10

# Name buffer with terminator, one padding byte, little-endian 32-bit time.
_ENTRY = struct.Struct("<11sxi")
_BOARD_SIZE = _ENTRY.size * SCORE_BOARD_NUMBER


@dataclass(frozen=True)
class ScoreBoardEntry:
    """A player name and finishing time; a time of -1 marks an empty slot."""

    name: str = ""
    time_in_ms: int = -1

    def __post_init__(self) -> None:
        encoded = self.name.encode("utf-8")[:MAX_NAME_LENGTH]
        object.__setattr__(self, "name", encoded.decode("utf-8", errors="ignore"))

    @property
    def is_empty(self) -> bool:
        return self.time_in_ms == -1

    def to_bytes(self) -> bytes:
        return _ENTRY.pack(self.name.encode("utf-8"), self.time_in_ms)

    @classmethod
    def from_bytes(cls, data: bytes) -> ScoreBoardEntry:
        """Parse one stored entry; raises ``ValueError`` on a wrong length."""
        if len(data) != _ENTRY.size:
            raise ValueError(f"entry data must be {_ENTRY.size} bytes, got {len(data)}")
        raw_name, time_in_ms = _ENTRY.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(name, time_in_ms)


def _empty_board() -> list[ScoreBoardEntry]:
    return [ScoreBoardEntry() for _ in range(SCORE_BOARD_NUMBER)]


def _board_to_bytes(board: list[ScoreBoardEntry]) -> bytes:
    return b"".join(entry.to_bytes() for entry in board)


def _board_from_bytes(data: bytes) -> list[ScoreBoardEntry]:
    return [
        ScoreBoardEntry.from_bytes(data[start:start + _ENTRY.size])
        for start in range(0, len(data), _ENTRY.size)
    ]


class ScoreBoardManager:
    """Keeps the fastest times for each size/difficulty pair."""

    def __init__(self, path_to_dir: Union[str, Path]) -> None:
        self.path_to_dir = Path(path_to_dir)
        self.boards: dict[str, list[ScoreBoardEntry]] = {}
        self.load_from_files()

    @staticmethod
    def _make_key(size_key: int, difficulty_key: int) -> str:
        return f"{size_key}_{difficulty_key}"

    def entries(self, size_key: int, difficulty_key: int) -> list[ScoreBoardEntry]:
        """The board for a combination, fastest first, created empty if missing."""
        return self.boards.setdefault(self._make_key(size_key, difficulty_key), _empty_board())

    def add_entry(self, size_key: int, difficulty_key: int, entry: ScoreBoardEntry) -> None:
        """Insert ``entry`` by time; the slowest entry falls off a full board."""
        board = self.entries(size_key, difficulty_key)
        count = 0
        while count < len(board) and not board[count].is_empty:
            count += 1
        insert_pos = next(
            (i for i, existing in enumerate(board[:count]) if entry.time_in_ms < existing.time_in_ms),
            count,
        )
        insert_and_drop_last(board, insert_pos, entry)

    def load_from_files(self) -> None:
        """Read every valid board file in the directory, creating the directory if needed."""
        self.path_to_dir.mkdir(parents=True, exist_ok=True)
        for path in sorted(self.path_to_dir.iterdir()):
            key = path.name
            if "_" not in key:
                continue
            manager = FileManager(path)
            if not manager.file_exists():
                continue
            try:
                data = manager.read_content()
            except OSError:
                continue
            if len(data) == _BOARD_SIZE:
                self.boards[key] = _board_from_bytes(data)

    def save_to_files(self) -> None:
        """Write each board to its own file; raises ``OSError`` on failure."""
        for key, board in self.boards.items():
            FileManager(self.path_to_dir / key).write_content(_board_to_bytes(board))