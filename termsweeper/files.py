"""Whole-file reading and writing."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class FileManager:
    """Reads and writes the complete contents of one file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def file_exists(self) -> bool:
        """Whether the path names an existing regular file."""
        return self.path.is_file()

    def read_content(self) -> bytes:
        """The file's bytes; raises ``OSError`` if it cannot be read."""
        return self.path.read_bytes()

    def write_content(self, content: Union[str, bytes]) -> None:
        """Replace the file's contents; text is written as UTF-8.

        Raises ``OSError`` if the file cannot be written.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.path.write_bytes(content)