"""Persistent user settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from termsweeper.files import FileManager

FILE_LOCATION = "mine_config"

_SIZE = 2


@dataclass
class Settings:
    """User preferences."""

    show_milliseconds: bool = False
    use_color: bool = True

    def to_bytes(self) -> bytes:
        """The two-byte stored form: one byte per flag."""
        return bytes((int(self.show_milliseconds), int(self.use_color)))

    @classmethod
    def from_bytes(cls, data: bytes) -> Settings:
        """Parse the stored form; raises ``ValueError`` on a wrong length."""
        if len(data) != _SIZE:
            raise ValueError(f"settings data must be {_SIZE} bytes, got {len(data)}")
        return cls(show_milliseconds=data[0] != 0, use_color=data[1] != 0)


@dataclass
class SettingsManager:
    """Loads settings from a file on creation and saves them back on request."""

    file_manager: FileManager
    settings: Settings = field(default_factory=Settings)

    def __post_init__(self) -> None:
        self.load_from_file()

    def save_to_file(self) -> None:
        """Write the current settings; raises ``OSError`` on failure."""
        self.file_manager.write_content(self.settings.to_bytes())

    def load_from_file(self) -> None:
        """Load settings if the file exists; an unreadable or invalid file is overwritten."""
        if not self.file_manager.file_exists():
            return
        try:
            self.settings = Settings.from_bytes(self.file_manager.read_content())
        except (OSError, ValueError):
            self.save_to_file()