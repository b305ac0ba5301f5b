"""Non-blocking keyboard input with an optional text-input mode."""

from __future__ import annotations

import curses
from typing import Callable, Optional, Union

KeyCallback = Callable[[int], None]

# Marker callback: while text input is active, keys are discarded.
_SWALLOW_KEYS = object()


class KeyboardController:
    """Drains pending key presses from a curses window.

    While text input is active, keys go to the text callback instead of the buffer.
    """

    def __init__(self, window) -> None:
        self._window = window
        self._text_input_active = False
        self._text_input_callback: Union[KeyCallback, object, None] = None

    def set_text_input_mode(
        self, active: bool, callback: Union[Optional[KeyCallback], object] = _SWALLOW_KEYS
    ) -> None:
        """Turn text input on or off.

        Without a callback, keys are discarded while active; ``None`` leaves them buffered.
        """
        self._text_input_active = active
        self._text_input_callback = callback

    @property
    def is_text_input_active(self) -> bool:
        return self._text_input_active

    def get_buffered(self) -> list[int]:
        """Every key pressed since the last call, in order."""
        buffered: list[int] = []
        while (key := self._window.getch()) != curses.ERR:
            if self._text_input_active and self._text_input_callback is not None:
                if callable(self._text_input_callback):
                    self._text_input_callback(key)
            else:
                buffered.append(key)
        return buffered

    def close(self) -> None:
        """Restore the terminal."""
        curses.endwin()

    def __enter__(self) -> KeyboardController:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()