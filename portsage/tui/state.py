"""Interaction state shared by the terminal interface."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field

MESSAGE_LIFETIME = 2.0


class Mode(enum.Enum):
    """What the interface is currently doing with key presses."""

    NORMAL = enum.auto()
    FILTER_INPUT = enum.auto()
    DETAIL = enum.auto()
    CONFIRM_KILL = enum.auto()


@dataclass
class ClipboardMessage:
    """A short status message that disappears a little while after it is set."""

    message: tuple[str, float] | None = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def set(self, text: str) -> None:
        """Show ``text`` starting now."""
        self.message = (text, self.clock())

    def visible_text(self) -> str | None:
        """Return the message if it is still fresh enough to show."""
        if self.message is None:
            return None
        text, stamp = self.message
        if self.clock() - stamp < MESSAGE_LIFETIME:
            return text
        return None