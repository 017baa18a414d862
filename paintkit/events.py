"""Mouse and keyboard event types and a FIFO queue to hold them."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar


class KeyType(enum.Enum):
    """Kind of key that was pressed."""

    NO_KEYPRESS = enum.auto()
    ASCII = enum.auto()
    ARROW = enum.auto()
    FUNCTION = enum.auto()
    ESCAPE = enum.auto()


class Button(enum.Enum):
    """Mouse button."""

    LEFT = enum.auto()
    RIGHT = enum.auto()


class ButtonState(enum.Enum):
    """Whether a mouse button is held down."""

    UP = enum.auto()
    DOWN = enum.auto()


class ClickType(enum.Enum):
    """Kind of mouse click."""

    NO_CLICK = enum.auto()
    LEFT_CLICK = enum.auto()
    RIGHT_CLICK = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""

    key_type: KeyType
    value: str


@dataclass(frozen=True)
class MouseEvent:
    """A mouse click at a window position."""

    click: ClickType
    x: int
    y: int


E = TypeVar("E")


class EventQueue(Generic[E]):
    """First-in, first-out queue of input events."""

    def __init__(self) -> None:
        self._events: deque[E] = deque()

    def insert(self, event: Optional[E]) -> None:
        """Append an event; ``None`` is ignored."""
        if event is not None:
            self._events.append(event)

    def remove(self) -> Optional[E]:
        """Pop the oldest event, or return ``None`` if the queue is empty."""
        return self._events.popleft() if self._events else None

    def __len__(self) -> int:
        return len(self._events)