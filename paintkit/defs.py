"""Shared definitions: user actions, colours, points, figure styling and errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class ActionType(enum.Enum):
    """Actions the user can trigger through the interface."""

    DRAW_RECT = enum.auto()
    EXIT = enum.auto()
    TO_DRAW = enum.auto()
    TO_PLAY = enum.auto()
    EMPTY = enum.auto()
    DRAWING_AREA = enum.auto()
    STATUS = enum.auto()


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    TURQUOISE: ClassVar[Color]
    LIGHTGOLDENRODYELLOW: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} channel must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range 0..255: {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the colour as an ``(r, g, b)`` tuple."""
        return (self.red, self.green, self.blue)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 128, 0)
Color.BLUE = Color(0, 0, 255)
Color.MAGENTA = Color(255, 0, 255)
Color.TURQUOISE = Color(64, 224, 208)
Color.LIGHTGOLDENRODYELLOW = Color(250, 250, 210)


@dataclass(frozen=True)
class Point:
    """A point on the drawing surface."""

    x: int
    y: int


@dataclass
class GfxInfo:
    """Graphical attributes of a figure."""

    draw_color: Color = field(default_factory=lambda: Color.BLACK)
    fill_color: Color = field(default_factory=lambda: Color.GREEN)
    is_filled: bool = False
    border_width: int = 1


class ErrorKind(enum.Enum):
    """Categories of failure raised by the graphics layer."""

    OUT_OF_MEMORY = enum.auto()
    FILE_NOT_FOUND = enum.auto()


class GraphicsError(Exception):
    """Raised when a graphics operation cannot complete."""

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        self.kind = kind
        super().__init__(message or kind.name.replace("_", " ").lower())