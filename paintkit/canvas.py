"""An off-screen drawing window with queued mouse and keyboard input."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from paintkit.defs import Color, ErrorKind, GraphicsError, Point
from paintkit.events import ClickType, KeyType, MouseEvent, KeyEvent
from paintkit.windowinput import WindowState


class DrawStyle(enum.Enum):
    """How a closed shape is drawn."""

    FRAME = enum.auto()
    FILLED = enum.auto()


def _box(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float, float, float]:
    return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


class Canvas:
    """A window whose surface is an RGB image and whose input is queued."""

    def __init__(self, width: int = 800, height: int = 600, x: int = 0, y: int = 0) -> None:
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.title = ""
        self.image = Image.new("RGB", (width, height), Color.WHITE.as_tuple())
        self._draw = ImageDraw.Draw(self.image)
        self.pen_color = Color.BLACK
        self.pen_width = 1
        self.brush_color = Color.WHITE
        self.font_size = 12
        self.font_bold = False
        self.font_name = ""
        self._font = ImageFont.load_default()
        self.state = WindowState()

    def change_title(self, title: str) -> None:
        """Set the window title."""
        self.title = title

    def set_pen(self, color: Color, width: int = 1) -> None:
        """Set the colour and width used for outlines, lines and text."""
        self.pen_color = color
        self.pen_width = width

    def set_brush(self, color: Color) -> None:
        """Set the colour used to fill shapes."""
        self.brush_color = color

    def set_font(self, size: int, bold: bool = False, name: str = "Arial") -> None:
        """Select the font for text; falls back to the built-in font."""
        self.font_size = size
        self.font_bold = bold
        self.font_name = name
        base = name.lower()
        candidates = ([f"{base}bd.ttf"] if bold else []) + [f"{base}.ttf", f"{name}.ttf"]
        for candidate in candidates:
            try:
                self._font = ImageFont.truetype(candidate, size)
                return
            except OSError:
                continue
        self._font = ImageFont.load_default()

    def _shape_colors(self, style: DrawStyle) -> tuple:
        fill = self.brush_color.as_tuple() if style is DrawStyle.FILLED else None
        return fill, self.pen_color.as_tuple()

    def draw_rectangle(
        self, x1: int, y1: int, x2: int, y2: int, style: DrawStyle = DrawStyle.FILLED
    ) -> None:
        """Draw an axis-aligned rectangle between two corners."""
        fill, outline = self._shape_colors(style)
        self._draw.rectangle(_box(x1, y1, x2, y2), fill=fill, outline=outline, width=self.pen_width)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line with the current pen."""
        self._draw.line([(x1, y1), (x2, y2)], fill=self.pen_color.as_tuple(), width=self.pen_width)

    def draw_triangle(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        x3: int,
        y3: int,
        style: DrawStyle = DrawStyle.FILLED,
    ) -> None:
        """Draw a triangle through three vertices."""
        fill, outline = self._shape_colors(style)
        self._draw.polygon(
            [(x1, y1), (x2, y2), (x3, y3)], fill=fill, outline=outline, width=self.pen_width
        )

    def draw_circle(
        self, x: int, y: int, radius: float, style: DrawStyle = DrawStyle.FILLED
    ) -> None:
        """Draw a circle around a centre point."""
        fill, outline = self._shape_colors(style)
        self._draw.ellipse(
            (x - radius, y - radius, x + radius, y + radius),
            fill=fill,
            outline=outline,
            width=self.pen_width,
        )

    def draw_string(self, x: int, y: int, text: str) -> None:
        """Draw text with its top-left corner at ``(x, y)``."""
        self._draw.text((x, y), text, fill=self.pen_color.as_tuple(), font=self._font)

    def draw_image(
        self, path: Union[str, Path], x: int, y: int, width: int, height: int
    ) -> None:
        """Paste an image file, scaled to ``width`` by ``height``, at ``(x, y)``."""
        try:
            with Image.open(path) as source:
                picture = source.convert("RGB").resize((width, height))
        except FileNotFoundError as exc:
            raise GraphicsError(ErrorKind.FILE_NOT_FOUND, f"cannot open image {path}") from exc
        self.image.paste(picture, (x, y))

    def post_click(self, x: int, y: int, click: ClickType = ClickType.LEFT_CLICK) -> None:
        """Queue a mouse click for this window."""
        self.state.mouse_queue.insert(MouseEvent(click, x, y))

    def post_key(self, value: str, key_type: KeyType = KeyType.ASCII) -> None:
        """Queue a key press for this window."""
        self.state.key_queue.insert(KeyEvent(key_type, value))

    def wait_mouse_click(self) -> Point:
        """Take the next queued click and return where it happened."""
        event = self.state.mouse_queue.remove()
        if event is None:
            raise LookupError("no pending mouse click")
        self.state.mouse_x, self.state.mouse_y = event.x, event.y
        return Point(event.x, event.y)

    def wait_key_press(self) -> str:
        """Take the next queued key press and return its character."""
        event = self.state.key_queue.remove()
        if event is None:
            raise LookupError("no pending key press")
        return event.value