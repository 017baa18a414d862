"""Drawing the interface chrome and figures onto the application window."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional, Union

from paintkit.canvas import Canvas, DrawStyle
from paintkit.defs import Color, GfxInfo, Point
from paintkit.ui import DrawMenuItem, InterfaceMode, UIInfo
from paintkit.userinput import Input

DEFAULT_IMAGE_DIR = Path("images") / "MenuItems"
WINDOW_TITLE = "Paint for Kids - Programming Techniques Project - Spring 2024"


class Output:
    """Owns the application window and draws everything shown on it."""

    def __init__(
        self,
        ui: Optional[UIInfo] = None,
        image_dir: Union[str, Path] = DEFAULT_IMAGE_DIR,
    ) -> None:
        self.ui = ui if ui is not None else UIInfo()
        self.ui.interface_mode = InterfaceMode.MODE_DRAW
        self.image_dir = Path(image_dir)
        self.canvas = self._create_window(self.ui.width, self.ui.height, self.ui.wx, self.ui.wy)
        self.canvas.change_title(WINDOW_TITLE)
        self.create_draw_toolbar()
        self.create_status_bar()

    def _create_window(self, width: int, height: int, x: int, y: int) -> Canvas:
        canvas = Canvas(width, height, x, y)
        canvas.set_brush(self.ui.bk_grnd_color)
        canvas.set_pen(self.ui.bk_grnd_color, 1)
        canvas.draw_rectangle(0, self.ui.tool_bar_height, width, height)
        return canvas

    def create_input(self) -> Input:
        """Return an input reader bound to this window."""
        return Input(self.canvas, self.ui)

    def _paint_status_bar(self) -> None:
        ui = self.ui
        self.canvas.set_pen(ui.status_bar_color, 1)
        self.canvas.set_brush(ui.status_bar_color)
        self.canvas.draw_rectangle(0, ui.height - ui.status_bar_height, ui.width, ui.height)

    def create_status_bar(self) -> None:
        """Draw the status bar along the bottom of the window."""
        self._paint_status_bar()

    def clear_status_bar(self) -> None:
        """Erase any message from the status bar."""
        self._paint_status_bar()

    def create_draw_toolbar(self) -> None:
        """Switch to draw mode and draw its toolbar icons."""
        ui = self.ui
        ui.interface_mode = InterfaceMode.MODE_DRAW
        for item in DrawMenuItem:
            self.canvas.draw_image(
                self.image_dir / item.image_name,
                item * ui.menu_item_width,
                0,
                ui.menu_item_width,
                ui.tool_bar_height,
            )
        self.canvas.set_pen(Color.RED, ui.line_under_tb_width)
        self.canvas.draw_line(0, ui.tool_bar_height, ui.width, ui.tool_bar_height)

    def create_play_toolbar(self) -> None:
        """Switch to play mode."""
        self.ui.interface_mode = InterfaceMode.MODE_PLAY

    def clear_draw_area(self) -> None:
        """Repaint the drawing area with the background colour."""
        ui = self.ui
        self.canvas.set_pen(ui.bk_grnd_color, 1)
        self.canvas.set_brush(ui.bk_grnd_color)
        self.canvas.draw_rectangle(
            0,
            ui.tool_bar_height + ui.line_under_tb_width,
            ui.width,
            ui.height - ui.status_bar_height,
        )

    def print_message(self, msg: str) -> None:
        """Show ``msg`` on the status bar, replacing any earlier message."""
        ui = self.ui
        self.clear_status_bar()
        self.canvas.set_pen(ui.msg_color, 50)
        self.canvas.set_font(20, True, "Arial")
        self.canvas.draw_string(10, ui.height - int(ui.status_bar_height / 1.5), msg)

    def _prepare(self, gfx: GfxInfo, selected: bool) -> DrawStyle:
        pen = self.ui.highlight_color if selected else gfx.draw_color
        self.canvas.set_pen(pen, 1)
        if gfx.is_filled:
            self.canvas.set_brush(gfx.fill_color)
            return DrawStyle.FILLED
        return DrawStyle.FRAME

    def draw_rect(self, p1: Point, p2: Point, gfx: GfxInfo, selected: bool = False) -> None:
        """Draw a rectangle with corners ``p1`` and ``p2``."""
        style = self._prepare(gfx, selected)
        self.canvas.draw_rectangle(p1.x, p1.y, p2.x, p2.y, style)

    def draw_square(self, p1: Point, p2: Point, gfx: GfxInfo, selected: bool = False) -> None:
        """Draw a square whose side runs from ``p1.x`` to ``p2.x``."""
        style = self._prepare(gfx, selected)
        self.canvas.draw_rectangle(p1.x, p1.y, p2.x, p1.y + (p2.x - p1.x), style)

    def draw_triangle(
        self, p1: Point, p2: Point, p3: Point, gfx: GfxInfo, selected: bool = False
    ) -> None:
        """Draw a triangle through three points."""
        style = self._prepare(gfx, selected)
        self.canvas.draw_triangle(p1.x, p1.y, p2.x, p2.y, p3.x, p3.y, style)

    def draw_circle(self, p1: Point, p2: Point, gfx: GfxInfo, selected: bool = False) -> None:
        """Draw a circle centred on ``p1`` passing through ``p2``."""
        style = self._prepare(gfx, selected)
        radius = math.hypot(p2.x - p1.x, p2.y - p1.y)
        self.canvas.draw_circle(p1.x, p1.y, radius, style)