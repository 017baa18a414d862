"""Layout, colours and mode of the painting interface."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from paintkit.defs import Color


class InterfaceMode(enum.Enum):
    """Which toolbar the interface is showing."""

    MODE_DRAW = enum.auto()
    MODE_PLAY = enum.auto()


class DrawMenuItem(enum.IntEnum):
    """Draw-mode toolbar items, in the order they appear left to right."""

    ITM_RECT = 0
    ITM_EXIT = 1

    @property
    def image_name(self) -> str:
        """File name of the icon shown for this item."""
        return _MENU_IMAGES[self]


_MENU_IMAGES = {
    DrawMenuItem.ITM_RECT: "Menu_Rect.jpg",
    DrawMenuItem.ITM_EXIT: "Menu_Exit.jpg",
}


@dataclass
class UIInfo:
    """Geometry and colour settings shared by input and output."""

    interface_mode: InterfaceMode = InterfaceMode.MODE_DRAW
    width: int = 1250
    height: int = 650
    wx: int = 5
    wy: int = 5
    status_bar_height: int = 50
    tool_bar_height: int = 50
    line_under_tb_width: int = 2
    menu_item_width: int = 80
    draw_color: Color = Color.BLUE
    fill_color: Color = Color.GREEN
    msg_color: Color = Color.RED
    bk_grnd_color: Color = Color.LIGHTGOLDENRODYELLOW
    highlight_color: Color = Color.MAGENTA
    status_bar_color: Color = Color.TURQUOISE
    pen_width: int = 3