"""Reading clicks, strings and toolbar actions from the user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from paintkit.canvas import Canvas
from paintkit.defs import ActionType, Point
from paintkit.ui import DrawMenuItem, InterfaceMode, UIInfo

if TYPE_CHECKING:
    from paintkit.output import Output

_ESCAPE = "\x1b"
_ENTER = "\r"
_BACKSPACE = "\b"


class Input:
    """Turns raw window input into points, text and actions."""

    def __init__(self, canvas: Canvas, ui: UIInfo) -> None:
        self.canvas = canvas
        self.ui = ui

    def get_point_clicked(self) -> Point:
        """Wait for a click and return where it happened."""
        return self.canvas.wait_mouse_click()

    def get_string(self, output: Optional[Output] = None) -> str:
        """Read text until Enter; Escape cancels and yields an empty string.

        When ``output`` is given, the text typed so far is echoed on its
        status bar after every key.
        """
        label = ""
        while True:
            key = self.canvas.wait_key_press()
            if key == _ESCAPE:
                return ""
            if key == _ENTER:
                return label
            if key == _BACKSPACE and label:
                label = label[:-1]
            else:
                label += key
            if output is not None:
                output.print_message(label)

    def get_user_action(self) -> ActionType:
        """Wait for a click and map its position to an action."""
        point = self.canvas.wait_mouse_click()
        ui = self.ui
        if ui.interface_mode is not InterfaceMode.MODE_DRAW:
            return ActionType.TO_PLAY

        if 0 <= point.y < ui.tool_bar_height:
            order = point.x // ui.menu_item_width
            try:
                item = DrawMenuItem(order)
            except ValueError:
                return ActionType.EMPTY
            return {
                DrawMenuItem.ITM_RECT: ActionType.DRAW_RECT,
                DrawMenuItem.ITM_EXIT: ActionType.EXIT,
            }[item]

        if ui.tool_bar_height <= point.y < ui.height - ui.status_bar_height:
            return ActionType.DRAWING_AREA

        return ActionType.STATUS