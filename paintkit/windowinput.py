"""Registry routing raw mouse and key input to per-window state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional

from paintkit.events import (
    Button,
    ButtonState,
    ClickType,
    EventQueue,
    KeyEvent,
    KeyType,
    MouseEvent,
)


@dataclass
class WindowState:
    """Input state tracked for one window."""

    left: ButtonState = ButtonState.UP
    right: ButtonState = ButtonState.UP
    mouse_x: int = 0
    mouse_y: int = 0
    mouse_queue: EventQueue[MouseEvent] = field(default_factory=EventQueue)
    key_queue: EventQueue[KeyEvent] = field(default_factory=EventQueue)


class WindowRegistry:
    """Maps window handles to their input state."""

    def __init__(
        self, handle: Optional[Hashable] = None, window: Optional[WindowState] = None
    ) -> None:
        self._windows: dict[Hashable, WindowState] = {}
        self.wait_close = True
        if handle is not None and window is not None:
            self.add_window(handle, window)

    def add_window(self, handle: Hashable, window: WindowState) -> None:
        """Register a window; an already registered handle is left unchanged."""
        self._windows.setdefault(handle, window)

    def remove_window(self, handle: Hashable) -> None:
        """Forget a window; unknown handles are ignored."""
        self._windows.pop(handle, None)

    def find_window(self, handle: Hashable) -> Optional[WindowState]:
        """Return the window registered under ``handle`` or ``None``."""
        return self._windows.get(handle)

    def count(self) -> int:
        """Number of registered windows."""
        return len(self._windows)

    def set_mouse_state(
        self, handle: Hashable, button: Button, state: ButtonState, x: int, y: int
    ) -> None:
        """Record a button state change and the mouse position."""
        window = self.find_window(handle)
        if window is None:
            return
        if button is Button.LEFT:
            window.left = state
        else:
            window.right = state
        window.mouse_x, window.mouse_y = x, y

    def set_mouse_coord(self, handle: Hashable, x: int, y: int) -> None:
        """Record the mouse position."""
        window = self.find_window(handle)
        if window is not None:
            window.mouse_x, window.mouse_y = x, y

    def set_click_info(self, handle: Hashable, click: ClickType, x: int, y: int) -> None:
        """Queue a mouse click for the window."""
        window = self.find_window(handle)
        if window is not None:
            window.mouse_queue.insert(MouseEvent(click, x, y))

    def set_key_info(self, handle: Hashable, key_type: KeyType, value: str) -> None:
        """Queue a key press for the window."""
        window = self.find_window(handle)
        if window is not None:
            window.key_queue.insert(KeyEvent(key_type, value))