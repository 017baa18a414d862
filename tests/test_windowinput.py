from paintkit.events import Button, ButtonState, ClickType, KeyType
from paintkit.windowinput import WindowRegistry, WindowState


def make_registry():
    first = WindowState()
    return WindowRegistry("main", first), first


def test_constructor_registers_first_window():
    registry, first = make_registry()
    assert registry.count() == 1
    assert registry.find_window("main") is first
    assert registry.wait_close is True


def test_duplicate_handle_keeps_original():
    registry, first = make_registry()
    registry.add_window("main", WindowState())
    assert registry.count() == 1
    assert registry.find_window("main") is first


def test_add_and_remove_windows():
    registry, _ = make_registry()
    other = WindowState()
    registry.add_window("other", other)
    assert registry.count() == 2
    registry.remove_window("main")
    assert registry.count() == 1
    assert registry.find_window("main") is None
    assert registry.find_window("other") is other


def test_remove_unknown_handle_is_noop():
    registry, _ = make_registry()
    registry.remove_window("nope")
    assert registry.count() == 1


def test_find_missing_returns_none():
    registry = WindowRegistry()
    assert registry.count() == 0
    assert registry.find_window("x") is None


def test_set_mouse_state_updates_right_button_and_coords():
    registry, window = make_registry()
    registry.set_mouse_state("main", Button.RIGHT, ButtonState.DOWN, 10, 20)
    assert window.right is ButtonState.DOWN
    assert window.left is ButtonState.UP
    assert (window.mouse_x, window.mouse_y) == (10, 20)
    registry.set_mouse_state("main", Button.LEFT, ButtonState.DOWN, 3, 4)
    assert window.left is ButtonState.DOWN
    assert (window.mouse_x, window.mouse_y) == (3, 4)


def test_set_mouse_coord():
    registry, window = make_registry()
    registry.set_mouse_coord("main", 7, 9)
    assert (window.mouse_x, window.mouse_y) == (7, 9)


def test_click_info_is_queued_in_order():
    registry, window = make_registry()
    registry.set_click_info("main", ClickType.LEFT_CLICK, 1, 2)
    registry.set_click_info("main", ClickType.RIGHT_CLICK, 3, 4)
    first = window.mouse_queue.remove()
    second = window.mouse_queue.remove()
    assert (first.click, first.x, first.y) == (ClickType.LEFT_CLICK, 1, 2)
    assert (second.click, second.x, second.y) == (ClickType.RIGHT_CLICK, 3, 4)


def test_key_info_is_queued():
    registry, window = make_registry()
    registry.set_key_info("main", KeyType.ASCII, "q")
    event = window.key_queue.remove()
    assert event.key_type is KeyType.ASCII
    assert event.value == "q"


def test_events_for_unknown_window_are_dropped():
    registry, window = make_registry()
    registry.set_click_info("ghost", ClickType.LEFT_CLICK, 1, 1)
    registry.set_key_info("ghost", KeyType.ASCII, "z")
    registry.set_mouse_coord("ghost", 5, 5)
    assert len(window.mouse_queue) == 0
    assert len(window.key_queue) == 0
    assert (window.mouse_x, window.mouse_y) == (0, 0)