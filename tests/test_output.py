import pytest
from PIL import Image

from paintkit.defs import ActionType, Color, ErrorKind, GfxInfo, GraphicsError, Point
from paintkit.output import WINDOW_TITLE, Output
from paintkit.ui import InterfaceMode

BACKGROUND = Color.LIGHTGOLDENRODYELLOW.as_tuple()
STATUS = Color.TURQUOISE.as_tuple()


@pytest.fixture
def image_dir(tmp_path):
    for name in ("Menu_Rect.jpg", "Menu_Exit.jpg"):
        Image.new("RGB", (40, 40), (10, 20, 30)).save(tmp_path / name)
    return tmp_path


@pytest.fixture
def output(image_dir):
    return Output(image_dir=image_dir)


def _pixel(output, x, y):
    return output.canvas.image.getpixel((x, y))


def test_window_setup(output):
    assert output.canvas.title == WINDOW_TITLE
    assert output.canvas.image.size == (output.ui.width, output.ui.height)
    assert output.ui.interface_mode is InterfaceMode.MODE_DRAW
    assert _pixel(output, 600, 300) == BACKGROUND
    assert _pixel(output, 600, 625) == STATUS
    assert _pixel(output, 600, output.ui.tool_bar_height) == Color.RED.as_tuple()


def test_missing_menu_images(tmp_path):
    with pytest.raises(GraphicsError) as info:
        Output(image_dir=tmp_path)
    assert info.value.kind is ErrorKind.FILE_NOT_FOUND


def test_toolbar_mode_switches(output):
    output.create_play_toolbar()
    assert output.ui.interface_mode is InterfaceMode.MODE_PLAY
    output.create_draw_toolbar()
    assert output.ui.interface_mode is InterfaceMode.MODE_DRAW


def test_create_input_shares_window_and_mode(output):
    user_input = output.create_input()
    output.canvas.post_click(10, 10)
    assert user_input.get_user_action() is ActionType.DRAW_RECT
    output.create_play_toolbar()
    output.canvas.post_click(10, 10)
    assert user_input.get_user_action() is ActionType.TO_PLAY


def test_filled_rect_and_highlight(output):
    gfx = GfxInfo(draw_color=Color.BLUE, fill_color=Color.GREEN, is_filled=True, border_width=6)
    output.draw_rect(Point(100, 100), Point(200, 200), gfx)
    assert _pixel(output, 150, 150) == Color.GREEN.as_tuple()
    assert _pixel(output, 100, 150) == Color.BLUE.as_tuple()
    output.draw_rect(Point(100, 100), Point(200, 200), gfx, True)
    assert _pixel(output, 100, 150) == Color.MAGENTA.as_tuple()
    assert _pixel(output, 150, 150) == Color.GREEN.as_tuple()


def test_unfilled_rect_keeps_background(output):
    gfx = GfxInfo(draw_color=Color.BLACK, is_filled=False, border_width=5)
    output.draw_rect(Point(100, 100), Point(200, 200), gfx)
    assert _pixel(output, 150, 150) == BACKGROUND
    assert _pixel(output, 200, 150) == Color.BLACK.as_tuple()


def test_square_side_follows_x_span(output):
    gfx = GfxInfo(draw_color=Color.BLUE, fill_color=Color.GREEN, is_filled=True)
    output.draw_square(Point(100, 100), Point(200, 120), gfx)
    assert _pixel(output, 150, 180) == Color.GREEN.as_tuple()
    assert _pixel(output, 150, 220) == BACKGROUND


def test_triangle(output):
    gfx = GfxInfo(draw_color=Color.BLUE, fill_color=Color.GREEN, is_filled=True)
    output.draw_triangle(Point(100, 100), Point(200, 100), Point(150, 200), gfx)
    assert _pixel(output, 150, 133) == Color.GREEN.as_tuple()
    output.draw_triangle(Point(100, 100), Point(200, 100), Point(150, 200), gfx, True)
    assert _pixel(output, 150, 100) == Color.MAGENTA.as_tuple()


def test_circle_radius_is_distance_between_points(output):
    gfx = GfxInfo(draw_color=Color.BLUE, fill_color=Color.GREEN, is_filled=True)
    output.draw_circle(Point(300, 300), Point(330, 340), gfx)
    assert _pixel(output, 300, 300) == Color.GREEN.as_tuple()
    assert _pixel(output, 300, 345) == Color.GREEN.as_tuple()
    assert _pixel(output, 360, 300) == BACKGROUND


def test_clear_draw_area_restores_background(output):
    gfx = GfxInfo(draw_color=Color.BLUE, fill_color=Color.GREEN, is_filled=True)
    output.draw_rect(Point(100, 100), Point(400, 400), gfx)
    output.clear_draw_area()
    region = output.canvas.image.crop((0, 52, output.ui.width, 600))
    assert set(region.getdata()) == {BACKGROUND}


def test_print_message_and_clear(output):
    output.print_message("Click anywhere")
    bar = (0, 600, output.ui.width, output.ui.height)
    assert len(set(output.canvas.image.crop(bar).getdata())) > 1
    output.clear_status_bar()
    assert set(output.canvas.image.crop(bar).getdata()) == {STATUS}


def test_print_message_echo_from_input(output):
    user_input = output.create_input()
    for ch in "ok\r":
        output.canvas.post_key(ch)
    assert user_input.get_string(output) == "ok"
    bar = (0, 600, output.ui.width, output.ui.height)
    assert len(set(output.canvas.image.crop(bar).getdata())) > 1