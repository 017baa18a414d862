# paintkit

A small toolkit for building a paint-style drawing program. The window is an
in-memory RGB image (Pillow), and user input is a queue of clicks and key
presses that you post to it.

- `paintkit.output.Output` lays out the window with a toolbar, a drawing
  area and a status bar, prints messages on the status bar, and draws
  rectangles, squares, triangles and circles, framed or filled, and
  optionally highlighted.
- `paintkit.userinput.Input` takes queued clicks and keys: it returns the
  point clicked, reads a typed string, and maps a click to an `ActionType`
  according to where it landed.
- `paintkit.canvas.Canvas` holds the drawing (`canvas.image`) and the
  queues of pending clicks and keys (`post_click`, `post_key`).
- `paintkit.ui.UIInfo` holds the layout and colours (1250 x 650 window,
  50-pixel toolbar and status bar, 80-pixel menu items by default).
- Smaller pieces: `paintkit.events.EventQueue`,
  `paintkit.windowinput.WindowRegistry`, and the rounding and row-copy
  helpers in `paintkit.jutils`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

`Output` draws the toolbar icons `Menu_Rect.jpg` and `Menu_Exit.jpg` from
an image directory (`images/MenuItems` relative to the working directory
by default). If an icon is missing, `paintkit.defs.GraphicsError` is raised.

```python
from paintkit.defs import ActionType, Color, GfxInfo, Point
from paintkit.output import Output

out = Output(image_dir="path/to/icons")
user_input = out.create_input()

gfx = GfxInfo(draw_color=Color.BLUE, fill_color=Color.GREEN,
              is_filled=True, border_width=6)
out.draw_rect(Point(100, 100), Point(300, 200), gfx, False)
out.draw_circle(Point(500, 300), Point(550, 300), gfx, True)  # highlighted
out.print_message("Click anywhere to continue")

out.canvas.image.save("drawing.png")
```

`draw_square` uses the horizontal distance between the two points as the
side; `draw_circle` is centred on the first point and passes through the
second. A highlighted figure is outlined in the highlight colour instead of
its own draw colour.

Clicks and key presses are posted to the canvas and consumed by `Input`:

```python
out.canvas.post_click(10, 10)        # the first toolbar item
assert user_input.get_user_action() is ActionType.DRAW_RECT

out.canvas.post_click(400, 300)
assert user_input.get_user_action() is ActionType.DRAWING_AREA
```

In draw mode a click on the toolbar gives `DRAW_RECT`, `EXIT` or `EMPTY`,
a click between the toolbar and the status bar gives `DRAWING_AREA`, and
anything lower gives `STATUS`. In play mode (after `create_play_toolbar`)
every click gives `TO_PLAY`.

`Input.get_string` reads keys until Enter (`"\r"`) and returns the text
typed; Escape (`"\x1b"`) returns an empty string and Backspace (`"\b"`)
removes the last character. When an `Output` is passed, the text so far is
shown on its status bar after each key.

Waiting for input when nothing is queued raises `LookupError`.

## Demo

`paintkit-demo` runs a scripted walk-through of the drawing and input
features and prints each status-bar message it showed:

```
paintkit-demo --events events.txt --images path/to/icons --save final.png
```

- `--events` (required): a text file with one event per line, either
  `click X Y` or `key C`. `C` is a single character or one of `ENTER`,
  `ESCAPE` (or `ESC`), `BACKSPACE`, `SPACE`. Blank lines and lines starting
  with `#` are skipped.
- `--images`: directory holding the toolbar icons (default
  `images/MenuItems`).
- `--save`: write the final window image to this file.

The command exits with status 1 if the events run out before the
walk-through ends (it ends on a click on the Exit toolbar item followed by
one more click). The same walk-through is available as
`paintkit.demo.run_demo(output, user_input)`, which returns the list of
messages.

## What it does not do

paintkit does not open a window on screen or read the real mouse and
keyboard: drawing goes to an in-memory image and input comes only from
events you post. The play-mode toolbar is not drawn, there is no hexagon
figure, and there is no saving or loading of drawings beyond writing the
canvas image yourself.