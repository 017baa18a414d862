"""Interactive walk-through that exercises the input and output classes."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from paintkit.defs import ActionType, Color, GfxInfo, GraphicsError, Point
from paintkit.events import KeyType
from paintkit.output import DEFAULT_IMAGE_DIR, Output
from paintkit.userinput import Input

INTRO = (
    "This demo is to test input and output classes, Click anywhere to start the test"
)
EXIT_MESSAGE = "Action: EXIT, test is finished, click anywhere to exit"

_ACTION_MESSAGES = {
    ActionType.DRAW_RECT: "Action: Draw a Rectangle , Click anywhere",
    ActionType.STATUS: "Action: a click on the Status Bar, Click anywhere",
    ActionType.DRAWING_AREA: "Action: a click on the Drawing Area, Click anywhere",
    ActionType.EMPTY: "Action: a click on empty area in the Design Tool Bar, Click anywhere",
    ActionType.TO_DRAW: "Action: Switch to Draw Mode, creating simualtion tool bar",
    ActionType.TO_PLAY: "Action: Switch to Play Mode, creating Design tool bar",
}

_KEY_NAMES = {
    "ENTER": "\r",
    "ESCAPE": "\x1b",
    "ESC": "\x1b",
    "BACKSPACE": "\b",
    "SPACE": " ",
}


def _frame_style() -> GfxInfo:
    return GfxInfo(draw_color=Color.BLACK, is_filled=False, border_width=5)


def _filled_style() -> GfxInfo:
    return GfxInfo(
        draw_color=Color.BLUE, fill_color=Color.GREEN, is_filled=True, border_width=6
    )


@dataclass
class _Stage:
    prompt: str
    highlight_prompt: str
    style: Callable[[], GfxInfo]
    closing: Optional[str] = None


@dataclass
class _Session:
    output: Output
    user_input: Input
    transcript: list[str] = field(default_factory=list)

    def say(self, message: str) -> None:
        self.output.print_message(message)
        self.transcript.append(message)

    def wait(self) -> None:
        self.user_input.get_point_clicked()

    def points(self, count: int) -> list[Point]:
        return [self.user_input.get_point_clicked() for _ in range(count)]


def _figure_test(
    session: _Session,
    draw: Callable[[list[Point], GfxInfo, bool], None],
    num_points: int,
    intro: str,
    stages: Sequence[_Stage],
) -> None:
    session.say(intro)
    session.wait()
    for stage in stages:
        session.say(stage.prompt)
        points = session.points(num_points)
        gfx = stage.style()
        draw(points, gfx, False)

        session.say(stage.highlight_prompt)
        session.wait()
        draw(points, gfx, True)

        if stage.closing is not None:
            session.say(stage.closing)
            session.wait()
            session.output.clear_draw_area()


def _figure_tests(session: _Session) -> None:
    out = session.output

    _figure_test(
        session,
        lambda pts, gfx, sel: out.draw_rect(pts[0], pts[1], gfx, sel),
        2,
        "Drawing a Rectangle, filled/non-filled and Highlighted filled/non-filled,  "
        "Click to continue",
        [
            _Stage(
                "Drawing a Rectangle ==> non-filled,  Click two points",
                "Drawing a Rectangle ==> Highlighted non-filled, Click to Highlight",
                _frame_style,
            ),
            _Stage(
                "Drawing a Rectangle ==> filled,  Click two points",
                "Drawing a Rectangle ==> Highlighted filled, Click to Highlight",
                _filled_style,
                "Drawing a Rectangle Test ==> OK,  Click anywhere to continue",
            ),
        ],
    )

    _figure_test(
        session,
        lambda pts, gfx, sel: out.draw_square(pts[0], pts[1], gfx, sel),
        2,
        "Drawing a Square, normal and Highlighted, Click to continue",
        [
            _Stage(
                "Drawing a square ==> non-filled,  Click two points",
                "Drawing a square ==> Highlighted non-filled, Click to Highlight",
                _frame_style,
                "Drawing a Square Test ==> OK,  Click anywhere to continue",
            ),
            _Stage(
                "Drawing a square ==> filled,  Click two points",
                "Drawing a square ==> Highlighted filled, Click to Highlight",
                _filled_style,
                "Drawing a square Test ==> OK,  Click anywhere to continue",
            ),
        ],
    )

    _figure_test(
        session,
        lambda pts, gfx, sel: out.draw_triangle(pts[0], pts[1], pts[2], gfx, sel),
        3,
        "Drawing a Triangle, filled/non-filled and Highlighted filled/non-filled,  "
        "Click to continue",
        [
            _Stage(
                "Drawing a Triangle ==> non-filled,  Click three points",
                "Drawing a Triangle ==> Highlighted non-filled, Click to Highlight",
                _frame_style,
                "Drawing a Triangle Test ==> OK,  Click anywhere to continue",
            ),
            _Stage(
                "Drawing a Triangle ==> filled,  Click two points",
                "Drawing a Triangle ==> Highlighted filled, Click to Highlight",
                _filled_style,
                "Drawing a Triangle Test ==> OK,  Click anywhere to continue",
            ),
        ],
    )

    session.say(
        "Drawing a Hexagon, filled/non-filled and Highlighted filled/non-filled,  "
        "Click to continue"
    )
    session.wait()
    session.say("Drawing a Hexagon Test ==> OK,  Click anywhere to continue")
    session.wait()
    out.clear_draw_area()

    _figure_test(
        session,
        lambda pts, gfx, sel: out.draw_circle(pts[0], pts[1], gfx, sel),
        2,
        "Drawing a Circle, filled/non-filled and Highlighted filled/non-filled,  "
        "Click to continue",
        [
            _Stage(
                "Drawing a Circle ==> non-filled,  Click two points",
                "Drawing a Circle ==> Highlighted non-filled, Click to Highlight",
                _frame_style,
                "Drawing a Circle Test ==> OK,  Click anywhere to continue",
            ),
            _Stage(
                "Drawing a Circle ==> filled,  Click two points",
                "Drawing a Circle ==> Highlighted filled, Click to Highlight",
                _filled_style,
                "Drawing a Circle Test ==> OK,  Click anywhere to continue",
            ),
        ],
    )


def _string_test(session: _Session) -> None:
    session.say("TEST3: Now Time to test class Input, Click anywhere to continue")
    session.wait()
    session.say("Testing Input ability to read strings")
    text = session.user_input.get_string(session.output)
    session.output.clear_status_bar()
    session.say(f"You Entered {text}")
    session.wait()
    session.output.clear_draw_area()


def _action_test(session: _Session) -> None:
    session.say("TEST4: Testing Input ability to detect User Action, click anywhere")
    while (action := session.user_input.get_user_action()) is not ActionType.EXIT:
        session.say(_ACTION_MESSAGES[action])
        if action is ActionType.TO_DRAW:
            session.output.create_draw_toolbar()
        elif action is ActionType.TO_PLAY:
            session.output.create_play_toolbar()


def run_demo(output: Output, user_input: Input) -> list[str]:
    """Run the full walk-through and return the status messages it showed.

    Raises ``LookupError`` if the window runs out of queued input.
    """
    session = _Session(output, user_input)

    session.say(INTRO)
    session.wait()
    session.say("TEST1: Drawing Tool bar and Status bar, Click anywhere to continue")
    session.wait()
    session.say(
        "TEST2: Now we will show that Output class can draw any figure in any state, "
        "Click anywhere to continue"
    )
    session.wait()

    _figure_tests(session)
    _string_test(session)
    _action_test(session)

    session.say(EXIT_MESSAGE)
    session.wait()
    return session.transcript


def _post_events(output: Output, lines: Sequence[str], parser: argparse.ArgumentParser) -> None:
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        kind, _, rest = line.partition(" ")
        rest = rest.strip()
        if kind == "click":
            try:
                x, y = (int(part) for part in rest.split())
            except ValueError:
                parser.error(f"line {number}: expected 'click X Y', got {line!r}")
            output.canvas.post_click(x, y)
        elif kind == "key":
            value = _KEY_NAMES.get(rest.upper(), rest)
            if len(value) != 1:
                parser.error(f"line {number}: expected one key, got {rest!r}")
            key_type = KeyType.ESCAPE if value == "\x1b" else KeyType.ASCII
            output.canvas.post_key(value, key_type)
        else:
            parser.error(f"line {number}: unknown event {kind!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the walk-through against a scripted sequence of input events."""
    parser = argparse.ArgumentParser(
        prog="paintkit-demo",
        description="Exercise drawing and input using scripted clicks and keys.",
    )
    parser.add_argument(
        "--images",
        type=Path,
        default=DEFAULT_IMAGE_DIR,
        help="directory holding the toolbar icons",
    )
    parser.add_argument(
        "--events",
        type=Path,
        required=True,
        help="file with one event per line: 'click X Y' or 'key C'",
    )
    parser.add_argument("--save", type=Path, help="write the final window image here")
    args = parser.parse_args(argv)

    try:
        lines = args.events.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        parser.error(f"cannot read events file: {exc}")

    try:
        output = Output(image_dir=args.images)
    except GraphicsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _post_events(output, lines, parser)

    try:
        transcript = run_demo(output, output.create_input())
    except LookupError:
        print("error: ran out of input events", file=sys.stderr)
        return 1

    for message in transcript:
        print(message)
    if args.save is not None:
        output.canvas.image.save(args.save)
    return 0


if __name__ == "__main__":
    sys.exit(main())