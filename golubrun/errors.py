"""Resource error reports and the on-screen overlay that fades them in and out."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, TextIO

Color = tuple[int, int, int, int]
Measure = Callable[[str, int], tuple[float, float]]

_ANIMATION_SPEED = 255 // 2
_TIME_TO_DESTROY = 4.0
_FONT_SCALE = 4
_HOLD_END = 255 + _TIME_TO_DESTROY * 0.5 * _ANIMATION_SPEED

_TEXT_RGB = (250, 250, 250)
_FILL_RGB = (250, 125, 125)
_OUTLINE_RGB = (250, 0, 0)


class ErrorField(IntEnum):
    """Line positions within an error report."""

    REPORT = 0
    FUNCTION = 1
    MAIN_OBJ = 2
    ARGUMENT0 = 3
    ARGUMENT1 = 4
    ARGUMENT2 = 5


_FIELD_COUNT = len(ErrorField)
_EMPTY_LINES: tuple[str, ...] = ("",) * _FIELD_COUNT


@dataclass(frozen=True)
class ErrorReport:
    """A description of a failed operation, one line per field."""

    code: str
    function: str
    main_obj: str
    argument0: str = ""
    argument1: str = ""
    argument2: str = ""

    @property
    def heading(self) -> str:
        return f"==========> ERROR [{self.code}] <=========="

    def lines(self) -> tuple[str, ...]:
        """The report's lines in ErrorField order."""
        return (
            self.heading,
            self.function,
            self.main_obj,
            self.argument0,
            self.argument1,
            self.argument2,
        )

    def format(self) -> str:
        """The report as written to the error stream."""
        heading, function, *rest = self.lines()
        return "\n" + heading + "\n\n" + function + "\n\n" + "\n".join(rest) + "\n\n"


def texture_load_error(size: int, path: str) -> ErrorReport:
    return ErrorReport(
        code="00000",
        function="FUNCTION: ResourceLoader.load_image (relative_path, data, split_for_shader)",
        main_obj="texture",
        argument0="data",
        argument1=f"size [ {size} ] ",
        argument2=f"path [ {path} ] ",
    )


def font_load_error(size: int, path: str) -> ErrorReport:
    return ErrorReport(
        code="00100",
        function="FUNCTION: ResourceLoader.load_font (relative_path, data, size)",
        main_obj="font",
        argument0="data",
        argument1=f"size [ {size} ] ",
        argument2=f"path [ {path} ] ",
    )


def image_load_error(size: int, path: str) -> ErrorReport:
    # The data line is deliberately left blank for image failures.
    return ErrorReport(
        code="00200",
        function="FUNCTION: ResourceLoader.load_image (relative_path, data)",
        main_obj="image",
        argument0="",
        argument1=f"size [ {size} ] ",
        argument2=f"path [ {path} ] ",
    )


def sound_load_error(size: int, path: str) -> ErrorReport:
    return ErrorReport(
        code="00300",
        function="FUNCTION: ResourceLoader.load_sound (relative_path, data)",
        main_obj="sound buffer",
        argument0="data",
        argument1=f"size [ {size} ] ",
        argument2=f"path [ {path} ] ",
    )


def shader_load_error(source: str, path: str) -> ErrorReport:
    return ErrorReport(
        code="00311",
        function="FUNCTION: ResourceLoader.load_shader (relative_path, source)",
        main_obj="shader",
        argument0=f"source [ {source} ] ",
        argument1=f"path [ {path} ] ",
    )


@dataclass(frozen=True)
class PlacedLine:
    """A text line with its on-screen position and measured size."""

    text: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class OverlayLayout:
    """Everything needed to draw the error overlay for one frame."""

    character_size: int
    lines: tuple[PlacedLine, ...]
    box: tuple[float, float, float, float]
    outline_thickness: float
    text_color: Color
    fill_color: Color
    outline_color: Color


def _to_alpha(frame: float) -> int:
    return int(max(0.0, min(255.0, frame)))


class ErrorOverlay:
    """Shows the latest error report, fading in, holding and fading out."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._active = False
        self._frame = 0.0
        self._alpha = 0
        self._pending: tuple[str, ...] = _EMPTY_LINES
        self._shown: tuple[str, ...] = _EMPTY_LINES

    def report(self, report: ErrorReport) -> None:
        """Queue a report for display and write it to the error stream."""
        self._active = True
        if self._frame > 255:
            self._frame = 255.0
        self._pending = report.lines()
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(report.format())
        stream.flush()

    def update(self, elapsed: float) -> None:
        """Advance the fade animation by `elapsed` seconds."""
        step = _ANIMATION_SPEED * elapsed
        if self._active:
            if self._frame == 0.0:
                self._shown = self._pending
            self._frame += step
            if self._frame <= 255:
                self._alpha = _to_alpha(self._frame)
            elif self._frame < _HOLD_END:
                self._alpha = 255
            else:
                self._active = False
        elif self._frame > 0:
            self._frame -= step
            self._alpha = 255 if self._frame > 255 else _to_alpha(self._frame)
        else:
            self._frame = 0.0
            self._alpha = 0
            self._pending = _EMPTY_LINES

    def alpha(self) -> int:
        """Current opacity of the overlay, 0 to 255."""
        return self._alpha

    def visible_lines(self) -> tuple[str, ...]:
        """Lines currently on screen; empty while fully transparent."""
        return self._shown if self._alpha > 0 else ()

    def layout(self, factor: float, window_width: float, measure: Measure) -> OverlayLayout:
        """Place the lines centred and stacked, and size the box around them.

        `measure(text, character_size)` returns the rendered width and height.
        """
        character_size = int(_FONT_SCALE * factor)
        placed: list[PlacedLine] = []
        for text in self._shown:
            width, height = measure(text, character_size)
            y = 2 * factor if not placed else placed[-1].y + placed[-1].height
            placed.append(PlacedLine(text, window_width * 0.5 - width * 0.5, y, width, height))
        first, function, last = placed[0], placed[ErrorField.FUNCTION], placed[-1]
        box = (function.x, first.y, function.width, last.y + last.height - first.y)
        return OverlayLayout(
            character_size=character_size,
            lines=tuple(placed),
            box=box,
            outline_thickness=factor,
            text_color=(*_TEXT_RGB, self._alpha),
            fill_color=(*_FILL_RGB, self._alpha),
            outline_color=(*_OUTLINE_RGB, self._alpha),
        )