"""The opening animation played from three sprite sheets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .names import FloatRect, centered_x

FRAME_WIDTH = 311
FRAME_HEIGHT = 175

SHEET_PATHS = (
    "Images/Introduction/introduction0.png",
    "Images/Introduction/introduction1.png",
    "Images/Introduction/introduction2.png",
)

_RESOURCES = Path(__file__).resolve().parent / "Resources"


@dataclass(frozen=True)
class AnimationStage:
    """One sprite sheet: how many frames it has, laid out in columns, and how fast it plays."""

    frames: int
    frames_vertical: int
    speed: float


_STAGES = (
    AnimationStage(frames=42, frames_vertical=8, speed=15.0),
    AnimationStage(frames=108, frames_vertical=14, speed=7.5),
    AnimationStage(frames=53, frames_vertical=9, speed=7.5),
)


def sheet_frame_rect(
    frame: float, frames_vertical: int, frame_width: int, frame_height: int
) -> tuple[int, int, int, int]:
    """Rectangle of a frame in a sheet filled column by column."""
    column = int(frame / frames_vertical)
    row = int(frame) % frames_vertical
    return (column * frame_width, row * frame_height, frame_width, frame_height)


class Introduction:
    """Plays the three introduction sheets one after another."""

    def __init__(self, sheets: Sequence[Any]) -> None:
        if len(sheets) != len(_STAGES):
            raise ValueError(f"expected {len(_STAGES)} sheets, got {len(sheets)}")
        self.sheets = tuple(sheets)
        self.stages = _STAGES
        self.frame = 0.0

    @property
    def total_frames(self) -> int:
        return sum(stage.frames for stage in self.stages)

    def _stage_start(self, index: int) -> int:
        return sum(stage.frames for stage in self.stages[:index])

    def stage_index(self) -> int:
        """Index of the sheet the current frame belongs to."""
        end = 0
        for index, stage in enumerate(self.stages[:-1]):
            end += stage.frames
            if self.frame < end:
                return index
        return len(self.stages) - 1

    @property
    def texture(self) -> Any:
        """The sheet currently shown."""
        return self.sheets[self.stage_index()]

    def update(self, elapsed: float) -> bool:
        """Advance at the current sheet's speed; returns whether the intro is over."""
        self.frame += self.stages[self.stage_index()].speed * elapsed
        return self.finished()

    def frame_rect(self) -> tuple[int, int, int, int]:
        """Area of the current sheet to show."""
        index = self.stage_index()
        local = self.frame - self._stage_start(index)
        return sheet_frame_rect(local, self.stages[index].frames_vertical, FRAME_WIDTH, FRAME_HEIGHT)

    def finished(self) -> bool:
        return self.frame >= self.total_frames

    def placement(self, factor: float, window_bounds: FloatRect) -> FloatRect:
        """On-screen rectangle: scaled by `factor`, centred horizontally, at the top."""
        width = FRAME_WIDTH * factor
        height = FRAME_HEIGHT * factor
        x = centered_x(window_bounds.left, window_bounds.width, width)
        return FloatRect(x, 0.0, width, height)


def _bundled(relative_path: str) -> bytes:
    try:
        return (_RESOURCES / relative_path).read_bytes()
    except OSError:
        return b""


def load_introduction(loader: Any) -> Introduction:
    """Load the three sheets through the resource loader."""
    sheets = [loader.load_image(path, _bundled(path)) for path in SHEET_PATHS]
    return Introduction(sheets)