"""Shared game settings, geometry helpers, text wrapping and resource loading."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import pygame

from .errors import (
    ErrorReport,
    font_load_error,
    shader_load_error,
    sound_load_error,
    texture_load_error,
)

Color = tuple[int, int, int, int]

_LOAD_ERRORS = (pygame.error, OSError, ValueError)


class GameStatus(Enum):
    """Which part of the game is currently running."""

    INTRODUCTION = 0
    MAIN_MENU = 1


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its left/top corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: "FloatRect") -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        min_x1, max_x1 = sorted((self.left, self.right))
        min_y1, max_y1 = sorted((self.top, self.bottom))
        min_x2, max_x2 = sorted((other.left, other.right))
        min_y2, max_y2 = sorted((other.top, other.bottom))
        return max(min_x1, min_x2) < min(max_x1, max_x2) and max(
            min_y1, min_y2
        ) < min(max_y1, max_y2)


@dataclass
class Settings:
    """Game-wide state shared by every component."""

    hitboxes_drawn: bool = False
    shader_on: bool = True
    time: float = 0.0
    microsec: float = 0.001
    font_hitbox_scale: float = 2.5
    lifting_hitbox_text: float = 2.5
    font_hitbox_color: Color = (100, 250, 0, 255)
    resolution_factor: int = 1
    game_status: GameStatus = GameStatus.INTRODUCTION
    path: str = " "

    @property
    def elapsed(self) -> float:
        """Seconds elapsed during the last frame."""
        return self.microsec * self.time


def hyphenate(text: str, symbols_in_line: int) -> str:
    """Insert a line break after every `symbols_in_line` characters past the first."""
    if symbols_in_line < 1:
        raise ValueError("symbols_in_line must be positive")
    pieces = []
    for index, char in enumerate(text):
        pieces.append(char)
        if index and index % symbols_in_line == 0:
            pieces.append("\n")
    return "".join(pieces)


def _line_is_full(count: int, limit: float) -> bool:
    if limit == 0:
        return count > 0
    return count / limit > 1


def wrap_text(text: str, symbols_in_line: int) -> str:
    """Wrap text to lines of at most `symbols_in_line` characters.

    Tabs count as four characters, explicit line breaks reset the counter and
    spaces at the start of a line are dropped.
    """
    limit = float(symbols_in_line) - 1.0
    pieces = []
    count = 0
    for char in text:
        if char in "\n\v":
            pieces.append(char)
            count = 0
            continue
        if char == "\t":
            pieces.append(char)
            count += 4
            continue
        if _line_is_full(count, limit):
            pieces.append("\n")
            count = 0
        if not (count == 0 and char == " "):
            pieces.append(char)
            count += 1
    return "".join(pieces)


def executable_dir(argv0: str, separator: str = os.sep) -> str:
    """Directory part of the program path, always ending in '/'."""
    cut = argv0.rfind(separator)
    head = argv0 if cut < 0 else argv0[:cut]
    return head + "/"


def centered_x(container_left: float, container_width: float, item_width: float) -> float:
    """Left coordinate that centres an item horizontally within a container."""
    return container_left + container_width * 0.5 - item_width * 0.5


class ResourceLoader:
    """Loads resources, preferring override files over the bundled data."""

    def __init__(
        self,
        base_path: str,
        reporter: Callable[[ErrorReport], None],
        settings: Optional[Settings] = None,
    ) -> None:
        self.base_path = Path(base_path)
        self.settings = settings if settings is not None else Settings()
        self._reporter = reporter

    def _resource(self, relative_path: str) -> Path:
        return self.base_path / "Resourcepack" / relative_path

    def _read_image(self, relative_path: str, data: bytes) -> Optional[pygame.Surface]:
        path = self._resource(relative_path)
        if path.is_file():
            try:
                return pygame.image.load(str(path))
            except _LOAD_ERRORS:
                pass
        try:
            return pygame.image.load(io.BytesIO(data), Path(relative_path).name)
        except _LOAD_ERRORS:
            return None

    def load_image(
        self, relative_path: str, data: bytes, split_for_shader: bool = False
    ) -> Optional[pygame.Surface]:
        """Load an image; with `split_for_shader` keep only one half of it."""
        surface = self._read_image(relative_path, data)
        if surface is None:
            self._reporter(texture_load_error(len(data), relative_path))
            return None
        if split_for_shader:
            half = int(surface.get_width() * 0.5)
            left = 0 if self.settings.shader_on else half
            area = pygame.Rect(left, 0, half, surface.get_height())
            surface = surface.subsurface(area).copy()
        return surface

    def load_font(self, relative_path: str, data: bytes, size: int) -> Optional[pygame.font.Font]:
        """Load a font of the given pixel size."""
        pygame.font.init()
        path = self._resource(relative_path)
        if path.is_file():
            try:
                return pygame.font.Font(str(path), size)
            except _LOAD_ERRORS:
                pass
        try:
            return pygame.font.Font(io.BytesIO(data), size)
        except _LOAD_ERRORS:
            self._reporter(font_load_error(len(data), relative_path))
            return None

    def load_sound(self, relative_path: str, data: bytes) -> Optional[pygame.mixer.Sound]:
        """Load a sound buffer."""
        path = self._resource(relative_path)
        if path.is_file():
            try:
                return pygame.mixer.Sound(str(path))
            except _LOAD_ERRORS:
                pass
        try:
            return pygame.mixer.Sound(file=io.BytesIO(data))
        except _LOAD_ERRORS:
            self._reporter(sound_load_error(len(data), relative_path))
            return None

    def load_shader(self, relative_path: str, source: str) -> Optional[str]:
        """Return fragment shader source from the shader pack or the built-in text."""
        path = self.base_path / "Shaderpack" / relative_path
        if path.is_file():
            try:
                return path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                pass
        if source:
            return source
        self._reporter(shader_load_error(source, relative_path))
        return None