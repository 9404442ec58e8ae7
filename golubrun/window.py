"""The game window: frame timing, fullscreen toggling, camera and presentation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

import pygame

from .button import Button
from .names import Color, FloatRect, GameStatus, Settings

TITLE = "GolubRun 4"
PIXEL_SIZE = (311.0, 175.0)
ICON_PATH = "Images/icon.png"
SHADER_FILE = "shader.frag"
F11_COOLDOWN = 1.0

_RESOURCES = Path(__file__).resolve().parent / "Resources"


def _bundled(relative_path: str) -> bytes:
    try:
        return (_RESOURCES / relative_path).read_bytes()
    except OSError:
        return b""


def _desktop_size() -> tuple[int, int]:
    sizes = pygame.display.get_desktop_sizes()
    if sizes:
        return sizes[0]
    return int(PIXEL_SIZE[0]), int(PIXEL_SIZE[1])


def _fill(surface: pygame.Surface, rect: pygame.Rect, color: Color) -> None:
    if rect.width <= 0 or rect.height <= 0 or color[3] == 0:
        return
    if color[3] == 255:
        surface.fill(color[:3], rect)
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    layer.fill(color)
    surface.blit(layer, rect.topleft)


def _outline(surface: pygame.Surface, rect: pygame.Rect, color: Color, thickness: int) -> None:
    if rect.width <= 0 or rect.height <= 0 or color[3] == 0 or thickness <= 0:
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(layer, color, layer.get_rect(), thickness)
    surface.blit(layer, rect.topleft)


class WindowMode(Enum):
    """How the window is shown."""

    DEFAULT = 0
    FULLSCREEN = 1


@dataclass
class Camera:
    """The visible area of the world, given by its centre and size."""

    center: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (0.0, 0.0)

    def bounds(self) -> FloatRect:
        width, height = self.size
        cx, cy = self.center
        return FloatRect(cx - width * 0.5, cy - height * 0.5, width, height)

    def resize(self, width: float, height: float) -> None:
        """Show an area of the given size with its corner at the origin."""
        self.center = (float(width) * 0.5, float(height) * 0.5)
        self.size = (float(width), float(height))


class GameWindow:
    """Owns the display, the off-screen canvas and the camera."""

    def __init__(self, settings: Optional[Settings] = None, title: str = TITLE) -> None:
        self.settings = settings if settings is not None else Settings()
        self.title = title
        self.pixel_size = PIXEL_SIZE
        self.mode = WindowMode.DEFAULT
        self.camera = Camera()
        self.time_since_clicking = 0.0
        self.default_color: Color = (0, 0, 0, 255)
        self._clear_color: Color = (0, 0, 0, 255)
        self.focused = False
        self.font: Any = None
        self.icon: Any = None
        self.shader_source: Optional[str] = None
        self.shader_uniforms: dict[str, Any] = {}
        self.canvas: Optional[pygame.Surface] = None
        self._rect = FloatRect(0.0, 0.0, *PIXEL_SIZE)
        self._screen: Optional[pygame.Surface] = None
        self._open = False

    def open(self, loader: Any) -> None:
        """Create the display at desktop size, set its icon and read the shader."""
        self.icon = loader.load_image(ICON_PATH, _bundled(ICON_PATH))
        pygame.display.init()
        self._screen = pygame.display.set_mode(_desktop_size(), pygame.RESIZABLE)
        pygame.display.set_caption(self.title)
        if self.icon is not None:
            pygame.display.set_icon(self.icon)
        self.mode = WindowMode.DEFAULT
        self._open = True
        self._apply_size(*self._screen.get_size())
        shader = Path(SHADER_FILE)
        try:
            self.shader_source = shader.read_text(encoding="utf-8") if shader.is_file() else None
        except (OSError, UnicodeDecodeError):
            self.shader_source = None

    def tick(self, elapsed_us: float, focused: bool) -> None:
        """Record the frame time; time stands still while the window is unfocused."""
        self.focused = focused
        self.settings.time = elapsed_us * 0.001 if focused else 0.0
        self.time_since_clicking += self.settings.elapsed

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen display."""
        if self.mode is WindowMode.DEFAULT:
            target = WindowMode.FULLSCREEN
            if self._open:
                modes = pygame.display.list_modes()
                size = modes[0] if isinstance(modes, list) and modes else _desktop_size()
                self._screen = pygame.display.set_mode(size, pygame.FULLSCREEN)
        else:
            target = WindowMode.DEFAULT
            if self._open:
                self._screen = pygame.display.set_mode(_desktop_size(), pygame.RESIZABLE)
        if self._open and self._screen is not None:
            width, height = self._screen.get_size()
        else:
            width, height = self._rect.width, self._rect.height
        self._apply_size(width, height)
        self.mode = target
        self.time_since_clicking = 0.0

    def handle_events(self, events: Iterable[Any]) -> None:
        """React to closing, Escape, F11 and resizing."""
        for event in events:
            if event.type == pygame.QUIT:
                self.close()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE and self.focused:
                    self.close()
                elif (
                    event.key == pygame.K_F11
                    and self.focused
                    and self.time_since_clicking > F11_COOLDOWN
                ):
                    self.toggle_fullscreen()
            elif event.type == pygame.VIDEORESIZE:
                self._apply_size(event.w, event.h)

    def _apply_size(self, width: float, height: float) -> None:
        self.camera.resize(width, height)
        factor = self.settings.resolution_factor
        self.canvas = pygame.Surface((max(1, int(width / factor)), max(1, int(height / factor))))
        self._rect = self.camera.bounds()

    def factor_x(self) -> float:
        return self._rect.width / self.pixel_size[0]

    def factor_y(self) -> float:
        return self._rect.height / self.pixel_size[1]

    def bounds(self) -> FloatRect:
        """The visible world area."""
        return self._rect

    def set_color(self, color: Color) -> None:
        self._clear_color = color

    def clear_color(self) -> Color:
        """The colour frames are cleared with; the default unless the set one is opaque."""
        return self._clear_color if self._clear_color[3] > 250 else self.default_color

    def close(self) -> None:
        if self._open:
            self._open = False
            self._screen = None
            pygame.display.quit()

    def is_open(self) -> bool:
        return self._open

    def _require_canvas(self) -> pygame.Surface:
        if self.canvas is None:
            raise RuntimeError("the window has no canvas yet")
        return self.canvas

    def _to_canvas(self, x: float, y: float) -> tuple[float, float]:
        factor = self.settings.resolution_factor
        return ((x - self._rect.left) / factor, (y - self._rect.top) / factor)

    def draw_button(self, button: Button) -> None:
        """Draw a button's rectangle, and its label while hit boxes are shown."""
        canvas = self._require_canvas()
        factor = self.settings.resolution_factor
        bounds = button.bounds()
        x, y = self._to_canvas(bounds.left, bounds.top)
        target = pygame.Rect(
            round(x),
            round(y),
            max(0, round(bounds.width / factor)),
            max(0, round(bounds.height / factor)),
        )
        if button.texture is not None and target.width and target.height:
            canvas.blit(pygame.transform.scale(button.texture, target.size), target.topleft)
        else:
            _fill(canvas, target, button.fill_color)
        thickness = round(button.outline_thickness * button.scale / factor)
        _outline(canvas, target, button.outline_color, thickness)
        if self.settings.hitboxes_drawn and self.font is not None and button.text:
            label = self.font.render(button.text, True, button.text_color[:3])
            label.set_alpha(button.text_color[3])
            canvas.blit(label, self._to_canvas(*button.text_position))

    def present(self, drawables: Iterable[Any]) -> None:
        """Clear the canvas, draw everything in order and show the frame.

        Each drawable is a Button or a tuple (surface, world_position[, area]).
        """
        canvas = self._require_canvas()
        canvas.fill(self.clear_color())
        for item in drawables:
            if isinstance(item, Button):
                self.draw_button(item)
                continue
            surface, position, *area = item
            canvas.blit(surface, self._to_canvas(*position), *area)
        if self.settings.game_status is GameStatus.INTRODUCTION:
            factor_y = self.factor_y()
            self.shader_uniforms = {
                "resolution": canvas.get_size(),
                "threshold": 0.0,
                "radius": int(8 * factor_y),
                "fadeInner": 0.3 * factor_y,
                "fadeOuter": 2.5 * factor_y,
            }
        else:
            self.shader_uniforms = {}
        if self._open and self._screen is not None:
            size = self._screen.get_size()
            frame = canvas if canvas.get_size() == size else pygame.transform.scale(canvas, size)
            self._screen.blit(frame, (0, 0))
            pygame.display.flip()