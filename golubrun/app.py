"""The game object and its main loop."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Any, Iterable, Optional

import pygame

from .errors import ErrorOverlay
from .introduction import Introduction, load_introduction
from .mouse import MouseTracker
from .names import GameStatus, ResourceLoader, Settings, executable_dir
from .window import GameWindow

FONT_PATH = "Shrift/pixel_font_by_BLACKFIRE.otf"

_RESOURCES = Path(__file__).resolve().parent / "Resources"


def _bundled(relative_path: str) -> bytes:
    try:
        return (_RESOURCES / relative_path).read_bytes()
    except OSError:
        return b""


class Game:
    """Ties the window, mouse, introduction and error overlay together."""

    def __init__(self, argv0: str = "") -> None:
        self.settings = Settings()
        self.settings.path = executable_dir(argv0)
        self.overlay = ErrorOverlay()
        self.loader = ResourceLoader(self.settings.path, self.overlay.report, self.settings)
        self.mouse = MouseTracker(self.settings)
        self.window = GameWindow(self.settings)
        self.introduction: Introduction = load_introduction(self.loader)
        self._font_data = _bundled(FONT_PATH)
        self._fonts: dict[int, Any] = {}

    def _font(self, size: int) -> Any:
        if size <= 0:
            return None
        if size not in self._fonts:
            self._fonts[size] = self.loader.load_font(FONT_PATH, self._font_data, size)
        return self._fonts[size]

    def _measure(self, text: str, size: int) -> tuple[float, float]:
        font = self._font(size)
        if font is None:
            return (0.0, 0.0)
        return font.size(text)

    def _mouse_state(self) -> tuple[tuple[float, float], bool]:
        if self.window.is_open():
            return pygame.mouse.get_pos(), bool(pygame.mouse.get_pressed()[0])
        return self.mouse.position, False

    def step(self, elapsed_us: float, focused: bool, events: Iterable[Any]) -> bool:
        """Run one frame; returns whether the window is still open."""
        settings = self.settings
        self.window.tick(elapsed_us, focused)
        self.window.handle_events(events)
        if settings.time != 0.0:
            position, left_down = self._mouse_state()
            self.mouse.update(position, left_down, self.window.factor_y(), settings.elapsed)
        if settings.game_status is GameStatus.INTRODUCTION:
            if self.introduction.update(settings.elapsed):
                settings.game_status = GameStatus.MAIN_MENU
        if settings.time != 0.0:
            self.overlay.update(settings.elapsed)
        if self.window.is_open() and self.window.canvas is not None:
            self.window.present(self._drawables())
        return self.window.is_open()

    def _drawables(self) -> list[Any]:
        items: list[Any] = []
        if self.settings.game_status is GameStatus.INTRODUCTION:
            items.extend(self._introduction_items())
        if self.settings.hitboxes_drawn and self.mouse.bounds().intersects(self.window.bounds()):
            items.extend(self._mouse_items())
        items.extend(self._overlay_items())
        return items

    def _scaled(self, value: float) -> int:
        return max(1, round(value / self.settings.resolution_factor))

    def _introduction_items(self) -> list[Any]:
        sheet = self.introduction.texture
        if sheet is None:
            return []
        area = pygame.Rect(self.introduction.frame_rect()).clip(sheet.get_rect())
        if not area.width or not area.height:
            return []
        place = self.introduction.placement(self.window.factor_y(), self.window.bounds())
        size = (self._scaled(place.width), self._scaled(place.height))
        frame = pygame.transform.scale(sheet.subsurface(area), size)
        return [(frame, (place.left, place.top))]

    def _mouse_items(self) -> list[Any]:
        bounds = self.mouse.bounds()
        box = pygame.Surface(
            (self._scaled(bounds.width), self._scaled(bounds.height)), pygame.SRCALPHA
        )
        pygame.draw.rect(box, self.mouse.color, box.get_rect(), 1)
        items: list[Any] = [(box, (bounds.left, bounds.top))]
        font = self._font(self.mouse.character_size)
        if font is not None:
            label = font.render(self.mouse.label, True, self.mouse.color[:3])
            items.append((label, self.mouse.label_position(*label.get_size())))
        return items

    def _overlay_items(self) -> list[Any]:
        if self.overlay.alpha() <= 0:
            return []
        layout = self.overlay.layout(
            self.window.factor_y(), self.window.bounds().width, self._measure
        )
        x, y, width, height = layout.box
        items: list[Any] = []
        if width > 0 and height > 0:
            box = pygame.Surface((self._scaled(width), self._scaled(height)), pygame.SRCALPHA)
            box.fill(layout.fill_color)
            thickness = max(1, round(layout.outline_thickness))
            pygame.draw.rect(box, layout.outline_color, box.get_rect(), thickness)
            items.append((box, (x, y)))
        font = self._font(layout.character_size)
        if font is not None:
            for line in layout.lines:
                if not line.text:
                    continue
                rendered = font.render(line.text, True, layout.text_color[:3])
                rendered.set_alpha(layout.text_color[3])
                items.append((rendered, (line.x, line.y)))
        return items

    def run(self) -> int:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self.window.open(self.loader)
            last = time.perf_counter_ns()
            while self.window.is_open():
                now = time.perf_counter_ns()
                elapsed_us = (now - last) / 1000.0
                last = now
                focused = bool(pygame.key.get_focused())
                self.step(elapsed_us, focused, pygame.event.get())
        finally:
            self.window.close()
            pygame.quit()
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv if argv is None else argv
    return Game(args[0] if args else "").run()


if __name__ == "__main__":
    sys.exit(main())