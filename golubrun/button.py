"""Rectangular buttons with an optional debug label and texture."""

from __future__ import annotations

from typing import Any, Optional

from .mouse import MouseTracker
from .names import Color, FloatRect, Settings

_TRANSPARENT: Color = (0, 0, 0, 0)


class Button:
    """A clickable rectangle; its label is only shown while hit boxes are drawn."""

    def __init__(self, settings: Optional[Settings] = None, name: Optional[str] = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.size = (0.0, 0.0)
        self.fill_color: Color = (255, 255, 255, 255)
        self.scale = 1.0
        self.position = (0.0, 0.0)
        self.outline = _TRANSPARENT
        self.outline_color: Color = (255, 255, 255, 255)
        self.outline_thickness = 0.0
        self.text = ""
        self.character_size = 30
        self.text_color: Color = (255, 255, 255, 255)
        self.text_position = (0.0, 0.0)
        self.texture: Any = None
        if name is not None:
            self.set_string(name)

    def set_size(self, width: float, height: float) -> None:
        self.size = (float(width), float(height))

    def set_fill_color(self, color: Color) -> None:
        self.fill_color = color

    def set_scale(self, factor: float) -> None:
        """Scale the rectangle and choose how its outline and label look."""
        self.scale = factor
        if self.settings.hitboxes_drawn:
            self.outline_thickness = 1.0
            self.outline_color = self.settings.font_hitbox_color
            self.character_size = int(factor * self.settings.font_hitbox_scale)
        elif self.outline[3] == 0:
            self.outline_thickness = 0.0
            self.character_size = 0
        else:
            self.outline_thickness = 1.0
            self.outline_color = self.outline
            self.character_size = 0

    def set_position(
        self, x: float, y: float, label_width: float = 0.0, label_height: float = 0.0
    ) -> None:
        """Move the rectangle; the label is centred above it given its measured size."""
        self.position = (float(x), float(y))
        self.text_position = (
            x + self.bounds().width * 0.5 - label_width * 0.5,
            y - label_height * self.settings.lifting_hitbox_text,
        )

    def set_string(self, name: str) -> None:
        """Set the label text and reset it to the hit-box style."""
        self.text = name
        self.character_size = int(self.settings.font_hitbox_scale)
        self.text_color = self.settings.font_hitbox_color
        self.outline_color = self.settings.font_hitbox_color
        self.outline_thickness = 1.0

    def set_outline(self, color: Color) -> None:
        self.outline = color

    def bounds(self) -> FloatRect:
        """Global bounds of the scaled rectangle, outline included."""
        width, height = self.size
        x, y = self.position
        t = self.outline_thickness
        s = self.scale
        return FloatRect(x - t * s, y - t * s, (width + 2 * t) * s, (height + 2 * t) * s)

    def hovered(self, mouse: MouseTracker) -> bool:
        return mouse.bounds().intersects(self.bounds())

    def pressed(self, mouse: MouseTracker) -> bool:
        """True when hovered and a fresh click is available; consumes the click."""
        return self.hovered(mouse) and mouse.consume_click()


class ImageButton(Button):
    """A button whose rectangle is filled with a texture."""

    def set_texture(self, surface: Any) -> None:
        self.texture = surface