"""Mouse cursor hit box, its debug label and click debouncing."""

from __future__ import annotations

from typing import Optional

from .names import FloatRect, Settings

LABEL = "PCM/hitbox/mouse"
CURSOR_SIZE = (1.0, 2.0)
OUTLINE_THICKNESS = 1.0
CLICK_COOLDOWN = 0.5


class MouseTracker:
    """Tracks the cursor position, its scaled hit box and fresh left clicks."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.label = LABEL
        self.color = self.settings.font_hitbox_color
        self.fill_color = (0, 0, 0, 0)
        self.font_scale = self.settings.font_hitbox_scale
        self.lifting_text = self.settings.lifting_hitbox_text
        self.position = (0.0, 0.0)
        self.factor = 1.0
        self.time_since_click = 0.0
        self.pressed = False
        self._held = False

    @property
    def character_size(self) -> int:
        """Pixel size of the debug label for the current scale."""
        return int(self.font_scale * self.factor)

    def update(
        self,
        position: tuple[float, float],
        left_down: bool,
        factor: float,
        elapsed: float,
    ) -> None:
        """Move the hit box and register a press only on the frame it starts."""
        self.position = (float(position[0]), float(position[1]))
        self.factor = factor
        if left_down:
            self.pressed = not self._held
            self._held = True
        else:
            self.pressed = False
            self._held = False
        self.time_since_click += elapsed

    def bounds(self) -> FloatRect:
        """Global bounds of the scaled hit box, outline included."""
        width, height = CURSOR_SIZE
        x, y = self.position
        f = self.factor
        return FloatRect(
            x - OUTLINE_THICKNESS * f,
            y - OUTLINE_THICKNESS * f,
            (width + 2 * OUTLINE_THICKNESS) * f,
            (height + 2 * OUTLINE_THICKNESS) * f,
        )

    def label_position(self, text_width: float, text_height: float) -> tuple[float, float]:
        """Where the debug label goes: centred over the hit box, lifted above it."""
        x, y = self.position
        return (
            x + self.bounds().width * 0.5 - text_width * 0.5,
            y - text_height * self.lifting_text,
        )

    def consume_click(self) -> bool:
        """True once for a fresh press when the cooldown has passed."""
        if self.pressed and self.time_since_click > CLICK_COOLDOWN:
            self.time_since_click = 0.0
            return True
        return False