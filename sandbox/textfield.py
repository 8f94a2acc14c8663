"""Single-line text input fields with one shared selection."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional, Sequence

import pygame

OUTLINE_THICKNESS = 2
OUTLINE_COLOR = (0, 0, 0)
FIELD_COLOR = (255, 255, 255)
SELECTED_COLOR = (150, 150, 150)
TEXT_COLOR = (0, 0, 0)
DEFAULT_SIZE = (50.0, 30.0)


class TextField:
    """A text box; at most one field across all instances is selected."""

    selected: ClassVar[Optional["TextField"]] = None

    def __init__(
        self,
        pos: Sequence[float],
        font,
        on_execute: Callable[[str], Any],
    ) -> None:
        self.pos = (float(pos[0]), float(pos[1]))
        self.font = font
        self.on_execute = on_execute
        self.size = DEFAULT_SIZE
        self.fill_color = FIELD_COLOR
        self.text = ""
        self.is_selected = False

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Global bounds (left, top, width, height), outline included."""
        x, y = self.pos
        w, h = self.size
        t = OUTLINE_THICKNESS
        return (x - t, y - t, w + 2 * t, h + 2 * t)

    def contains(self, point: Sequence[float]) -> bool:
        left, top, width, height = self.bounds
        px, py = point
        return left <= px < left + width and top <= py < top + height

    def _deselect(self) -> None:
        self.is_selected = False
        self.fill_color = FIELD_COLOR

    def update(self, mouse_pos: Sequence[float], pressed: bool) -> None:
        """Select the field on a click inside it, deselect on a click elsewhere."""
        if pressed and self.contains(mouse_pos):
            current = TextField.selected
            if current is not None and current is not self:
                current._deselect()
            TextField.selected = self
            self.is_selected = True
            self.fill_color = SELECTED_COLOR
        elif pressed and TextField.selected is self:
            self._deselect()
            TextField.selected = None

    def render(self, surface: pygame.Surface) -> None:
        """Draw the field and its text."""
        x, y = self.pos
        w, h = self.size
        t = OUTLINE_THICKNESS
        outer = pygame.Rect(round(x - t), round(y - t), round(w + 2 * t), round(h + 2 * t))
        inner = pygame.Rect(round(x), round(y), round(w), round(h))
        pygame.draw.rect(surface, OUTLINE_COLOR, outer)
        pygame.draw.rect(surface, self.fill_color, inner)
        if self.font is not None and self.text:
            surface.blit(self.font.render(self.text, True, TEXT_COLOR), (round(x), round(y)))

    def execute(self) -> None:
        """Hand the current text to the action and clear the field."""
        self.on_execute(self.text)
        self.text = ""

    def _text_extent(self) -> tuple[int, int]:
        if self.font is None or not self.text:
            return (0, 0)
        width, height = self.font.size(self.text)
        return (int(width), int(height))

    def set_string(self, value: str) -> None:
        """Set the selected field's text and resize this field to fit."""
        current = TextField.selected
        if current is None:
            raise RuntimeError("No textfield set")
        current.text = value
        width, height = self._text_extent()
        self.size = (float(max(45, width) + 5), float(max(25, height + 5)))