"""Clickable buttons driven by mouse position and button state."""

from __future__ import annotations

import abc
import enum
from typing import Any, Callable, Optional, Sequence

import pygame

OUTLINE_THICKNESS = 2
OUTLINE_COLOR = (0, 0, 0)
DISABLED_COLOR = (255, 0, 0)
INITIAL_TEXT_COLOR = (255, 255, 255)

Callback = Callable[[], Any]


class ButtonState(enum.Enum):
    """Visual and interaction state of a button."""

    IDLE = 0
    HOVER = 1
    CLICKED = 2
    DISABLED = 3


class _ButtonBase(abc.ABC):
    def __init__(
        self,
        size: Sequence[float],
        position: Sequence[float],
        idle_color,
        hover_color,
        clicked_color,
        text_idle_color,
        text_hover_color,
        text_clicked_color,
        text: str,
        font,
        active: bool = True,
    ) -> None:
        self.size = (float(size[0]), float(size[1]))
        self.position = (float(position[0]), float(position[1]))
        self.idle_color = idle_color
        self.hover_color = hover_color
        self.clicked_color = clicked_color
        self.text_idle_color = text_idle_color
        self.text_hover_color = text_hover_color
        self.text_clicked_color = text_clicked_color
        self.text = text
        self.font = font
        self.active = active
        self.state = ButtonState.IDLE
        self.fill_color = idle_color
        self.text_color = INITIAL_TEXT_COLOR
        self._was_clicked = False

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Global bounds (left, top, width, height), outline included."""
        x, y = self.position
        w, h = self.size
        t = OUTLINE_THICKNESS
        return (x - t, y - t, w + 2 * t, h + 2 * t)

    def contains(self, point: Sequence[float]) -> bool:
        left, top, width, height = self.bounds
        px, py = point
        return left <= px < left + width and top <= py < top + height

    def update(self, mouse_pos: Sequence[float], pressed: bool) -> None:
        """Advance the state from the mouse and refresh the colours."""
        self._update_state(mouse_pos, pressed)
        self._update_appearance()

    def _update_state(self, mouse_pos: Sequence[float], pressed: bool) -> None:
        if not self.active:
            self.state = ButtonState.DISABLED
            return
        if self.contains(mouse_pos):
            if pressed:
                self.state = ButtonState.CLICKED
                if not self._was_clicked:
                    self._fire()
                self._was_clicked = True
            else:
                self.state = ButtonState.HOVER
                self._was_clicked = False
        else:
            self.state = ButtonState.IDLE
            self._was_clicked = False

    def _update_appearance(self) -> None:
        if self.state is ButtonState.DISABLED:
            self.fill_color = DISABLED_COLOR
        elif self.state is ButtonState.CLICKED:
            self.fill_color = self.clicked_color
            self.text_color = self.text_clicked_color
        elif self.state is ButtonState.HOVER:
            self.fill_color = self.hover_color
            self.text_color = self.text_hover_color
        else:
            self.fill_color = self.idle_color
            self.text_color = self.text_idle_color

    @abc.abstractmethod
    def _fire(self) -> None:
        """Run the click action."""

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the outlined box and its centred label."""
        x, y = self.position
        w, h = self.size
        t = OUTLINE_THICKNESS
        outer = pygame.Rect(round(x - t), round(y - t), round(w + 2 * t), round(h + 2 * t))
        inner = pygame.Rect(round(x), round(y), round(w), round(h))
        pygame.draw.rect(surface, OUTLINE_COLOR, outer)
        pygame.draw.rect(surface, self.fill_color, inner)
        if self.font is not None and self.text:
            rendered = self.font.render(self.text, True, self.text_color)
            rect = rendered.get_rect(center=(x + w / 2.0, y + h / 2.0))
            surface.blit(rendered, rect)


class Button(_ButtonBase):
    """A button with a single click action."""

    def __init__(
        self,
        size,
        position,
        idle_color,
        hover_color,
        clicked_color,
        text_idle_color,
        text_hover_color,
        text_clicked_color,
        text: str,
        font,
        on_click: Optional[Callback],
        active: bool = True,
    ) -> None:
        super().__init__(
            size,
            position,
            idle_color,
            hover_color,
            clicked_color,
            text_idle_color,
            text_hover_color,
            text_clicked_color,
            text,
            font,
            active,
        )
        self.on_click = on_click

    def _fire(self) -> None:
        if self.on_click is not None:
            self.on_click()

    def update(self, mouse_pos, pressed) -> None:
        super().update(mouse_pos, pressed)

    def draw(self, surface) -> None:
        super().draw(surface)


class MultiButton(_ButtonBase):
    """A button that runs every registered callback when clicked."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.callbacks: list[Callback] = []

    def _fire(self) -> None:
        for callback in list(self.callbacks):
            callback()

    def update(self, mouse_pos, pressed) -> None:
        super().update(mouse_pos, pressed)

    def draw(self, surface) -> None:
        super().draw(surface)

    def add_callback(self, callback: Callback) -> None:
        """Register a callback to run on click."""
        self.callbacks.append(callback)

    def remove_callback(self, callback: Callback) -> None:
        """Remove every registration of ``callback``; ValueError if absent."""
        remaining = [c for c in self.callbacks if c != callback]
        if len(remaining) == len(self.callbacks):
            raise ValueError(f"remove_callback: {callback!r} not found")
        self.callbacks = remaining

    def __add__(self, callback: Callback) -> "MultiButton":
        self.add_callback(callback)
        return self

    def __sub__(self, callback: Callback) -> "MultiButton":
        self.remove_callback(callback)
        return self