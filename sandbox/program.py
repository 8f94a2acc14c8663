"""The interactive falling-sand window."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

import pygame

from sandbox.simulation import DEFAULT_HEIGHT, DEFAULT_WIDTH, SandWorld

WINDOW_SIZE = (1920, 1080)
IMAGE_SIZE = (DEFAULT_WIDTH, DEFAULT_HEIGHT)
FONT_PATH = "assets/fonts/arial.ttf"
FONT_SIZE = 25
TITLE = "Falling sand"
BACKGROUND = (0, 0, 0)


def _load_font(path: Optional[str]) -> Optional[pygame.font.Font]:
    if path is None:
        return None
    if not Path(path).is_file():
        raise FileNotFoundError(f"font not found: {path}")
    return pygame.font.Font(path, FONT_SIZE)


class Program:
    """Owns the window, the sand world and the UI widgets."""

    def __init__(
        self,
        window_size: Sequence[int] = WINDOW_SIZE,
        image_size: Sequence[int] = IMAGE_SIZE,
        font_path: Optional[str] = FONT_PATH,
        rng=None,
        mouse: Optional[Callable[[], tuple[int, int]]] = None,
    ) -> None:
        pygame.init()
        self.font = _load_font(font_path)
        self.screen = pygame.display.set_mode(tuple(window_size))
        pygame.display.set_caption(TITLE)
        self.world = SandWorld(int(image_size[0]), int(image_size[1]), rng=rng)
        self._canvas = pygame.Surface(self.world.size)
        self.buttons: list = []
        self.button_held = False
        self.running = True
        self.loaded_image: Optional[pygame.Surface] = None
        self._mouse = mouse if mouse is not None else pygame.mouse.get_pos

    def run(self) -> None:
        """Process events, update and draw until the window is closed."""
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.update()
                self.render()
        finally:
            pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.button_held = True
        elif event.type == pygame.MOUSEBUTTONUP:
            self.button_held = False
        elif event.type == pygame.DROPFILE:
            try:
                self.load_image(event.file)
            except (FileNotFoundError, ValueError) as exc:
                print(f"Failed to load image: {exc}", file=sys.stderr)

    def update(self) -> None:
        """Advance the sand one frame and refresh the buttons."""
        mouse_pos = self._mouse()
        self.world.update_pixels()
        if self.button_held:
            self.world.spawn_sand(mouse_pos)
        if self.buttons:
            pressed = bool(pygame.mouse.get_pressed()[0])
            for button in self.buttons:
                button.update(mouse_pos, pressed)
        self.world.check_fixed_pixels()

    def render(self) -> None:
        """Draw the sand image to the window."""
        self._canvas.fill(BACKGROUND)
        for position, color in self.world.cells():
            self._canvas.set_at(position, color)
        self.screen.fill(BACKGROUND)
        self.screen.blit(self._canvas, (0, 0))
        pygame.display.flip()

    def load_image(self, path) -> pygame.Surface:
        """Load a dropped image file and keep it as ``loaded_image``."""
        file = Path(path)
        if not file.is_file():
            raise FileNotFoundError(f"image not found: {file}")
        try:
            image = pygame.image.load(str(file))
        except pygame.error as exc:
            raise ValueError(f"cannot read image {file}: {exc}") from exc
        self.loaded_image = image
        return image


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sandbox", description="Falling-sand sandbox.")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font for the UI")
    args = parser.parse_args(argv)
    try:
        program = Program(font_path=args.font)
    except FileNotFoundError:
        print("Failed to load font!", file=sys.stderr)
        pygame.quit()
        return 1
    program.run()
    return 0