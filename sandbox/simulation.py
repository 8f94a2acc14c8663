"""The falling-sand world: a grid of coloured cells and the particles moving in it."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Protocol, Sequence

from sandbox.pixel import BLACK, Color, Pixel, PixelStatus, PixelType

DEFAULT_WIDTH = 1900
DEFAULT_HEIGHT = 1000
SPAWN_RADIUS = 30


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class SandWorld:
    """A fixed-size image in which sand particles fall and pile up.

    Empty cells are black. Particles fall straight down when they can,
    slide diagonally when only a lower neighbour is free, and become
    fixed once nothing below them is free.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: Optional[_RandomSource] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"world size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rng: _RandomSource = rng if rng is not None else random.Random()
        self._cells: dict[tuple[int, int], Color] = {}
        self.pixels: list[Pixel] = []
        self.active: list[Pixel] = []

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def color_at(self, x: int, y: int) -> Color:
        """Colour of the cell at (x, y); IndexError outside the image."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) lies outside a {self.width}x{self.height} world")
        return self._cells.get((x, y), BLACK)

    def cells(self) -> Iterator[tuple[tuple[int, int], Color]]:
        """Yield the position and colour of every non-empty cell."""
        yield from self._cells.items()

    def _is_empty(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and (x, y) not in self._cells

    def _move(self, pixel: Pixel, x: int, y: int) -> None:
        del self._cells[pixel.pos]
        self._cells[(x, y)] = pixel.color
        pixel.pos = (x, y)

    def update_pixels(self) -> None:
        """Move every active, unfixed particle one step."""
        for pixel in self.active:
            if pixel.fixed:
                continue
            x, y = pixel.pos
            if not (0 <= y < self.height - 1 and 0 <= x < self.width - 1):
                continue

            if self._is_empty(x, y + 1):
                self._move(pixel, x, y + 1)
                continue

            can_fall_left = x > 0 and self._is_empty(x - 1, y + 1)
            can_fall_right = self._is_empty(x + 1, y + 1)
            if can_fall_left and can_fall_right:
                dx = -1 if self.rng.randrange(2) == 0 else 1
            elif can_fall_left:
                dx = -1
            elif can_fall_right:
                dx = 1
            else:
                pixel.set_state(PixelStatus.FIXED)
                continue
            self._move(pixel, x + dx, y + 1)

    def check_fixed_pixels(self) -> None:
        """Drop particles that have come to rest from the active list."""
        self.active = [pixel for pixel in self.active if not pixel.fixed]

    def spawn_sand(self, pos: Sequence[int]) -> Optional[Pixel]:
        """Drop a sand grain at a random spot near ``pos``.

        Returns the new particle, or None if the chosen cell is taken
        or lies outside the image.
        """
        half = SPAWN_RADIUS // 2
        x = int(pos[0]) + self.rng.randrange(SPAWN_RADIUS) - half
        y = int(pos[1]) + self.rng.randrange(SPAWN_RADIUS) - half
        if not self._is_empty(x, y):
            return None
        pixel = Pixel(PixelType.SAND, (x, y), rng=self.rng)
        self.pixels.append(pixel)
        self.active.append(pixel)
        self._cells[(x, y)] = pixel.color
        return pixel

    def step(self, mouse_pos: Sequence[int], held: bool) -> Optional[Pixel]:
        """Advance one frame, spawning sand at ``mouse_pos`` while ``held``."""
        self.update_pixels()
        spawned = self.spawn_sand(mouse_pos) if held else None
        self.check_fixed_pixels()
        return spawned