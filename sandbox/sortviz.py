"""Selection sort shown as a row of white bars."""

from __future__ import annotations

import argparse
import random
from typing import Iterator, Optional, Sequence

import pygame

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
NUM_VALUES = 800
FRAME_RATE = 60
SWAP_DELAY_MS = 10
BAR_COLOR = (255, 255, 255)
BACKGROUND = (0, 0, 0)
TITLE = "Selection Sort Visualization"


def random_data(count: int, height: int, rng=None) -> list[int]:
    """``count`` random values in ``range(height)``."""
    rng = rng if rng is not None else random
    return [rng.randrange(height) for _ in range(count)]


def selection_sort_swaps(data: list[int]) -> Iterator[tuple[int, int]]:
    """Sort ``data`` in place, largest values to the end.

    Yields ``(max_index, i)`` after each swap, so callers can redraw.
    """
    for i in range(len(data) - 1, 0, -1):
        max_index = max(range(i + 1), key=data.__getitem__)
        if max_index != i:
            data[max_index], data[i] = data[i], data[max_index]
            yield (max_index, i)


def bar_rects(data: Sequence[int], width: float, height: float) -> list[tuple[float, float, float, float]]:
    """Rectangles ``(x, y, w, h)`` standing on the bottom edge, one per value."""
    if not data:
        return []
    bar_width = float(width) / len(data)
    return [
        (i * bar_width, float(height) - value, bar_width, float(value))
        for i, value in enumerate(data)
    ]


def draw_bars(surface: pygame.Surface, data: Sequence[int]) -> None:
    """Draw ``data`` as white bars across the whole surface."""
    width, height = surface.get_size()
    for x, y, w, h in bar_rects(data, width, height):
        left = round(x)
        rect = pygame.Rect(left, round(y), max(1, round(x + w) - left), round(h))
        pygame.draw.rect(surface, BAR_COLOR, rect)


def _closed() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def _show(screen: pygame.Surface, data: Sequence[int]) -> None:
    screen.fill(BACKGROUND)
    draw_bars(screen, data)
    pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sortviz", description=TITLE)
    parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        data = random_data(NUM_VALUES, WINDOW_HEIGHT)

        for _ in selection_sort_swaps(data):
            if _closed():
                return 0
            _show(screen, data)
            pygame.time.wait(SWAP_DELAY_MS)

        while not _closed():
            _show(screen, data)
            clock.tick(FRAME_RATE)
        return 0
    finally:
        pygame.quit()