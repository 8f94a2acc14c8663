"""Particles of the falling-sand world and their colours."""

from __future__ import annotations

import enum
import random
from dataclasses import InitVar, dataclass
from typing import Callable, Optional, Protocol

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class PixelStatus(enum.IntFlag):
    """Bit flags describing the state of a pixel."""

    NOSTATUS = 0
    ACTIVE = 1 << 0
    FIXED = 1 << 1


class PixelType(enum.IntEnum):
    """Material a pixel is made of."""

    NOTYPE = 0
    SAND = 1
    WATER = 2
    MURKYWATER = 3


def _source(rng: Optional[_RandomSource]) -> _RandomSource:
    return rng if rng is not None else random


def sand_color(rng: Optional[_RandomSource] = None) -> Color:
    """Return a random sandy colour, fully opaque."""
    rng = _source(rng)
    r = 190 + rng.randrange(31)
    g = 140 + rng.randrange(26)
    b = 90 + rng.randrange(21)
    return (r, g, b, 255)


def water_color(rng: Optional[_RandomSource] = None) -> Color:
    """Return a random deep-blue water colour, slightly transparent."""
    rng = _source(rng)
    r = 10 + rng.randrange(21)
    g = 60 + rng.randrange(31)
    b = 180 + rng.randrange(51)
    return (r, g, b, 200)


def murky_water_color(rng: Optional[_RandomSource] = None) -> Color:
    """Return a random murky water colour."""
    rng = _source(rng)
    r = 15 + rng.randrange(16)
    g = 40 + rng.randrange(31)
    b = 100 + rng.randrange(51)
    return (r, g, b, 220)


_COLOR_MAKERS: dict[PixelType, Callable[[Optional[_RandomSource]], Color]] = {
    PixelType.SAND: sand_color,
    PixelType.WATER: water_color,
    PixelType.MURKYWATER: murky_water_color,
}


@dataclass
class Pixel:
    """A single particle: its material, position, colour and flags."""

    type: PixelType
    pos: tuple[int, int]
    rng: InitVar[Optional[_RandomSource]] = None
    color: Optional[Color] = None
    flags: PixelStatus = PixelStatus.NOSTATUS

    def __post_init__(self, rng: Optional[_RandomSource]) -> None:
        self.type = PixelType(self.type)
        self.pos = (int(self.pos[0]), int(self.pos[1]))
        self.flags = PixelStatus(self.flags) | PixelStatus.ACTIVE
        if self.color is None:
            maker = _COLOR_MAKERS.get(self.type)
            self.color = maker(rng) if maker is not None else BLACK

    def set_state(self, flag: PixelStatus) -> None:
        """Add ``flag`` to the pixel's flags."""
        self.flags |= flag

    @property
    def fixed(self) -> bool:
        """Whether the pixel has come to rest."""
        return bool(self.flags & PixelStatus.FIXED)