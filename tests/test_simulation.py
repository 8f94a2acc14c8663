import random

import pytest

from sandbox.pixel import BLACK, PixelType
from sandbox.simulation import SandWorld


class MiddleRng:
    """Always picks the middle of the range: spawn offsets become zero."""

    def randrange(self, stop):
        return stop // 2


def occupied(world):
    return [
        (x, y)
        for y in range(world.height)
        for x in range(world.width)
        if world.color_at(x, y) != BLACK
    ]


def test_new_world_is_black():
    world = SandWorld(8, 6)
    assert occupied(world) == []
    assert world.size == (8, 6)


def test_color_at_outside_raises():
    world = SandWorld(8, 6)
    with pytest.raises(IndexError):
        world.color_at(8, 0)
    with pytest.raises(IndexError):
        world.color_at(0, -1)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        SandWorld(0, 5)


def test_spawn_places_sand_at_position():
    world = SandWorld(10, 10, rng=MiddleRng())
    pixel = world.spawn_sand((5, 5))
    assert pixel.pos == (5, 5)
    assert pixel.type is PixelType.SAND
    assert world.color_at(5, 5) == pixel.color
    assert world.active == [pixel]
    assert world.pixels == [pixel]


def test_spawn_on_taken_cell_is_skipped():
    world = SandWorld(10, 10, rng=MiddleRng())
    world.spawn_sand((5, 5))
    assert world.spawn_sand((5, 5)) is None
    assert len(world.active) == 1


def test_spawn_outside_is_skipped():
    world = SandWorld(10, 10, rng=MiddleRng())
    assert world.spawn_sand((-100, -100)) is None
    assert world.pixels == []


def test_pixel_falls_one_row():
    world = SandWorld(10, 10, rng=MiddleRng())
    pixel = world.spawn_sand((5, 5))
    world.update_pixels()
    assert pixel.pos == (5, 6)
    assert world.color_at(5, 6) == pixel.color
    assert world.color_at(5, 5) == BLACK


def test_pixel_reaches_bottom_and_stays_active():
    world = SandWorld(10, 10, rng=MiddleRng())
    pixel = world.spawn_sand((5, 2))
    for _ in range(20):
        world.update_pixels()
        world.check_fixed_pixels()
    assert pixel.pos == (5, world.height - 1)
    assert pixel in world.active


def test_pixel_slides_diagonally():
    world = SandWorld(10, 10, rng=MiddleRng())
    world.spawn_sand((5, 9))
    top = world.spawn_sand((5, 8))
    world.update_pixels()
    assert top.pos[1] == 9
    assert top.pos[0] in (4, 6)
    assert world.color_at(5, 8) == BLACK


def test_blocked_pixel_becomes_fixed_and_is_removed():
    world = SandWorld(10, 10, rng=MiddleRng())
    for x in (4, 5, 6):
        world.spawn_sand((x, 9))
    top = world.spawn_sand((5, 8))
    world.update_pixels()
    assert top.fixed
    world.check_fixed_pixels()
    assert top not in world.active
    assert sorted(p.pos for p in world.active) == [(4, 9), (5, 9), (6, 9)]
    assert len(world.pixels) == 4


def test_step_spawns_only_when_held():
    world = SandWorld(10, 10, rng=MiddleRng())
    assert world.step((5, 5), False) is None
    assert world.pixels == []
    spawned = world.step((5, 5), True)
    assert world.pixels == [spawned]


def test_cells_match_particles_after_many_steps():
    world = SandWorld(20, 20, rng=random.Random(7))
    for _ in range(300):
        world.step((10, 5), True)
    cells = dict(world.cells())
    assert len(cells) == len(world.pixels)
    for pixel in world.pixels:
        assert cells[pixel.pos] == pixel.color
    assert all(not p.fixed for p in world.active)