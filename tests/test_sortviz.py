import random

import pygame
import pytest

from sandbox.sortviz import bar_rects, draw_bars, random_data, selection_sort_swaps


def test_random_data_length_and_range():
    data = random_data(500, 600, random.Random(3))
    assert len(data) == 500
    assert all(0 <= value < 600 for value in data)


def test_random_data_varies():
    data = random_data(200, 10, random.Random(9))
    assert len(set(data)) > 1


def test_random_data_empty():
    assert random_data(0, 10, random.Random(9)) == []


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_selection_sort_sorts(seed):
    data = random_data(100, 50, random.Random(seed))
    expected = sorted(data)
    list(selection_sort_swaps(data))
    assert data == expected


def test_sorted_input_yields_no_swaps():
    data = [1, 2, 3, 4]
    assert list(selection_sort_swaps(data)) == []
    assert data == [1, 2, 3, 4]


def test_swaps_place_largest_first():
    data = [3, 1, 2]
    swaps = list(selection_sort_swaps(data))
    assert swaps == [(0, 2), (0, 1)]
    assert data == [1, 2, 3]


def test_each_swap_fixes_the_tail():
    data = random_data(40, 30, random.Random(5))
    original = sorted(data)
    for _, i in selection_sort_swaps(data):
        assert data[i] == max(data[: i + 1])
        assert sorted(data) == original


def test_bar_rects_stand_on_bottom():
    data = [10, 0, 35, 50]
    rects = bar_rects(data, 100, 50)
    assert [h for _, _, _, h in rects] == data
    assert all(y + h == 50 for _, y, _, h in rects)
    assert sum(w for _, _, w, _ in rects) == pytest.approx(100)
    assert [x for x, _, _, _ in rects] == sorted(x for x, _, _, _ in rects)


def test_bar_rects_empty():
    assert bar_rects([], 100, 50) == []


def test_draw_bars_paints_columns():
    surface = pygame.Surface((4, 10))
    surface.fill((0, 0, 0))
    draw_bars(surface, [10, 0, 5, 10])
    white = (255, 255, 255, 255)
    black = (0, 0, 0, 255)
    assert all(tuple(surface.get_at((0, y))) == white for y in range(10))
    assert all(tuple(surface.get_at((1, y))) == black for y in range(10))
    assert tuple(surface.get_at((2, 4))) == black
    assert tuple(surface.get_at((2, 5))) == white