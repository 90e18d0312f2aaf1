"""
Unit tests for the pure color functions used by the renderer.
"""

import random

import numpy as np
import pytest

from gridsnake.config import BG, HEAD
from gridsnake.core import Direction, InitArgs, advance_tick, init
from gridsnake.render import cell_color, food_color, grid_colors, lerp, pct_to_byte


@pytest.fixture
def game():
    args = InitArgs(grid_size=(8, 6), direction=Direction.RIGHT, position=(1, 1), snake_length=4)
    g = init(args, rng=random.Random(3))
    g.food = (7, 5)
    return g


class TestCellColor:

    def test_empty(self):
        assert cell_color(0, 4) is None

    def test_head(self):
        assert cell_color(4, 4) == HEAD

    def test_tail_gradient(self):
        assert cell_color(2, 4) == (175, 202, 120)
        assert cell_color(1, 4) == (162, 176, 130)

    def test_newer_segments_brighter(self):
        colors = [cell_color(v, 10) for v in range(1, 10)]
        greens = [c[1] for c in colors]
        assert greens == sorted(greens)

    def test_lerp(self):
        assert lerp(0.0, 150, 200) == 150
        assert lerp(0.5, 150, 200) == 175
        assert lerp(0.5, 140, 100) == 120


class TestFoodColor:

    def test_cycles(self):
        assert food_color(0) == (255, 0, 0)
        assert food_color(50) == (255, 63, 127)
        assert food_color(200) == food_color(0)

    def test_pct_to_byte_bounds(self):
        assert pct_to_byte(0.0) == 0
        assert pct_to_byte(0.999) == 255


class TestGridColors:

    def test_background_and_food(self, game):
        colors = grid_colors(game, 0)
        assert colors.shape == (8, 6, 3)
        assert colors.dtype == np.uint8
        assert tuple(colors[0, 0]) == BG
        assert tuple(colors[7, 5]) == (255, 0, 0)

    def test_snake_cells(self, game):
        for _ in range(3):
            advance_tick(game)
        colors = grid_colors(game, 0)
        assert tuple(colors[4, 1]) == HEAD
        assert tuple(colors[3, 1]) == cell_color(3, 4)
        assert tuple(colors[2, 1]) == cell_color(2, 4)

    def test_reads_only(self, game):
        advance_tick(game)
        before = game.grid.copy()
        grid_colors(game, 123)
        assert np.array_equal(game.grid, before)

    def test_no_food(self, game):
        game.food = None
        colors = grid_colors(game, 0)
        assert tuple(colors[7, 5]) == BG
