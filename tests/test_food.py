"""
Тесты еды: еда никогда не появляется на змейке.
"""
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from food import Food, GridFullError
from grid import in_bounds


class TestFood:
    def test_initial_position_avoids_occupied(self):
        body = [(6, 9), (5, 9), (4, 9)]
        food = Food(body, rng=np.random.default_rng(0))
        assert food.position not in body
        assert in_bounds(food.position)

    def test_respawn_never_on_occupied(self):
        rng = np.random.default_rng(3)
        occupied = [(x, y) for x in range(4) for y in range(4) if (x, y) != (2, 1)]
        food = Food(size=4, rng=rng)
        for _ in range(20):
            assert food.respawn(occupied) == (2, 1)
            assert food.position == (2, 1)

    def test_respawn_many_times(self):
        rng = np.random.default_rng(11)
        body = [(x, 0) for x in range(10)]
        food = Food(body, size=10, rng=rng)
        for _ in range(200):
            food.respawn(body)
            assert food.position not in body

    def test_full_grid_raises(self):
        occupied = [(x, y) for x in range(3) for y in range(3)]
        food = Food(size=3, rng=np.random.default_rng(0))
        with pytest.raises(GridFullError):
            food.respawn(occupied)

    def test_full_grid_error_is_value_error(self):
        assert issubclass(GridFullError, ValueError)

    def test_out_of_bounds_cells_do_not_count(self):
        """Голова за стеной не занимает клетку поля."""
        occupied = [(x, y) for x in range(2) for y in range(2) if (x, y) != (1, 1)]
        occupied.append((-1, 0))
        food = Food(size=2, rng=np.random.default_rng(0))
        assert food.respawn(occupied) == (1, 1)
