"""
Еда: одна клетка, никогда не на змейке.
"""
import logging

import numpy as np

from config import CELL_COUNT
from grid import in_bounds, random_cell, cell_count

logger = logging.getLogger(__name__)


class GridFullError(ValueError):
    """Свободных клеток нет - еду поставить некуда"""


class Food:
    def __init__(self, occupied=(), size=CELL_COUNT, rng=None):
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = None
        self.respawn(occupied)

    def respawn(self, occupied):
        """
        Случайная клетка, не занятая occupied.

        Перебираем случайные клетки, пока не попадём в свободную.
        Если поле занято целиком - GridFullError (иначе цикл бесконечный).
        """
        occupied = set(occupied)
        taken = sum(1 for cell in occupied if in_bounds(cell, self.size))
        if taken >= cell_count(self.size):
            raise GridFullError(f"No free cell on {self.size}x{self.size} grid")

        position = random_cell(self.rng, self.size)
        while position in occupied:
            position = random_cell(self.rng, self.size)

        self.position = position
        logger.debug("Food at %s", position)
        return position
