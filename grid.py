"""
Геометрия поля N x N. Состояния нет.
"""
import numpy as np

from config import CELL_COUNT, CELL_SIZE, OFFSET


def in_bounds(cell, size=CELL_COUNT):
    """Клетка внутри поля?"""
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def random_cell(rng=None, size=CELL_COUNT):
    """Случайная клетка поля (равномерно)"""
    if rng is None:
        rng = np.random.default_rng()
    x, y = rng.integers(0, size, 2)
    return int(x), int(y)


def cell_count(size=CELL_COUNT):
    return size * size


def cell_to_pixel(cell, offset=OFFSET, cell_size=CELL_SIZE):
    """Левый верхний угол клетки в пикселях окна"""
    x, y = cell
    return offset + x * cell_size, offset + y * cell_size
