import pytest

from cavegen.grid import Grid
from cavegen.tiles import WALL, FLOOR

def make_grid(size, floors=()):
    """All-wall grid with the given (x,y) cells opened to floor."""
    g = Grid.filled(size, WALL)
    for x, y in floors:
        g.set(x, y, FLOOR)
    return g

@pytest.fixture
def open_room():
    # 10x10, wall rim, 8x8 floor interior
    return make_grid(10, [(x, y) for y in range(1, 9) for x in range(1, 9)])

@pytest.fixture
def two_pockets():
    # Two disconnected 5-cell horizontal pockets in a 12x12 wall grid
    a = [(x, 2) for x in range(2, 7)]
    b = [(x, 7) for x in range(4, 9)]
    return make_grid(12, a + b)
