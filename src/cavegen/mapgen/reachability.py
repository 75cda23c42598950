# src/cavegen/mapgen/reachability.py
# Flood fill over floor cells, 4-connected.

from collections import deque
from typing import Set

from ..grid import Grid, OutOfBoundsError, XY
from ..tiles import FLOOR

DIRS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


def reachable_region(grid: Grid, start: XY) -> Set[XY]:
    """
    BFS from `start`; returns every floor cell reachable through up/down/left/right
    steps, the start included. A wall start gives an empty set.
    """
    sx, sy = start
    if not grid.in_bounds(sx, sy):
        raise OutOfBoundsError(sx, sy, grid.size)
    if grid.get(sx, sy) != FLOOR:
        return set()

    size, buf = grid.size, grid.buf
    visited = {(sx, sy)}
    queue = deque([(sx, sy)])
    while queue:
        cx, cy = queue.popleft()
        for dx, dy in DIRS_4:
            nx, ny = cx + dx, cy + dy
            if nx < 0 or ny < 0 or nx >= size or ny >= size:
                continue
            if (nx, ny) in visited:
                continue
            if buf[ny * size + nx] != FLOOR:
                continue
            visited.add((nx, ny))
            queue.append((nx, ny))
    return visited


def count_reachable(grid: Grid, start: XY) -> int:
    return len(reachable_region(grid, start))


class ReachabilityAnalyzer:
    """Stateless; a class so the selector can take a substitute in tests."""

    @staticmethod
    def count(grid: Grid, start: XY) -> int:
        return count_reachable(grid, start)

    @staticmethod
    def region(grid: Grid, start: XY) -> Set[XY]:
        return reachable_region(grid, start)
