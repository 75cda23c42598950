# src/cavegen/mapgen/placement.py
# Spawn selection: random interior sampling, validated by flood-fill size.

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..config import SpawnQuery
from ..grid import Grid, XY
from ..tiles import FLOOR
from .reachability import ReachabilityAnalyzer

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnPoint:
    x: int
    y: int
    reachable: int
    attempts: int
    ok = True

    def as_tuple(self) -> XY:
        return (self.x, self.y)

    def world_position(
        self, cell_size: float, origin: Tuple[float, float] = (0.0, 0.0)
    ) -> Tuple[float, float]:
        # Centre of the cell, for placement layers that work in world units.
        ox, oy = origin
        return (ox + (self.x + 0.5) * cell_size, oy + (self.y + 0.5) * cell_size)


@dataclass(frozen=True)
class SelectionFailure:
    attempts: int
    min_reachable_tiles: int
    reason: str = "no candidate reached the threshold"
    ok = False


SpawnResult = Union[SpawnPoint, SelectionFailure]


def interior_floor_cells(grid: Grid) -> List[XY]:
    size = grid.size
    return [
        (x, y)
        for y in range(1, size - 1)
        for x in range(1, size - 1)
        if grid.buf[y * size + x] == FLOOR
    ]


class SpawnSelector:
    """
    First-fit search for a floor cell whose reachable area holds at least
    query.min_reachable_tiles floor cells, giving up after query.max_attempts.

    The rng is passed to every select() call and only needs randint(a, b);
    it is a different stream from the one that generated the cave.
    """

    def __init__(self, analyzer: Optional[ReachabilityAnalyzer] = None):
        self.analyzer = analyzer if analyzer is not None else ReachabilityAnalyzer()

    def select(self, grid: Grid, query: SpawnQuery, rng) -> SpawnResult:
        if query.wall_costs_attempt:
            result = self._select_rejection(grid, query, rng)
        else:
            result = self._select_from_floor(grid, query, rng)

        if result.ok:
            log.info(
                "spawn at (%d,%d), reachable tiles = %d, attempts = %d",
                result.x, result.y, result.reachable, result.attempts,
            )
        else:
            log.warning(
                "could not find a start position: %s (min_reachable=%d, attempts=%d)",
                result.reason, result.min_reachable_tiles, result.attempts,
            )
        return result

    def _accept(self, grid: Grid, x: int, y: int, query: SpawnQuery) -> int:
        reachable = self.analyzer.count(grid, (x, y))
        return reachable if reachable >= query.min_reachable_tiles else 0

    def _select_rejection(self, grid: Grid, query: SpawnQuery, rng) -> SpawnResult:
        # Sample anywhere in the interior; a wall hit still uses up the attempt.
        hi = grid.size - 2
        if hi < 1:
            return SelectionFailure(0, query.min_reachable_tiles, reason="no interior cells")
        for attempt in range(1, query.max_attempts + 1):
            x = rng.randint(1, hi)
            y = rng.randint(1, hi)
            if grid.get(x, y) != FLOOR:
                continue
            reachable = self._accept(grid, x, y, query)
            if reachable:
                return SpawnPoint(x, y, reachable, attempt)
        return SelectionFailure(query.max_attempts, query.min_reachable_tiles)

    def _select_from_floor(self, grid: Grid, query: SpawnQuery, rng) -> SpawnResult:
        # Sample among interior floor cells only, so no attempt is wasted on walls.
        floors = interior_floor_cells(grid)
        if not floors:
            return SelectionFailure(0, query.min_reachable_tiles, reason="no floor cells")
        for attempt in range(1, query.max_attempts + 1):
            x, y = floors[rng.randint(0, len(floors) - 1)]
            reachable = self._accept(grid, x, y, query)
            if reachable:
                return SpawnPoint(x, y, reachable, attempt)
        return SelectionFailure(query.max_attempts, query.min_reachable_tiles)
