# src/cavegen/mapgen/cave.py
# Cellular-automaton cave generator: random fill, then repeated smoothing.
# Border cells are always wall, so caves never open onto the grid edge.

import logging
from typing import Iterator, Optional

from ..config import GenerationConfig
from ..grid import Grid
from ..rng import PMRandom
from ..tiles import FLOOR, WALL

log = logging.getLogger(__name__)

# 8-neighbourhood, excluding the cell itself
NEIGHBORS_8 = (
    (-1, -1), (0, -1), (1, -1),
    (-1,  0),          (1,  0),
    (-1,  1), (0,  1), (1,  1),
)

# > 4 walls around -> wall, < 4 -> floor, exactly 4 -> unchanged
WALL_THRESHOLD = 4


def count_wall_neighbors(grid: Grid, x: int, y: int) -> int:
    """Walls among the 8 neighbours of (x,y); off-grid neighbours count as wall."""
    size, buf = grid.size, grid.buf
    n = 0
    for dx, dy in NEIGHBORS_8:
        nx, ny = x + dx, y + dy
        if nx < 0 or ny < 0 or nx >= size or ny >= size:
            n += 1
        elif buf[ny * size + nx] == WALL:
            n += 1
    return n


def smooth(grid: Grid) -> Grid:
    """
    One simultaneous smoothing pass. Every count is taken from `grid` as it was
    before the pass; the result is a new Grid. Border cells stay wall.
    """
    size = grid.size
    out = grid.copy()
    for y in range(1, size - 1):
        for x in range(1, size - 1):
            walls = count_wall_neighbors(grid, x, y)
            if walls > WALL_THRESHOLD:
                out.buf[y * size + x] = WALL
            elif walls < WALL_THRESHOLD:
                out.buf[y * size + x] = FLOOR
    return out


def random_fill(grid: Grid, rng, fill_probability: float) -> None:
    """
    Phase 1. Border forced to wall (no draws); each interior cell, row by row,
    takes one rng.random() draw and becomes wall when the draw < fill_probability.
    """
    size = grid.size
    for y in range(size):
        for x in range(size):
            if grid.is_border(x, y):
                grid.buf[y * size + x] = WALL
            else:
                grid.buf[y * size + x] = WALL if rng.random() < fill_probability else FLOOR


class CaveGenerator:
    """
    Step-wise generator so a caller can look at every intermediate state:

        gen = CaveGenerator(config)
        gen.initialize()
        while not gen.finished:
            gen.smooth_step()
            draw(gen.current_grid())

    `run()` does all of that in one call. The rng defaults to a PMRandom seeded
    from config.seed; pass one in to share or control the stream.
    """

    def __init__(self, config: GenerationConfig, rng: Optional[PMRandom] = None):
        self.config = config
        self.rng = rng if rng is not None else PMRandom.from_seed(config.seed)
        self._grid: Optional[Grid] = None
        self._steps_done = 0

    @property
    def initialized(self) -> bool:
        return self._grid is not None

    @property
    def steps_done(self) -> int:
        return self._steps_done

    @property
    def steps_remaining(self) -> int:
        return self.config.smoothing_steps - self._steps_done

    @property
    def finished(self) -> bool:
        return self.initialized and self.steps_remaining == 0

    def initialize(self) -> Grid:
        grid = Grid.filled(self.config.size, WALL)
        random_fill(grid, self.rng, self.config.fill_probability)
        self._grid = grid
        self._steps_done = 0
        log.debug(
            "random fill: size=%d p=%.3f floor=%d",
            self.config.size, self.config.fill_probability, grid.floor_count(),
        )
        return grid

    def smooth_step(self) -> Grid:
        if self._grid is None:
            raise RuntimeError("smooth_step() called before initialize()")
        if self.steps_remaining <= 0:
            raise RuntimeError(
                f"all {self.config.smoothing_steps} smoothing steps already applied"
            )
        self._grid = smooth(self._grid)
        self._steps_done += 1
        log.debug("smoothing step %d/%d", self._steps_done, self.config.smoothing_steps)
        return self._grid

    def current_grid(self) -> Grid:
        if self._grid is None:
            raise RuntimeError("no grid yet; call initialize() first")
        return self._grid

    def iter_steps(self) -> Iterator[Grid]:
        """Fill, then yield the grid after the fill and after each smoothing step."""
        yield self.initialize()
        while self.steps_remaining > 0:
            yield self.smooth_step()
        self._log_done()

    def run(self) -> Grid:
        if self._grid is None:
            self.initialize()
        while self.steps_remaining > 0:
            self.smooth_step()
        self._log_done()
        return self._grid

    def _log_done(self) -> None:
        log.info(
            "cave generated: seed=%d size=%d steps=%d floor=%d",
            self.config.seed, self.config.size, self._steps_done, self._grid.floor_count(),
        )
