# src/cavegen/mapgen/generator.py
# Full level pipeline: cave generation, then spawn selection on the final grid.

import random
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import GenerationConfig, SpawnQuery
from ..grid import Grid
from .cave import CaveGenerator
from .placement import SpawnResult, SpawnSelector

StepCallback = Callable[[int, Grid], None]

@dataclass
class Level:
    config: GenerationConfig
    grid: Grid
    spawn: SpawnResult

def generate_level(
    config: GenerationConfig,
    query: Optional[SpawnQuery] = None,
    spawn_rng=None,
    on_step: Optional[StepCallback] = None,
) -> Level:
    """
    on_step(i, grid) is called after the random fill (i=0) and after each
    smoothing step (i=1..smoothing_steps). spawn_rng defaults to an unseeded
    random.Random, so the spawn may differ between runs unless one is passed.
    """
    query = query if query is not None else SpawnQuery()
    spawn_rng = spawn_rng if spawn_rng is not None else random.Random()

    gen = CaveGenerator(config)
    grid = None
    for i, grid in enumerate(gen.iter_steps()):
        if on_step is not None:
            on_step(i, grid)

    spawn = SpawnSelector().select(grid, query, spawn_rng)
    return Level(config=config, grid=grid, spawn=spawn)
