# src/cavegen/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from ..grid import Grid
from .image import REGION_COLOR, SPAWN_COLOR, color_for

class Tileset:
    """
    Cached solid-colour tiles for the viewer:
      - one Surface per cell state, exactly (tile_size, tile_size)
      - an extra tint for floor that is reachable from the spawn
    No display is needed to build them.
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=16)
    def get(self, state: int) -> pygame.Surface:
        return self._solid(color_for(state))

    @lru_cache(maxsize=1)
    def region(self) -> pygame.Surface:
        return self._solid(REGION_COLOR)

    def _solid(self, rgba: Tuple[int, int, int, int]) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(rgba)
        return img

def draw_grid(
    surface: pygame.Surface,
    grid: Grid,
    tiles: Tileset,
    region: Optional[Iterable[Tuple[int, int]]] = None,
    spawn: Optional[Tuple[int, int]] = None,
) -> None:
    t = tiles.tile_size
    for x, y, state in grid.cells():
        surface.blit(tiles.get(state), (x * t, y * t))
    for x, y in region or ():
        surface.blit(tiles.region(), (x * t, y * t))
    if spawn is not None:
        sx, sy = spawn
        pygame.draw.circle(surface, SPAWN_COLOR, (sx * t + t // 2, sy * t + t // 2), max(1, t // 2))
