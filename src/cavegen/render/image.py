# src/cavegen/render/image.py
# Render a grid to a Pillow image: walls dark, floor light, optional highlights.

import os
from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import Grid, XY
from ..tiles import is_wall

RGBA = Tuple[int, int, int, int]

WALL_COLOR: RGBA = (80, 80, 80, 255)
FLOOR_COLOR: RGBA = (220, 220, 220, 255)
REGION_COLOR: RGBA = (160, 255, 160, 255)   # floor reachable from the spawn
SPAWN_COLOR: RGBA = (255, 220, 0, 255)

def color_for(state: int) -> RGBA:
    return WALL_COLOR if is_wall(state) else FLOOR_COLOR

def render_grid(
    grid: Grid,
    tile_size: int = 4,
    region: Optional[Iterable[XY]] = None,
    spawn: Optional[XY] = None,
    margin: int = 0,
) -> Image.Image:
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    side = grid.size * tile_size + 2 * margin
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)

    def box(x: int, y: int):
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        # inclusive corner, so subtract one pixel
        return (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)

    for x, y, state in grid.cells():
        draw.rectangle(box(x, y), fill=color_for(state))
    for x, y in region or ():
        draw.rectangle(box(x, y), fill=REGION_COLOR)
    if spawn is not None:
        draw.ellipse(box(*spawn), fill=SPAWN_COLOR)
    return canvas

def save_png(img: Image.Image, out_png: str) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
