#!/usr/bin/env python3
# Interactive cave viewer (no gameplay).
# - Shows the random fill, then each smoothing step with a pause in between
# - After the last step, picks a spawn and tints the cave reachable from it
# - R: regenerate with the next seed   S: pick a new spawn   Esc: quit
# - 60 Hz fixed loop; pacing never touches either random stream

import argparse
import random

import pygame

from cavegen.config import (
    GenerationConfig, SpawnQuery,
    DEFAULT_FILL_PROBABILITY, DEFAULT_SIZE, DEFAULT_SMOOTHING_STEPS, DEFAULT_SEED,
    DEFAULT_MIN_REACHABLE_TILES, DEFAULT_MAX_ATTEMPTS,
)
from cavegen.mapgen.cave import CaveGenerator
from cavegen.mapgen.placement import SpawnSelector
from cavegen.mapgen.reachability import reachable_region
from cavegen.render.tileset import Tileset, draw_grid
from cavegen.setup_logging import setup_logging


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Grid side length")
    ap.add_argument("--fill", type=float, default=DEFAULT_FILL_PROBABILITY, help="Initial wall probability")
    ap.add_argument("--steps", type=int, default=DEFAULT_SMOOTHING_STEPS, help="Smoothing steps")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Generation seed")
    ap.add_argument("--pause", type=float, default=0.1, help="Seconds between smoothing steps")
    ap.add_argument("--min-reachable", type=int, default=DEFAULT_MIN_REACHABLE_TILES)
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    ap.add_argument("--spawn-seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=6, help="Tile size in pixels")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args()
    setup_logging(args.log_level)

    query = SpawnQuery(min_reachable_tiles=args.min_reachable, max_attempts=args.max_attempts)
    spawn_rng = random.Random(args.spawn_seed)
    selector = SpawnSelector()

    pygame.init()
    clock = pygame.time.Clock()
    side = args.size * args.tile
    screen = pygame.display.set_mode((side, side))
    tiles = Tileset(args.tile)

    seed = args.seed

    def pick_spawn(grid):
        result = selector.select(grid, query, spawn_rng)
        if not result.ok:
            return None, None
        return result.as_tuple(), reachable_region(grid, result.as_tuple())

    def new_generator(seed):
        gen = CaveGenerator(GenerationConfig(args.fill, args.size, args.steps, seed))
        gen.initialize()
        # with --steps 0 the fill is already the final grid
        spawn, region = pick_spawn(gen.current_grid()) if gen.finished else (None, None)
        return gen, spawn, region

    gen, spawn, region = new_generator(seed)
    pause_ms = int(args.pause * 1000)
    since_step = 0

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    seed += 1
                    gen, spawn, region = new_generator(seed)
                    since_step = 0
                elif ev.key == pygame.K_s and gen.finished:
                    spawn, region = pick_spawn(gen.current_grid())

        since_step += clock.get_time()
        if not gen.finished and since_step >= pause_ms:
            since_step = 0
            gen.smooth_step()
            if gen.finished:
                spawn, region = pick_spawn(gen.current_grid())

        screen.fill((0, 0, 0))
        draw_grid(screen, gen.current_grid(), tiles, region=region, spawn=spawn)
        state = f"step {gen.steps_done}/{args.steps}"
        if gen.finished:
            state = f"spawn {spawn}" if spawn else "no spawn"
        pygame.display.set_caption(f"Cave Viewer: seed {seed}  {state}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
