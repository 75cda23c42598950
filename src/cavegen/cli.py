# src/cavegen/cli.py
# `cavegen emit|spawn|render`: generate caves from the command line.

import argparse
import random
from typing import List, Optional

from .config import (
    ConfigError, GenerationConfig, SpawnQuery,
    DEFAULT_FILL_PROBABILITY, DEFAULT_SIZE, DEFAULT_SMOOTHING_STEPS, DEFAULT_SEED,
    DEFAULT_MIN_REACHABLE_TILES, DEFAULT_MAX_ATTEMPTS,
)
from .mapgen.cave import CaveGenerator
from .mapgen.generator import generate_level
from .mapgen.reachability import reachable_region
from .render.image import render_grid, save_png
from .setup_logging import setup_logging
from .tsv import write_tsv

EXIT_NO_SPAWN = 1

def _config(args) -> GenerationConfig:
    return GenerationConfig(
        fill_probability=args.fill, size=args.size,
        smoothing_steps=args.steps, seed=args.seed,
    )

def _query(args) -> SpawnQuery:
    return SpawnQuery(
        min_reachable_tiles=args.min_reachable,
        max_attempts=args.max_attempts,
        wall_costs_attempt=not args.free_misses,
    )

def _spawn_rng(args) -> random.Random:
    # Unseeded unless asked: spawn choice is its own random process.
    return random.Random(args.spawn_seed) if args.spawn_seed is not None else random.Random()

def cmd_emit(args) -> int:
    grid = CaveGenerator(_config(args)).run()
    write_tsv(grid, args.out, include_header=args.header)
    print(f"Wrote {args.out}")
    return 0

def cmd_spawn(args) -> int:
    level = generate_level(_config(args), _query(args), spawn_rng=_spawn_rng(args))
    if not level.spawn.ok:
        print(f"no spawn: {level.spawn.reason} after {level.spawn.attempts} attempts")
        return EXIT_NO_SPAWN
    print(f"{level.spawn.x}\t{level.spawn.y}\t{level.spawn.reachable}")
    return 0

def cmd_render(args) -> int:
    level = generate_level(_config(args), _query(args), spawn_rng=_spawn_rng(args))
    spawn = region = None
    if level.spawn.ok:
        spawn = level.spawn.as_tuple()
        region = reachable_region(level.grid, spawn)
    save_png(render_grid(level.grid, tile_size=args.tile, region=region, spawn=spawn), args.out)
    print(f"Wrote {args.out}")
    return 0 if level.spawn.ok else EXIT_NO_SPAWN

def _add_generation_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('--size', type=int, default=DEFAULT_SIZE, help="Grid side length")
    p.add_argument('--fill', type=float, default=DEFAULT_FILL_PROBABILITY,
                   help="Probability an interior cell starts as wall")
    p.add_argument('--steps', type=int, default=DEFAULT_SMOOTHING_STEPS, help="Smoothing steps")
    p.add_argument('--seed', type=int, default=DEFAULT_SEED, help="Generation seed")

def _add_spawn_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('--min-reachable', type=int, default=DEFAULT_MIN_REACHABLE_TILES)
    p.add_argument('--max-attempts', type=int, default=DEFAULT_MAX_ATTEMPTS)
    p.add_argument('--spawn-seed', type=int, default=None, help="Seed for spawn sampling")
    p.add_argument('--free-misses', action='store_true',
                   help="Sample floor cells only; wall hits don't use attempts")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cavegen")
    p.add_argument('--log-level', default="WARNING", help="DEBUG, INFO, WARNING, ERROR")
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('emit', help="Write a generated grid as TSV")
    _add_generation_args(p1)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('spawn', help="Generate and print a validated start cell")
    _add_generation_args(p2)
    _add_spawn_args(p2)
    p2.set_defaults(func=cmd_spawn)

    p3 = sub.add_parser('render', help="Generate and write a PNG")
    _add_generation_args(p3)
    _add_spawn_args(p3)
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--tile', type=int, default=4, help="Tile size in pixels")
    p3.set_defaults(func=cmd_render)
    return p

def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if getattr(args, "tile", 1) <= 0:
        p.error("--tile must be positive")
    setup_logging(args.log_level)
    try:
        return args.func(args)
    except ConfigError as e:
        p.error(str(e))

if __name__ == '__main__':
    raise SystemExit(main())
