# tests/test_generator.py
import random

from cavegen.config import GenerationConfig, SpawnQuery
from cavegen.mapgen.cave import CaveGenerator
from cavegen.mapgen.generator import generate_level
from cavegen.mapgen.reachability import count_reachable

def test_level_grid_matches_generator():
    cfg = GenerationConfig(fill_probability=0.45, size=40, smoothing_steps=6, seed=100)
    level = generate_level(cfg, SpawnQuery(min_reachable_tiles=30, max_attempts=200), random.Random(0))
    assert level.grid == CaveGenerator(cfg).run()
    assert level.config is cfg

def test_on_step_sees_fill_and_every_step():
    cfg = GenerationConfig(size=20, smoothing_steps=4, seed=1)
    seen = []
    generate_level(cfg, SpawnQuery(min_reachable_tiles=1), random.Random(0),
                   on_step=lambda i, g: seen.append((i, g.copy())))
    assert [i for i, _ in seen] == [0, 1, 2, 3, 4]
    assert seen[-1][1] == CaveGenerator(cfg).run()

def test_spawn_reproducible_with_seeded_source():
    cfg = GenerationConfig(fill_probability=0.45, size=40, smoothing_steps=5, seed=9)
    q = SpawnQuery(min_reachable_tiles=40, max_attempts=300)
    a = generate_level(cfg, q, random.Random(123)).spawn
    b = generate_level(cfg, q, random.Random(123)).spawn
    assert a == b

def test_open_level_spawn():
    cfg = GenerationConfig(fill_probability=0.0, size=10, smoothing_steps=0)
    level = generate_level(cfg, SpawnQuery(min_reachable_tiles=64, max_attempts=1))
    assert level.spawn.ok
    assert count_reachable(level.grid, level.spawn.as_tuple()) == 64

def test_unreachable_threshold_gives_failure_not_exception():
    cfg = GenerationConfig(fill_probability=0.0, size=10, smoothing_steps=0)
    level = generate_level(cfg, SpawnQuery(min_reachable_tiles=65, max_attempts=10))
    assert not level.spawn.ok and level.spawn.attempts == 10

def test_pipeline_logs_generation_once(caplog):
    import logging
    cfg = GenerationConfig(size=12, smoothing_steps=2, seed=4)
    with caplog.at_level(logging.INFO, logger="cavegen"):
        generate_level(cfg, SpawnQuery(min_reachable_tiles=1), random.Random(0))
    assert caplog.text.count("cave generated") == 1
