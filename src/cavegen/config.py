from dataclasses import dataclass

# Defaults: a 100x100 half-wall fill smoothed 20 times, spawn needing 100 reachable tiles.
DEFAULT_FILL_PROBABILITY = 0.5
DEFAULT_SIZE = 100
DEFAULT_SMOOTHING_STEPS = 20
DEFAULT_SEED = 100
DEFAULT_MIN_REACHABLE_TILES = 100
DEFAULT_MAX_ATTEMPTS = 1000


class ConfigError(ValueError):
    """Invalid generation config or spawn query. Raised at construction."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


def _require_int(field: str, value) -> None:
    # bool is an int subclass; True/False as a size or count is always a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(field, f"expected an integer, got {value!r}")


@dataclass(frozen=True)
class GenerationConfig:
    fill_probability: float = DEFAULT_FILL_PROBABILITY
    size: int = DEFAULT_SIZE
    smoothing_steps: int = DEFAULT_SMOOTHING_STEPS
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        p = self.fill_probability
        if isinstance(p, bool) or not isinstance(p, (int, float)):
            raise ConfigError("fill_probability", f"expected a number, got {p!r}")
        if not (0.0 <= p <= 1.0):
            raise ConfigError("fill_probability", f"must be within [0, 1], got {p}")
        _require_int("size", self.size)
        if self.size <= 2:
            # Needs an interior: the border is always wall.
            raise ConfigError("size", f"must be greater than 2, got {self.size}")
        _require_int("smoothing_steps", self.smoothing_steps)
        if self.smoothing_steps < 0:
            raise ConfigError("smoothing_steps", f"must be >= 0, got {self.smoothing_steps}")
        _require_int("seed", self.seed)


@dataclass(frozen=True)
class SpawnQuery:
    min_reachable_tiles: int = DEFAULT_MIN_REACHABLE_TILES
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    # True: a sampled wall cell uses up an attempt (original behaviour).
    # False: sample only among floor cells, so misses are free.
    wall_costs_attempt: bool = True

    def __post_init__(self) -> None:
        _require_int("min_reachable_tiles", self.min_reachable_tiles)
        if self.min_reachable_tiles < 1:
            raise ConfigError(
                "min_reachable_tiles", f"must be >= 1, got {self.min_reachable_tiles}"
            )
        _require_int("max_attempts", self.max_attempts)
        if self.max_attempts < 1:
            raise ConfigError("max_attempts", f"must be >= 1, got {self.max_attempts}")
        if not isinstance(self.wall_costs_attempt, bool):
            raise ConfigError(
                "wall_costs_attempt", f"expected a bool, got {self.wall_costs_attempt!r}"
            )
