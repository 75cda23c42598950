# src/cavegen/rng.py
# Park-Miller "minimal standard" generator. Fully deterministic across platforms,
# so a seed always reproduces the same cave.

from dataclasses import dataclass

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    """
    Map any Python int onto a valid Park-Miller state (1..M-1).
    State 0 is a fixed point of the recurrence, so it is remapped to 1.
    """
    s = (seed & 0x7FFFFFFF) % M
    return s or 1

@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(normalize_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        """Float in [0, 1); one draw."""
        return (self.next32() - 1) / (M - 1)

    def randint(self, lo: int, hi: int) -> int:
        """Integer in lo..hi inclusive; one draw. Same call shape as random.Random."""
        if hi < lo:
            raise ValueError(f"empty range {lo}..{hi}")
        return lo + (self.next32() - 1) % (hi - lo + 1)
