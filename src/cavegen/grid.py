from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .tiles import STATES, WALL, is_floor

XY = Tuple[int, int]


class OutOfBoundsError(IndexError):
    """Coordinate outside 0..size-1 on either axis."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"cell ({x},{y}) is outside a {size}x{size} grid")
        self.x = x
        self.y = y
        self.size = size


@dataclass
class Grid:
    size: int
    buf: List[int]

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if len(self.buf) != self.size * self.size:
            raise ValueError(
                f"buffer holds {len(self.buf)} cells, expected {self.size * self.size}"
            )

    @classmethod
    def filled(cls, size: int, state: int = WALL) -> "Grid":
        if state not in STATES:
            raise ValueError(f"unknown cell state {state!r}")
        return cls(size=size, buf=[state] * (size * size))

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build from row lists indexed [y][x]; rows must form a square."""
        size = len(rows)
        if any(len(r) != size for r in rows):
            raise ValueError("matrix is not square")
        buf = [int(v) for r in rows for v in r]
        bad = [v for v in buf if v not in STATES]
        if bad:
            raise ValueError(f"unknown cell state {bad[0]!r}")
        return cls(size=size, buf=buf)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.size - 1 or y == self.size - 1

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        return y * self.size + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        if v not in STATES:
            raise ValueError(f"unknown cell state {v!r}")
        self.buf[self.idx(x, y)] = v

    def is_floor(self, x: int, y: int) -> bool:
        return is_floor(self.get(x, y))

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        # Row-major: the order renderers walk the grid in.
        for y in range(self.size):
            row = y * self.size
            for x in range(self.size):
                yield x, y, self.buf[row + x]

    def floor_count(self) -> int:
        return sum(1 for v in self.buf if is_floor(v))

    def copy(self) -> "Grid":
        return Grid(size=self.size, buf=list(self.buf))

    def as_matrix(self) -> List[List[int]]:
        s = self.size
        return [self.buf[y * s:(y + 1) * s] for y in range(s)]
