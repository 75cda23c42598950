# Grid <-> TSV: one row per line, tab-separated cell states (1 = wall, 0 = floor).

import csv
from typing import List

from .grid import Grid

def write_tsv(grid: Grid, path: str, include_header: bool = False) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", lineterminator="\n")
        if include_header:
            w.writerow(list(range(grid.size)))
        for row in grid.as_matrix():
            w.writerow(row)

def read_rows(path: str) -> List[List[int]]:
    rows = []
    with open(path, encoding="utf-8") as f:
        for ln, line in enumerate(f, 1):
            line = line.rstrip("\n")
            if not line:
                continue
            try:
                rows.append([int(x) for x in line.split("\t")])
            except ValueError:
                raise ValueError(f"{path}:{ln}: non-integer cell") from None
    return rows

def read_tsv(path: str) -> Grid:
    """Header-less TSV only; raises ValueError if it isn't a square 0/1 grid."""
    rows = read_rows(path)
    if not rows:
        raise ValueError(f"{path}: empty grid")
    try:
        return Grid.from_matrix(rows)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from None
