# grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple
import random

import numpy as np

Pos = Tuple[int, int]  # (row, col)

# 4-connected moves: up, down, left, right
DIRECTIONS: Tuple[Pos, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

FREE = 0
BLOCKED = 1


@dataclass(frozen=True, eq=False)
class Grid:
    """
    Immutable occupancy grid:
      - cells[r, c] == 0  -> free
      - anything else     -> blocked

    Positions are (row, col) tuples, so equality and hashing are by value.
    """
    cells: np.ndarray

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from nested lists; rejects empty or ragged input."""
        if len(rows) == 0 or len(rows[0]) == 0:
            raise ValueError("Grid must have at least one row and one column.")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Grid is not rectangular: row {i} has {len(row)} cells, expected {width}."
                )
        return cls.from_array(rows)

    @classmethod
    def from_array(cls, cells) -> "Grid":
        """
        Wrap a 2D array of markers as-is. Marker values are kept (no int
        cast), so any non-zero value stays blocked. Row lengths are not
        checked here; from_rows does that.
        """
        arr = np.array(cells)
        arr.flags.writeable = False
        return cls(cells=arr)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Parse a grid from text, one row per line.

        Two row styles are accepted:
          - whitespace separated integers:  "0 1 0"
          - compact characters:             ".#." or "010"
            ('.' = free, '#' = blocked, digits are taken as markers)

        Blank lines and lines starting with ';' are ignored.
        """
        rows: List[List[int]] = []
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith(";"):
                continue
            if len(line.split()) > 1:
                rows.append([int(tok) for tok in line.split()])
            else:
                rows.append([_parse_char(ch) for ch in line])
        return cls.from_rows(rows)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        obstacle_density: float = 0.2,
        seed: int = 0,
        keep_free: Iterable[Pos] = (),
    ) -> "Grid":
        """
        Random grid with round(obstacle_density * rows * cols) blocked cells.
        Cells listed in keep_free are never blocked (e.g. start and goal).
        No connectivity guarantee is made.
        """
        rng = random.Random(seed)
        reserved = set(keep_free)
        candidates = [
            (r, c)
            for r in range(rows)
            for c in range(cols)
            if (r, c) not in reserved
        ]
        rng.shuffle(candidates)
        n_blocked = min(int(round(obstacle_density * rows * cols)), len(candidates))

        cells = [[FREE] * cols for _ in range(rows)]
        for r, c in candidates[:n_blocked]:
            cells[r][c] = BLOCKED
        return cls.from_rows(cells)

    # ------------------------------------------------------------------ #
    # Basic queries & helpers                                            #
    # ------------------------------------------------------------------ #
    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, p: Pos) -> bool:
        r, c = p
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_free(self, p: Pos) -> bool:
        r, c = p
        return bool(self.cells[r, c] == FREE)

    def neighbors4(self, p: Pos) -> List[Pos]:
        """4-connected neighbors (up, down, left, right) that are in bounds and free."""
        r, c = p
        out: List[Pos] = []
        for dr, dc in DIRECTIONS:
            q = (r + dr, c + dc)
            if self.in_bounds(q) and self.is_free(q):
                out.append(q)
        return out

    def obstacles(self) -> List[Pos]:
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(self.cells))]

    def to_text(self) -> str:
        return "\n".join(
            "".join("." if v == FREE else "#" for v in row) for row in self.cells
        )


def _parse_char(ch: str) -> int:
    if ch == ".":
        return FREE
    if ch == "#":
        return BLOCKED
    if ch.isdigit():
        return int(ch)
    raise ValueError(f"Unknown grid character: {ch!r}")
