"""Reel spinning and grid reshaping."""

from __future__ import annotations

import random
from typing import Optional, Sequence, Tuple

import structlog

from ..symbols import DEFAULT_SYMBOL_TABLE, Symbol, SymbolTable

logger = structlog.get_logger(__name__)

ROWS = 3
COLS = 3

Reel = Tuple[Symbol, ...]
Grid = Tuple[Tuple[Symbol, ...], ...]


class SpinEngine:
    """Draws ``cols`` reels of ``rows`` symbols each.

    Every reel starts from a fresh copy of the full pool and draws without
    replacement, so a reel never holds more copies of a symbol than its
    population. Reels are independent of each other.
    """

    def __init__(
        self,
        table: SymbolTable = DEFAULT_SYMBOL_TABLE,
        rows: int = ROWS,
        cols: int = COLS,
        rng: Optional[random.Random] = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("grid needs at least one row and one column")
        self.table = table
        self.rows = rows
        self.cols = cols
        self.rng = rng or random.Random()
        self._pool = table.pool()
        if rows > len(self._pool):
            raise ValueError(
                f"cannot draw {rows} symbols per reel from a pool of {len(self._pool)}"
            )

    def spin_reel(self) -> Reel:
        remaining = list(self._pool)
        reel = []
        for _ in range(self.rows):
            idx = self.rng.randrange(len(remaining))
            reel.append(remaining.pop(idx))
        return tuple(reel)

    def spin(self) -> Grid:
        """Return the drawn reels, column-major."""
        reels = tuple(self.spin_reel() for _ in range(self.cols))
        logger.debug("spin", reels=[[str(s) for s in reel] for reel in reels])
        return reels


def transpose(reels: Sequence[Sequence[Symbol]]) -> Grid:
    """Turn column-major reels into row-major pay-lines."""
    if not reels:
        return ()
    rows = len(reels[0])
    return tuple(tuple(reel[i] for reel in reels) for i in range(rows))
