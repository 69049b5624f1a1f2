"""Slot machine symbols configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping


class Symbol(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    def __str__(self) -> str:
        return self.value


# Rarer symbols pay more.
SYMBOL_POPULATIONS: Mapping[Symbol, int] = MappingProxyType(
    {
        Symbol.A: 2,
        Symbol.B: 4,
        Symbol.C: 6,
        Symbol.D: 8,
    }
)

SYMBOL_MULTIPLIERS: Mapping[Symbol, int] = MappingProxyType(
    {
        Symbol.A: 5,
        Symbol.B: 4,
        Symbol.C: 3,
        Symbol.D: 2,
    }
)


@dataclass(frozen=True)
class SymbolTable:
    """Population and payout multiplier for every symbol on the reels."""

    populations: Mapping[Symbol, int] = field(default_factory=lambda: SYMBOL_POPULATIONS)
    multipliers: Mapping[Symbol, float] = field(default_factory=lambda: SYMBOL_MULTIPLIERS)

    def __post_init__(self) -> None:
        if set(self.populations) != set(self.multipliers):
            raise ValueError("populations and multipliers must cover the same symbols")
        for symbol in self.populations:
            if self.populations[symbol] <= 0 or self.multipliers[symbol] <= 0:
                raise ValueError(f"{symbol} needs a positive population and multiplier")
        # freeze caller supplied dicts
        object.__setattr__(self, "populations", MappingProxyType(dict(self.populations)))
        object.__setattr__(self, "multipliers", MappingProxyType(dict(self.multipliers)))

    def symbols(self) -> List[Symbol]:
        return list(self.populations)

    def population(self, symbol: Symbol) -> int:
        return self.populations[symbol]

    def multiplier(self, symbol: Symbol) -> float:
        return self.multipliers[symbol]

    def pool(self) -> List[Symbol]:
        """Expand populations into the flat list a reel draws from."""
        pool: List[Symbol] = []
        for symbol, count in self.populations.items():
            pool.extend([symbol] * count)
        return pool


DEFAULT_SYMBOL_TABLE = SymbolTable()
