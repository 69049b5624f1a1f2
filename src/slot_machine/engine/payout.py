"""Pay-line evaluation."""

from __future__ import annotations

from typing import List, Sequence

from ..symbols import DEFAULT_SYMBOL_TABLE, Symbol, SymbolTable


class PayoutEvaluator:
    def __init__(self, table: SymbolTable = DEFAULT_SYMBOL_TABLE) -> None:
        self.table = table

    def winning_lines(self, rows: Sequence[Sequence[Symbol]], lines: int) -> List[int]:
        """Indexes of the staked lines whose symbols are all the same."""
        won = []
        for idx, row in enumerate(rows[:lines]):
            if row and all(symbol == row[0] for symbol in row):
                won.append(idx)
        return won

    def winnings(self, rows: Sequence[Sequence[Symbol]], bet: float, lines: int) -> float:
        total = 0
        for idx in self.winning_lines(rows, lines):
            total += bet * self.table.multiplier(rows[idx][0])
        return total
