"""Formatting helpers for grids and money amounts."""

from __future__ import annotations

from typing import Iterator, Sequence

from .symbols import Symbol


def format_amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def format_row(row: Sequence[Symbol]) -> str:
    return " | ".join(str(symbol) for symbol in row)


def format_grid(rows: Sequence[Sequence[Symbol]]) -> Iterator[str]:
    for row in rows:
        yield format_row(row)
