"""
Row Builder

Groups an ordered sequence of item unit sizes into rows.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from .distribution import distribute, chunk, BALANCE_THRESHOLD
from ..protocol import Row, RowItem


def build_rows(
    sizes: Sequence[int],
    max_columns: int,
    balanced: bool = True,
    tagged: Optional[Sequence[bool]] = None,
    threshold: float = BALANCE_THRESHOLD,
) -> List[Row]:
    """
    Partition items into rows, preserving their order.

    Sequences made only of single-unit items are split with the row
    distribution (or plain chunking when ``balanced`` is False). Mixed
    sequences are packed greedily, first fit.

    Args:
        sizes: Unit size of each item, already capped to max_columns
        max_columns: Row capacity in units
        balanced: Use smart distribution for uniform items
        tagged: Per item flag, True when the item carries an explicit size
        threshold: Final row fill ratio passed to the distribution

    Returns:
        List of rows, each a list of RowItem
    """
    if not sizes:
        return []

    max_columns = max(1, max_columns)
    items = [
        RowItem(index, size, bool(tagged[index]) if tagged else False)
        for index, size in enumerate(sizes)
    ]

    if all(size == 1 for size in sizes):
        if balanced:
            distribution = distribute(len(items), max_columns, threshold)
        else:
            distribution = chunk(len(items), max_columns)
        return _slice(items, distribution)

    return _build_greedy_rows(items, max_columns)


def _slice(items: List[RowItem], distribution: List[int]) -> List[Row]:
    rows = []
    start = 0
    for row_size in distribution:
        rows.append(items[start : start + row_size])
        start += row_size
    return rows


def _build_greedy_rows(items: List[RowItem], max_columns: int) -> List[Row]:
    rows: List[Row] = []
    current: Row = []
    current_size = 0

    for item in items:
        if current and current_size + item.size > max_columns:
            rows.append(current)
            current = []
            current_size = 0
        current.append(item)
        current_size += item.size

    if current:
        rows.append(current)

    return rows


def row_total(row: Row) -> int:
    """Sum of the unit sizes in a row."""
    return sum(item.size for item in row)
