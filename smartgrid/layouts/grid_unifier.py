"""
Grid Unifier

Finds one track count that every row can be laid out on with whole spans.
"""

from __future__ import annotations
from functools import reduce
from math import gcd
from typing import Iterable, List

from .row_builder import row_total
from ..protocol import Row


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    return a * b // gcd(a, b)


def lcm_of(numbers: Iterable[int]) -> int:
    return reduce(lcm, numbers, 1)


def unify(row_lengths: List[int], uniform: bool = True) -> int:
    """
    Calculate the grid resolution for a set of rows.

    Args:
        row_lengths: Item count per row (uniform rows) or unit total per row
        uniform: Whether every item is a single unit

    Returns:
        Grid resolution; 0 when there are no rows
    """
    lengths = [length for length in row_lengths if length > 0]
    if not lengths:
        return 0

    distinct = sorted(set(lengths))
    if len(distinct) == 1:
        return distinct[0]

    if not uniform:
        return distinct[-1]

    return lcm_of(distinct)


def unify_rows(rows: List[Row]) -> int:
    """Grid resolution for rows produced by the row builder."""
    uniform = all(item.size == 1 for row in rows for item in row)
    if uniform:
        return unify([len(row) for row in rows], uniform=True)
    return unify([row_total(row) for row in rows], uniform=False)
