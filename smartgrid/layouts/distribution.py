"""
Row Distribution

Chooses how many uniform items go in each row so that the trailing row is
never a lonely straggler.
"""

from __future__ import annotations
from typing import List, Optional

# Smallest acceptable fill ratio for the final row
BALANCE_THRESHOLD = 0.34


def distribute(
    item_count: int, max_columns: int, threshold: float = BALANCE_THRESHOLD
) -> List[int]:
    """
    Calculate row sizes for uniform items.

    Keeps as many full rows as possible and balances only the tail, e.g.
    7 items in 3 columns become [3, 2, 2] rather than [3, 3, 1].

    Args:
        item_count: Number of items
        max_columns: Maximum items per row
        threshold: Minimum fill ratio accepted for the final row

    Returns:
        Row sizes, summing to item_count, each at most max_columns
    """
    if item_count <= 0 or max_columns <= 0:
        return []

    if item_count <= max_columns:
        return [item_count]

    min_rows = -(-item_count // max_columns)

    for full_rows in range(min_rows - 1, -1, -1):
        rows = _try_distribution(item_count, max_columns, min_rows, full_rows)
        if rows and _is_balanced(rows, max_columns, threshold):
            return rows

    return chunk(item_count, max_columns)


def chunk(item_count: int, max_columns: int) -> List[int]:
    """Plain greedy chunking: full rows, then whatever is left."""
    if item_count <= 0 or max_columns <= 0:
        return []

    full_rows, remainder = divmod(item_count, max_columns)
    rows = [max_columns] * full_rows
    if remainder:
        rows.append(remainder)
    return rows


def _try_distribution(
    item_count: int, max_columns: int, min_rows: int, full_rows: int
) -> Optional[List[int]]:
    """Full rows first, then the remainder spread over the remaining rows."""
    remaining_items = item_count - full_rows * max_columns
    remaining_rows = min_rows - full_rows

    if remaining_rows <= 0 or remaining_items < 0:
        return None

    if -(-remaining_items // remaining_rows) > max_columns:
        return None

    rows = [max_columns] * full_rows
    left = remaining_items
    for i in range(remaining_rows):
        size = -(-left // (remaining_rows - i))
        rows.append(size)
        left -= size

    return rows


def _is_balanced(rows: List[int], max_columns: int, threshold: float) -> bool:
    return len(rows) == 1 or rows[-1] / max_columns >= threshold
