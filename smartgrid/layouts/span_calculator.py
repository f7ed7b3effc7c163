"""
Span Calculator

Turns rows of unit sizes into whole-track spans on the unified grid.
"""

from __future__ import annotations
from fractions import Fraction
from math import floor
from typing import List, Optional

from .row_builder import row_total
from ..protocol import FillPolicy, Row


def calculate_spans(
    rows: List[Row],
    grid_resolution: int,
    fill_policy: FillPolicy = FillPolicy.FILL_AND_EXPAND,
    last_row_policy: Optional[FillPolicy] = None,
) -> List[int]:
    """
    Calculate the span of every item.

    Filled rows always sum to exactly ``grid_resolution``. Rows that keep
    raw sizes sum to their unit total, except a last row that keeps raw
    sizes while the other rows fill: its items are sized like those of the
    densest row, leaving trailing space.

    Items with an explicit size keep it and leave the slack to their
    neighbours only when the rows mix unit sizes. Rows of single-unit items
    split the grid evenly whether or not their items are tagged.

    Args:
        rows: Rows from the row builder
        grid_resolution: Track count from the grid unifier
        fill_policy: Policy for every row
        last_row_policy: Override for the last row (defaults to fill_policy)

    Returns:
        Spans aligned to the original item order
    """
    if not rows:
        return []

    reference_total = _reference_total(rows, grid_resolution)
    mixed = any(item.size != 1 for row in rows for item in row)
    spans = [0] * sum(len(row) for row in rows)

    for row_index, row in enumerate(rows):
        is_last = row_index == len(rows) - 1
        policy = fill_policy
        if is_last and last_row_policy is not None:
            policy = last_row_policy

        use_reference = (
            is_last
            and last_row_policy == FillPolicy.PRESERVE_RAW_SIZE
            and fill_policy == FillPolicy.FILL_AND_EXPAND
        )

        if mixed and any(item.tagged for item in row):
            row_spans = tagged_row_spans(row, grid_resolution, policy)
        elif policy == FillPolicy.PRESERVE_RAW_SIZE:
            if use_reference:
                row_spans = reference_row_spans(row, grid_resolution, reference_total)
            else:
                row_spans = [item.size for item in row]
        else:
            row_spans = fill_row_spans(row, grid_resolution)

        for item, span in zip(row, row_spans):
            spans[item.index] = span

    return spans


def fill_row_spans(row: Row, grid_resolution: int) -> List[int]:
    """
    Stretch a row to the grid resolution, keeping item proportions.

    Uses the largest remainder method: every item gets the floor of its
    exact share, then the leftover tracks go one each to the items with
    the largest fractional parts, earlier items first on equal parts.
    """
    total = row_total(row)
    if total <= 0 or grid_resolution <= 0:
        return [1] * len(row)

    exact = [Fraction(item.size * grid_resolution, total) for item in row]
    spans = [max(1, floor(share)) for share in exact]
    remainder = grid_resolution - sum(spans)

    order = sorted(range(len(row)), key=lambda i: -(exact[i] - floor(exact[i])))
    for i in order:
        if remainder <= 0:
            break
        spans[i] += 1
        remainder -= 1

    # Only reachable when a row holds more items than tracks
    while remainder < 0 and max(spans) > 1:
        widest = max(range(len(spans)), key=lambda i: (spans[i], i))
        spans[widest] -= 1
        remainder += 1

    return spans


def reference_row_spans(
    row: Row, grid_resolution: int, reference_total: int
) -> List[int]:
    """Size items like the densest row does, without filling the row."""
    if reference_total <= 0:
        return [item.size for item in row]

    scale = Fraction(grid_resolution, reference_total)
    return [max(1, _round_half_up(item.size * scale)) for item in row]


def tagged_row_spans(row: Row, grid_resolution: int, policy: FillPolicy) -> List[int]:
    """
    Spans for a row holding items with explicit sizes.

    Tagged items keep their size unless the row is filled. Slack goes to
    untagged items first, evenly, earliest items taking any leftover. A row
    of tagged items only shares the slack by weight, the last item taking
    whatever rounding left over.
    """
    spans = [item.size for item in row]
    slack = grid_resolution - sum(spans)

    if policy != FillPolicy.FILL_AND_EXPAND or slack <= 0:
        return spans

    untagged = [i for i, item in enumerate(row) if not item.tagged]
    if untagged:
        extra, leftover = divmod(slack, len(untagged))
        for position, i in enumerate(untagged):
            spans[i] += extra + (1 if position < leftover else 0)
        return spans

    total = sum(spans)
    distributed = 0
    for i, item in enumerate(row):
        if i == len(row) - 1:
            spans[i] += slack - distributed
        else:
            extra = min(
                _round_half_up(Fraction(item.size * slack, total)),
                slack - distributed,
            )
            spans[i] += extra
            distributed += extra

    return spans


def _reference_total(rows: List[Row], grid_resolution: int) -> int:
    densest = max(rows, key=len)
    total = row_total(densest)
    return total if total > 0 else grid_resolution


def _round_half_up(value: Fraction) -> int:
    return floor(value + Fraction(1, 2))
