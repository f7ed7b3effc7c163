"""
Effective Column Resolver

Narrows the configured column count to what fits the container width.
"""

from __future__ import annotations
from math import floor
from typing import Callable, Iterable, Optional, Tuple

from ..protocol import MinWidthConfig, SizeTier

Resolve = Callable[[Optional[str]], float]


def effective_columns(
    width: float,
    max_columns: int,
    min_widths: Optional[MinWidthConfig],
    resolve: Resolve,
    tiers: Iterable[SizeTier] = (SizeTier.SMALL,),
    default_gap: Optional[str] = None,
) -> int:
    """
    Calculate how many columns fit in the container.

    The most demanding tier wins: each present tier's minimum width is
    divided by its unit weight, and the largest per-unit width is used.
    A tier with no minimum of its own uses the small tier's.

    Args:
        width: Container width in pixels
        max_columns: Configured column maximum
        min_widths: Minimum width and gap expressions
        resolve: Length expression resolver
        tiers: Size tiers present among the items
        default_gap: Gap expression used when min_widths has none

    Returns:
        Column count in [1, max_columns]
    """
    max_columns = max(1, max_columns)
    if min_widths is None or not min_widths.enabled or width <= 0:
        return max_columns

    gap = resolve(min_widths.gap if min_widths.gap else default_gap)

    per_unit = 0.0
    for tier in set(tiers) or {SizeTier.SMALL}:
        expression = min_widths.expression_for(tier)
        weight = tier.value
        if not expression:
            expression = min_widths.small
            weight = 1
        if not expression:
            continue
        per_unit = max(per_unit, resolve(expression) / weight)

    if per_unit <= 0 or per_unit + gap <= 0:
        return max_columns

    fit = floor((width + gap) / (per_unit + gap))
    return max(1, min(max_columns, fit))


class ColumnResolver:
    """Effective column resolver remembering its last configuration."""

    def __init__(self, resolve: Resolve):
        self._resolve = resolve
        self._fingerprint: Optional[Tuple] = None
        self._columns = 0

    def resolve(
        self,
        width: float,
        max_columns: int,
        min_widths: Optional[MinWidthConfig],
        tiers: Iterable[SizeTier] = (SizeTier.SMALL,),
        default_gap: Optional[str] = None,
    ) -> int:
        tiers = frozenset(tiers)
        fingerprint = (width, max_columns, min_widths, tiers, default_gap)
        if fingerprint != self._fingerprint:
            self._columns = effective_columns(
                width, max_columns, min_widths, self._resolve, tiers, default_gap
            )
            self._fingerprint = fingerprint
        return self._columns

    def uses(self, resolve: Resolve) -> bool:
        """Whether lengths are resolved with the given callable."""
        return self._resolve == resolve

    def invalidate(self):
        """Forget the last configuration."""
        self._fingerprint = None
