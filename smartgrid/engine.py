"""
Layout Engine

Runs one layout pass: effective columns, unit sizes, rows, grid resolution
and spans.
"""

from __future__ import annotations
from typing import Optional, Sequence

from .config import GridConfig, MAX_COLUMNS
from .layouts.column_resolver import ColumnResolver
from .layouts.grid_unifier import unify_rows
from .layouts.row_builder import build_rows
from .layouts.size_classifier import SizeSpec, classify, is_explicit, tier_of
from .layouts.span_calculator import calculate_spans
from .protocol import BalanceMode, FillPolicy, LayoutResult
from .units import UnitResolver


def compute_layout(
    sizes: Sequence[SizeSpec],
    config: Optional[GridConfig] = None,
    width: Optional[float] = None,
    unit_resolver: Optional[UnitResolver] = None,
    column_resolver: Optional[ColumnResolver] = None,
) -> LayoutResult:
    """
    Calculate the layout of a sequence of items.

    The result only depends on the arguments, so repeating a pass on
    unchanged input gives an identical result.

    Args:
        sizes: Size spec of each item, in display order (None for no spec)
        config: Engine configuration (defaults apply when omitted)
        width: Container width in pixels; None disables responsive narrowing
        unit_resolver: Resolver for length expressions, reused across passes
        column_resolver: Column resolver remembering its last configuration;
            it must resolve lengths with unit_resolver when both are given

    Returns:
        LayoutResult with rows, grid resolution, spans and effective columns

    Raises:
        ValueError: column_resolver resolves lengths with another resolver
    """
    config = config or GridConfig()
    if column_resolver is None:
        unit_resolver = unit_resolver or UnitResolver()
        column_resolver = ColumnResolver(unit_resolver.resolve)
    elif unit_resolver is not None and not column_resolver.uses(unit_resolver.resolve):
        raise ValueError("column_resolver must resolve lengths with unit_resolver")

    columns = config.max_columns
    if width is not None:
        tiers = {tier_of(classify(spec, MAX_COLUMNS)) for spec in sizes}
        columns = column_resolver.resolve(
            width, config.max_columns, config.min_widths, tiers, config.default_gap
        )

    if not sizes:
        return LayoutResult(effective_columns=columns)

    units = [classify(spec, columns) for spec in sizes]
    tagged = [is_explicit(spec) for spec in sizes]

    rows = build_rows(
        units,
        columns,
        balanced=config.balance == BalanceMode.AUTO,
        tagged=tagged,
        threshold=config.balance_threshold,
    )
    grid_resolution = unify_rows(rows)

    last_row_policy = config.effective_last_row_policy
    if config.balance == BalanceMode.EXPAND:
        last_row_policy = FillPolicy.FILL_AND_EXPAND
    elif config.balance == BalanceMode.PRESERVE:
        last_row_policy = FillPolicy.PRESERVE_RAW_SIZE

    spans = calculate_spans(rows, grid_resolution, config.fill_policy, last_row_policy)

    return LayoutResult(
        rows=rows,
        grid_resolution=grid_resolution,
        spans=spans,
        effective_columns=columns,
    )
