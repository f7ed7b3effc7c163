"""
smartgrid - balanced grid layouts

Lays out items of varying widths on a fixed-width grid without leaving a
lonely, under-filled last row.

This package provides:
- Row distribution that balances the trailing rows
- A unified track count so rows of different lengths need no fractional spans
- Exact span calculation under fill policies
- Responsive narrowing of the column count to the container width
- An event-driven manager that recomputes layouts and feeds a sink

Example usage:
    from smartgrid import compute_layout, GridConfig

    result = compute_layout([None] * 7, GridConfig(max_columns=3))
    result.grid_resolution  # 6
    result.spans            # [2, 2, 2, 3, 3, 3, 3]

Or from the command line:
    python -m smartgrid 7 --columns 3
"""

__version__ = "0.1.0"

from .protocol import (
    FillPolicy,
    BalanceMode,
    SizeTier,
    SIZE_UNITS,
    RowItem,
    Row,
    MinWidthConfig,
    UnitContext,
    LayoutResult,
)

from .config import GridConfig

from .layouts import (
    distribute,
    build_rows,
    unify,
    unify_rows,
    calculate_spans,
    classify,
    effective_columns,
    ColumnResolver,
    BALANCE_THRESHOLD,
)

from .units import UnitResolver, resolve_length

from .engine import compute_layout

from .sinks import LayoutSink, RecordingSink

from .debounce import Debouncer

from .grid_manager import GridManager

from . import topics

__all__ = [
    # Version
    "__version__",
    # Types
    "FillPolicy",
    "BalanceMode",
    "SizeTier",
    "SIZE_UNITS",
    "RowItem",
    "Row",
    "MinWidthConfig",
    "UnitContext",
    "LayoutResult",
    # Configuration
    "GridConfig",
    # Algorithms
    "distribute",
    "build_rows",
    "unify",
    "unify_rows",
    "calculate_spans",
    "classify",
    "effective_columns",
    "ColumnResolver",
    "BALANCE_THRESHOLD",
    # Units
    "UnitResolver",
    "resolve_length",
    # Engine
    "compute_layout",
    # Sinks
    "LayoutSink",
    "RecordingSink",
    # Adapter
    "Debouncer",
    "GridManager",
    # Event topics
    "topics",
]
