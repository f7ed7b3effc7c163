"""
Layout Algorithms

Pure functions deciding rows, grid resolution and spans.
"""

from .distribution import distribute, chunk, BALANCE_THRESHOLD
from .row_builder import build_rows, row_total
from .grid_unifier import unify, unify_rows, lcm
from .span_calculator import (
    calculate_spans,
    fill_row_spans,
    reference_row_spans,
    tagged_row_spans,
)
from .size_classifier import SizeSpec, classify, is_explicit, is_semantic, tier_of
from .column_resolver import ColumnResolver, effective_columns

__all__ = [
    # Distribution
    "distribute",
    "chunk",
    "BALANCE_THRESHOLD",
    # Rows
    "build_rows",
    "row_total",
    # Grid
    "unify",
    "unify_rows",
    "lcm",
    # Spans
    "calculate_spans",
    "fill_row_spans",
    "reference_row_spans",
    "tagged_row_spans",
    # Sizes
    "SizeSpec",
    "classify",
    "is_explicit",
    "is_semantic",
    "tier_of",
    # Columns
    "ColumnResolver",
    "effective_columns",
]
