"""
Layout Data Types

Value types shared by the layout algorithms, the adapter and the sinks.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class FillPolicy(Enum):
    """How a row's spans relate to the grid resolution."""

    FILL_AND_EXPAND = "fill-and-expand"  # Spans stretch to fill the row
    PRESERVE_RAW_SIZE = "preserve-raw-size"  # Spans keep their unit size


class BalanceMode(Enum):
    """Row grouping strategy for uniform items."""

    AUTO = "auto"  # Smart distribution, avoids orphaned rows
    EXPAND = "expand"  # Greedy rows, trailing row stretched
    PRESERVE = "preserve"  # Greedy rows, trailing items keep full-row width


class SizeTier(Enum):
    """Semantic item size, valued in grid units."""

    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    @property
    def label(self) -> str:
        return self.name.lower()


SIZE_UNITS = {tier.label: tier.value for tier in SizeTier}


@dataclass(frozen=True)
class RowItem:
    """An item placed in a row: its original position and resolved unit size."""

    index: int
    size: int
    tagged: bool = False  # Carries an explicit size spec


Row = List[RowItem]


@dataclass(frozen=True)
class MinWidthConfig:
    """Minimum item width per size tier, plus the gap, as length expressions."""

    small: Optional[str] = None
    medium: Optional[str] = None
    large: Optional[str] = None
    gap: Optional[str] = None

    def expression_for(self, tier: SizeTier) -> Optional[str]:
        return getattr(self, tier.label)

    @property
    def enabled(self) -> bool:
        """Whether any tier carries a minimum width."""
        return any(self.expression_for(tier) for tier in SizeTier)


@dataclass(frozen=True)
class UnitContext:
    """Font and viewport dimensions used to resolve relative lengths."""

    font_size: float = 16.0
    root_font_size: float = 16.0
    viewport_width: float = 1280.0
    viewport_height: float = 800.0


@dataclass(frozen=True)
class LayoutResult:
    """Output of a layout pass, handed to the presentation sink.

    ``spans`` is aligned to the original item order. Every row's spans sum
    to ``grid_resolution`` when the row is filled, or to the row's raw unit
    total when it keeps raw sizes.
    """

    rows: List[Row] = field(default_factory=list)
    grid_resolution: int = 0
    spans: List[int] = field(default_factory=list)
    effective_columns: int = 0

    @property
    def columns(self) -> int:
        """Visual column count, taken from the first row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def single_column(self) -> bool:
        return self.effective_columns == 1

    def row_spans(self) -> List[List[int]]:
        """Spans grouped per row."""
        return [[self.spans[item.index] for item in row] for row in self.rows]
