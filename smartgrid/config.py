"""
Grid Configuration

Configuration consumed by the layout engine, with coercion of loosely
typed host input to safe values.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from .layouts.distribution import BALANCE_THRESHOLD
from .layouts.size_classifier import parse_int
from .protocol import BalanceMode, FillPolicy, MinWidthConfig

DEFAULT_COLUMNS = 3
MIN_COLUMNS = 1
MAX_COLUMNS = 12

# Tokens accepted for fill policies, including the attribute values hosts use
FILL_POLICY_ALIASES = {
    "fill-and-expand": FillPolicy.FILL_AND_EXPAND,
    "equal-extra": FillPolicy.FILL_AND_EXPAND,
    "expand": FillPolicy.FILL_AND_EXPAND,
    "preserve-raw-size": FillPolicy.PRESERVE_RAW_SIZE,
    "none": FillPolicy.PRESERVE_RAW_SIZE,
    "fixed": FillPolicy.PRESERVE_RAW_SIZE,
    "preserve": FillPolicy.PRESERVE_RAW_SIZE,
}


def parse_columns(value) -> int:
    """Coerce a column count to [1, 12], defaulting to 3 when unreadable."""
    columns = parse_int(value)
    if columns is None:
        return DEFAULT_COLUMNS
    return max(MIN_COLUMNS, min(MAX_COLUMNS, columns))


def parse_fill_policy(
    value: Union[str, FillPolicy, None], default: Optional[FillPolicy]
) -> Optional[FillPolicy]:
    """Coerce a fill policy token, falling back to default."""
    if isinstance(value, FillPolicy):
        return value
    if isinstance(value, str):
        return FILL_POLICY_ALIASES.get(value.strip().lower(), default)
    return default


def parse_balance(value: Union[str, BalanceMode, None]) -> BalanceMode:
    """Coerce a balance mode token, defaulting to AUTO."""
    if isinstance(value, BalanceMode):
        return value
    if isinstance(value, str):
        try:
            return BalanceMode(value.strip().lower())
        except ValueError:
            return BalanceMode.AUTO
    return BalanceMode.AUTO


@dataclass
class GridConfig:
    """Layout engine configuration."""

    max_columns: Union[int, str] = DEFAULT_COLUMNS
    fill_policy: Union[FillPolicy, str] = FillPolicy.FILL_AND_EXPAND
    last_row_policy: Optional[Union[FillPolicy, str]] = None
    balance: Union[BalanceMode, str] = BalanceMode.AUTO

    # Responsive narrowing
    min_widths: MinWidthConfig = field(default_factory=MinWidthConfig)
    default_gap: str = "1rem"

    # Smallest acceptable fill ratio of the final row
    balance_threshold: float = BALANCE_THRESHOLD

    def __post_init__(self):
        """Coerce loosely typed values."""
        self.max_columns = parse_columns(self.max_columns)
        self.fill_policy = parse_fill_policy(
            self.fill_policy, FillPolicy.FILL_AND_EXPAND
        )
        self.last_row_policy = parse_fill_policy(self.last_row_policy, None)
        self.balance = parse_balance(self.balance)
        if self.min_widths is None:
            self.min_widths = MinWidthConfig()

    @property
    def effective_last_row_policy(self) -> FillPolicy:
        """Last row policy, following fill_policy when unset."""
        return self.last_row_policy or self.fill_policy

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "GridConfig":
        """
        Build a configuration from host attribute strings.

        Recognised keys: columns, fill, fill-last, orphans, balance,
        min-width (alias of min-width-small), min-width-small,
        min-width-medium, min-width-large, gap.
        """
        last_row = attributes.get("fill-last", attributes.get("orphans"))
        return cls(
            max_columns=attributes.get("columns", DEFAULT_COLUMNS),
            fill_policy=attributes.get("fill", FillPolicy.FILL_AND_EXPAND),
            last_row_policy=last_row,
            balance=attributes.get("balance", BalanceMode.AUTO),
            min_widths=MinWidthConfig(
                small=attributes.get(
                    "min-width-small", attributes.get("min-width")
                ),
                medium=attributes.get("min-width-medium"),
                large=attributes.get("min-width-large"),
                gap=attributes.get("gap"),
            ),
        )
