"""
Size Classifier

Maps per-item size specs ("small", "medium", "large" or a positive
integer) to grid units.
"""

from __future__ import annotations
import re
from typing import Optional, Union

from ..protocol import SIZE_UNITS, SizeTier

SizeSpec = Union[str, int, None]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value) -> Optional[int]:
    """Parse the leading integer of a value, None if there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def is_semantic(spec: SizeSpec) -> bool:
    """Whether the spec is one of the semantic labels."""
    return isinstance(spec, str) and spec in SIZE_UNITS


def is_explicit(spec: SizeSpec) -> bool:
    """Whether the item carries a size spec at all."""
    if spec is None:
        return False
    if isinstance(spec, str):
        return spec.strip() != ""
    return True


def classify(spec: SizeSpec, max_columns: int) -> int:
    """
    Resolve a size spec to a unit count in [1, max_columns].

    Missing, unknown and non-positive specs count as one unit.
    """
    if is_semantic(spec):
        units = SIZE_UNITS[spec]
    else:
        units = parse_int(spec) if is_explicit(spec) else None
        if units is None or units < 1:
            units = 1

    return max(1, min(units, max_columns))


def tier_of(units: int) -> SizeTier:
    """Size tier an item of the given unit count falls in."""
    if units >= SizeTier.LARGE.value:
        return SizeTier.LARGE
    if units == SizeTier.MEDIUM.value:
        return SizeTier.MEDIUM
    return SizeTier.SMALL
