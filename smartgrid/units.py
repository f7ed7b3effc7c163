"""
Unit Resolution

Converts length expressions such as "12rem" or "30vw" to pixels.
"""

from __future__ import annotations
import re
from typing import Dict, Optional, Tuple

from .protocol import UnitContext

PIXELS_PER_INCH = 96

UNIT_PATTERN = re.compile(
    r"^(-?\d*\.?\d+)\s*(px|rem|em|vw|vh|vmin|vmax|cm|mm|in|pt|pc)?$", re.IGNORECASE
)
_LEADING_NUMBER = re.compile(r"^\s*(-?\d*\.?\d+)")


def parse_length(expression: str) -> Optional[Tuple[float, str]]:
    """Split an expression into value and lowercase unit, None if unsupported."""
    match = UNIT_PATTERN.match(expression.strip())
    if not match:
        return None
    return float(match.group(1)), (match.group(2) or "").lower()


def to_pixels(value: float, unit: str, context: UnitContext) -> Optional[float]:
    """Convert a parsed length to pixels, None for an unknown unit."""
    if unit in ("", "px"):
        return value
    if unit == "rem":
        return value * context.root_font_size
    if unit == "em":
        return value * context.font_size
    if unit == "vw":
        return value * context.viewport_width / 100
    if unit == "vh":
        return value * context.viewport_height / 100
    if unit == "vmin":
        return value * min(context.viewport_width, context.viewport_height) / 100
    if unit == "vmax":
        return value * max(context.viewport_width, context.viewport_height) / 100
    if unit == "in":
        return value * PIXELS_PER_INCH
    if unit == "cm":
        return value * PIXELS_PER_INCH / 2.54
    if unit == "mm":
        return value * PIXELS_PER_INCH / 25.4
    if unit == "pt":
        return value * PIXELS_PER_INCH / 72
    if unit == "pc":
        return value * PIXELS_PER_INCH / 6
    return None


def resolve_length(expression: str, context: UnitContext) -> Optional[float]:
    """
    Resolve a length expression to pixels.

    Returns 0 for an empty expression and None when the expression or its
    unit is not supported.
    """
    if not expression or not expression.strip():
        return 0.0

    parsed = parse_length(expression)
    if parsed is None:
        return None
    return to_pixels(parsed[0], parsed[1], context)


class UnitResolver:
    """
    Resolves length expressions against one unit context, with a cache.

    Unsupported expressions are reported once through ``report`` and fall
    back to their leading number, or 0.
    """

    def __init__(self, context: Optional[UnitContext] = None, report=None):
        self.context = context or UnitContext()
        self._report = report
        self._cache: Dict[str, float] = {}

    def resolve(self, expression: Optional[str]) -> float:
        """Resolve an expression to pixels."""
        key = (expression or "").strip()
        if not key:
            return 0.0

        if key in self._cache:
            return self._cache[key]

        pixels = resolve_length(key, self.context)
        if pixels is None:
            pixels = self._fallback(key)

        self._cache[key] = pixels
        return pixels

    def set_context(self, context: UnitContext):
        """Switch to a new unit context, dropping cached values if it changed."""
        if context != self.context:
            self.context = context
            self.clear_cache()

    def clear_cache(self):
        """Forget every resolved value."""
        self._cache.clear()

    def _fallback(self, expression: str) -> float:
        message = (
            f"unsupported length expression {expression!r}; "
            "use px, rem, em, vw, vh, vmin, vmax, in, cm, mm, pt or pc"
        )
        if expression.endswith("%"):
            message = (
                f"percentage length {expression!r} is not supported for minimum "
                "widths; use px, rem, em or viewport units instead"
            )
        if self._report:
            self._report(message)

        match = _LEADING_NUMBER.match(expression)
        return float(match.group(1)) if match else 0.0
