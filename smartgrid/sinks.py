"""
Layout Sinks

Receivers of layout results.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from .protocol import LayoutResult


class LayoutSink(ABC):
    """Abstract base class for whatever applies a layout to the host."""

    @abstractmethod
    def apply(self, result: LayoutResult):
        """
        Apply a layout result.

        Each item occupies ``result.spans[i]`` of ``result.grid_resolution``
        equal-width tracks; each row of ``result.rows`` starts a new line.
        """
        pass


class RecordingSink(LayoutSink):
    """Keeps every result it receives."""

    def __init__(self):
        self.results: List[LayoutResult] = []

    def apply(self, result: LayoutResult):
        self.results.append(result)

    @property
    def last(self) -> Optional[LayoutResult]:
        return self.results[-1] if self.results else None
