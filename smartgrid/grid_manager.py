"""
Grid Manager

Binds the layout engine to a host: listens for change events, keeps the
caches that live across passes, and hands results to a sink.
"""

from __future__ import annotations
import threading
from typing import Callable, List, Optional, Sequence

from pubsub import pub

from . import topics
from .config import GridConfig
from .debounce import Debouncer
from .engine import compute_layout
from .layouts.column_resolver import ColumnResolver
from .layouts.size_classifier import SizeSpec
from .protocol import LayoutResult, UnitContext
from .sinks import LayoutSink
from .units import UnitResolver

# Seconds a resize burst must be quiet before a pass runs
RESIZE_DEBOUNCE = 0.1


class GridManager:
    """
    Recomputes a grid layout whenever its inputs change.

    This component subscribes to item, configuration, style and resize
    events. It publishes LAYOUT_COMPUTED after every pass and
    CONFIG_WARNING for non-fatal configuration problems.

    Responsibilities:
    - ITEMS_CHANGED / ITEM_SIZE_CHANGED: lay out again immediately
    - CONFIG_CHANGED: lay out again immediately
    - CONTAINER_RESIZED: lay out again once resizing settles
    - STYLE_CHANGED / CMD_REFRESH: drop cached lengths, lay out again
    """

    def __init__(
        self,
        sink: LayoutSink,
        config: Optional[GridConfig] = None,
        items: Optional[Sequence[SizeSpec]] = None,
        context: Optional[UnitContext] = None,
        width: Optional[float] = None,
        debounce_delay: float = RESIZE_DEBOUNCE,
        timer_factory: Callable = threading.Timer,
    ):
        """Initialize grid manager.

        Args:
            sink: Receives every layout result
            config: Grid configuration
            items: Size spec of each item (None for no spec)
            context: Font and viewport dimensions for relative lengths
            width: Container width in pixels, None when unknown
            debounce_delay: Quiet period for resize events, in seconds
            timer_factory: Creates the resize timer (threading.Timer signature)
        """
        self.sink = sink
        self.config = config or GridConfig()
        self.items: List[SizeSpec] = list(items or [])
        self.width = width
        self.last_result: Optional[LayoutResult] = None

        self.unit_resolver = UnitResolver(context, report=self._report)
        self.column_resolver = ColumnResolver(self.unit_resolver.resolve)
        self.resize_debouncer = Debouncer(debounce_delay, self.layout, timer_factory)
        self._lock = threading.RLock()
        self._closed = False

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events GridManager cares about."""
        pub.subscribe(self._on_items_changed, topics.ITEMS_CHANGED)
        pub.subscribe(self._on_item_size_changed, topics.ITEM_SIZE_CHANGED)
        pub.subscribe(self._on_config_changed, topics.CONFIG_CHANGED)
        pub.subscribe(self._on_style_changed, topics.STYLE_CHANGED)
        pub.subscribe(self._on_container_resized, topics.CONTAINER_RESIZED)
        pub.subscribe(self._on_refresh, topics.CMD_REFRESH)

    def close(self):
        """Stop listening for events and drop any scheduled pass."""
        self.resize_debouncer.cancel()
        if self._closed:
            return
        self._closed = True
        pub.unsubscribe(self._on_items_changed, topics.ITEMS_CHANGED)
        pub.unsubscribe(self._on_item_size_changed, topics.ITEM_SIZE_CHANGED)
        pub.unsubscribe(self._on_config_changed, topics.CONFIG_CHANGED)
        pub.unsubscribe(self._on_style_changed, topics.STYLE_CHANGED)
        pub.unsubscribe(self._on_container_resized, topics.CONTAINER_RESIZED)
        pub.unsubscribe(self._on_refresh, topics.CMD_REFRESH)

    def layout(self) -> LayoutResult:
        """Run a layout pass now and hand the result to the sink."""
        with self._lock:
            self.resize_debouncer.cancel()
            result = compute_layout(
                self.items,
                self.config,
                self.width,
                self.unit_resolver,
                self.column_resolver,
            )
            self.last_result = result
            self.sink.apply(result)

        pub.sendMessage(topics.LAYOUT_COMPUTED, result=result)
        return result

    def set_items(self, items: Sequence[SizeSpec]):
        """Replace the item sequence."""
        self.items = list(items)
        self.layout()

    def set_item_size(self, index: int, size: SizeSpec):
        """Change the size spec of one item."""
        if not 0 <= index < len(self.items):
            return
        self.items[index] = size
        self.layout()

    def set_config(self, config: GridConfig):
        """Replace the configuration."""
        self.config = config
        self.layout()

    def resize(self, width: float):
        """Record a new container width; the pass runs once resizing settles."""
        self.width = width
        self.resize_debouncer.trigger()

    def refresh(self, context: Optional[UnitContext] = None):
        """Drop cached lengths and columns, then lay out again."""
        with self._lock:
            if context is not None:
                self.unit_resolver.set_context(context)
            self.unit_resolver.clear_cache()
            self.column_resolver.invalidate()
        self.layout()

    def _report(self, message: str):
        """Report a non-fatal configuration problem."""
        print(f"smartgrid: {message}")
        pub.sendMessage(topics.CONFIG_WARNING, message=message)

    # Event handlers
    def _on_items_changed(self, items):
        """Handle ITEMS_CHANGED event."""
        self.set_items(items)

    def _on_item_size_changed(self, index, size=None):
        """Handle ITEM_SIZE_CHANGED event."""
        self.set_item_size(index, size)

    def _on_config_changed(self, config):
        """Handle CONFIG_CHANGED event."""
        self.set_config(config)

    def _on_style_changed(self, context=None):
        """Handle STYLE_CHANGED event."""
        self.refresh(context)

    def _on_container_resized(self, width):
        """Handle CONTAINER_RESIZED event."""
        self.resize(width)

    def _on_refresh(self):
        """Handle CMD_REFRESH command."""
        self.refresh()
