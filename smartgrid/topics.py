"""
Event Topics for smartgrid

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Item collection events
ITEMS_CHANGED = "items.changed"
"""Published when items are added, removed or reordered. Params: items (size specs)"""

ITEM_SIZE_CHANGED = "item.size_changed"
"""Published when one item's size spec changes. Params: index, size"""

# Configuration events
CONFIG_CHANGED = "config.changed"
"""Published when the grid configuration changes. Params: config"""

STYLE_CHANGED = "style.changed"
"""Published when font or viewport inputs change. Params: context (optional)"""

# Container events
CONTAINER_RESIZED = "container.resized"
"""Published when the container width changes. Params: width. Debounced."""

# Commands
CMD_REFRESH = "cmd.refresh"
"""Command: Drop cached values and lay out again."""

# Results
LAYOUT_COMPUTED = "layout.computed"
"""Published after every layout pass. Params: result"""

CONFIG_WARNING = "diagnostic.config_warning"
"""Published for non-fatal configuration problems. Params: message"""
