"""
Layout Preview Rendering with Cairo

Draws a layout result as a PNG: one band per row, one box per item, each
box as wide as its share of the grid tracks.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union
import cairo

from .protocol import LayoutResult
from .sinks import LayoutSink

Color = Tuple[int, int, int, int]


def parse_color(color: Union[str, Color]) -> Color:
    """
    Parse a color value into RGBA tuple.

    Accepts "#RRGGBB", "#RRGGBBAA" or an (R, G, B, A) tuple of 0-255 values.
    """
    if isinstance(color, str):
        color = color.lstrip("#")
        if len(color) == 6:
            r, g, b = int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)
            return (r, g, b, 0xFF)
        elif len(color) == 8:
            return tuple(int(color[i : i + 2], 16) for i in range(0, 8, 2))
        raise ValueError(f"Invalid color format: {color}. Use #RRGGBB or #RRGGBBAA")
    elif isinstance(color, tuple) and len(color) == 4:
        return color
    raise ValueError(f"Invalid color type: {type(color)}. Use hex string or RGBA tuple")


@dataclass
class PreviewStyle:
    """Styling of the preview image."""

    width: int = 640
    row_height: int = 48
    gap: int = 8
    bg_color: Union[str, Color] = "#2e3440"
    item_color: Union[str, Color] = "#5e81ac"
    tagged_item_color: Union[str, Color] = "#b48ead"
    text_color: Union[str, Color] = "#d8dee9"
    font_family: str = "sans-serif"
    font_size: int = 12

    def __post_init__(self):
        """Parse color strings into tuples."""
        self.bg_color = parse_color(self.bg_color)
        self.item_color = parse_color(self.item_color)
        self.tagged_item_color = parse_color(self.tagged_item_color)
        self.text_color = parse_color(self.text_color)


class PreviewRenderer:
    """Renders layout results onto Cairo image surfaces."""

    def __init__(self, style: PreviewStyle = None):
        self.style = style or PreviewStyle()

    def image_height(self, result: LayoutResult) -> int:
        rows = max(1, len(result.rows))
        return rows * self.style.row_height + (rows + 1) * self.style.gap

    def render(self, result: LayoutResult) -> cairo.ImageSurface:
        """Render a layout result to a new surface."""
        style = self.style
        height = self.image_height(result)
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, style.width, height)
        ctx = cairo.Context(surface)

        self._set_cairo_color(ctx, style.bg_color)
        ctx.rectangle(0, 0, style.width, height)
        ctx.fill()

        if result.grid_resolution > 0:
            usable = style.width - 2 * style.gap
            track = usable / result.grid_resolution

            for row_index, row in enumerate(result.rows):
                y = style.gap + row_index * (style.row_height + style.gap)
                x = float(style.gap)
                for item in row:
                    span = result.spans[item.index]
                    box_width = max(1.0, span * track - style.gap)
                    self._draw_item(ctx, item.index, item.tagged, x, y, box_width)
                    x += span * track

        surface.flush()
        return surface

    def write_png(self, result: LayoutResult, path: str):
        """Render a layout result to a PNG file."""
        surface = self.render(result)
        surface.write_to_png(path)

    def _draw_item(self, ctx, index: int, tagged: bool, x: float, y: float, width: float):
        style = self.style
        color = style.tagged_item_color if tagged else style.item_color
        self._set_cairo_color(ctx, color)
        ctx.rectangle(x, y, width, style.row_height)
        ctx.fill()

        label = str(index + 1)
        ctx.select_font_face(
            style.font_family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL
        )
        ctx.set_font_size(style.font_size)
        extents = ctx.text_extents(label)
        self._set_cairo_color(ctx, style.text_color)
        ctx.move_to(
            x + (width - extents.width) / 2,
            y + (style.row_height + extents.height) / 2,
        )
        ctx.show_text(label)

    def _set_cairo_color(self, ctx, color: Color):
        r, g, b, a = color
        ctx.set_source_rgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


class PreviewSink(LayoutSink):
    """Writes every applied layout to a PNG file."""

    def __init__(self, path: str, style: PreviewStyle = None):
        self.path = path
        self.renderer = PreviewRenderer(style)
        self.frames = 0

    def apply(self, result: LayoutResult):
        self.renderer.write_png(result, self.path)
        self.frames += 1
