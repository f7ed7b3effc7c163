"""
Command Line Interface

Prints the layout of a number of items, optionally rendering a preview.
"""

from __future__ import annotations
import argparse
from typing import List, Optional

from .config import GridConfig
from .engine import compute_layout
from .protocol import LayoutResult, MinWidthConfig, UnitContext
from .units import UnitResolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartgrid",
        description="Lay out items on a balanced grid without orphaned rows.",
    )
    parser.add_argument("items", type=int, help="number of items")
    parser.add_argument("--columns", default="3", help="maximum columns (1-12)")
    parser.add_argument(
        "--sizes",
        default="",
        help="comma separated size specs (small, medium, large or an integer); "
        "empty entries mean no spec",
    )
    parser.add_argument("--fill", default="fill-and-expand", help="fill policy")
    parser.add_argument("--fill-last", default=None, help="last row fill policy")
    parser.add_argument("--balance", default="auto", help="auto, expand or preserve")
    parser.add_argument("--width", type=float, default=None, help="container width")
    parser.add_argument("--min-width", default=None, help="minimum item width")
    parser.add_argument("--gap", default=None, help="gap between items")
    parser.add_argument("--font-size", type=float, default=16.0)
    parser.add_argument("--preview", default=None, help="write a PNG preview here")
    return parser


def parse_sizes(text: str, count: int) -> List[Optional[str]]:
    """Size specs for count items, missing entries meaning no spec."""
    given = [part.strip() or None for part in text.split(",")] if text else []
    return (given + [None] * count)[:count]


def format_result(result: LayoutResult) -> str:
    lines = [
        f"effective columns: {result.effective_columns}",
        f"grid resolution:   {result.grid_resolution}",
        f"rows:              {[len(row) for row in result.rows]}",
    ]
    for number, spans in enumerate(result.row_spans(), start=1):
        lines.append(f"  row {number}: spans {spans}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    config = GridConfig(
        max_columns=args.columns,
        fill_policy=args.fill,
        last_row_policy=args.fill_last,
        balance=args.balance,
        min_widths=MinWidthConfig(small=args.min_width, gap=args.gap),
    )
    context = UnitContext(font_size=args.font_size, root_font_size=args.font_size)
    resolver = UnitResolver(context, report=lambda message: print(f"smartgrid: {message}"))

    result = compute_layout(
        parse_sizes(args.sizes, max(0, args.items)),
        config,
        args.width,
        resolver,
    )
    print(format_result(result))

    if args.preview:
        from .preview import PreviewRenderer

        PreviewRenderer().write_png(result, args.preview)
        print(f"preview written to {args.preview}")

    return 0
