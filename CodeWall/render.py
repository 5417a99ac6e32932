#!/usr/bin/env python3
"""
CodeWall Render CLI Tool

Usage:
    python -m CodeWall.render --dir ~/Desktop/Projects -n 5 -o wallpaper.png
    python -m CodeWall.render --files a.py b.js --layout edge-to-edge --columns 2
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .api import DEFAULT_OUTPUT, EmptyBatchError, render_recent_files, render_wallpaper
from .core import LAYOUT_MODES, RenderOptions, block_to_svg, parse_color, parse_columns

DEFAULT_PROJECTS_DIR = os.path.join(os.path.expanduser("~"), "Desktop", "Projects")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render recent code files as a faux code wallpaper")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dir", type=str, default=DEFAULT_PROJECTS_DIR, help="Directory to scan")
    source.add_argument("--files", nargs="+", help="Explicit files to render (skips scanning)")
    parser.add_argument("--count", "-n", type=int, default=5, help="Number of recent files")
    parser.add_argument("--output", "-o", type=str, default=DEFAULT_OUTPUT)
    parser.add_argument("--theme", choices=["light", "dark"])
    parser.add_argument("--font-size", type=int)
    parser.add_argument("--line-spacing", type=int)
    parser.add_argument("--line-cap", choices=["square", "round"])
    parser.add_argument("--margin", type=int)
    parser.add_argument("--no-line-numbers", dest="line_numbers", action="store_false", default=None)
    parser.add_argument("--line-number-offset", type=int)
    parser.add_argument("--max-lines", type=int)
    parser.add_argument("--max-width", type=int)
    parser.add_argument("--columns", type=parse_columns, help="Grid columns or 'auto'")
    parser.add_argument("--layout", choices=list(LAYOUT_MODES))
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--background", type=parse_color, help="Background color, e.g. '#0d1117'")
    parser.add_argument("--workers", type=int, default=4)
    parser.add_argument("--svg-dir", type=str, help="Also write each block as SVG here")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def options_from_args(args) -> RenderOptions:
    return RenderOptions.from_env().with_overrides(
        theme=args.theme,
        font_size=args.font_size,
        line_spacing=args.line_spacing,
        line_cap=args.line_cap,
        margin=args.margin,
        show_line_numbers=args.line_numbers,
        line_number_offset=args.line_number_offset,
        max_lines_per_file=args.max_lines,
        max_line_width=args.max_width,
        grid_columns=args.columns,
        layout_mode=args.layout,
        canvas_width=args.width,
        canvas_height=args.height,
        background_color=args.background,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = options_from_args(args).validate()
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.files:
            result = render_wallpaper(
                args.files, options, args.output, args.workers, show_progress=True
            )
        else:
            print(f"Scanning directory: {args.dir}")
            result = render_recent_files(
                args.dir, args.count, options, args.output, args.workers, show_progress=True
            )
    except EmptyBatchError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.svg_dir:
        svg_dir = Path(args.svg_dir)
        svg_dir.mkdir(parents=True, exist_ok=True)
        for i, block in enumerate(result.blocks, 1):
            path = svg_dir / f"{i:03d}_{block.name or 'block'}.svg"
            path.write_text(block_to_svg(block), encoding="utf-8")
            print(f"Saved to {path}")

    print(f"Wallpaper created: {result.output_path}")
    print(f"Dimensions: {options.canvas_width}x{options.canvas_height}")
    print(f"Files included: {len(result.blocks)}")
    for path in result.failed:
        print(f"  skipped: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
