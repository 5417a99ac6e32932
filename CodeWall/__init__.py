# CodeWall - Faux Code Wallpaper Renderer
#
# Simple usage:
#   from CodeWall import render_recent_files, render_wallpaper
#
# CLI:
#   python -m CodeWall.render --dir ~/Desktop/Projects -n 5 -o wallpaper.png

from .api import (
    EmptyBatchError,
    WallpaperResult,
    render_code_to_block,
    render_file,
    render_blocks,
    compose_wallpaper,
    render_wallpaper,
    render_recent_files,
)
from .core import (
    RenderOptions,
    Language,
    classify,
    Token,
    TokenKind,
    tokenize,
    StyleCategory,
    style_of,
    escape,
    highlight_source,
    Block,
    render_block,
    LayoutError,
    Placement,
    plan_layout,
    layout,
    get_recent_files,
)

__version__ = "1.0.0"

__all__ = [
    # High-level API
    "EmptyBatchError",
    "WallpaperResult",
    "render_code_to_block",
    "render_file",
    "render_blocks",
    "compose_wallpaper",
    "render_wallpaper",
    "render_recent_files",
    # Configuration
    "RenderOptions",
    # Tokenizing and styling
    "Language",
    "classify",
    "Token",
    "TokenKind",
    "tokenize",
    "StyleCategory",
    "style_of",
    "escape",
    "highlight_source",
    # Rendering and layout
    "Block",
    "render_block",
    "LayoutError",
    "Placement",
    "plan_layout",
    "layout",
    # Discovery
    "get_recent_files",
]
