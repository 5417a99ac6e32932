# CodeWall Core Module
# Tokenizing, styling, faux code rendering and grid layout

from .constants import (
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_SPACING,
    DEFAULT_MARGIN,
    DEFAULT_MAX_LINES_PER_FILE,
    DEFAULT_MAX_LINE_WIDTH,
    LAYOUT_MODES,
)
from .config import RenderOptions, parse_color, parse_columns
from .languages import Language, classify, keywords_for
from .tokens import Token, TokenKind, tokenize, tokenize_lines
from .text_processing import prepare_lines, analyze_text_structure
from .syntax import (
    StyleCategory,
    StyledRun,
    style_of,
    escape,
    style_line,
    highlight_source,
    color_for,
)
from .rendering import (
    Block,
    Stroke,
    render_block,
    rasterize_block,
    block_to_svg,
    styled_lines_to_html,
)
from .layout import LayoutError, LayoutPlan, Placement, grid_shape, plan_layout, layout
from .canvas import compose_canvas, write_canvas
from .discovery import SourceFile, scan_directory, get_recent_files

__all__ = [
    # Constants
    "DEFAULT_CANVAS_WIDTH",
    "DEFAULT_CANVAS_HEIGHT",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_LINE_SPACING",
    "DEFAULT_MARGIN",
    "DEFAULT_MAX_LINES_PER_FILE",
    "DEFAULT_MAX_LINE_WIDTH",
    "LAYOUT_MODES",
    # Configuration
    "RenderOptions",
    "parse_color",
    "parse_columns",
    # Languages
    "Language",
    "classify",
    "keywords_for",
    # Tokenizer
    "Token",
    "TokenKind",
    "tokenize",
    "tokenize_lines",
    # Text processing
    "prepare_lines",
    "analyze_text_structure",
    # Styling
    "StyleCategory",
    "StyledRun",
    "style_of",
    "escape",
    "style_line",
    "highlight_source",
    "color_for",
    # Rendering
    "Block",
    "Stroke",
    "render_block",
    "rasterize_block",
    "block_to_svg",
    "styled_lines_to_html",
    # Layout
    "LayoutError",
    "LayoutPlan",
    "Placement",
    "grid_shape",
    "plan_layout",
    "layout",
    # Canvas
    "compose_canvas",
    "write_canvas",
    # Discovery
    "SourceFile",
    "scan_directory",
    "get_recent_files",
]
