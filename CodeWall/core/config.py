# Render configuration

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from PIL import ImageColor

from .constants import (
    BACKGROUND_COLORS,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_FONT_SIZE,
    DEFAULT_GRID_COLUMNS,
    DEFAULT_LAYOUT_MODE,
    DEFAULT_LINE_CAP,
    DEFAULT_LINE_NUMBER_OFFSET,
    DEFAULT_LINE_SPACING,
    DEFAULT_MARGIN,
    DEFAULT_MAX_LINE_WIDTH,
    DEFAULT_MAX_LINES_PER_FILE,
    DEFAULT_THEME,
    LAYOUT_MODES,
    LINE_CAPS,
    THEMES,
)

RGBA = Tuple[int, int, int, int]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower()


def parse_color(value: Union[str, tuple]) -> RGBA:
    """
    Parse a color into an RGBA tuple.

    Accepts hex strings, CSS color names, or RGB/RGBA tuples.
    """
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value)
    else:
        rgb = tuple(int(c) for c in value)
    if len(rgb) == 3:
        return (rgb[0], rgb[1], rgb[2], 255)
    if len(rgb) == 4:
        return rgb
    raise ValueError(f"Invalid color: {value!r}")


def parse_columns(value: Union[str, int, None]) -> Union[str, int]:
    """Normalize a grid column setting to 'auto' or a positive int."""
    if value is None:
        return "auto"
    if isinstance(value, str):
        value = value.strip().lower()
        if value in ("", "auto"):
            return "auto"
        value = int(value)
    if value < 1:
        raise ValueError(f"grid_columns must be >= 1 or 'auto', got {value}")
    return value


@dataclass(frozen=True)
class RenderOptions:
    """Options shared by the block renderer, layout and canvas writer."""

    theme: str = DEFAULT_THEME
    font_size: int = DEFAULT_FONT_SIZE
    line_spacing: int = DEFAULT_LINE_SPACING
    line_cap: str = DEFAULT_LINE_CAP
    margin: int = DEFAULT_MARGIN
    show_line_numbers: bool = True
    line_number_offset: int = DEFAULT_LINE_NUMBER_OFFSET
    max_lines_per_file: int = DEFAULT_MAX_LINES_PER_FILE
    max_line_width: int = DEFAULT_MAX_LINE_WIDTH
    grid_columns: Union[str, int] = DEFAULT_GRID_COLUMNS
    layout_mode: str = DEFAULT_LAYOUT_MODE
    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    background_color: Optional[RGBA] = field(default=None)

    @property
    def background(self) -> RGBA:
        """Background color, falling back to the theme default."""
        if self.background_color is not None:
            return parse_color(self.background_color)
        return BACKGROUND_COLORS[self.theme]

    def validate(self) -> "RenderOptions":
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme {self.theme!r}, expected one of {THEMES}")
        if self.line_cap not in LINE_CAPS:
            raise ValueError(f"Unknown line cap {self.line_cap!r}, expected one of {LINE_CAPS}")
        if self.layout_mode not in LAYOUT_MODES:
            raise ValueError(f"Unknown layout mode {self.layout_mode!r}, expected one of {LAYOUT_MODES}")
        for name in ("font_size", "max_lines_per_file", "max_line_width", "canvas_width", "canvas_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.line_spacing < 0 or self.margin < 0:
            raise ValueError("line_spacing and margin must not be negative")
        parse_columns(self.grid_columns)
        return self

    def with_overrides(self, **overrides) -> "RenderOptions":
        """Return a copy with non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "RenderOptions":
        """
        Build options from CODEWALL_* environment variables.

        Unset variables keep the built-in defaults.
        """
        background = os.getenv("CODEWALL_BACKGROUND", "").strip()
        return cls(
            theme=_env_str("CODEWALL_THEME", DEFAULT_THEME),
            font_size=_env_int("CODEWALL_FONT_SIZE", DEFAULT_FONT_SIZE),
            line_spacing=_env_int("CODEWALL_LINE_SPACING", DEFAULT_LINE_SPACING),
            line_cap=_env_str("CODEWALL_LINE_CAP", DEFAULT_LINE_CAP),
            margin=_env_int("CODEWALL_MARGIN", DEFAULT_MARGIN),
            show_line_numbers=_env_bool("CODEWALL_LINE_NUMBERS", True),
            line_number_offset=_env_int("CODEWALL_LINE_NUMBER_OFFSET", DEFAULT_LINE_NUMBER_OFFSET),
            max_lines_per_file=_env_int("CODEWALL_MAX_LINES", DEFAULT_MAX_LINES_PER_FILE),
            max_line_width=_env_int("CODEWALL_MAX_LINE_WIDTH", DEFAULT_MAX_LINE_WIDTH),
            grid_columns=parse_columns(os.getenv("CODEWALL_COLUMNS", DEFAULT_GRID_COLUMNS)),
            layout_mode=_env_str("CODEWALL_LAYOUT", DEFAULT_LAYOUT_MODE),
            canvas_width=_env_int("CODEWALL_WIDTH", DEFAULT_CANVAS_WIDTH),
            canvas_height=_env_int("CODEWALL_HEIGHT", DEFAULT_CANVAS_HEIGHT),
            background_color=parse_color(background) if background else None,
        )
