# Faux code block rendering module
#
# A block is a small vector drawing: every non-whitespace token becomes a
# horizontal stroke whose length follows the token text, so the block keeps
# the silhouette of the code without any glyphs.

from typing import List, NamedTuple, Sequence, Tuple

from PIL import Image as PIL_Image, ImageColor, ImageDraw

from .config import RenderOptions
from .syntax import StyledLine, StyleCategory, color_for, escape
from .tokens import TokenKind

# gist-syntax class names used for HTML output
HTML_CLASSES = {
    StyleCategory.KEYWORD: "pl-k",
    StyleCategory.STRING: "pl-s",
    StyleCategory.COMMENT: "pl-c",
    StyleCategory.LITERAL: "pl-c1",
    StyleCategory.PLAIN: "pl-e",
}


class Stroke(NamedTuple):
    x: float
    y: float
    length: float
    thickness: float
    color: str
    rounded: bool


class Block(NamedTuple):
    primitives: Tuple[Stroke, ...]
    width: int
    height: int
    name: str = ""


def _line_top(index: int, options: RenderOptions) -> float:
    return options.margin + index * (options.font_size + options.line_spacing)


def render_block(
    lines: Sequence[StyledLine],
    options: RenderOptions = None,
    name: str = "",
) -> Block:
    """
    Render styled lines as a faux code block.

    Args:
        lines: Styled lines, one per source line
        options: Render options (theme, font size, line spacing, caps, margin,
            line numbers)
        name: Display name carried on the block

    Returns:
        Block with its intrinsic width and height
    """
    if options is None:
        options = RenderOptions()

    advance = options.font_size
    thickness = options.font_size
    rounded = options.line_cap == "round"

    gutter = 0
    number_x = 0
    max_digits = len(str(len(lines)))
    if options.show_line_numbers and lines:
        gutter = (max_digits + 2) * advance
        number_x = max(0, options.margin + options.line_number_offset)
    code_x = options.margin + gutter

    primitives: List[Stroke] = []
    max_extent = 0

    for index, line in enumerate(lines):
        y = _line_top(index, options)

        if options.show_line_numbers:
            digits = len(str(index + 1))
            primitives.append(Stroke(
                number_x + (max_digits - digits) * advance, y,
                digits * advance, thickness, color_for(None, options.theme), rounded,
            ))

        column = 0
        for run in line:
            width = len(run.token.text)
            if run.token.kind is not TokenKind.WHITESPACE:
                primitives.append(Stroke(
                    code_x + column * advance, y,
                    width * advance, thickness, color_for(run.style, options.theme), rounded,
                ))
                max_extent = max(max_extent, column + width)
            column += width

    width = int(round(code_x + max_extent * advance + options.margin))
    if lines:
        content_height = len(lines) * options.font_size + (len(lines) - 1) * options.line_spacing
    else:
        content_height = 0
    height = int(round(2 * options.margin + content_height))

    return Block(tuple(primitives), width, height, name)


def rasterize_block(
    block: Block,
    scale: float,
    size: Tuple[int, int] = None,
) -> PIL_Image.Image:
    """
    Draw a block's strokes onto a transparent image at the given scale.

    Args:
        block: Block to draw
        scale: Multiplier applied to every coordinate
        size: Target (width, height); defaults to the floored scaled size

    Returns:
        RGBA PIL Image
    """
    if size is None:
        size = (int(block.width * scale), int(block.height * scale))
    width, height = max(1, size[0]), max(1, size[1])

    img = PIL_Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    for stroke in block.primitives:
        x0 = stroke.x * scale
        y0 = stroke.y * scale
        x1 = x0 + stroke.length * scale
        y1 = y0 + stroke.thickness * scale
        fill = ImageColor.getrgb(stroke.color)
        # Degenerate strokes still cover one pixel
        x1 = max(x1, x0 + 1)
        y1 = max(y1, y0 + 1)
        if stroke.rounded:
            radius = min(x1 - x0, y1 - y0) / 2
            draw.rounded_rectangle((x0, y0, x1, y1), radius=radius, fill=fill)
        else:
            draw.rectangle((x0, y0, x1, y1), fill=fill)

    return img


def block_to_svg(block: Block) -> str:
    """Serialize a block as a standalone SVG document."""
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{block.width}" '
        f'height="{block.height}" viewBox="0 0 {block.width} {block.height}">'
    ]
    if block.name:
        parts.append(f"<title>{escape(block.name)}</title>")
    for stroke in block.primitives:
        radius = stroke.thickness / 2 if stroke.rounded else 0
        parts.append(
            f'<rect x="{stroke.x:g}" y="{stroke.y:g}" width="{stroke.length:g}" '
            f'height="{stroke.thickness:g}" rx="{radius:g}" fill="{stroke.color}"/>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


def styled_lines_to_html(lines: Sequence[StyledLine]) -> str:
    """
    Serialize styled lines as HTML, one div per line.

    Token text is already escaped by the styler; whitespace is emitted as is.
    """
    html_lines = []
    for line in lines:
        spans = []
        for run in line:
            if run.style is None:
                spans.append(run.markup)
            else:
                spans.append(f'<span class="{HTML_CLASSES[run.style]}">{run.markup}</span>')
        html_lines.append(f'<div class="blob-code-inner">{"".join(spans)}</div>')
    return "\n".join(html_lines)
