"""Unit tests for faux code block rendering."""

from PIL import ImageColor

from CodeWall.core import (
    RenderOptions,
    StyleCategory,
    block_to_svg,
    color_for,
    highlight_source,
    rasterize_block,
    render_block,
    styled_lines_to_html,
)

PLAIN = RenderOptions(show_line_numbers=False, line_cap="square")


def test_block_size_follows_content() -> None:
    block = render_block(highlight_source("ab cd"), PLAIN)
    # margin + 5 chars * font size + margin
    assert (block.width, block.height) == (40, 24)
    assert len(block.primitives) == 2

    block = render_block(highlight_source("ab cd\nx"), PLAIN)
    assert block.height == 2 * 10 + 2 * 4 + 8


def test_whitespace_only_advances() -> None:
    block = render_block(highlight_source("a   b"), PLAIN)
    first, second = block.primitives
    assert first.x == 10
    assert second.x == 10 + 4 * 4
    assert block.width == 10 + 5 * 4 + 10


def test_line_numbers_add_gutter() -> None:
    options = RenderOptions(show_line_numbers=True)
    block = render_block(highlight_source("ab cd\nx"), options)
    numbers = [s for s in block.primitives if s.color == color_for(None, options.theme)]
    assert len(numbers) == 2
    assert numbers[0].x == 10 - 3
    code = [s for s in block.primitives if s not in numbers]
    assert code[0].x == 10 + 3 * 4
    assert block.width == 10 + 3 * 4 + 5 * 4 + 10


def test_line_cap_and_theme() -> None:
    options = RenderOptions(show_line_numbers=False, line_cap="round", theme="light")
    block = render_block(highlight_source("return 1"), options)
    assert all(s.rounded for s in block.primitives)
    assert block.primitives[0].color == color_for(StyleCategory.KEYWORD, "light")
    assert block.primitives[1].color == color_for(StyleCategory.LITERAL, "light")


def test_block_name_is_kept() -> None:
    block = render_block(highlight_source("x"), PLAIN, name="main.py")
    assert block.name == "main.py"


def test_rasterize_block_draws_strokes() -> None:
    block = render_block(highlight_source("ab"), PLAIN)
    img = rasterize_block(block, 1.0)
    assert img.size == (block.width, block.height)
    assert img.mode == "RGBA"
    expected = ImageColor.getrgb(color_for(StyleCategory.PLAIN, PLAIN.theme)) + (255,)
    assert img.getpixel((12, 12)) == expected
    assert img.getpixel((1, 1))[3] == 0


def test_rasterize_block_honours_target_size() -> None:
    block = render_block(highlight_source("abc\ndef"), PLAIN)
    img = rasterize_block(block, 2.5, size=(100, 80))
    assert img.size == (100, 80)


def test_svg_has_one_rect_per_stroke() -> None:
    block = render_block(highlight_source("if (x) y"), PLAIN, name="a<b>.js")
    svg = block_to_svg(block)
    assert svg.startswith("<svg")
    assert svg.count("<rect") == len(block.primitives)
    assert f'width="{block.width}"' in svg
    assert "<title>a&lt;b&gt;.js</title>" in svg


def test_html_uses_escaped_markup() -> None:
    html = styled_lines_to_html(highlight_source("a < 'b'"))
    assert html == (
        '<div class="blob-code-inner"><span class="pl-e">a</span> '
        '<span class="pl-e">&lt;</span> <span class="pl-s">&#039;b&#039;</span></div>'
    )
