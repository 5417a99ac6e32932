"""Unit tests for token styling and escaping."""

from CodeWall.core import (
    Language,
    StyleCategory,
    Token,
    TokenKind,
    color_for,
    escape,
    highlight_source,
    style_line,
    style_of,
    tokenize,
)
from CodeWall.core.syntax import DARK_THEME, LIGHT_THEME


def test_style_mapping_is_total() -> None:
    expected = {
        TokenKind.KEYWORD: StyleCategory.KEYWORD,
        TokenKind.STRING: StyleCategory.STRING,
        TokenKind.COMMENT: StyleCategory.COMMENT,
        TokenKind.NUMERIC: StyleCategory.LITERAL,
        TokenKind.IDENTIFIER: StyleCategory.PLAIN,
        TokenKind.OPERATOR: StyleCategory.PLAIN,
        TokenKind.WHITESPACE: None,
    }
    for kind in TokenKind:
        assert style_of(kind) == expected[kind]


def test_escape_replaces_five_characters() -> None:
    assert escape("&<>\"'") == "&amp;&lt;&gt;&quot;&#039;"
    assert escape("plain text") == "plain text"
    assert escape("&amp;") == "&amp;amp;"


def test_style_line_escapes_non_whitespace_only() -> None:
    line = style_line(tokenize('if (a < "b") x'))
    markup = "".join(run.markup for run in line)
    assert markup == "if (a &lt; &quot;b&quot;) x"
    for run in line:
        if run.token.kind is TokenKind.WHITESPACE:
            assert run.style is None
            assert run.markup == run.token.text


def test_style_line_keeps_token_order() -> None:
    tokens = tokenize("return 1", Language.JAVASCRIPT)
    line = style_line(tokens)
    assert [run.token for run in line] == tokens
    assert [run.style for run in line] == [StyleCategory.KEYWORD, None, StyleCategory.LITERAL]


def test_highlight_source_applies_truncation() -> None:
    code = "\n".join("x" * 200 for _ in range(50))
    lines = highlight_source(code, max_lines=30, max_line_width=120)
    assert len(lines) == 30
    assert all(sum(len(run.token.text) for run in line) == 120 for line in lines)


def test_highlight_source_expands_tabs() -> None:
    (line,) = highlight_source("\tpass", language=Language.PYTHON)
    assert [run.token for run in line][:4] == [Token(TokenKind.WHITESPACE, " ")] * 4
    assert line[-1].style is StyleCategory.KEYWORD


def test_theme_colors() -> None:
    assert color_for(StyleCategory.KEYWORD, "dark") == DARK_THEME["Keyword"]
    assert color_for(StyleCategory.LITERAL, "dark") == DARK_THEME["Number"]
    assert color_for(StyleCategory.STRING, "light") == LIGHT_THEME["String"]
    assert color_for(StyleCategory.PLAIN, "light") == LIGHT_THEME["Name"]
    assert color_for(None, "light") == LIGHT_THEME["Text"]
