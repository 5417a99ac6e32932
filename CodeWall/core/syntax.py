# Syntax styling module

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from pygments.token import Comment, Keyword, Name, Number, Operator, String, Text

from .constants import DEFAULT_MAX_LINE_WIDTH, DEFAULT_MAX_LINES_PER_FILE
from .languages import DEFAULT_LANGUAGE, Language
from .text_processing import prepare_lines
from .tokens import Token, TokenKind, tokenize


class StyleCategory(str, Enum):
    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    LITERAL = "literal"
    PLAIN = "plain"


STYLE_MAP = {
    TokenKind.KEYWORD: StyleCategory.KEYWORD,
    TokenKind.STRING: StyleCategory.STRING,
    TokenKind.COMMENT: StyleCategory.COMMENT,
    TokenKind.NUMERIC: StyleCategory.LITERAL,
    TokenKind.IDENTIFIER: StyleCategory.PLAIN,
    TokenKind.OPERATOR: StyleCategory.PLAIN,
}

# Pygments token type used for color lookup
CATEGORY_TOKEN_TYPES = {
    StyleCategory.KEYWORD: Keyword,
    StyleCategory.STRING: String,
    StyleCategory.COMMENT: Comment,
    StyleCategory.LITERAL: Number,
    StyleCategory.PLAIN: Name,
}

# GitHub Dark colors
DARK_THEME = {
    "Keyword": "#FF7B72",
    "String": "#A5D6FF",
    "Number": "#79C0FF",
    "Comment": "#8B949E",
    "Operator": "#FF7B72",
    "Name": "#C9D1D9",
    "Text": "#484F58",
}

# Classic Light theme colors
LIGHT_THEME = {
    "Keyword": "#0000FF",
    "String": "#A31515",
    "Number": "#098658",
    "Comment": "#008000",
    "Operator": "#000000",
    "Name": "#24292F",
    "Text": "#8C959F",
}

THEMES = {"dark": DARK_THEME, "light": LIGHT_THEME}

# Line numbers and other gutter marks
GUTTER_TOKEN_TYPE = Text

_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


class StyledRun(NamedTuple):
    token: Token
    style: Optional[StyleCategory]
    markup: str


StyledLine = Tuple[StyledRun, ...]


def style_of(kind: TokenKind) -> Optional[StyleCategory]:
    """Style category for a token kind; whitespace is unstyled (None)."""
    return STYLE_MAP.get(kind)


def escape(text: str) -> str:
    """Escape &, <, >, " and ' for embedding in markup."""
    return text.translate(_ESCAPES)


def style_line(tokens: Sequence[Token]) -> StyledLine:
    """Pair each token with its style; non-whitespace text is escaped."""
    runs = []
    for token in tokens:
        if token.kind is TokenKind.WHITESPACE:
            runs.append(StyledRun(token, None, token.text))
        else:
            runs.append(StyledRun(token, style_of(token.kind), escape(token.text)))
    return tuple(runs)


def highlight_source(
    code: str,
    language: Language = DEFAULT_LANGUAGE,
    max_lines: int = DEFAULT_MAX_LINES_PER_FILE,
    max_line_width: int = DEFAULT_MAX_LINE_WIDTH,
) -> List[StyledLine]:
    """
    Truncate, tokenize and style source code line by line.

    Args:
        code: Source code text
        language: Language used for keyword lookup
        max_lines: Maximum lines kept from the top of the file
        max_line_width: Maximum characters kept per line

    Returns:
        One StyledLine per kept source line
    """
    lines = prepare_lines(code, max_lines=max_lines, max_line_width=max_line_width)
    return [style_line(tokenize(line, language)) for line in lines]


def _get_color_for_token(token_type, theme_map: dict) -> str:
    """Get color for token type, walking up the token hierarchy."""
    while token_type is not None:
        for key, color in theme_map.items():
            if str(token_type).endswith("." + key):
                return color
        token_type = token_type.parent
    return theme_map["Name"]


def color_for(style: Optional[StyleCategory], theme: str = "dark") -> str:
    """Hex color for a style category in the given theme."""
    theme_map = THEMES[theme]
    if style is None:
        return _get_color_for_token(GUTTER_TOKEN_TYPE, theme_map)
    return _get_color_for_token(CATEGORY_TOKEN_TYPES[style], theme_map)
