# Lexical tokenizer module
#
# Heuristic, single-line tokenizer. Each line is scanned on its own, so block
# comments and multi-line strings are not carried over between lines.

import string
from enum import Enum
from typing import List, NamedTuple

from .languages import DEFAULT_LANGUAGE, Language, keywords_for


class TokenKind(str, Enum):
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    STRING = "string"
    NUMERIC = "numeric"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"


class Token(NamedTuple):
    kind: TokenKind
    text: str


QUOTES = frozenset("\"'`")
DIGITS = frozenset(string.digits)
NUMERIC_CHARS = frozenset(string.digits + "._xXoObB")
WORD_START = frozenset(string.ascii_letters + "_$")
WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_$")


def _scan_string(line: str, start: int) -> int:
    """Return the end index of the string literal opened at `start`."""
    quote = line[start]
    i = start + 1
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            # Escape pair; a trailing backslash only consumes itself
            i = min(i + 2, n)
        elif ch == quote:
            return i + 1
        else:
            i += 1
    return n


def _scan_while(line: str, start: int, chars: frozenset) -> int:
    i = start
    n = len(line)
    while i < n and line[i] in chars:
        i += 1
    return i


def tokenize(line: str, lang: Language = DEFAULT_LANGUAGE) -> List[Token]:
    """
    Split one line of source into typed tokens.

    Rules are tried in a fixed order at every position and the scanner
    never backtracks:
        1. whitespace, one token per character
        2. `//` comment, absorbs the rest of the line
        3. quoted string (", ', `) with backslash escapes; unterminated
           strings end at end of line
        4. numeric literal
        5. identifier or keyword
        6. any other single character as an operator

    Args:
        line: A single line without its newline
        lang: Language whose keyword table is used

    Returns:
        List of Token; their texts concatenate back to `line`
    """
    keywords = keywords_for(lang)
    tokens = []
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]

        if ch.isspace():
            tokens.append(Token(TokenKind.WHITESPACE, ch))
            i += 1
            continue

        if ch == "/" and line.startswith("/", i + 1):
            tokens.append(Token(TokenKind.COMMENT, line[i:]))
            break

        if ch in QUOTES:
            end = _scan_string(line, i)
            tokens.append(Token(TokenKind.STRING, line[i:end]))
            i = end
            continue

        if ch in DIGITS:
            end = _scan_while(line, i, NUMERIC_CHARS)
            tokens.append(Token(TokenKind.NUMERIC, line[i:end]))
            i = end
            continue

        if ch in WORD_START:
            end = _scan_while(line, i, WORD_CHARS)
            word = line[i:end]
            kind = TokenKind.KEYWORD if word in keywords else TokenKind.IDENTIFIER
            tokens.append(Token(kind, word))
            i = end
            continue

        tokens.append(Token(TokenKind.OPERATOR, ch))
        i += 1

    return tokens


def tokenize_lines(text: str, lang: Language = DEFAULT_LANGUAGE) -> List[List[Token]]:
    """Tokenize every line of `text` independently."""
    return [tokenize(line, lang) for line in text.split("\n")]
