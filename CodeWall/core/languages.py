# Language detection module

from enum import Enum
from types import MappingProxyType


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"


DEFAULT_LANGUAGE = Language.JAVASCRIPT

EXTENSION_MAP = {
    "py": Language.PYTHON,
    "js": Language.JAVASCRIPT,
    "jsx": Language.JAVASCRIPT,
    "ts": Language.JAVASCRIPT,
    "tsx": Language.JAVASCRIPT,
    "java": Language.JAVA,
}


def classify(file_name: str) -> Language:
    """
    Detect language from the file extension.

    Only the text after the final dot counts. Unknown or missing
    extensions fall back to JavaScript.
    """
    _, dot, ext = file_name.rpartition(".")
    if not dot:
        ext = ""
    return EXTENSION_MAP.get(ext.lower(), DEFAULT_LANGUAGE)


# Keyword tables, looked up case-sensitively by the tokenizer
KEYWORDS = MappingProxyType({
    Language.JAVASCRIPT: frozenset({
        "abstract", "arguments", "await", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "debugger", "default", "delete", "do",
        "double", "else", "enum", "eval", "export", "extends", "false", "final",
        "finally", "float", "for", "function", "goto", "if", "implements", "import",
        "in", "instanceof", "int", "interface", "let", "long", "native", "new", "null",
        "package", "private", "protected", "public", "return", "short", "static",
        "super", "switch", "synchronized", "this", "throw", "throws", "transient",
        "true", "try", "typeof", "var", "void", "volatile", "while", "with", "yield",
        "async", "of",
    }),
    Language.PYTHON: frozenset({
        "False", "None", "True", "and", "as", "assert", "async", "await", "break",
        "class", "continue", "def", "del", "elif", "else", "except", "finally", "for",
        "from", "global", "if", "import", "in", "is", "lambda", "nonlocal", "not", "or",
        "pass", "raise", "return", "try", "while", "with", "yield",
    }),
    Language.JAVA: frozenset({
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "final", "finally", "float", "for", "goto", "if", "implements",
        "import", "instanceof", "int", "interface", "long", "native", "new", "null",
        "package", "private", "protected", "public", "return", "short", "static",
        "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "try", "void", "volatile", "while", "true", "false",
    }),
})


def keywords_for(lang) -> frozenset:
    """Keyword set for a language, falling back to the JavaScript table."""
    return KEYWORDS.get(lang, KEYWORDS[DEFAULT_LANGUAGE])
