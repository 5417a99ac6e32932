# Text preprocessing module

from typing import Dict, List

from .constants import DEFAULT_MAX_LINE_WIDTH, DEFAULT_MAX_LINES_PER_FILE, TAB_SPACES


def prepare_lines(
    text: str,
    max_lines: int = DEFAULT_MAX_LINES_PER_FILE,
    max_line_width: int = DEFAULT_MAX_LINE_WIDTH,
) -> List[str]:
    """
    Prepare source text for tokenizing.

    Args:
        text: Original file content
        max_lines: Keep at most this many lines from the top
        max_line_width: Cut each line to this many characters

    Returns:
        List of lines, tabs expanded and truncated
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")[:max_lines]
    return [line.replace("\t", TAB_SPACES)[:max_line_width] for line in lines]


def analyze_text_structure(lines: List[str]) -> Dict:
    """
    Analyze prepared lines.

    Returns:
        {'num_lines': int, 'max_line_chars': int, 'avg_line_chars': float}
    """
    num_lines = len(lines)
    line_lengths = [len(line) for line in lines]
    max_line_chars = max(line_lengths) if line_lengths else 0
    avg_line_chars = sum(line_lengths) / num_lines if num_lines > 0 else 0

    return {
        "num_lines": num_lines,
        "max_line_chars": max_line_chars,
        "avg_line_chars": avg_line_chars,
    }
