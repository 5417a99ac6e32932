"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from CodeWall.core import RenderOptions


@pytest.fixture
def small_options() -> RenderOptions:
    """Options with a small canvas so composition stays fast."""
    return RenderOptions(canvas_width=400, canvas_height=300)


@pytest.fixture
def source_files(tmp_path: Path) -> list:
    """Four small source files in different languages."""
    contents = {
        "app.js": "const x = 1; // one\nfunction f(a) {\n  return a * 2;\n}\n",
        "main.py": "def main():\n    print('hello')\n    return 0\n",
        "Main.java": "public class Main {\n  static int n = 42;\n}\n",
        "util.ts": "export const greet = (s) => `hi ${s}`;\n",
    }
    paths = []
    for name, text in contents.items():
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        paths.append(str(path))
    return paths
