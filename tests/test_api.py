"""Tests for the end-to-end wallpaper pipeline."""

from pathlib import Path

import pytest
from PIL import Image

from CodeWall import (
    EmptyBatchError,
    RenderOptions,
    render_blocks,
    render_code_to_block,
    render_recent_files,
    render_wallpaper,
)
from CodeWall.render import main


def test_partial_failure_keeps_remaining_files(tmp_path, source_files, small_options) -> None:
    missing = str(tmp_path / "gone.py")
    paths = source_files[:2] + [missing] + source_files[2:]
    out = tmp_path / "wall.png"

    result = render_wallpaper(paths, small_options, str(out))

    assert len(result.blocks) == 4
    assert result.failed == (missing,)
    assert len(result.plan.placements) == 4
    with Image.open(out) as image:
        assert image.size == (400, 300)


def test_blocks_keep_input_order(source_files) -> None:
    blocks, failed = render_blocks(list(reversed(source_files)), max_workers=4)
    assert failed == []
    assert [b.name for b in blocks] == [Path(p).name for p in reversed(source_files)]


def test_undecodable_file_is_dropped(tmp_path, source_files) -> None:
    binary = tmp_path / "blob.js"
    binary.write_bytes(b"\xff\xfe\x00\x80")
    blocks, failed = render_blocks([str(binary)] + source_files[:1])
    assert len(blocks) == 1
    assert failed == [str(binary)]


def test_degenerate_block_is_dropped(tmp_path) -> None:
    empty = tmp_path / "empty.py"
    empty.write_text("", encoding="utf-8")
    options = RenderOptions(margin=0, show_line_numbers=False)
    blocks, failed = render_blocks([str(empty)], options)
    assert blocks == []
    assert failed == [str(empty)]


def test_empty_batch_fails(tmp_path, small_options) -> None:
    with pytest.raises(EmptyBatchError):
        render_wallpaper([str(tmp_path / "nope.js")], small_options, str(tmp_path / "out.png"))
    assert not (tmp_path / "out.png").exists()


def test_language_is_taken_from_file_name() -> None:
    py_block = render_code_to_block("def f(): pass", "m.py")
    js_block = render_code_to_block("def f(): pass", "m.js")
    assert {s.color for s in py_block.primitives} != {s.color for s in js_block.primitives}


def test_render_recent_files(tmp_path, source_files, small_options) -> None:
    out = tmp_path / "recent.png"
    result = render_recent_files(str(tmp_path), count=2, options=small_options, output_path=str(out))
    assert len(result.blocks) == 2
    assert out.exists()


def test_cli_renders_files(tmp_path, source_files, capsys) -> None:
    out = tmp_path / "cli.png"
    svg_dir = tmp_path / "svg"
    code = main([
        "--files", *source_files,
        "-o", str(out),
        "--width", "320", "--height", "200",
        "--layout", "edge-to-edge", "--columns", "2",
        "--svg-dir", str(svg_dir),
    ])
    assert code == 0
    assert out.exists()
    assert len(list(svg_dir.glob("*.svg"))) == 4
    assert "Files included: 4" in capsys.readouterr().out


def test_cli_empty_batch_exits_nonzero(tmp_path, capsys) -> None:
    code = main(["--files", str(tmp_path / "missing.py"), "-o", str(tmp_path / "x.png")])
    assert code == 1
    assert "No valid code files" in capsys.readouterr().err
