# CodeWall Simplified API

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from PIL import Image as PIL_Image
from tqdm import tqdm

from .core import (
    Block,
    LayoutPlan,
    RenderOptions,
    analyze_text_structure,
    classify,
    compose_canvas,
    get_recent_files,
    highlight_source,
    plan_layout,
    render_block,
    write_canvas,
)

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "./codewall-wallpaper.png"


class EmptyBatchError(RuntimeError):
    """Raised when no input file produced a usable block."""


class WallpaperResult(NamedTuple):
    output_path: str
    plan: LayoutPlan
    blocks: Tuple[Block, ...]
    failed: Tuple[str, ...]


def render_code_to_block(
    code: str,
    file_name: str = "",
    options: RenderOptions = None,
) -> Block:
    """
    Render source code as a faux code block.

    Args:
        code: Source code text
        file_name: File name, used for language detection and as block name
        options: Render options

    Returns:
        Block
    """
    if options is None:
        options = RenderOptions()
    language = classify(file_name)
    lines = highlight_source(
        code,
        language=language,
        max_lines=options.max_lines_per_file,
        max_line_width=options.max_line_width,
    )
    return render_block(lines, options, name=file_name)


def render_file(path: str, options: RenderOptions = None) -> Block:
    """Read a file and render it; I/O and decode errors propagate."""
    with open(path, "r", encoding="utf-8") as f:
        code = f.read()
    file_name = os.path.basename(path)
    structure = analyze_text_structure(code.split("\n"))
    logger.debug(
        "%s: %d lines, longest %d chars",
        file_name, structure["num_lines"], structure["max_line_chars"],
    )
    return render_code_to_block(code, file_name, options)


def render_blocks(
    paths: Sequence[str],
    options: RenderOptions = None,
    max_workers: int = 4,
    show_progress: bool = False,
) -> Tuple[List[Block], List[str]]:
    """
    Render files in parallel, dropping the ones that fail.

    Args:
        paths: File paths, in the order blocks should appear
        options: Render options
        max_workers: Thread pool size
        show_progress: Show a tqdm progress bar

    Returns:
        (blocks in input order, paths that failed)
    """
    if options is None:
        options = RenderOptions()
    results: Dict[int, Block] = {}
    failed: List[str] = []

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        futures = {executor.submit(render_file, path, options): (i, path) for i, path in enumerate(paths)}
        completed = as_completed(futures)
        if show_progress:
            completed = tqdm(completed, total=len(futures), desc="Rendering files")
        for future in completed:
            index, path = futures[future]
            try:
                block = future.result()
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Error processing file %s: %s", path, e)
                failed.append(path)
                continue
            if block.width <= 0 or block.height <= 0:
                logger.warning("Skipping %s: empty block (%dx%d)", path, block.width, block.height)
                failed.append(path)
                continue
            results[index] = block

    blocks = [results[i] for i in sorted(results)]
    failed.sort(key=list(paths).index)
    return blocks, failed


def compose_wallpaper(
    blocks: Sequence[Block],
    options: RenderOptions = None,
) -> Tuple[PIL_Image.Image, LayoutPlan]:
    """
    Lay out blocks on the canvas and rasterize them.

    Raises:
        EmptyBatchError: if `blocks` is empty
    """
    if options is None:
        options = RenderOptions()
    if not blocks:
        raise EmptyBatchError("No valid code files found to generate wallpaper.")

    plan = plan_layout(
        blocks,
        options.canvas_width,
        options.canvas_height,
        mode=options.layout_mode,
        columns=options.grid_columns,
    )
    logger.info(
        "Grid %dx%d, cell %.1fx%.1f, scale %.3f",
        plan.cols, plan.rows, plan.cell_width, plan.cell_height, plan.scale,
    )
    image = compose_canvas(
        blocks, plan, options.canvas_width, options.canvas_height, options.background
    )
    return image, plan


def render_wallpaper(
    paths: Sequence[str],
    options: RenderOptions = None,
    output_path: str = DEFAULT_OUTPUT,
    max_workers: int = 4,
    show_progress: bool = False,
) -> WallpaperResult:
    """
    Render files into a single wallpaper image and write it to disk.

    Files that cannot be read are skipped; only an empty batch fails.

    Args:
        paths: Source file paths
        options: Render options
        output_path: PNG output path
        max_workers: Thread pool size for per-file rendering
        show_progress: Show a tqdm progress bar

    Returns:
        WallpaperResult
    """
    if options is None:
        options = RenderOptions()
    options.validate()

    blocks, failed = render_blocks(paths, options, max_workers, show_progress)
    image, plan = compose_wallpaper(blocks, options)
    write_canvas(image, output_path)
    return WallpaperResult(output_path, plan, tuple(blocks), tuple(failed))


def render_recent_files(
    root: str,
    count: int = 5,
    options: RenderOptions = None,
    output_path: str = DEFAULT_OUTPUT,
    max_workers: int = 4,
    show_progress: bool = False,
) -> WallpaperResult:
    """Discover the `count` most recently edited files under `root` and render them."""
    files = get_recent_files(root, count)
    logger.info("Found %d recent files under %s", len(files), root)
    return render_wallpaper(
        [f.path for f in files], options, output_path, max_workers, show_progress
    )
