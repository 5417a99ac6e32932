# Grid layout module
#
# All blocks share one scale factor so strokes keep the same thickness across
# the whole canvas.

import math
from typing import List, NamedTuple, Sequence, Tuple, Union

from .constants import DEFAULT_LAYOUT_MODE, LAYOUT_MODES


class LayoutError(ValueError):
    """Raised when blocks cannot be laid out (empty batch or zero-sized block)."""


class Placement(NamedTuple):
    block_index: int
    scaled_width: int
    scaled_height: int
    offset_x: int
    offset_y: int


class LayoutPlan(NamedTuple):
    cols: int
    rows: int
    cell_width: float
    cell_height: float
    scale: float
    placements: Tuple[Placement, ...]


def _block_size(block) -> Tuple[float, float]:
    return block.width, block.height


def grid_shape(count: int, columns: Union[str, int, None] = "auto") -> Tuple[int, int]:
    """
    Compute (cols, rows) for `count` blocks.

    'auto' gives a near-square grid; an int fixes the column count.
    """
    if count < 1:
        raise LayoutError("Cannot lay out an empty set of blocks")
    if columns is None or columns == "auto":
        cols = math.ceil(math.sqrt(count))
    else:
        cols = int(columns)
        if cols < 1:
            raise LayoutError(f"Column count must be >= 1, got {columns}")
    rows = math.ceil(count / cols)
    return cols, rows


def validate_blocks(blocks: Sequence) -> None:
    """Check layout preconditions: at least one block, all with positive size."""
    if not blocks:
        raise LayoutError("Cannot lay out an empty set of blocks")
    for index, block in enumerate(blocks):
        width, height = _block_size(block)
        if width <= 0 or height <= 0:
            raise LayoutError(
                f"Block {index} has non-positive size {width}x{height}; "
                "degenerate blocks must be filtered before layout"
            )


def plan_layout(
    blocks: Sequence,
    canvas_width: int,
    canvas_height: int,
    mode: str = DEFAULT_LAYOUT_MODE,
    columns: Union[str, int, None] = "auto",
) -> LayoutPlan:
    """
    Place blocks on a fixed canvas in a grid with one global scale.

    Args:
        blocks: Items with positive `width` and `height`
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        mode: 'centered' (cells sized to the largest block, blocks centered
            in their cell) or 'edge-to-edge' (cells partition the canvas,
            blocks pinned to the cell's top-left)
        columns: 'auto' for a near-square grid, or a fixed column count

    Returns:
        LayoutPlan with grid shape, cell size, the shared scale and one
        Placement per block in input order
    """
    if mode not in LAYOUT_MODES:
        raise LayoutError(f"Unknown layout mode {mode!r}, expected one of {LAYOUT_MODES}")
    validate_blocks(blocks)

    count = len(blocks)
    cols, rows = grid_shape(count, columns)

    max_width = max(_block_size(b)[0] for b in blocks)
    max_height = max(_block_size(b)[1] for b in blocks)

    if mode == "edge-to-edge":
        cell_width = canvas_width / cols
        cell_height = canvas_height / rows
    else:
        fit = min(canvas_width / (cols * max_width), canvas_height / (rows * max_height))
        cell_width = max_width * fit
        cell_height = max_height * fit

    scale = min(cell_width / max_width, cell_height / max_height)
    centered = mode == "centered"

    placements: List[Placement] = []
    for index, block in enumerate(blocks):
        width, height = _block_size(block)
        col = index % cols
        row = index // cols

        scaled_width = math.floor(width * scale)
        scaled_height = math.floor(height * scale)

        x = col * cell_width
        y = row * cell_height
        if centered:
            x += (cell_width - scaled_width) / 2
            y += (cell_height - scaled_height) / 2

        placements.append(Placement(
            block_index=index,
            scaled_width=scaled_width,
            scaled_height=scaled_height,
            offset_x=math.floor(x),
            offset_y=math.floor(y),
        ))

    return LayoutPlan(cols, rows, cell_width, cell_height, scale, tuple(placements))


def layout(
    blocks: Sequence,
    canvas_width: int,
    canvas_height: int,
    mode: str = DEFAULT_LAYOUT_MODE,
    columns: Union[str, int, None] = "auto",
) -> List[Placement]:
    """Placements only; see plan_layout."""
    return list(plan_layout(blocks, canvas_width, canvas_height, mode, columns).placements)
