# Canvas composition module

import logging
import os
from typing import Sequence

from PIL import Image as PIL_Image

from .config import RGBA
from .layout import LayoutPlan
from .rendering import Block, rasterize_block

logger = logging.getLogger(__name__)


def compose_canvas(
    blocks: Sequence[Block],
    plan: LayoutPlan,
    canvas_width: int,
    canvas_height: int,
    background: RGBA = (13, 17, 23, 255),
) -> PIL_Image.Image:
    """
    Rasterize every placed block onto a solid background.

    Args:
        blocks: Blocks in the order the plan was computed for
        plan: Layout plan from plan_layout
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        background: RGBA background color

    Returns:
        RGBA PIL Image of exactly canvas_width x canvas_height
    """
    canvas = PIL_Image.new("RGBA", (canvas_width, canvas_height), color=tuple(background))

    for placement in plan.placements:
        block = blocks[placement.block_index]
        if placement.scaled_width < 1 or placement.scaled_height < 1:
            logger.warning("Block %r scaled below one pixel, skipped", block.name)
            continue
        try:
            tile = rasterize_block(
                block,
                plan.scale,
                size=(placement.scaled_width, placement.scaled_height),
            )
        except (ValueError, OSError) as e:
            logger.error("Error rasterizing block %r: %s", block.name, e)
            continue
        canvas.alpha_composite(tile, dest=(placement.offset_x, placement.offset_y))

    return canvas


def write_canvas(image: PIL_Image.Image, output_path: str) -> str:
    """Save the canvas as PNG, creating parent directories. Returns the path."""
    parent = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(parent, exist_ok=True)
    image.save(output_path, format="PNG")
    return output_path
