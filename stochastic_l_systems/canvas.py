"""
Rasterisation of turtle geometry with Pillow.

The second turtle pass produces segments relative to the measured bounding
rectangle, so the canvas here is allocated at exactly that size. Helpers turn
the canvas into numpy arrays and fit it into a fixed-size viewport.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from stochastic_l_systems.turtle_graphics import Point, TurtleGeometry

logger = logging.getLogger(__name__)


def _line_width(pen_width: float) -> int:
    return max(1, int(math.ceil(pen_width)))


def rasterize(geometry: TurtleGeometry,
              background: int = 0,
              ink: int = 255) -> Image.Image:
    """
    Draw the segments on a grayscale canvas the size of the bounding rectangle.

    Lines are drawn with the pen width the rectangle was measured for.

    Args:
        geometry: Output of turtle_graphics.interpret().
        background: Gray level of the empty canvas.
        ink: Gray level of the lines.

    Returns:
        Image.Image: Mode "L" image of size (geometry.width, geometry.height).
    """
    W, H = geometry.width, geometry.height
    img = Image.new("L", (W, H), background)
    draw = ImageDraw.Draw(img)
    width = _line_width(geometry.pen_width)

    for p0, p1 in geometry.segments:
        draw.line([p0, p1], fill=ink, width=width)

    logger.debug("rasterized %d segments on a %dx%d canvas", len(geometry.segments), W, H)
    return img


def to_array(img: Image.Image) -> np.ndarray:
    return np.array(img, dtype=np.uint8)


def ink_mask(img: Image.Image, background: int = 0) -> np.ndarray:
    """Binary mask, 1 where something was drawn."""
    arr = to_array(img)
    return (arr != background).astype(np.uint8)


def center_in_viewport(img: Image.Image,
                       viewport_size: Tuple[int, int],
                       background: int = 0) -> Image.Image:
    """
    Place the canvas in the middle of a viewport.

    If the viewport is smaller than the canvas along an axis, the canvas is
    aligned to the top/left edge and cropped.
    """
    W, H = viewport_size
    w, h = img.size
    out = Image.new(img.mode, (W, H), background)

    x = max(0, (W - w) // 2)
    y = max(0, (H - h) // 2)
    out.paste(img.crop((0, 0, min(w, W), min(h, H))), (x, y))
    return out


def render_fitted(geometry: TurtleGeometry,
                  canvas_size: Tuple[int, int] = (256, 256),
                  margin: int = 8,
                  pen_width: Optional[float] = None,
                  background: int = 0,
                  ink: int = 255) -> Image.Image:
    """
    Draw the geometry uniformly scaled to fill a fixed-size canvas.

    The drawing keeps its aspect ratio and is centred with at least
    ``margin`` pixels on every side. The pen width is in output pixels and
    defaults to the geometry's own.
    """
    W, H = canvas_size
    width = max(geometry.width, 1e-6)
    height = max(geometry.height, 1e-6)

    sx = (W - 2 * margin) / width
    sy = (H - 2 * margin) / height
    scale = max(min(sx, sy), 0.0)

    off_x = (W - width * scale) / 2
    off_y = (H - height * scale) / 2

    def to_px(p: Point) -> Point:
        return off_x + p[0] * scale, off_y + p[1] * scale

    img = Image.new("L", (W, H), background)
    draw = ImageDraw.Draw(img)
    line_width = _line_width(geometry.pen_width if pen_width is None else pen_width)

    for p0, p1 in geometry.segments:
        draw.line([to_px(p0), to_px(p1)], fill=ink, width=line_width)

    return img
