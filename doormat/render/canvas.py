"""
Pixel buffer for one generation pass: a Pillow RGB image with an RGBA-blending ImageDraw,
plus numpy round-trips for whole-surface passes.
"""
import math
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from ..color import clamp_channel

Fill = Sequence[float]


def _fill(color: Fill) -> tuple[int, ...]:
    """Clamp every channel (and alpha, if present) to 0-255."""
    return tuple(clamp_channel(c) for c in color)


class Canvas:
    """
    Owned exclusively by the renderer during one generation pass.
    Semi-transparent fills (4-tuples) alpha-blend over what is already painted.
    """

    def __init__(self, width: int, height: int, background: Fill = (222, 222, 222)):
        self.image = Image.new("RGB", (int(width), int(height)), _fill(background))
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def rect(self, x: float, y: float, w: float, h: float, fill: Fill) -> None:
        """Fill the pixel span [x, x + w) x [y, y + h), rounded to the pixel grid."""
        x0, y0 = round(x), round(y)
        x1, y1 = round(x + w) - 1, round(y + h) - 1
        if x1 < x0 or y1 < y0:
            return
        self._draw.rectangle([x0, y0, x1, y1], fill=_fill(fill))

    def polyline(self, points: Sequence[tuple[float, float]], fill: Fill, width: float = 1.0) -> None:
        if len(points) < 2:
            return
        self._draw.line(list(points), fill=_fill(fill), width=max(1, round(width)))

    def pieslice(self, cx: float, cy: float, radius: float, start: float, end: float, fill: Fill) -> None:
        """
        Filled arc wedge. Angles in radians, measured clockwise from 3 o'clock (y points down);
        the wedge runs clockwise from start to end.
        """
        if radius <= 0:
            return
        start_deg = math.degrees(start)
        end_deg = math.degrees(end)
        while end_deg < start_deg:
            end_deg += 360.0
        box = [cx - radius, cy - radius, cx + radius, cy + radius]
        self._draw.pieslice(box, start=start_deg, end=end_deg, fill=_fill(fill))

    def ellipse(self, cx: float, cy: float, w: float, h: float, fill: Fill) -> None:
        box = [cx - w / 2, cy - h / 2, cx + w / 2, cy + h / 2]
        self._draw.ellipse(box, fill=_fill(fill))

    def to_array(self) -> np.ndarray:
        """Copy of the buffer as (H, W, 3) uint8."""
        return np.array(self.image, dtype=np.uint8)

    def from_array(self, arr: np.ndarray) -> None:
        """Replace the buffer with an (H, W, 3) array; values are clamped to 0-255."""
        arr = np.clip(np.asarray(arr), 0, 255).astype(np.uint8)
        self.image = Image.fromarray(arr)
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def rotated(self) -> Image.Image:
        """The buffer turned 90 degrees clockwise for presentation."""
        return self.image.transpose(Image.Transpose.ROTATE_270)
