"""
Text embedding: cleans text rows and rasterizes them into rectangular ink cells
using the built-in 5x7 bitmap font.

The finished image is presented rotated 90 degrees, so each text row becomes a vertical
column of glyphs on the mat and every glyph's bit grid is turned to compensate.
"""
import logging
import re
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .data.font import GLYPH_COLS, GLYPH_ROWS, glyph_bits

logger = logging.getLogger(__name__)

MAX_CHARS = 11
MAX_ROWS = 3
TEXT_SCALE = 2

_DISALLOWED = re.compile(r"[^A-Z0-9 ]")


@dataclass(frozen=True)
class TextCell:
    """One illuminated glyph pixel, in mat-local coordinates."""
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


def clean_text(text: str) -> str:
    """Uppercase, keep only A-Z, 0-9 and space, truncate to MAX_CHARS."""
    return _DISALLOWED.sub("", text.upper())[:MAX_CHARS]


def clean_rows(rows: str | Iterable[str] | None) -> list[str]:
    """Clean every row, drop rows that end up empty, keep at most MAX_ROWS."""
    if rows is None:
        return []
    if isinstance(rows, str):
        rows = [rows]
    cleaned = [clean_text(r) for r in rows]
    cleaned = [r for r in cleaned if r]
    if len(cleaned) > MAX_ROWS:
        logger.warning("Only %d text rows fit on the mat; dropping %d", MAX_ROWS, len(cleaned) - MAX_ROWS)
    return cleaned[:MAX_ROWS]


def glyph_cells(char: str, x: float, y: float, cell_w: float, cell_h: float) -> list[TextCell]:
    """
    Cells for one glyph whose footprint starts at (x, y).
    Bit (row, col) lands at column `row` and row `GLYPH_COLS - 1 - col`, so the footprint is
    GLYPH_ROWS cells wide and GLYPH_COLS cells high.
    """
    cells: list[TextCell] = []
    for row, bits in enumerate(glyph_bits(char)):
        for col, bit in enumerate(bits):
            if bit != "1":
                continue
            new_col = row
            new_row = GLYPH_COLS - 1 - col
            cells.append(TextCell(x + new_col * cell_w, y + new_row * cell_h, cell_w, cell_h))
    return cells


def rasterize(
    rows: str | Iterable[str] | None,
    warp_thickness: int,
    weft_thickness: int,
    mat_width: float,
    mat_height: float,
) -> list[TextCell]:
    """
    Map text rows to ink cells. Depends only on the rows and thread thickness (no randomness).
    Rows sit side by side, centered across the mat width; characters within a row are stacked
    bottom-to-top and centered vertically. Cells that would leave the mat are dropped.
    """
    rows = clean_rows(rows)
    if not rows:
        return []

    cell_w = (warp_thickness + 1) * TEXT_SCALE
    cell_h = (weft_thickness + 1) * TEXT_SCALE
    char_width = GLYPH_ROWS * cell_w
    char_height = GLYPH_COLS * cell_h
    char_gap = cell_h
    row_gap = char_width * 1.5

    total_width = len(rows) * char_width + (len(rows) - 1) * row_gap
    base_x = (mat_width - total_width) / 2

    cells: list[TextCell] = []
    for row_index, text in enumerate(rows):
        text_height = len(text) * (char_height + char_gap) - char_gap
        start_x = base_x + row_index * (char_width + row_gap)
        start_y = (mat_height - text_height) / 2
        for i, char in enumerate(text):
            char_y = start_y + (len(text) - 1 - i) * (char_height + char_gap)
            cells.extend(glyph_cells(char, start_x, char_y, cell_w, cell_h))

    inside = [c for c in cells if c.x >= 0 and c.y >= 0 and c.x + c.width <= mat_width and c.y + c.height <= mat_height]
    if len(inside) < len(cells):
        logger.warning("Text does not fit the mat at this thread thickness; dropped %d cells", len(cells) - len(inside))
    return inside


def ink_mask(cells: Iterable[TextCell], xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Boolean mask over a grid of thread positions: True where point (x, y) lies inside some cell.
    xs and ys broadcast against each other (e.g. a column of y values and a row of x values).
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    mask = np.zeros(np.broadcast_shapes(xs.shape, ys.shape), dtype=bool)
    for c in cells:
        mask |= (xs >= c.x) & (xs < c.x + c.width) & (ys >= c.y) & (ys < c.y + c.height)
    return mask
