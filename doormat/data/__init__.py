# Doormat data: palettes and bitmap font tables

from .font import GLYPHS, GLYPH_COLS, GLYPH_ROWS, glyph_bits
from .palettes import PALETTE_DATA

__all__ = ["GLYPHS", "GLYPH_COLS", "GLYPH_ROWS", "glyph_bits", "PALETTE_DATA"]
