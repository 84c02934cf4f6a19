# Rendering passes: weave surface, fringe and selvedge, all onto one Canvas

from .canvas import Canvas
from .edges import render_fringe, render_selvedge
from .weave import render_texture_overlay, render_weave

__all__ = ["Canvas", "render_weave", "render_texture_overlay", "render_fringe", "render_selvedge"]
