"""
Fringe and selvedge: frayed thread strands at the top and bottom edges, looped weft
arcs at the left and right edges.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from ..color import Color, lerp, parse_hex, scale, shift
from ..config import RenderConfig
from ..palettes import Palette, ensure_palette
from ..random_utils import SeededRandom
from ..stripes import Stripe, WeaveType
from .canvas import Canvas

logger = logging.getLogger(__name__)

STRAND_WIDTH = 12
THREADS_PER_STRAND = 12
FRINGE_SAMPLES = 11  # t = 0.0, 0.1, ... 1.0
FRINGE_DARKEN = 0.7
SELVEDGE_DARKEN = 0.8
KNOTS_PER_ARC = 8


# -------------------------
# Fringe
# -------------------------


def _fringe_thread(
    canvas: Canvas,
    strand_x: float,
    strand_width: float,
    start_y: float,
    end_y: float,
    color: Color,
    rng: SeededRandom,
) -> None:
    thread_x = strand_x + rng.uniform_range(-strand_width / 6, strand_width / 6)
    wave_amplitude = rng.uniform_range(1, 4)
    wave_freq = rng.uniform_range(0.2, 0.8)
    direction = rng.uniform_choice((-1, 1))
    curl = rng.uniform_range(0.5, 2.0)
    length = rng.uniform_range(0.8, 1.2)
    weight = rng.uniform_range(0.5, 1.2)

    points: list[tuple[float, float]] = []
    for i in range(FRINGE_SAMPLES):
        t = i / (FRINGE_SAMPLES - 1)
        y = start_y + (end_y - start_y) * t * length
        x_offset = math.sin(t * math.pi * wave_freq) * wave_amplitude * t * direction * curl
        x_offset += rng.uniform_range(-1, 1)
        # Occasional kinks
        if rng.uniform() < 0.3:
            x_offset += rng.uniform_range(-2, 2)
        points.append((thread_x + x_offset, y))
    canvas.polyline(points, color.as_tuple(), width=weight)


def render_fringe_section(
    canvas: Canvas,
    x: float,
    y: float,
    w: float,
    h: float,
    side: str,
    palette: Palette,
    rng: SeededRandom,
) -> None:
    """One fringe band; threads start at the mat edge and run outward."""
    strands = math.ceil(w / STRAND_WIDTH)
    strand_width = w / strands if strands else 0
    start_y, end_y = (y + h, y) if side == "top" else (y, y + h)
    for i in range(strands):
        strand_x = x + i * strand_width
        strand_color = scale(parse_hex(rng.uniform_choice(palette.colors)), FRINGE_DARKEN)
        for _ in range(THREADS_PER_STRAND):
            _fringe_thread(canvas, strand_x, strand_width, start_y, end_y, strand_color, rng)


def render_fringe(canvas: Canvas, palette: Palette | None, rng: SeededRandom, config: RenderConfig) -> None:
    """Top and bottom fringe bands of height fringe_length."""
    if config.fringe_length <= 0:
        return
    palette = ensure_palette(palette)
    ox, oy = config.origin
    f = config.fringe_length
    render_fringe_section(canvas, ox, oy - f, config.mat_width, f, "top", palette, rng)
    render_fringe_section(canvas, ox, oy + config.mat_height, config.mat_width, f, "bottom", palette, rng)


# -------------------------
# Selvedge
# -------------------------


def selvedge_rows(stripes: Sequence[Stripe], weft_thickness: int) -> list[tuple[Stripe, float]]:
    """
    (stripe, y) for every weft thread of the mat except the very first and the very last.
    """
    weft_spacing = weft_thickness + 1
    rows: list[tuple[Stripe, float]] = []
    for stripe in stripes:
        y = stripe.y_start
        while y < stripe.y_end:
            rows.append((stripe, y))
            y += weft_spacing
    if not rows:
        return rows
    rows = rows[1:]
    # The last thread of the final stripe is any row whose next step leaves the mat
    last = stripes[-1]
    return [(s, y) for s, y in rows if not (s is last and y + weft_spacing >= last.y_end)]


def selvedge_color(stripe: Stripe, y: float, rng: SeededRandom) -> Color:
    """Owning stripe's color (noise-blended toward the secondary for mixed stripes), darkened."""
    color = parse_hex(stripe.primary_color)
    if stripe.secondary_color and stripe.weave_type == WeaveType.MIXED:
        blend = rng.noise1d(y * 0.1) * 0.5 + 0.5
        color = lerp(color, parse_hex(stripe.secondary_color), blend)
    return scale(color, SELVEDGE_DARKEN)


def _jittered(color: Color, delta: float, rng: SeededRandom) -> tuple[float, float, float]:
    base = shift(color, delta)
    return (
        base.r + rng.uniform_range(-10, 10),
        base.g + rng.uniform_range(-10, 10),
        base.b + rng.uniform_range(-10, 10),
    )


def render_selvedge_arc(
    canvas: Canvas,
    cx: float,
    cy: float,
    radius: float,
    start: float,
    end: float,
    color: Color,
    side: str,
    rng: SeededRandom,
) -> None:
    """
    A looped thread end: concentric partial arcs of alternating shades, detail layers,
    an offset shadow, a faint inner hollow and small knots.
    """
    thread_count = max(6, math.floor(radius / 1.2))
    thread_spacing = radius / thread_count
    for i in range(thread_count):
        thread_radius = radius - i * thread_spacing
        fill = _jittered(color, 25 if i % 2 == 0 else -20, rng)
        canvas.pieslice(
            cx + rng.uniform_range(-1, 1),
            cy + rng.uniform_range(-1, 1),
            thread_radius,
            start + rng.uniform_range(-0.1, 0.1),
            end + rng.uniform_range(-0.1, 0.1),
            (*fill, 88),
        )

    for i in range(3):
        detail_radius = radius * (0.3 + i * 0.2)
        detail_alpha = (180 - i * 40) * 0.7
        detail = shift(color, 15 if i % 2 == 0 else -15)
        canvas.pieslice(
            cx + rng.uniform_range(-0.5, 0.5),
            cy + rng.uniform_range(-0.5, 0.5),
            detail_radius,
            start + rng.uniform_range(-0.05, 0.05),
            end + rng.uniform_range(-0.05, 0.05),
            detail.with_alpha(detail_alpha),
        )

    shadow_offset = 1 if side == "left" else -1
    canvas.pieslice(cx + shadow_offset, cy + 1, radius, start, end, scale(color, 0.6).with_alpha(70))
    canvas.pieslice(cx, cy, radius * 0.25, start, end, scale(color, 0.5).with_alpha(40))

    for i in range(KNOTS_PER_ARC):
        angle = rng.uniform_range(start, end)
        dist = radius * rng.uniform_range(0.2, 0.7)
        knot = shift(color, 20 if i % 2 == 0 else -15)
        canvas.ellipse(
            cx + math.cos(angle) * dist,
            cy + math.sin(angle) * dist,
            rng.uniform_range(1.5, 3.5),
            rng.uniform_range(1.5, 3.5),
            knot.with_alpha(120),
        )


def _render_selvedge_side(
    canvas: Canvas,
    rows: list[tuple[Stripe, float]],
    side: str,
    rng: SeededRandom,
    config: RenderConfig,
    weft_thickness: int,
) -> None:
    ox, oy = config.origin
    edge_x = ox if side == "left" else ox + config.mat_width
    # Left loops bulge left (bottom -> top through 180°); right loops mirror through 0°
    base_start, base_end = (math.pi / 2, -math.pi / 2) if side == "left" else (-math.pi / 2, math.pi / 2)
    for stripe, y in rows:
        color = selvedge_color(stripe, y, rng)
        radius = weft_thickness * rng.uniform_range(1.2, 1.8)
        cx = edge_x + rng.uniform_range(-2, 2)
        cy = oy + y + weft_thickness / 2 + rng.uniform_range(-1, 1)
        start = base_start + rng.uniform_range(-0.2, 0.2)
        end = base_end + rng.uniform_range(-0.2, 0.2)
        render_selvedge_arc(canvas, cx, cy, radius, start, end, color, side, rng)


def render_selvedge(
    canvas: Canvas,
    stripes: Sequence[Stripe],
    rng: SeededRandom,
    config: RenderConfig,
    weft_thickness: int,
) -> None:
    """Left side first, then right; each walks every interior weft row top to bottom."""
    rows = selvedge_rows(stripes, weft_thickness)
    if not rows:
        logger.debug("No stripes to hang selvedge loops on")
        return
    _render_selvedge_side(canvas, rows, "left", rng, config, weft_thickness)
    _render_selvedge_side(canvas, rows, "right", rng, config, weft_thickness)
