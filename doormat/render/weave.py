"""
Weave renderer: stripes → warp threads, weft threads, interlace shading, then a
whole-mat fabric texture overlay.

Per-cell colors are computed with numpy in the fixed traversal order below; only the
final rectangles go through the canvas one by one. Randomness order (per stripe):
warp jitter (x outer, y inner, r/g/b), then weft jitter (y outer, x inner, r/g/b).
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..color import Color, parse_hex
from ..config import RenderConfig
from ..random_utils import SeededRandom
from ..stripes import Stripe, WeaveType
from ..text import TextCell, ink_mask
from .canvas import Canvas

logger = logging.getLogger(__name__)

WARP_JITTER = 15
WEFT_JITTER = 20
MIXED_NOISE_SCALE = 0.1
MIXED_THRESHOLD = 0.5
TEXTURED_NOISE_SCALE = 0.05
TEXTURED_WHITE_BLEND = 0.15
INK_BRIGHTNESS_THRESHOLD = 128

# (alpha) for interlace shading
UNDER_SHADOW_ALPHA = 40
OVER_HIGHLIGHT_ALPHA = 30

# Texture overlay: (grid step, noise scale)
HATCH_STEP, HATCH_SCALE, HATCH_MAX_ALPHA = 2, 0.02, 50
RELIEF_STEP, RELIEF_SCALE = 6, 0.03
RELIEF_LIGHT_ABOVE, RELIEF_LIGHT_ALPHA = 0.6, 25
RELIEF_DARK_BELOW, RELIEF_DARK_ALPHA = 0.4, 20


def _rgb(hex_color: str) -> np.ndarray:
    return np.array(parse_hex(hex_color).as_tuple(), dtype=np.float64)


def _apply_ink(colors: np.ndarray, mask: np.ndarray, ink: tuple[Color, Color] | None) -> np.ndarray:
    """
    Recolor ink positions: light ink over dark threads, dark ink over light threads.
    Brightness is taken from the jittered (unclamped) thread color.
    """
    if ink is None or not mask.any():
        return colors
    light, dark = ink
    bright = colors.mean(axis=-1)
    ink_colors = np.where(
        (bright < INK_BRIGHTNESS_THRESHOLD)[..., None],
        np.array(light.as_tuple(), dtype=np.float64),
        np.array(dark.as_tuple(), dtype=np.float64),
    )
    return np.where(mask[..., None], ink_colors, colors)


def _thread_rows(stripe: Stripe, weft_spacing: int) -> np.ndarray:
    return np.arange(stripe.y_start, stripe.y_end, weft_spacing, dtype=np.float64)


def weft_base_colors(stripe: Stripe, xs: np.ndarray, ys: np.ndarray, rng: SeededRandom) -> np.ndarray:
    """
    Weft base color grid (len(ys), len(xs), 3) before jitter.
    mixed: noise above threshold switches to the secondary color.
    textured: primary blended toward white by a noise-proportional amount.
    """
    primary = _rgb(stripe.primary_color)
    base = np.broadcast_to(primary, (len(ys), len(xs), 3)).copy()
    if len(xs) == 0 or len(ys) == 0:
        return base
    gx, gy = np.meshgrid(xs, ys)
    if stripe.weave_type == WeaveType.MIXED and stripe.secondary_color:
        n = rng.noise2d(gx * MIXED_NOISE_SCALE, gy * MIXED_NOISE_SCALE)
        base = np.where((n > MIXED_THRESHOLD)[..., None], _rgb(stripe.secondary_color), base)
    elif stripe.weave_type == WeaveType.TEXTURED:
        n = rng.noise2d(gx * TEXTURED_NOISE_SCALE, gy * TEXTURED_NOISE_SCALE)
        t = (n * TEXTURED_WHITE_BLEND)[..., None]
        base = primary + (255.0 - primary) * t
    return base


def render_stripe(
    canvas: Canvas,
    stripe: Stripe,
    cells: Sequence[TextCell],
    ink: tuple[Color, Color] | None,
    rng: SeededRandom,
    config: RenderConfig,
    warp_thickness: int,
    weft_thickness: int,
) -> None:
    """Warp pass, weft pass and interlace shading for one stripe."""
    ox, oy = config.origin
    warp_spacing = warp_thickness + 1
    weft_spacing = weft_thickness + 1
    xs = np.arange(0, config.mat_width, warp_spacing, dtype=np.float64)
    ys = _thread_rows(stripe, weft_spacing)
    if len(ys) == 0:
        return

    # Warp (vertical) foundation: x outer, y inner
    primary = _rgb(stripe.primary_color)
    warp = primary + rng.jitter((len(xs), len(ys), 3), WARP_JITTER)
    warp = _apply_ink(warp, ink_mask(cells, xs[:, None], ys[None, :]), ink)
    warp = np.clip(warp, 0, 255)
    warp_curve = np.sin(ys * 0.05) * 0.5
    for i, x in enumerate(xs):
        for j, y in enumerate(ys):
            canvas.rect(ox + x + warp_curve[j], oy + y, warp_thickness, weft_spacing, warp[i, j])

    # Weft (horizontal) threads: y outer, x inner
    weft = weft_base_colors(stripe, xs, ys, rng) + rng.jitter((len(ys), len(xs), 3), WEFT_JITTER)
    weft = _apply_ink(weft, ink_mask(cells, xs[None, :], ys[:, None]), ink)
    weft = np.clip(weft, 0, 255)
    weft_curve = np.cos(xs * 0.05) * 0.5
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            canvas.rect(ox + x, oy + y + weft_curve[i], warp_spacing, weft_thickness, weft[j, i])

    # Interlace: threads passing under (shadow) and over (highlight)
    shadow = (0, 0, 0, UNDER_SHADOW_ALPHA)
    for y in np.arange(stripe.y_start, stripe.y_end, weft_spacing * 2):
        for x in range(0, config.mat_width, warp_spacing * 2):
            canvas.rect(ox + x + 1, oy + y + 1, warp_spacing - 2, weft_spacing - 2, shadow)
    highlight = (255, 255, 255, OVER_HIGHLIGHT_ALPHA)
    for y in np.arange(stripe.y_start + weft_spacing, stripe.y_end, weft_spacing * 2):
        for x in range(warp_spacing, config.mat_width, warp_spacing * 2):
            canvas.rect(ox + x, oy + y, warp_spacing - 1, weft_spacing - 1, highlight)


def render_weave(
    canvas: Canvas,
    stripes: Sequence[Stripe],
    cells: Sequence[TextCell],
    ink: tuple[Color, Color] | None,
    rng: SeededRandom,
    config: RenderConfig,
    warp_thickness: int,
    weft_thickness: int,
) -> None:
    """Paint every stripe top to bottom, then the fabric texture overlay."""
    for stripe in stripes:
        render_stripe(canvas, stripe, cells, ink, rng, config, warp_thickness, weft_thickness)
    render_texture_overlay(canvas, rng, config)
    logger.debug("Wove %d stripes (warp=%d, weft=%d, %d ink cells)", len(stripes), warp_thickness, weft_thickness, len(cells))


def _cell_field(rng: SeededRandom, width: int, height: int, step: int, scale: float) -> np.ndarray:
    """Noise sampled at each grid cell's top-left corner, expanded to (height, width) pixels."""
    cx = np.arange(0, width, step, dtype=np.float64)
    cy = np.arange(0, height, step, dtype=np.float64)
    gx, gy = np.meshgrid(cx * scale, cy * scale)
    field = rng.noise2d(gx, gy)
    return np.repeat(np.repeat(field, step, axis=0), step, axis=1)[:height, :width]


def texture_factors(rng: SeededRandom, width: int, height: int) -> np.ndarray:
    """
    Per-pixel multiplicative gain for the mat surface.
    Fine hatching darkens by up to HATCH_MAX_ALPHA/255; coarse relief lifts or darkens
    where the noise leaves the mid band. Multiplying keeps the weave's hue.
    """
    hatch = 1.0 - _cell_field(rng, width, height, HATCH_STEP, HATCH_SCALE) * HATCH_MAX_ALPHA / 255.0
    relief_noise = _cell_field(rng, width, height, RELIEF_STEP, RELIEF_SCALE)
    relief = np.ones_like(relief_noise)
    relief[relief_noise > RELIEF_LIGHT_ABOVE] = 1.0 + RELIEF_LIGHT_ALPHA / 255.0
    relief[relief_noise < RELIEF_DARK_BELOW] = 1.0 - RELIEF_DARK_ALPHA / 255.0
    return hatch * relief


def render_texture_overlay(canvas: Canvas, rng: SeededRandom, config: RenderConfig) -> None:
    """Multiply-blend the fabric texture over the whole mat area."""
    ox, oy = config.origin
    w, h = config.mat_width, config.mat_height
    arr = canvas.to_array().astype(np.float64)
    region = arr[oy:oy + h, ox:ox + w]
    region *= texture_factors(rng, w, h)[..., None]
    canvas.from_array(np.clip(arr, 0, 255))
