"""
Stripe layout generator: partitions the mat height into contiguous stripes with
randomized height, color, weave type and blend attributes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .config import validate_height_range
from .palettes import Palette, ensure_palette
from .random_utils import SeededRandom

logger = logging.getLogger(__name__)


class WeaveType(str, Enum):
    SOLID = "solid"
    TEXTURED = "textured"
    MIXED = "mixed"


# Weighted weave roll: solid most likely, mixed least
WEAVE_WEIGHTS: tuple[tuple[WeaveType, float], ...] = (
    (WeaveType.SOLID, 0.6),
    (WeaveType.TEXTURED, 0.2),
    (WeaveType.MIXED, 0.2),
)


@dataclass(frozen=True)
class DensityMode:
    name: str
    min_height: float
    max_height: float
    weight: float


DENSITY_MODES: tuple[DensityMode, ...] = (
    DensityMode("high", 15, 35, 0.2),   # many thin stripes
    DensityMode("low", 50, 90, 0.2),    # fewer thick stripes
    DensityMode("mixed", 20, 80, 0.6),  # varied sizes
)


@dataclass(frozen=True)
class Stripe:
    y_start: float
    height: float
    primary_color: str
    secondary_color: str | None
    weave_type: WeaveType
    warp_variation: float

    @property
    def y_end(self) -> float:
        return self.y_start + self.height

    def to_dict(self) -> dict:
        return {
            "y": self.y_start,
            "height": self.height,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "weaveType": self.weave_type.value,
            "warpVariation": self.warp_variation,
        }


def _mixed_height(rng: SeededRandom, mode: DensityMode) -> float:
    """Within the mixed mode: 30% thin, 30% medium, 40% thick."""
    band = rng.weighted_choice(("thin", "medium", "thick"), (0.3, 0.3, 0.4))
    if band == "thin":
        return rng.uniform_range(mode.min_height, mode.min_height + 20)
    if band == "medium":
        return rng.uniform_range(mode.min_height + 15, mode.max_height - 15)
    return rng.uniform_range(mode.max_height - 25, mode.max_height)


def generate_stripes(
    rng: SeededRandom,
    palette: Palette | None,
    mat_height: float,
    *,
    density_modes: bool = True,
    height_range: tuple[float, float] = (8.0, 40.0),
    secondary_probability: float = 0.15,
) -> list[Stripe]:
    """
    Build a fresh stripe layout covering [0, mat_height) exactly, top to bottom.
    Call order per stripe: height roll(s), primary color, secondary roll (+ color), weave roll, warp variation.
    """
    height_range = validate_height_range(height_range)
    palette = ensure_palette(palette)
    stripes: list[Stripe] = []
    current_y = 0.0

    mode: DensityMode | None = None
    if density_modes:
        mode = rng.weighted_choice(DENSITY_MODES, [m.weight for m in DENSITY_MODES])
        logger.debug("Stripe density mode: %s", mode.name)

    while current_y < mat_height:
        if mode is None:
            stripe_height = rng.uniform_range(*height_range)
        elif mode.name == "mixed":
            stripe_height = _mixed_height(rng, mode)
        else:
            stripe_height = rng.uniform_range(mode.min_height, mode.max_height)

        # Never overshoot: the last stripe fills the remainder exactly
        is_last = current_y + stripe_height >= mat_height
        if is_last:
            stripe_height = mat_height - current_y

        primary = rng.uniform_choice(palette.colors)
        secondary = rng.uniform_choice(palette.colors) if rng.uniform() < secondary_probability else None
        weave_type = rng.weighted_choice([w for w, _ in WEAVE_WEIGHTS], [p for _, p in WEAVE_WEIGHTS])

        stripes.append(
            Stripe(
                y_start=current_y,
                height=stripe_height,
                primary_color=primary,
                secondary_color=secondary,
                weave_type=weave_type,
                warp_variation=rng.uniform_range(0.1, 0.5),
            )
        )
        current_y = float(mat_height) if is_last else current_y + stripe_height

    logger.debug("Generated %d stripes for height %s", len(stripes), mat_height)
    return stripes


def validate_layout(stripes: list[Stripe], mat_height: float, *, tol: float = 1e-6) -> bool:
    """True when stripes are ordered, contiguous and cover [0, mat_height) exactly."""
    if not stripes:
        return mat_height == 0
    cursor = 0.0
    for s in stripes:
        if s.height <= 0 or abs(s.y_start - cursor) > tol:
            return False
        cursor = s.y_end
    return abs(cursor - mat_height) <= tol
