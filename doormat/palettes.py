"""
Palette registry: a fixed catalog of named color sets; one is chosen per generation.
"""
import logging
from dataclasses import dataclass

from .color import BLACK, WHITE, Color, brightness, lerp, parse_hex
from .data.palettes import PALETTE_DATA
from .random_utils import SeededRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    name: str
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError(f"Palette {self.name!r} has no colors")

    def rgb(self) -> list[Color]:
        return [parse_hex(c) for c in self.colors]


_REGISTRY: tuple[Palette, ...] = tuple(Palette(name, tuple(colors)) for name, colors in PALETTE_DATA)


def all_palettes() -> tuple[Palette, ...]:
    """Every registered palette, in registry order."""
    return _REGISTRY


def default_palette() -> Palette:
    return _REGISTRY[0]


def get_palette(name: str) -> Palette:
    for p in _REGISTRY:
        if p.name == name:
            return p
    raise KeyError(f"Unknown palette: {name!r}")


def pick_random(rng: SeededRandom) -> Palette:
    """Uniform pick from the registry using the RNG's choice primitive."""
    return rng.uniform_choice(_REGISTRY)


def ensure_palette(palette: Palette | None) -> Palette:
    """Self-heal uninitialized palette state by falling back to the default palette."""
    if palette is None or not palette.colors:
        fallback = default_palette()
        logger.warning("No palette selected; falling back to %s", fallback.name)
        return fallback
    return palette


def text_colors(palette: Palette) -> tuple[Color, Color]:
    """
    High-contrast ink colors derived from a palette: (light, dark).
    Light = lightest color pushed 30% toward white; dark = darkest color pushed 40% toward black.
    """
    colors = palette.rgb()
    lightest = max(colors, key=brightness)
    darkest = min(colors, key=brightness)
    return lerp(lightest, WHITE, 0.3), lerp(darkest, BLACK, 0.4)
