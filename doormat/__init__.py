# Generative doormat: seeded stripe layout, woven rendering, fringe, selvedge, embedded text, traits

from .config import RenderConfig, load_config, render_config_from_dict
from .generator import DoormatGenerator, DoormatState
from .palettes import Palette, all_palettes, pick_random
from .random_utils import SeededRandom
from .stripes import Stripe, WeaveType, generate_stripes
from .text import TextCell, clean_text, rasterize
from .traits import TraitRecord, classify

__all__ = [
    "RenderConfig",
    "load_config",
    "render_config_from_dict",
    "DoormatGenerator",
    "DoormatState",
    "Palette",
    "all_palettes",
    "pick_random",
    "SeededRandom",
    "Stripe",
    "WeaveType",
    "generate_stripes",
    "TextCell",
    "clean_text",
    "rasterize",
    "TraitRecord",
    "classify",
]
