"""
Load and expose app config (YAML). Used by the generator to get mat size, thread thickness, output dir, etc.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for key, value in data.items():
        # Sections merge one level deep so a partial YAML keeps the other defaults
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


# (mat width, mat height, fringe length)
_SIZE_PRESETS: dict[str, tuple[int, int, int]] = {
    "small": (400, 600, 20),
    "standard": (800, 1200, 30),
    "large": (1200, 1800, 40),
}


def _defaults() -> dict[str, Any]:
    return {
        "doormat": {
            "width": 800,
            "height": 1200,
            "fringe_length": 30,
            "size": None,
            "warp_thickness": None,  # None = drawn per seed
            "weft_thickness": 8,
            "density_modes": True,
            "stripe_height_range": [8, 40],
            "secondary_probability": 0.15,
        },
        "output": {
            "dir": "output",
            "filename_prefix": "doormat",
            "rotate": True,
            "background": [222, 222, 222],
        },
    }


def resolve_render_config(config: dict[str, Any]) -> dict[str, Any]:
    """Resolve doormat config: size preset overrides width/height/fringe_length if set."""
    mat = dict(config.get("doormat", {}))
    size = mat.get("size")
    if size and size in _SIZE_PRESETS:
        w, h, fringe = _SIZE_PRESETS[size]
        mat["width"] = w
        mat["height"] = h
        mat["fringe_length"] = fringe
    return mat


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output", {})
    d = out.get("dir", "output")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p


@dataclass
class RenderConfig:
    """Mat geometry and weave parameters for one generation context."""
    mat_width: int = 800
    mat_height: int = 1200
    fringe_length: int = 30
    warp_thickness: int | None = None  # pinned value; None = random per seed
    weft_thickness: int = 8
    density_modes: bool = True
    stripe_height_range: tuple[float, float] = (8.0, 40.0)
    secondary_probability: float = 0.15
    background: tuple[int, int, int] = (222, 222, 222)
    rotate: bool = True

    def __post_init__(self) -> None:
        if self.mat_width <= 0 or self.mat_height <= 0:
            raise ValueError(f"Mat size must be positive, got {self.mat_width}x{self.mat_height}")
        if self.fringe_length < 0:
            raise ValueError(f"fringe_length must be >= 0, got {self.fringe_length}")
        if self.warp_thickness is not None:
            self.warp_thickness = validate_thickness(self.warp_thickness, "warp_thickness")
        self.weft_thickness = validate_thickness(self.weft_thickness, "weft_thickness")
        validate_height_range(self.stripe_height_range)

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Unrotated canvas (width, height): mat plus a two-fringe buffer on every side."""
        pad = self.fringe_length * 4
        return self.mat_width + pad, self.mat_height + pad

    @property
    def origin(self) -> tuple[int, int]:
        """Top-left corner of the mat on the canvas."""
        return self.fringe_length * 2, self.fringe_length * 2


def validate_thickness(value: int, name: str = "thickness") -> int:
    if int(value) != value or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def validate_height_range(height_range: tuple[float, float]) -> tuple[float, float]:
    lo, hi = height_range
    if lo <= 0 or hi < lo:
        raise ValueError(f"Invalid stripe_height_range: {tuple(height_range)}")
    return lo, hi


def render_config_from_dict(config: dict[str, Any] | None = None) -> RenderConfig:
    """Build a RenderConfig from a loaded YAML config dict (missing keys use defaults)."""
    config = config or _defaults()
    mat = resolve_render_config(config)
    out = config.get("output", {})
    lo, hi = mat.get("stripe_height_range") or (8, 40)
    warp = mat.get("warp_thickness")
    return RenderConfig(
        mat_width=int(mat.get("width", 800)),
        mat_height=int(mat.get("height", 1200)),
        fringe_length=int(mat.get("fringe_length", 30)),
        warp_thickness=warp,
        weft_thickness=mat.get("weft_thickness", 8),
        density_modes=bool(mat.get("density_modes", True)),
        stripe_height_range=(float(lo), float(hi)),
        secondary_probability=float(mat.get("secondary_probability", 0.15)),
        background=tuple(int(c) for c in out.get("background", (222, 222, 222))),
        rotate=bool(out.get("rotate", True)),
    )
