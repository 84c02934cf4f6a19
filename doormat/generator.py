"""
Doormat generator: seed (+ text, thread thickness) → stripe layout → rendered pixels → traits.
All generation state lives in one explicit DoormatState; nothing is shared between instances,
so many seeds can be rendered side by side.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

import numpy as np
from PIL import Image

from .config import RenderConfig, render_config_from_dict, validate_thickness
from .palettes import Palette, default_palette, ensure_palette, pick_random, text_colors
from .random_utils import SeededRandom
from .render import Canvas, render_fringe, render_selvedge, render_weave
from .stripes import Stripe, generate_stripes
from .text import TextCell, clean_rows, rasterize
from .traits import TraitRecord, classify

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
WARP_CHOICES = (1, 2, 3, 4, 5, 6)


@dataclass
class DoormatState:
    """Everything one generation produced. Rebuilt from scratch on every generate()."""
    seed: int
    palette: Palette
    stripes: list[Stripe]
    warp_thickness: int
    weft_thickness: int
    rng_state: dict[str, Any]  # RNG right after layout; every redraw restarts from here
    text_rows: list[str] = field(default_factory=list)
    text_cells: list[TextCell] = field(default_factory=list)
    canvas: Canvas | None = None


class DoormatGenerator:
    """
    Core-facing interface for UI/CLI/export layers.
    generate(seed) → pixels + traits; set_text / clear_text / set_*_thickness re-render in place.
    on_redraw, if given, is called with the generator after every render.
    """

    def __init__(
        self,
        config: RenderConfig | dict | None = None,
        *,
        on_redraw: Callable[["DoormatGenerator"], None] | None = None,
    ):
        if isinstance(config, RenderConfig):
            self.config = config
        else:
            self.config = render_config_from_dict(config)
        self.weft_thickness = self.config.weft_thickness
        self.on_redraw = on_redraw
        self.state: DoormatState | None = None
        self._text_rows: list[str] = []

    # --- generation ---

    def generate(self, seed: int) -> DoormatState:
        """Reseed, pick thickness and palette, lay out stripes, then render."""
        rng = SeededRandom(seed)
        # Always drawn so a pinned warp does not shift the rest of the sequence
        drawn_warp = rng.uniform_choice(WARP_CHOICES)
        warp = self.config.warp_thickness or drawn_warp
        palette = pick_random(rng)
        stripes = generate_stripes(
            rng,
            palette,
            self.config.mat_height,
            density_modes=self.config.density_modes,
            height_range=self.config.stripe_height_range,
            secondary_probability=self.config.secondary_probability,
        )
        self.state = DoormatState(
            seed=int(seed),
            palette=palette,
            stripes=stripes,
            warp_thickness=warp,
            weft_thickness=self.weft_thickness,
            rng_state=rng.get_state(),
            text_rows=list(self._text_rows),
        )
        logger.info(
            "Generated doormat seed=%s palette=%s stripes=%d warp=%d weft=%d",
            seed, palette.name, len(stripes), warp, self.weft_thickness,
        )
        self._redraw()
        return self.state

    def _ensure_state(self) -> DoormatState:
        if self.state is None:
            logger.debug("No doormat generated yet; generating seed %s", DEFAULT_SEED)
            self.generate(DEFAULT_SEED)
        return self.state

    def _redraw(self) -> None:
        state = self.state
        state.palette = ensure_palette(state.palette)
        state.text_cells = rasterize(
            state.text_rows,
            state.warp_thickness,
            state.weft_thickness,
            self.config.mat_width,
            self.config.mat_height,
        )
        ink = text_colors(state.palette) if state.text_cells else None
        rng = SeededRandom.from_state(state.rng_state)

        canvas = Canvas(*self.config.canvas_size, background=self.config.background)
        render_weave(canvas, state.stripes, state.text_cells, ink, rng, self.config, state.warp_thickness, state.weft_thickness)
        render_fringe(canvas, state.palette, rng, self.config)
        render_selvedge(canvas, state.stripes, rng, self.config, state.weft_thickness)
        state.canvas = canvas

        if self.on_redraw is not None:
            self.on_redraw(self)

    # --- configuration updates ---

    def set_text(self, rows: str | Iterable[str]) -> list[str]:
        """
        Embed up to MAX_ROWS rows of text; rows are cleaned, never rejected. Returns the cleaned rows.
        Before the first generate() the rows are only stored.
        """
        self._text_rows = clean_rows(rows)
        if self.state is not None:
            self.state.text_rows = list(self._text_rows)
            self._redraw()
        return self._text_rows

    def clear_text(self) -> None:
        self._text_rows = []
        if self.state is not None:
            self.state.text_rows = []
            self._redraw()

    def set_warp_thickness(self, n: int) -> None:
        """Override the current mat's warp thickness (the next generate() draws a new one unless pinned)."""
        n = validate_thickness(n, "warp_thickness")
        state = self._ensure_state()
        state.warp_thickness = n
        self._redraw()

    def set_weft_thickness(self, n: int) -> None:
        n = validate_thickness(n, "weft_thickness")
        self.weft_thickness = n
        if self.state is not None:
            self.state.weft_thickness = n
            self._redraw()

    # --- read-only accessors ---

    def get_current_palette(self) -> Palette:
        if self.state is None:
            return default_palette()
        return self.state.palette

    def calculate_traits(self) -> TraitRecord:
        if self.state is None:
            return classify([], default_palette(), self._text_rows)
        return classify(self.state.stripes, self.state.palette, self.state.text_rows)

    def stripe_data(self) -> list[dict]:
        if self.state is None:
            return []
        return [s.to_dict() for s in self.state.stripes]

    @property
    def image(self) -> Image.Image:
        """Finished image; rotated 90 degrees clockwise when config.rotate is set."""
        canvas = self._ensure_state().canvas
        return canvas.rotated() if self.config.rotate else canvas.image.copy()

    @property
    def pixels(self) -> np.ndarray:
        """Finished image as an (H, W, 3) uint8 array."""
        return np.array(self.image, dtype=np.uint8)
