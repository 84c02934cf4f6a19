"""
Pipeline: one seed → one PNG plus a sibling JSON with traits and stripe data.
Thin export layer around DoormatGenerator; the generator itself never touches disk.
"""
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from .config import get_output_dir, load_config, render_config_from_dict
from .generator import DoormatGenerator

logger = logging.getLogger(__name__)


def generate_doormat(
    seed: int,
    *,
    text_rows: Iterable[str] | None = None,
    output_path: Path | None = None,
    config: dict[str, Any] | None = None,
    generator: DoormatGenerator | None = None,
) -> Path:
    """
    Generate one doormat and write it. Returns the PNG path; traits go to <name>.json beside it.
    """
    if config is None:
        config = load_config()
    if generator is None:
        generator = DoormatGenerator(render_config_from_dict(config))

    if text_rows:
        generator.set_text(list(text_rows))
    else:
        generator.clear_text()
    generator.generate(seed)

    if output_path is None:
        out_dir = get_output_dir(config)
        output_path = out_dir / _filename(config, seed)
    output_path = Path(output_path)
    if output_path.suffix == "":
        output_path = output_path.with_suffix(".png")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    generator.image.save(output_path)
    meta_path = output_path.with_suffix(".json")
    meta_path.write_text(json.dumps(export_metadata(generator), indent=2), encoding="utf-8")
    logger.info("Wrote %s and %s", output_path, meta_path)
    return output_path


def generate_batch(
    seeds: Iterable[int],
    *,
    text_rows: Iterable[str] | None = None,
    output_dir: Path | None = None,
    config: dict[str, Any] | None = None,
) -> list[Path]:
    """One file per seed; each seed gets a fresh generator so no state carries over."""
    if config is None:
        config = load_config()
    rows = list(text_rows or [])
    out_dir = Path(output_dir) if output_dir is not None else get_output_dir(config)
    paths: list[Path] = []
    for seed in seeds:
        paths.append(
            generate_doormat(
                seed,
                text_rows=rows,
                output_path=out_dir / _filename(config, seed),
                config=config,
            )
        )
    return paths


def export_metadata(generator: DoormatGenerator) -> dict[str, Any]:
    """Seed, traits, marketplace attributes and the stripe layout."""
    state = generator.state
    traits = generator.calculate_traits()
    return {
        "seed": state.seed if state else None,
        "warpThickness": state.warp_thickness if state else None,
        "weftThickness": state.weft_thickness if state else generator.weft_thickness,
        "textRows": list(state.text_rows) if state else [],
        "traits": traits.to_dict(),
        "attributes": traits.to_metadata(),
        "palette": {
            "name": generator.get_current_palette().name,
            "colors": list(generator.get_current_palette().colors),
        },
        "stripeData": generator.stripe_data(),
    }


def _filename(config: dict[str, Any], seed: int) -> str:
    prefix = config.get("output", {}).get("filename_prefix", "doormat")
    return f"{prefix}_{seed}.png"
