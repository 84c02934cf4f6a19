#!/usr/bin/env python3
"""
CLI: Generate doormat images from seeds. One PNG + one traits JSON per seed.
Usage:
  python scripts/generate.py 42
  python scripts/generate.py 1 2 3 --text "WELCOME" --text "HOME"
  python scripts/generate.py 42 --warp 3 --weft 6 --output my_mat.png
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from doormat.config import load_config, render_config_from_dict
from doormat.generator import DoormatGenerator
from doormat.pipeline import export_metadata, generate_batch, generate_doormat
from doormat.workflow_utils import log_structured, setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate woven doormat images from integer seeds (deterministic per seed)."
    )
    parser.add_argument(
        "seeds",
        type=int,
        nargs="+",
        help="One or more integer seeds.",
    )
    parser.add_argument(
        "--text",
        "-t",
        action="append",
        default=None,
        help="Text row to weave in (repeat for up to 3 rows; A-Z, 0-9 and space, max 11 chars).",
    )
    parser.add_argument(
        "--warp",
        type=int,
        default=None,
        help="Pin warp thread thickness (default: drawn from 1-6 per seed).",
    )
    parser.add_argument(
        "--weft",
        type=int,
        default=None,
        help="Weft thread thickness (default: from config, 8).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output PNG path (single seed) or directory (several seeds). Default: output/.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--no-rotate",
        action="store_true",
        help="Keep the unrotated working orientation (stripes run horizontally).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging.",
    )
    args = parser.parse_args()
    setup_logging(args.verbose)

    config = load_config(args.config)
    if args.warp is not None:
        config["doormat"]["warp_thickness"] = args.warp
    if args.weft is not None:
        config["doormat"]["weft_thickness"] = args.weft
    if args.no_rotate:
        config["output"]["rotate"] = False

    if len(args.seeds) == 1:
        generator = DoormatGenerator(render_config_from_dict(config))
        path = generate_doormat(
            args.seeds[0],
            text_rows=args.text,
            output_path=args.output,
            config=config,
            generator=generator,
        )
        log_structured("info", event="doormat", path=str(path), **export_metadata(generator)["traits"])
        print(f"Done. Doormat: {path}")
        return

    paths = generate_batch(args.seeds, text_rows=args.text, output_dir=args.output, config=config)
    for seed, path in zip(args.seeds, paths):
        log_structured("info", event="doormat", seed=seed, path=str(path))
    print(f"Done. {len(paths)} doormats in {paths[0].parent}")


if __name__ == "__main__":
    main()
