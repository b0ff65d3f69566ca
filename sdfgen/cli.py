#!/usr/bin/env python3
"""
Command-line interface for sdfgen.

Usage:
    sdfgen gen [-o DIR] [--params JSON] [--preview] <input-image...>
    sdfgen blend [-o FILE] <sdf1> <sdf2> [<sdf3>...]

Inputs of both commands may be glob patterns such as "masks/*.png"; a pattern
without an extension matches every supported image type. Blend inputs keep
their order and repeats.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sdfgen.config import GeneratorConfig
from sdfgen.generator import SDFGenerator
from sdfgen.image_io import expand_inputs, load_image, output_path_for, save_field

logger = logging.getLogger(__name__)

DEFAULT_GEN_OUTPUT = "sdf_output"
DEFAULT_BLEND_OUTPUT = "blended.png"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdfgen",
        description="Generate and blend signed distance field images",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("gen", help="Generate SDF images from masks")
    gen.add_argument("inputs", nargs="+", help="Input images (glob patterns allowed, e.g. *.png)")
    gen.add_argument("-o", "--output", default=DEFAULT_GEN_OUTPUT,
                     help="Output directory for SDF images")
    gen.add_argument("--params", type=str, help="JSON file with generator parameters")
    gen.add_argument("--preview", action="store_true",
                     help="Also write a mask/SDF comparison figure per input")
    gen.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    blend = subparsers.add_parser("blend", help="Blend two or more SDF images")
    blend.add_argument("inputs", nargs="+",
                       help="SDF images (glob patterns allowed), blended in the given order")
    blend.add_argument("-o", "--output", default=DEFAULT_BLEND_OUTPUT,
                       help="Output path for the blended image")
    blend.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def run_gen(generator: SDFGenerator, args: argparse.Namespace) -> int:
    inputs = expand_inputs(args.inputs)
    output_dir = Path(args.output or DEFAULT_GEN_OUTPUT)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Using output directory: {output_dir}, {len(inputs)} input(s)")

    if args.preview:
        import matplotlib
        matplotlib.use("Agg")
        from sdfgen.visualization import save_preview

    for input_path in inputs:
        output = output_path_for(input_path, output_dir)
        field = generator.generate_from_path(input_path)
        save_field(field, output)
        logger.info(f"Saved SDF image: {output}")

        if args.preview:
            preview = output_path_for(input_path, output_dir, suffix=".preview.png")
            save_preview(load_image(input_path), field, preview)
            logger.info(f"Saved preview: {preview}")

    return 0


def run_blend(generator: SDFGenerator, args: argparse.Namespace) -> int:
    inputs = expand_inputs(args.inputs, dedupe=False)
    result = generator.blend_paths(inputs)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    save_field(result, output)
    logger.info(f"Saved blended image: {output} ({len(inputs) - 1} adjacent pairs)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        params = getattr(args, "params", None)
        config = GeneratorConfig.from_json(params) if params else GeneratorConfig()
        generator = SDFGenerator(config)

        if args.command == "gen":
            return run_gen(generator, args)
        return run_blend(generator, args)
    except (ValueError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


def console_main():
    sys.exit(main())


if __name__ == "__main__":
    console_main()
