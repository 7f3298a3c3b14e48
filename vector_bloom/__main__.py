import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from vector_bloom import (
    BloomConfig,
    InvalidGeometryError,
    ValidationError,
    dump_config,
    fill_defaults,
    generate_bloom,
    generate_svg_document,
    load_config,
    validate,
)
from vector_bloom.demo import DEMO

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _write(path_value: str, text: str, label: str) -> None:
    output_path = Path(path_value)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing %s to %s", label, output_path)
    output_path.write_text(text, encoding="utf-8")
    print(f"{label} written to {output_path}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate vector flower drawings")
    parser.add_argument("path", nargs="?", help="Path to a JSON flower configuration")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the built-in demo configuration instead of a file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for petal jitter (default: unseeded)",
    )
    parser.add_argument(
        "--output",
        help="Write a standalone SVG document to the given path",
    )
    parser.add_argument(
        "--json-output",
        help="Write the configuration, with defaults filled in, to the given path",
    )
    parser.add_argument(
        "--zoom",
        type=float,
        default=1.0,
        help="View box scale around the flower center, below 1 zooms in (default: 1)",
    )
    parser.add_argument("--flower-id", help="Identifier used in SVG element ids")
    parser.add_argument(
        "--highlight-petal",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Highlight the petal group with this configuration index (repeatable)",
    )
    parser.add_argument(
        "--highlight-center",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Highlight the center arrangement with this configuration index (repeatable)",
    )
    args = parser.parse_args(argv)

    if not args.path and not args.demo:
        parser.error("a configuration path or --demo is required")

    _configure_logging(args.log_level)

    if args.demo:
        logger.info("Using the built-in demo configuration")
        config = BloomConfig.from_dict(DEMO)
    else:
        logger.info("Loading configuration from %s", args.path)
        config = load_config(args.path)

    fill_defaults(config)
    try:
        validate(config)
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(1)
    logger.info("Validation succeeded")

    rng = np.random.default_rng(args.seed)
    try:
        geometry = generate_bloom(config, rng=rng)
    except InvalidGeometryError as exc:
        logger.error("Cannot generate geometry: %s", exc)
        raise SystemExit(1)

    print(f"Petal groups: {len(geometry.petals)}")
    for layer, petals in enumerate(geometry.petals):
        print(f"  layer {layer}: {len(petals)} petal(s)")
    print(f"Center arrangements: {len(geometry.center)}")
    for layer, arrangement in enumerate(geometry.center):
        print(
            f"  layer {layer}: {len(arrangement.bases)} base(s), {len(arrangement.tips)} tip(s)"
        )
    print(f"Paths: {geometry.path_count}")

    if args.output:
        document = generate_svg_document(
            geometry,
            flower_id=args.flower_id,
            highlight_petals=args.highlight_petal,
            highlight_centers=args.highlight_center,
            zoom=args.zoom,
        )
        _write(args.output, document, "SVG document")

    if args.json_output:
        _write(args.json_output, dump_config(config) + "\n", "Configuration")


if __name__ == "__main__":
    main(sys.argv[1:])
