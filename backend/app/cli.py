"""
Rectangle art from the command line: packs a canvas and writes SVG.

Usage:
  python -m app.cli --width 800 --height 600                 # SVG to stdout
  python -m app.cli --count 500 --min-size 8 --max-size 40 -o art.svg
  python -m app.cli --seed 7 --zone 400,300,150,#ff0000 -o art.svg
"""

from __future__ import annotations

import argparse
import logging
import sys

from app.models.art import CircleZone, GenerationConfig, GenerationRequest
from app.packing.config import GAP, MAX_ATTEMPTS_PER_RECT, PackerConfig
from app.packing.service import generate_artwork
from app.svg.render import artwork_to_svg

logger = logging.getLogger(__name__)


def _parse_zone(text: str) -> CircleZone:
    """Parse "x,y,radius,#color" into a CircleZone."""
    try:
        x, y, radius, color = text.split(",")
        return CircleZone(x=float(x), y=float(y), radius=float(radius), color=color.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid zone {text!r}: expected x,y,radius,#color") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pack gap-respecting rectangles into an SVG canvas.")
    parser.add_argument("--width", type=float, default=800, help="canvas width in px")
    parser.add_argument("--height", type=float, default=600, help="canvas height in px")
    parser.add_argument("--count", type=int, default=1000, help="rectangles to place")
    parser.add_argument("--min-size", type=int, default=8)
    parser.add_argument("--max-size", type=int, default=60)
    parser.add_argument("--color", default="#1f77b4", help="default fill color")
    parser.add_argument("--zone", type=_parse_zone, action="append", default=[],
                        help="circular color zone x,y,radius,#color (repeatable)")
    parser.add_argument("--gap", type=float, default=GAP)
    parser.add_argument("--attempts", type=int, default=MAX_ATTEMPTS_PER_RECT,
                        help="placement attempts per rectangle")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-o", "--output", help="output .svg path (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.width <= 0 or args.height <= 0:
        print("error: canvas dimensions must be positive", file=sys.stderr)
        return 2
    try:
        config = GenerationConfig(
            color=args.color, count=args.count,
            min_size=args.min_size, max_size=args.max_size,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    request = GenerationRequest(
        canvas_width=args.width, canvas_height=args.height,
        config=config, zones=tuple(args.zone),
    )
    artwork = generate_artwork(
        request,
        seed=args.seed,
        packer_config=PackerConfig(gap=args.gap, max_attempts_per_rect=args.attempts),
    )
    svg = artwork_to_svg(artwork)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
    else:
        sys.stdout.write(svg + "\n")

    print(artwork.status, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
