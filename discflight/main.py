"""
discflight command-line entry point.

Prints the hyzer, flat and anhyzer flight paths of a disc.

Usage:
    python -m discflight.main 12 5 -1 3                  # SVG paths, saved throw style
    python -m discflight.main 12 5 -1 3 --throw rhfh
    python -m discflight.main 12 5 -1 3 --hand left --motion forehand
    python -m discflight.main 7 5 -2 1 --format summary
    python -m discflight.main 2 3 0 1 --max-distance 200 --format json
"""

import argparse
import dataclasses
import json
import logging
import sys

from discflight.flight_path import compute_flight_paths, sample_path, summarize_flight
from discflight.models.flight import FlightNumbers, InvalidInputError, ThrowStyle
from discflight.utils.config import Config

logger = logging.getLogger(__name__)

THROW_CHOICES = [style.value for style in ThrowStyle] + [
    style.long_name for style in ThrowStyle
]


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def resolve_throw_style(args) -> ThrowStyle:
    """Pick the throw style from CLI args, falling back to saved settings."""
    if args.throw:
        return ThrowStyle.parse(args.throw)
    config = Config()
    hand = args.hand or config.get("throwing_hand")
    motion = args.motion or config.get("default_motion")
    return ThrowStyle.from_hand(hand, motion)


def resolve_canvas(args):
    """Saved canvas with any CLI overrides applied."""
    overrides = {
        "width": args.width,
        "height": args.height,
        "start_x": args.start_x,
        "start_y": args.start_y,
        "max_distance": args.max_distance,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(Config.get_canvas_config(), **overrides)


def print_svg(paths):
    for angle, path in paths:
        print(f"{angle.value:<8} {path.to_svg()}")


def print_json(paths, samples: int):
    document = {}
    for angle, path in paths:
        entry = path.to_dict()
        entry["svg"] = path.to_svg()
        entry["samples"] = sample_path(path, samples).round(3).tolist()
        document[angle.value] = entry
    print(json.dumps(document, indent=2))


def print_summary(flight_numbers, style, paths, canvas, samples: int):
    print(f"\n{'='*60}")
    print(f"  Disc:          {flight_numbers.speed:g} | {flight_numbers.glide:g} | "
          f"{flight_numbers.turn:g} | {flight_numbers.fade:g}")
    print(f"  Throw:         {style.long_name}")
    print(f"{'='*60}")
    for angle, path in paths:
        s = summarize_flight(path, canvas, samples)
        print(f"  {angle.value.capitalize():<8} "
              f"distance={s.distance_ft:.0f}ft  "
              f"right={s.max_right_px:.1f}px  "
              f"left={s.max_left_px:.1f}px  "
              f"landing={s.final_offset_ft:+.1f}ft  "
              f"length={s.length_px:.1f}px")
    print(f"{'='*60}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Disc golf flight path diagrams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Flight numbers
    parser.add_argument("speed", type=float, help="Speed rating (1-15)")
    parser.add_argument("glide", type=float, help="Glide rating (1-7)")
    parser.add_argument("turn", type=float, help="Turn rating (-5 to 1)")
    parser.add_argument("fade", type=float, help="Fade rating (0-5)")

    # Throw style
    parser.add_argument(
        "--throw", type=str, choices=THROW_CHOICES, default=None,
        help="Throw style (default: from saved throwing hand and motion)",
    )
    parser.add_argument(
        "--hand", type=str, choices=["right", "left"], default=None,
        help="Throwing hand (ignored when --throw is given)",
    )
    parser.add_argument(
        "--motion", type=str, choices=["backhand", "forehand"], default=None,
        help="Throwing motion (ignored when --throw is given)",
    )

    # Canvas overrides
    parser.add_argument("--width", type=float, default=None, help="Canvas width (px)")
    parser.add_argument("--height", type=float, default=None, help="Canvas height (px)")
    parser.add_argument("--start-x", type=float, default=None, help="Throw origin x (px)")
    parser.add_argument("--start-y", type=float, default=None, help="Throw origin y (px)")
    parser.add_argument(
        "--max-distance", type=float, default=None,
        help="Feet shown on the full chart height",
    )

    # Output
    parser.add_argument(
        "--format", type=str, default="svg", choices=["svg", "json", "summary"],
        help="Output format (default: svg)",
    )
    parser.add_argument(
        "--samples", type=int, default=None,
        help="Points sampled per curve for json/summary output",
    )

    # Verbosity
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        style = resolve_throw_style(args)
        canvas = resolve_canvas(args)
        samples = args.samples if args.samples is not None else Config().get("sample_points")
        flight_numbers = FlightNumbers(args.speed, args.glide, args.turn, args.fade)
        paths = compute_flight_paths(flight_numbers, style, canvas)

        if args.format == "json":
            print_json(paths, samples)
        elif args.format == "summary":
            print_summary(flight_numbers, style, paths, canvas, samples)
        else:
            print_svg(paths)
    except InvalidInputError as e:
        logger.debug(f"Rejected input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
