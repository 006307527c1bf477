from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from fontfit.core.config import get_settings
from fontfit.core.logging import configure_logging
from fontfit.typeset.fit import constraint_for
from fontfit.typeset.label import FittableLabel
from fontfit.typeset.measure import PillowTextMeasurer
from fontfit.typeset.model import Size

logger = logging.getLogger(__name__)


@dataclass
class ScriptConfig:
    """A centralized configuration object for the command-line tool."""
    text: str
    target: Size
    font_path: Optional[Path]
    number_of_lines: int
    max_font_size: float
    min_font_scale: float
    line_spacing_multiplier: float
    as_json: bool


def _parse_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"must be finite: {value!r}")
    return number


def _positive_float(value: str) -> float:
    number = _parse_float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return number


def _unit_fraction(value: str) -> float:
    number = _positive_float(value)
    if number > 1:
        raise argparse.ArgumentTypeError(f"must be in (0, 1]: {value!r}")
    return number


def _non_negative_float(value: str) -> float:
    number = _parse_float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="fontfit",
        description="Find the largest font size at which TEXT fits a WIDTH x HEIGHT box",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("text", type=str, help="Text to fit; use \\n for hard line breaks")
    parser.add_argument("--width", type=float, required=True, help="Target box width in pixels")
    parser.add_argument("--height", type=float, required=True, help="Target box height in pixels")
    parser.add_argument(
        "--font",
        type=str,
        default=str(settings.font_path) if settings.font_path else None,
        help="Path to TTF/OTF font (Pillow's default font when omitted)",
    )
    parser.add_argument("--lines", type=int, default=1, help="Number of lines; 1 keeps the text on one line, 0 wraps freely")
    parser.add_argument("--max-size", type=_positive_float, default=settings.max_font_size, help="Largest font size to consider")
    parser.add_argument("--min-scale", type=_unit_fraction, default=settings.min_font_scale, help="Smallest font size as a fraction of --max-size")
    parser.add_argument("--line-spacing", type=_non_negative_float, default=settings.line_spacing_multiplier, help="Line spacing multiplier for wrapped text")
    parser.add_argument("--json", action="store_true", help="Print a JSON object instead of the bare size")
    return parser.parse_args(argv)


def run(config: ScriptConfig) -> dict:
    measurer = PillowTextMeasurer(font_path=config.font_path, line_spacing_multiplier=config.line_spacing_multiplier)
    label = FittableLabel(
        text=config.text,
        font_size=config.max_font_size,
        bounds=config.target,
        measure=measurer,
        number_of_lines=config.number_of_lines,
    )
    label.font_size_to_fit(max_font_size=config.max_font_size, min_font_scale=config.min_font_scale)
    measured = measurer(config.text, label.font_size, constraint_for(label.layout_mode, config.target))
    return {
        "font_size": label.font_size,
        "mode": label.layout_mode.value,
        "measured": {"width": measured.width, "height": measured.height},
        "target": {"width": config.target.width, "height": config.target.height},
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    # stdout carries only the result
    configure_logging(get_settings().log_level, stream=sys.stderr)

    config = ScriptConfig(
        text=args.text.replace("\\n", "\n"),
        target=Size(width=args.width, height=args.height),
        font_path=Path(args.font) if args.font else None,
        number_of_lines=args.lines,
        max_font_size=args.max_size,
        min_font_scale=args.min_scale,
        line_spacing_multiplier=args.line_spacing,
        as_json=args.json,
    )

    try:
        result = run(config)
    except FileNotFoundError:
        logger.exception("font_not_found", extra={"font_path": str(config.font_path)})
        return 1

    logger.info("fit_complete", extra={"font_size": result["font_size"], "mode": result["mode"]})
    if config.as_json:
        print(json.dumps(result))
    else:
        print(result["font_size"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
