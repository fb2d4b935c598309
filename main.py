"""
Color Scheme Generator
Image -> RGB pixel matrix (optionally box-filtered) -> HSV pixel matrix
"""

import argparse
import logging
import sys
from pathlib import Path

from models.errors import PixelMatrixError
from utils.constants import DEFAULT_OUTPUT_PATH

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a positive integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} is not a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-scheme-generator",
        description="Load an image as RGB and HSV pixel matrices.",
        epilog=(
            "--stride is only valid together with --window. "
            "With --window, the HSV matrix is converted from the averaged "
            "RGB matrix, not from the full-resolution image."
        ),
    )
    parser.add_argument("image", help="Input image path")
    parser.add_argument("-w", "--window", type=positive_int,
                        help="Average non-padded N x N windows before conversion")
    parser.add_argument("-s", "--stride", type=positive_int,
                        help="Step between window origins (default: window; requires --window)")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_PATH,
                        help=f"Where to write the RGB image (default: {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def run_cli(args: argparse.Namespace) -> None:
    from models.window_params import WindowParams
    from engines.pipeline import extract_colors
    from utils.matrix_io import load_rgb_matrix, save_rgb_matrix

    params = WindowParams(args.window, args.stride) if args.window else None

    logger.info("Loading %s", args.image)
    result = extract_colors(load_rgb_matrix(args.image), params)
    rgb, hsv = result.rgb, result.hsv

    if params is not None:
        src_w, src_h = result.source_size
        logger.info("Averaged %dx%d with window=%d stride=%d",
                    src_w, src_h, params.window, params.stride)

    print(f"Loaded RGB matrix: {rgb.width}x{rgb.height}")
    print(f"Loaded HSV matrix: {hsv.width}x{hsv.height}")
    if not rgb.is_empty():
        print(list(rgb.first()))
        print(list(hsv.first()))

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    save_rgb_matrix(rgb, output)
    print(f"Saved RGB image to {output}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.stride is not None and args.window is None:
        parser.error("--stride requires --window")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run_cli(args)
    except (PixelMatrixError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
