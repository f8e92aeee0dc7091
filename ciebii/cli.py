from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .convert_job import CiebiiFileBuilder, ConvertSettings
from .io import read_file, write_file
from .rendering import file_to_image, show

log = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV_VAR = "CIEBII_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ciebii",
        description="Convert images to checksummed ciebii files and view them.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output (-vv for debug)")
    sub = parser.add_subparsers(dest="command")

    convert = sub.add_parser("convert", help="Convert a PNG/JPG image into a ciebii file")
    convert.add_argument("input", help="Image to convert (.png/.jpg/.gif/.bmp/...)")
    convert.add_argument("-o", "--output", help="Output path (default: <name>.cib in the current directory)")
    convert.add_argument("--max-width", type=positive_int, metavar="N", help="Downscale images wider than N pixels")

    render = sub.add_parser("render", help="Render a ciebii file")
    render.add_argument("file", help="ciebii file to render")
    render.add_argument("--scale", type=positive_int, default=1, help="Integer zoom factor (default: 1)")
    render.add_argument("--save", metavar="PATH", help="Save the rendered image instead of opening a viewer")

    info = sub.add_parser("info", help="Print dimensions of a ciebii file")
    info.add_argument("file", help="ciebii file to inspect")
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity == 1:
        level = "INFO"
    else:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def convert_image(args: argparse.Namespace) -> int:
    builder = CiebiiFileBuilder(ConvertSettings(max_width=args.max_width))
    output = args.output or builder.output_path_for(args.input)
    try:
        ciebii_file = builder.build_from_file(args.input)
        log.info("Saving file...")
        write_file(output, ciebii_file)
    except Exception as exc:
        print(f"Failed to convert '{args.input}': {exc}", file=sys.stderr)
        return 2
    width, height = ciebii_file.dimensions()
    print(f"Successfully converted '{args.input}' to '{output}' ({width}x{height})")
    return 0


def render_file(args: argparse.Namespace) -> int:
    ciebii_file = read_file(args.file)
    if args.save:
        file_to_image(ciebii_file, args.scale).save(args.save)
        return 0
    show(ciebii_file, args.scale)
    return 0


def print_info(args: argparse.Namespace) -> int:
    ciebii_file = read_file(args.file)
    width, height = ciebii_file.dimensions()
    print(f"dimensions: {width}x{height}")
    print(f"chunks: {len(ciebii_file)}")
    print(f"size: {len(ciebii_file.encode())} bytes")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if not args.command:
        parser.print_usage(sys.stderr)
        return 2
    if args.command == "convert":
        return convert_image(args)
    try:
        if args.command == "render":
            return render_file(args)
        return print_info(args)
    except Exception as exc:
        print(f"Failed to read '{args.file}': {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
