#!/usr/bin/env python3
"""Gdenticon - write the identicon for a hex hash as an SVG file.

Usage:
    python gdenticon.py 0123456789abcdef0123456789abcdef icon.svg
    python gdenticon.py -s 64 0123456789abcdef out.svg
    python gdenticon.py 0123456789abcdef -           # SVG to stdout
"""

import argparse
import sys

from generator import InvalidHashFormat, generate
from models import Config, DEFAULT_SIZE, DEFAULT_PADDING, DEFAULT_SATURATION


def main(argv=None):
    parser = argparse.ArgumentParser(description="Gdenticon identicon generator")
    parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE,
                        help=f"Size of the output icon (default {DEFAULT_SIZE})")
    parser.add_argument("--saturation", type=float, default=DEFAULT_SATURATION,
                        help=f"Colour saturation, 0..1 (default {DEFAULT_SATURATION})")
    parser.add_argument("--padding", type=float, default=DEFAULT_PADDING,
                        help=f"Padding as a fraction of the size (default {DEFAULT_PADDING})")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("hash", help="Hex hash, at least 11 digits")
    parser.add_argument("output", help="Output .svg file, or - for stdout")
    args = parser.parse_args(argv)

    if args.debug:
        import logging
        logging.basicConfig(level=logging.DEBUG)

    config = Config.from_ranges(saturation=args.saturation)
    try:
        svg = generate(args.hash, args.size, config, args.padding)
    except InvalidHashFormat as e:
        print(e, file=sys.stderr)
        return 1

    if args.output == "-":
        sys.stdout.write(svg)
        return 0

    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
    except OSError as e:
        print(f"Cannot write {args.output}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
