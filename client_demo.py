#!/usr/bin/env python3
#
# PROJECT: wireframe-projector
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from wireframe_projector.config import RenderConfig
from wireframe_projector.demo import demo_mesh, main
from wireframe_projector.logging_config import setup_logging
from wireframe_projector.stl import STLParseError


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                               Spinning demo cube
  %(prog)s teapot.stl                    Load an ASCII STL model
  %(prog)s teapot.stl --raw              Keep the model's own coordinates
  %(prog)s --fov 70 --period 10 --ascii  Wide lens, fast spin, ASCII cells

keys:
  w/s  move forward/back    a/d  move left/right
  left/right arrows  turn   b  toggle braille    q  quit
"""
    parser = argparse.ArgumentParser(
        description="Wireframe STL Projector",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to an ASCII .stl file")
    parser.add_argument("--resolution", type=int, default=None,
                        help="Raster size in pixels per side (default: fit terminal)")
    parser.add_argument("--fov", type=float, default=52.0,
                        help="Field of view in degrees (default: 52)")
    parser.add_argument("--period", type=float, default=30.0,
                        help="Seconds per full model revolution (default: 30)")
    parser.add_argument("--distance", type=float, default=2.0,
                        help="Initial camera distance from the origin (default: 2)")
    parser.add_argument("--raw", action="store_true",
                        help="Do not centre and scale the model into a unit box")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--log-file", default=None,
                        help="Write log output to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Log at DEBUG level")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    setup_logging(logging.DEBUG if args.debug else logging.INFO,
                  log_file=args.log_file, console=False)

    try:
        config = RenderConfig.detect_terminal(
            resolution=args.resolution,
            fov=args.fov,
            rotation_period=args.period,
            camera_distance=args.distance,
            normalize=not args.raw,
        )
        if args.ascii:
            config.use_braille = False
        mesh = demo_mesh(args.model, normalize=config.normalize)
    except (OSError, STLParseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        curses.wrapper(lambda s: main(s, mesh, config))
    except KeyboardInterrupt:
        pass
