#!/usr/bin/env python3
#
# PROJECT: ascii-cube-renderer
# MODULE: cube_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ascii_cube_renderer.animation import main
from ascii_cube_renderer.log import setup_logging


def build_parser():
    epilog = """\
examples:
  %(prog)s                                  Spinning cube, 80x24
  %(prog)s --fit-terminal                   Fill the current terminal
  %(prog)s --size 12 --zoom 40 --step 0.5   Smaller, denser cube
  %(prog)s --frames 300 --log-file cube.log --verbose
"""
    parser = argparse.ArgumentParser(
        description="ASCII Cube Renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=80,
                        help="Viewport width in columns (default: 80)")
    parser.add_argument("--height", type=int, default=24,
                        help="Viewport height in rows (default: 24)")
    parser.add_argument("--fit-terminal", action="store_true",
                        help="Size the viewport to the current terminal")
    parser.add_argument("--size", type=float, default=20.0,
                        help="Cube half-extent in world units (default: 20)")
    parser.add_argument("--distance", type=float, default=100.0,
                        help="Camera distance along the depth axis (default: 100)")
    parser.add_argument("--zoom", type=float, default=30.0,
                        help="Projection scale factor (default: 30)")
    parser.add_argument("--step", type=float, default=0.8,
                        help="Spacing between face samples (default: 0.8)")
    parser.add_argument("--speed-a", type=float, default=0.05,
                        help="X-axis rotation per frame, radians (default: 0.05)")
    parser.add_argument("--speed-b", type=float, default=0.05,
                        help="Y-axis rotation per frame, radians (default: 0.05)")
    parser.add_argument("--speed-c", type=float, default=0.01,
                        help="Z-axis rotation per frame, radians (default: 0.01)")
    parser.add_argument("--delay", type=float, default=16.0,
                        help="Sleep after each frame, milliseconds (default: 16)")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after N frames (default: run until Ctrl+C)")
    parser.add_argument("--no-normalize", action="store_true",
                        help="Let rotation angles grow without wrapping")
    parser.add_argument("--no-ansi", action="store_true",
                        help="Do not emit cursor control sequences")
    parser.add_argument("--log-file", default=None,
                        help="Write logs to this file (rotated at 1 MiB)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-second frame statistics (to stderr unless "
                             "--log-file is given)")
    return parser


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)
    try:
        main(args)
    except ValueError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
