#!/usr/bin/env python3
"""
Falling-sand cave simulation - command line entry point.

Reads a rock path description from a file, pours sand until the pile
stabilizes and prints the number of resting grains.
"""

import argparse
import sys
from typing import List, Optional

from .cave import ParseCaveError
from .geometry import ParsePointError
from .simulation import SandSimulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sandcave",
        description="Count the sand grains that come to rest in a cave",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format (one rock path per line):
  498,4 -> 498,6 -> 496,6
  503,4 -> 502,4 -> 502,9 -> 494,9

Examples:
  sandcave input.txt                 # Synthetic floor below the rock
  sandcave input.txt --no-floor      # Stop once sand falls past the rock
  sandcave input.txt --render        # Print the final cave first
        """
    )

    parser.add_argument(
        'input',
        help='Path to the rock path description'
    )

    parser.add_argument(
        '--no-floor',
        dest='floor',
        action='store_false',
        help='Disable the synthetic floor two rows below the deepest rock'
    )

    parser.add_argument(
        '--render',
        action='store_true',
        help='Print the final cave before the count'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity (default: WARNING)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        with open(args.input, "r") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    try:
        sim = SandSimulation(contents, floor=args.floor, log_level=args.log_level)
    except (ParseCaveError, ParsePointError) as e:
        print(f"Error: invalid cave description: {e}", file=sys.stderr)
        return 1

    count = sim.run()

    if args.render:
        print(sim.render(), end="")
    print(count)

    return 0


if __name__ == "__main__":
    sys.exit(main())
