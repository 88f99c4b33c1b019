"""Command-line entry point: parse the options a run is started with."""

from __future__ import annotations

import sys
from typing import Dict, Optional, Sequence

from evosim.options import build_parser


def parse_options(argv: Optional[Sequence[str]] = None) -> Dict[str, str]:
    """Map each option given on the command line to its value, keyed by its short key.

    On/off options are normalised to "1" or "0". Options that were not given
    are left out. An unknown option or a missing value exits with a usage error.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    namespace = build_parser().parse_args(args)
    return {key: value for key, value in vars(namespace).items() if value is not None}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and print the resulting options, one ``key=value`` per line."""
    options = parse_options(argv)
    for key, value in options.items():
        print(f"{key}={value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())