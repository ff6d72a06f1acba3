"""Command line entry point: run one or more scenario files."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .game import Game

_HELP = (
    "Welcome to my game:",
    "To run a configuration file you should run the command:",
    "questgrid -n [number] -files [file1 file2 ...] .",
    "For example : questgrid -n 2 -files ../inputs/g1_in.csv ../inputs/g2_in.csv ",
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scenario files named after ``-n N -files``; return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    for arg in args:
        print(arg)

    if not args:
        print("Enter input file or enter command -help")
        print("Example : questgrid -help")
        return 0

    if args[0] == "-help":
        for line in _HELP:
            print(line)
        return 0

    for path in args[3:]:
        try:
            Game(path).play()
        except OSError:
            print("Unable to open file")
            return 1
        except ValueError as error:
            print(error)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())