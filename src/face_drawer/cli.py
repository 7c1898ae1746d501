"""Command line entry point.

Usage::

    face-drawer <dir> <frame_id>
    face-drawer <dir> <start_frame_id> <end_frame_id>    # frames [start, end)
"""

__all__ = ["main", "EXIT_OK", "EXIT_ARGUMENT_ERROR"]

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .config import DrawerConfig
from .core import FaceDrawer
from .exceptions import ArgumentError
from .landmarks import H5LandmarkSource, LandmarkSource, StaticLandmarkSource
from .logging_utils import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ARGUMENT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="face-drawer",
        description="Draw the Delaunay mesh of facial landmarks onto numbered frames.",
        usage="%(prog)s [options] DIR FRAME_ID\n       %(prog)s [options] DIR START_FRAME_ID END_FRAME_ID",
    )
    parser.add_argument("positional", nargs="*", metavar="ARG", help="frame directory followed by one or two frame ids")
    parser.add_argument("--landmarks", type=Path, default=None, help="HDF5 landmark store, one string per frame")
    parser.add_argument("--log-level", default="INFO", help="logging level (default: INFO)")
    parser.add_argument(
        "--legacy-trailing-pair",
        action="store_true",
        help="drop a last coordinate pair that is not followed by a comma",
    )
    return parser


def _frame_range(positional: List[str]) -> Tuple[Path, int, int]:
    if len(positional) > 3:
        raise ArgumentError("Too many arguments", context={"count": len(positional)})

    directory = Path(positional[0])
    if not directory.is_dir():
        raise ArgumentError("Frame directory does not exist", context={"dir": directory})

    try:
        ids = [int(value) for value in positional[1:]]
    except ValueError as e:
        raise ArgumentError("Frame ids must be integers", context={"ids": positional[1:]}, cause=e) from e

    if len(ids) == 1:
        return directory, ids[0], ids[0] + 1
    return directory, ids[0], ids[1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.positional) < 2:
        parser.print_usage()
        return EXIT_OK

    configure_logging(args.log_level)
    try:
        directory, start, end = _frame_range(args.positional)
    except ArgumentError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_ARGUMENT_ERROR

    landmarks: LandmarkSource = StaticLandmarkSource()
    if args.landmarks is not None:
        landmarks = H5LandmarkSource(args.landmarks)

    drawer = FaceDrawer(DrawerConfig(flush_trailing_pair=not args.legacy_trailing_pair), landmarks)
    drawer.process_range(directory, start, end)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
