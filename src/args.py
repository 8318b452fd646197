"""Argument parsing functionality for pkgprobe."""

import argparse
from constants import Constants


def positive_int(value):
    """argparse type for strictly positive integers."""
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number


def positive_float(value):
    """argparse type for strictly positive numbers."""
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="pkgprobe",
        description=(
            "Checks whether new upstream releases exist for packages built from "
            "PKGBUILD recipes. Extracts each source URL and probes X.Y.Z+1, "
            "X.Y+1.0 and X+1.0.0; a positive answer from the server means a "
            "new release is probably available."
        ),
        add_help=True,
    )

    parser.add_argument("-v", "--verbose",
                        dest="VERBOSE",
                        help="Also print per-package diagnostics",
                        action="store_true")
    parser.add_argument("--threads_num",
                        dest="THREADS_NUM",
                        help=f"Number of threads used for URL polling (default: {Constants.DEFAULT_THREADS})",
                        action="store",
                        type=positive_int)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help=f"Per-probe timeout in seconds (default: {Constants.REQUEST_TIMEOUT})",
                        action="store",
                        type=positive_float)

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--abs",
                              dest="ABS",
                              help=f"Scan the ABS tree at {Constants.ABS_ROOT} (default)",
                              action="store_true")
    source_group.add_argument("-d", "--directory",
                              dest="DIRECTORY",
                              help="Scan PKGBUILD files found anywhere below DIR",
                              action="store",
                              type=str)

    parser.add_argument("--extractor",
                        dest="EXTRACTOR",
                        help="Command printing pkgname, pkgver and sources of the recipe passed as last argument",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    parser.add_argument("PACKAGES",
                        help="Only check these packages",
                        nargs="*",
                        metavar="package")

    return parser.parse_args(argv)
