#!/usr/bin/env python3
"""
Command line entry point: scan a directory, group duplicates, review them.
"""

import argparse
import platform
import subprocess
import sys
from pathlib import Path

from .config import BANNER, DEFAULT_THRESHOLD
from .files import collect_images
from .grouper import clamp_threshold
from .scanner import ScanError, run_scan
from .session import ReviewSession

EXIT_OK = 0
EXIT_BAD_ARGUMENTS = 1
EXIT_SCAN_FAILED = 1
EXIT_MISSING_PATH = 2


class DetectorArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"Error: {message}")
        self.exit(EXIT_BAD_ARGUMENTS)


def build_parser() -> argparse.ArgumentParser:
    parser = DetectorArgumentParser(
        prog="image-duplicate-detector",
        description="Image Duplicate Detector - Find and review near-duplicate images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  image-duplicate-detector /path/to/images
  image-duplicate-detector -r -t 0.95 /path/to/images
        """
    )

    parser.add_argument('path', help='Directory to search for duplicate images')
    parser.add_argument('-r', '--recurse', action='store_true',
                        help='Recurse through subdirectories')
    parser.add_argument('-t', '--threshold', type=float, default=DEFAULT_THRESHOLD,
                        help='Value from 0.1-1.0 (default 0.9) that sets how similar an image '
                             'has to be to another to be flagged as a duplicate')
    return parser


def clear_terminal():
    """Clear the console between screens."""
    if not sys.stdout.isatty():
        return
    try:
        if platform.system() == "Windows":
            subprocess.run("cls", shell=True)
        else:
            subprocess.run(["clear"])
    except OSError:
        # No clear command available; keep drawing below the old screen
        pass


def main(argv=None) -> int:
    """Main function; returns the process exit code."""
    args = build_parser().parse_args(argv)

    clear_terminal()
    print(BANNER)

    directory = Path(args.path)
    if not directory.exists():
        print(f'Directory "{args.path}" does not exist')
        return EXIT_MISSING_PATH
    if not directory.is_dir():
        print(f'"{args.path}" is not a directory')
        return EXIT_MISSING_PATH

    if args.recurse:
        print("Recursion enabled")

    threshold = clamp_threshold(args.threshold)
    if threshold != DEFAULT_THRESHOLD:
        print(f"Threshold set to {threshold}")

    print("Counting files... this might take a while!")
    paths = collect_images(directory, recurse=args.recurse)
    print(f"Found {len(paths)} file{'' if len(paths) == 1 else 's'}")
    if len(paths) <= 1:
        print("Didn't find enough files to compare\nExiting...")
        return EXIT_OK

    print("Starting file comparison")
    try:
        duplicates = run_scan(paths, threshold, show_progress=sys.stdout.isatty())
    except ScanError as e:
        print(f"Error: {e}")
        return EXIT_SCAN_FAILED
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return EXIT_OK

    if not duplicates:
        print("No duplicates found")
        return EXIT_OK

    session = ReviewSession(duplicates, clear_screen=clear_terminal)
    try:
        session.run()
    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled by user.")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
