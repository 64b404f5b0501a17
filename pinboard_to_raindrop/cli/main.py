"""Command line interface for the Pinboard to Raindrop converter."""

import argparse
import os
import sys
from typing import Optional

from .. import __version__
from ..api.pinboard_client import DEFAULT_TIMEOUT, PinboardClient
from ..core.converter import BookmarkConverter
from ..core.models import TransformOptions
from ..errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pinboard-to-raindrop",
        description="📌 Convert Pinboard bookmarks into a Raindrop.io CSV import file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pinboard-to-raindrop -p johndoe:XXXX -o raindrop.csv
  pinboard-to-raindrop -p johndoe:XXXX -o raindrop.csv -r "Pinboard Imports"
  pinboard-to-raindrop -o raindrop.csv --user-tags @pinboard,imported -c

Environment Variables:
  PINBOARD_TOKEN      - Your Pinboard API token (used when --pinboard-token is omitted)

Import the file from Raindrop.io: Settings → Import → CSV.
        """,
    )

    parser.add_argument(
        "--output",
        "-o",
        required=True,
        help="Output file with Raindrop formatted bookmarks",
    )

    parser.add_argument(
        "--pinboard-token",
        "-p",
        default=os.getenv("PINBOARD_TOKEN"),
        help='Pinboard API token, e.g. "johndoe:XXXX" (default: $PINBOARD_TOKEN)',
    )

    parser.add_argument(
        "--raindrop-folder",
        "-r",
        default="",
        help="Target folder in Raindrop for the imported bookmarks (default: none)",
    )

    parser.add_argument(
        "--user-tags",
        "-u",
        type=parse_user_tags,
        default=(),
        help="Comma-separated tags appended to every bookmark, e.g. @pinboard",
    )

    parser.add_argument(
        "--clean-description",
        "-c",
        action="store_true",
        help="Clean up descriptions by removing linebreaks",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first invalid bookmark instead of skipping it",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for the Pinboard API (default: {DEFAULT_TIMEOUT:g})",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def parse_user_tags(value: str) -> tuple[str, ...]:
    """Split a ``tag,tag`` argument, dropping blank entries."""
    return tuple(t.strip() for t in value.split(",") if t.strip())


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code: 0 on success, 1 when a stage fails, 130 when interrupted
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.pinboard_token:
        parser.error("--pinboard-token is required (or set PINBOARD_TOKEN)")

    options = TransformOptions(
        folder=args.raindrop_folder,
        user_tags=args.user_tags,
        clean_description=args.clean_description,
    )

    try:
        client = PinboardClient(token=args.pinboard_token, timeout=args.timeout)
        converter = BookmarkConverter(client, options=options, strict=args.strict)
        converter.convert(args.output)
    except ConversionError as e:
        print(f"❌ {e.stage} failed: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n⏹️  Conversion interrupted by user", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
