"""Conversion workflow that ties fetching, mapping and writing together."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..api.pinboard_client import PinboardClient
from ..export.csv_writer import RaindropCSVWriter
from .mapper import SkippedBookmark, map_bookmarks
from .models import TransformOptions


@dataclass
class ConversionStats:
    """Counters for a single conversion run."""

    fetched: int = 0
    converted: int = 0
    skipped: int = 0
    written: int = 0
    skipped_records: list[SkippedBookmark] = field(default_factory=list)


class BookmarkConverter:
    """Runs the Pinboard -> Raindrop pipeline: fetch, map, write."""

    def __init__(
        self,
        client: PinboardClient,
        writer: Optional[RaindropCSVWriter] = None,
        options: Optional[TransformOptions] = None,
        strict: bool = False,
    ):
        """Initialize the converter.

        Args:
            client: Pinboard API client used to fetch bookmarks
            writer: CSV writer for the Raindrop import file
            options: Folder, user tags and description cleanup settings
            strict: Abort on the first invalid bookmark instead of skipping it
        """
        self.client = client
        self.writer = writer or RaindropCSVWriter()
        self.options = options or TransformOptions()
        self.strict = strict
        self.stats = ConversionStats()

    def convert(self, output_path: Union[str, Path]) -> ConversionStats:
        """Fetch all bookmarks, convert them and write the import file.

        Any FetchError, ValidationError (strict mode) or WriteError propagates
        to the caller; nothing is written unless every stage succeeds.

        Args:
            output_path: Destination CSV file

        Returns:
            Statistics for the run
        """
        self.stats = ConversionStats()

        print("📥 Fetching bookmarks from Pinboard...")
        pinboard_bookmarks = self.client.fetch_all_posts()
        self.stats.fetched = len(pinboard_bookmarks)
        print(f"📚 Found {self.stats.fetched} bookmarks")

        result = map_bookmarks(pinboard_bookmarks, self.options, strict=self.strict)
        self.stats.converted = len(result.bookmarks)
        self.stats.skipped = len(result.errors)
        self.stats.skipped_records = result.errors

        self.stats.written = self.writer.write(result.bookmarks, output_path)
        print(f"💾 Wrote {self.stats.written} bookmarks to {output_path}")

        self.print_stats()
        return self.stats

    def print_stats(self) -> None:
        """Print the number of converted bookmarks and the skipped ones."""
        print(f"✓ {self.stats.converted} bookmarks successfully processed")
        print(f"✕ {self.stats.skipped} bookmark processing errors")
        for skipped in self.stats.skipped_records:
            url = skipped.url or "<no URL>"
            print(f"  ⚠️  Skipped #{skipped.index + 1} {url}: {skipped.reason}")
