"""Raindrop.io CSV import file writer."""

import csv
import os
import tempfile
from pathlib import Path
from typing import Iterable, Union

from ..core.models import RaindropBookmark
from ..errors import WriteError

OUTPUT_FILE_MODE = 0o644


class RaindropCSVWriter:
    """Writes bookmarks in the column layout Raindrop's CSV importer expects."""

    COLUMNS = [
        "url",
        "folder",
        "title",
        "note",
        "tags",
        "created",
        "cover",
        "highlights",
        "favorite",
    ]

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(
        self, bookmarks: Iterable[RaindropBookmark], output_path: Union[str, Path]
    ) -> int:
        """Write a complete import file, replacing any file at the path.

        Rows are written to a temporary file next to the destination and moved
        into place only once everything is flushed, so a failed run never
        leaves a truncated import file behind.

        Fields containing a comma, a quote or a line break are quoted with
        inner quotes doubled (RFC 4180).

        Args:
            bookmarks: Rows to write, in order
            output_path: Destination CSV file

        Returns:
            Number of bookmark rows written (header excluded)

        Raises:
            WriteError: If the file cannot be created, written or moved into place
        """
        path = Path(output_path)

        try:
            tmp_file = tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                newline="",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            )
        except OSError as e:
            raise WriteError(f"Cannot create {path}: {e}") from e

        tmp_path = Path(tmp_file.name)
        count = 0
        try:
            with tmp_file as f:
                # Temporary files are owner-only; imports get a plain file mode
                os.chmod(f.fileno(), OUTPUT_FILE_MODE)
                writer = csv.writer(f, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
                writer.writerow(self.COLUMNS)
                for bookmark in bookmarks:
                    writer.writerow(bookmark.to_row())
                    count += 1
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except BaseException as e:
            tmp_path.unlink(missing_ok=True)
            if isinstance(e, OSError):
                raise WriteError(f"Cannot write {path}: {e}") from e
            raise

        return count
