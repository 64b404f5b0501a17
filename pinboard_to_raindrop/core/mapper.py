"""Conversion of Pinboard posts into Raindrop import rows."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from ..errors import ValidationError
from .models import PinboardBookmark, RaindropBookmark, TransformOptions

# Raindrop's CSV importer splits the tags cell on commas
TAG_DELIMITER = ", "

RFC3339_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


@dataclass(frozen=True)
class SkippedBookmark:
    """A post that could not be converted, with the reason why."""

    index: int
    url: str
    reason: str


@dataclass
class MappingResult:
    """Converted bookmarks plus the posts that were skipped."""

    bookmarks: list[RaindropBookmark] = field(default_factory=list)
    errors: list[SkippedBookmark] = field(default_factory=list)


def tag(tags: str, user_tags: Iterable[str] = ()) -> list[str]:
    """Combine a post's own tags with the user-supplied tags.

    Duplicates are kept and order is preserved: original tags first.
    """
    return tags.split() + [t for t in user_tags if t]


def clean_description(text: str) -> str:
    """Collapse a multi-line description onto a single line.

    Each line is stripped, blank lines are dropped and the rest are joined
    with single spaces.
    """
    lines = (line.strip() for line in text.splitlines())
    return " ".join(line for line in lines if line)


def validate_created(created: str) -> Optional[datetime]:
    """Check that a Pinboard timestamp is a valid RFC 3339 date-time.

    Only the extended ``YYYY-MM-DDTHH:MM:SS[.frac](Z|±HH:MM)`` form is
    accepted, independent of what ``datetime.fromisoformat`` tolerates on the
    running interpreter.

    Args:
        created: Timestamp such as ``2017-04-03T15:59:39Z``

    Returns:
        The parsed, timezone-aware datetime, or None when no timestamp is set

    Raises:
        ValidationError: If the timestamp is unparsable or has no offset
    """
    if not created:
        return None

    match = RFC3339_RE.fullmatch(created)
    if not match:
        raise ValidationError(f"Invalid creation time {created!r}")

    offset = match.group("offset")
    fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
    try:
        if offset in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            tz = timezone(
                sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
            )
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError as e:
        raise ValidationError(f"Invalid creation time {created!r}") from e


def to_raindrop(bookmark: PinboardBookmark, options: TransformOptions) -> RaindropBookmark:
    """Convert a single Pinboard post into a Raindrop row.

    The timestamp is validated but written back verbatim, so the instant is
    never shifted between time zones. A post without a timestamp keeps an
    empty ``created`` column.

    Raises:
        ValidationError: If the post has unusable fields, no URL or an
            invalid timestamp
    """
    if bookmark.problems:
        raise ValidationError("; ".join(bookmark.problems))

    if not bookmark.url.strip():
        raise ValidationError("Bookmark has no URL")

    validate_created(bookmark.created)

    note = bookmark.description
    if options.clean_description:
        note = clean_description(note)

    return RaindropBookmark(
        url=bookmark.url,
        folder=options.folder,
        title=bookmark.title,
        note=note,
        tags=TAG_DELIMITER.join(tag(bookmark.tags, options.user_tags)),
        created=bookmark.created,
        favorite=False,
    )


def map_bookmarks(
    bookmarks: Iterable[PinboardBookmark],
    options: TransformOptions,
    strict: bool = False,
) -> MappingResult:
    """Convert every post, skipping the ones that fail validation.

    Args:
        bookmarks: Posts in the order Pinboard returned them
        options: Folder, extra tags and description cleanup settings
        strict: Raise on the first invalid post instead of skipping it

    Returns:
        MappingResult with converted rows in input order and skipped posts

    Raises:
        ValidationError: Only when ``strict`` is set
    """
    result = MappingResult()
    for index, bookmark in enumerate(bookmarks):
        try:
            result.bookmarks.append(to_raindrop(bookmark, options))
        except ValidationError as e:
            if strict:
                raise ValidationError(
                    f"Bookmark #{index + 1} ({bookmark.url or 'no URL'}): {e}"
                ) from e
            result.errors.append(SkippedBookmark(index, bookmark.url, str(e)))
    return result
