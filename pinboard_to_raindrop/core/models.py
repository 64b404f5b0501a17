"""Bookmark records for both ends of the conversion."""

from dataclasses import dataclass
from typing import Any, Optional

# Pinboard API field -> PinboardBookmark attribute
PINBOARD_TEXT_FIELDS = {
    "href": "url",
    "description": "title",
    "extended": "description",
    "tags": "tags",
    "time": "created",
}
PINBOARD_FLAG_FIELDS = {"shared": "shared", "toread": "toread"}


def _parse_flag(value: Any) -> Optional[bool]:
    """Pinboard encodes booleans as "yes"/"no"; accept real booleans too.

    Returns None for anything else.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("yes", "no", ""):
        return value.lower() == "yes"
    return None


@dataclass(frozen=True)
class PinboardBookmark:
    """A post as returned by Pinboard's ``posts/all`` endpoint.

    ``problems`` lists the fields that came back with an unusable value; the
    mapper refuses to convert a bookmark that has any.
    """

    url: str = ""
    title: str = ""
    description: str = ""
    tags: str = ""
    created: str = ""
    shared: bool = False
    toread: bool = False
    problems: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: Any) -> "PinboardBookmark":
        """Build a bookmark from one decoded JSON post.

        Missing fields fall back to empty defaults and unknown fields are
        ignored, so a sparse post still loads. A field with the wrong type is
        also defaulted and recorded in ``problems`` so that one bad post is
        skipped instead of failing the whole fetch.

        Args:
            data: One element of the decoded ``posts/all`` array

        Returns:
            The parsed bookmark
        """
        if not isinstance(data, dict):
            return cls(problems=(f"Expected a JSON object, got {type(data).__name__}",))

        values: dict[str, Any] = {}
        problems = []
        for api_field, attr in PINBOARD_TEXT_FIELDS.items():
            value = data.get(api_field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                problems.append(
                    f"Field '{api_field}' should be a string, got {type(value).__name__}"
                )
                value = ""
            values[attr] = value

        for api_field, attr in PINBOARD_FLAG_FIELDS.items():
            raw = data.get(api_field, "")
            flag = _parse_flag(raw)
            if flag is None:
                problems.append(f"Field '{api_field}' has unexpected value {raw!r}")
                flag = False
            values[attr] = flag

        return cls(problems=tuple(problems), **values)


@dataclass(frozen=True)
class RaindropBookmark:
    """One row of a Raindrop.io CSV import file, in column order."""

    url: str
    folder: str = ""
    title: str = ""
    note: str = ""
    tags: str = ""
    created: str = ""
    cover: str = ""
    highlights: str = ""
    favorite: bool = False

    def to_row(self) -> list[str]:
        """Return the CSV cells for this bookmark."""
        return [
            self.url,
            self.folder,
            self.title,
            self.note,
            self.tags,
            self.created,
            self.cover,
            self.highlights,
            "true" if self.favorite else "false",
        ]


@dataclass(frozen=True)
class TransformOptions:
    """User choices applied to every converted bookmark."""

    folder: str = ""
    user_tags: tuple[str, ...] = ()
    clean_description: bool = False
