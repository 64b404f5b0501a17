"""Tests for the bookmark models."""

from pinboard_to_raindrop.core.models import (
    PinboardBookmark,
    RaindropBookmark,
    TransformOptions,
)


class TestPinboardBookmark:
    """Test cases for PinboardBookmark.from_api."""

    def test_from_api_maps_fields(self, mock_posts):
        """Test that Pinboard field names map onto bookmark attributes."""
        bookmark = PinboardBookmark.from_api(mock_posts[0])

        assert bookmark == PinboardBookmark(
            url="https://python.org/tutorial",
            title="Python Tutorial",
            description="Learn Python programming\nwith this tutorial",
            tags="dev python",
            created="2024-01-15T10:30:00Z",
            shared=True,
            toread=False,
        )

    def test_from_api_missing_fields_default_empty(self):
        """Test that a sparse post loads with empty defaults."""
        bookmark = PinboardBookmark.from_api({"href": "https://example.com"})

        assert bookmark.url == "https://example.com"
        assert bookmark.title == ""
        assert bookmark.description == ""
        assert bookmark.tags == ""
        assert bookmark.created == ""
        assert bookmark.shared is False
        assert bookmark.toread is False

    def test_from_api_null_fields_default_empty(self):
        """Test that JSON nulls are treated as missing."""
        bookmark = PinboardBookmark.from_api({"href": "https://example.com", "extended": None})
        assert bookmark.description == ""

    def test_from_api_boolean_flags(self):
        """Test that real booleans are accepted for flags."""
        bookmark = PinboardBookmark.from_api({"shared": True, "toread": "YES"})
        assert bookmark.shared is True
        assert bookmark.toread is True

    def test_from_api_wrong_field_type(self):
        """Test that a non-string text field is defaulted and recorded."""
        bookmark = PinboardBookmark.from_api(
            {"href": "https://example.com", "tags": 5, "time": "2024-01-15T10:30:00Z"}
        )

        assert bookmark.url == "https://example.com"
        assert bookmark.tags == ""
        assert bookmark.problems == ("Field 'tags' should be a string, got int",)

    def test_from_api_bad_flag(self):
        """Test that an unknown flag value is recorded as a problem."""
        bookmark = PinboardBookmark.from_api({"shared": "maybe"})

        assert bookmark.shared is False
        assert bookmark.problems == ("Field 'shared' has unexpected value 'maybe'",)

    def test_from_api_not_an_object(self):
        """Test that a non-object post becomes an empty bookmark with a problem."""
        bookmark = PinboardBookmark.from_api(["https://example.com"])

        assert bookmark.url == ""
        assert bookmark.problems == ("Expected a JSON object, got list",)

    def test_from_api_valid_post_has_no_problems(self, mock_posts):
        assert all(PinboardBookmark.from_api(p).problems == () for p in mock_posts)


class TestRaindropBookmark:
    """Test cases for RaindropBookmark."""

    def test_to_row_column_order(self):
        """Test that cells follow the import column order."""
        bookmark = RaindropBookmark(
            url="https://example.com",
            folder="Imported",
            title="Example",
            note="A note",
            tags="a, b",
            created="2017-04-03T15:59:39Z",
        )

        assert bookmark.to_row() == [
            "https://example.com",
            "Imported",
            "Example",
            "A note",
            "a, b",
            "2017-04-03T15:59:39Z",
            "",
            "",
            "false",
        ]

    def test_to_row_favorite(self):
        """Test favorite rendering."""
        assert RaindropBookmark(url="u", favorite=True).to_row()[-1] == "true"


def test_transform_options_defaults():
    """Test that default options leave bookmarks untouched."""
    options = TransformOptions()
    assert options.folder == ""
    assert options.user_tags == ()
    assert options.clean_description is False
