"""Pytest configuration and shared fixtures."""

from typing import Dict
from unittest.mock import Mock

import pytest

from pinboard_to_raindrop.core.models import PinboardBookmark, TransformOptions


@pytest.fixture
def mock_pinboard_token():
    """Mock Pinboard API token."""
    return "johndoe:0123456789ABCDEF"


@pytest.fixture
def mock_posts():
    """Mock ``posts/all`` response body."""
    return [
        {
            "href": "https://python.org/tutorial",
            "description": "Python Tutorial",
            "extended": "Learn Python programming\nwith this tutorial",
            "meta": "3c5ee1a0c4b9e3f8",
            "hash": "d41d8cd98f00b204e9800998ecf8427e",
            "time": "2024-01-15T10:30:00Z",
            "shared": "yes",
            "toread": "no",
            "tags": "dev python",
        },
        {
            "href": "https://speedrun.com/metroidprime/guide",
            "description": 'He said, "hi"',
            "extended": "",
            "meta": "a8f5f167f44f4964",
            "hash": "e4d909c290d0fb1ca068ffaddf22cbd0",
            "time": "2024-01-10T15:45:00Z",
            "shared": "no",
            "toread": "yes",
            "tags": "",
        },
        {
            "href": "https://example.com/cli",
            "description": "CLI tools",
            "extended": "Shell, tooling; and more",
            "meta": "0cc175b9c0f1b6a8",
            "hash": "92eb5ffee6ae2fec3ad71c777531578f",
            "time": "2019-03-20T08:15:00Z",
            "shared": "no",
            "toread": "no",
            "tags": "dev cli",
        },
    ]


@pytest.fixture
def pinboard_bookmarks(mock_posts):
    """Parsed bookmarks for the mock posts."""
    return [PinboardBookmark.from_api(post) for post in mock_posts]


@pytest.fixture
def transform_options():
    """Options as produced by a typical command line."""
    return TransformOptions(
        folder="Pinboard Imports", user_tags=("@pinboard",), clean_description=True
    )


@pytest.fixture
def mock_requests_get(mock_posts):
    """Mock a successful ``posts/all`` response."""
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = mock_posts
    return mock_response


# Test data helpers
def create_mock_post(
    post_id: int, tags: str = "", time: str = "2024-01-15T10:30:00Z"
) -> Dict:
    """Create a mock Pinboard post for testing."""
    return {
        "href": f"https://example.com/page{post_id}",
        "description": f"Page {post_id}",
        "extended": f"Sample description for page {post_id}",
        "time": time,
        "shared": "no",
        "toread": "no",
        "tags": tags,
    }
