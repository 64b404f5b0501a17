"""
📌 Pinboard to Raindrop

Converts a Pinboard bookmark collection into a CSV file that Raindrop.io's
"Import from CSV" feature understands.
"""

__version__ = "1.0.0"
__license__ = "BSD 3-Clause"

from .core.converter import BookmarkConverter

__all__ = ["BookmarkConverter"]
