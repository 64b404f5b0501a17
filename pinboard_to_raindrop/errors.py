"""Exception hierarchy for the Pinboard to Raindrop conversion pipeline."""


class ConversionError(Exception):
    """Base class for every failure that aborts a conversion run."""

    stage = "convert"


class FetchError(ConversionError):
    """Failure while retrieving bookmarks from Pinboard."""

    stage = "fetch"


class NetworkError(FetchError):
    """Transport failure or unexpected HTTP status from the Pinboard API."""


class AuthError(FetchError):
    """Missing or rejected Pinboard API token."""


class ParseError(FetchError):
    """Pinboard response body does not match the expected schema."""


class ValidationError(ConversionError):
    """A bookmark cannot be converted to a Raindrop row."""

    stage = "transform"


class WriteError(ConversionError):
    """The Raindrop CSV file could not be created or written."""

    stage = "write"
