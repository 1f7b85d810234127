class ApodError(Exception):
    """Base class for failures raised while acquiring APOD items."""


class FetchError(ApodError):
    """A URL could not be fetched (transport error or non-success status)."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ApiError(FetchError):
    """The APOD JSON API answered with an error or an unreadable payload."""
