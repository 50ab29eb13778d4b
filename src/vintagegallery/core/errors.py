"""Failure kinds raised or reported by the gallery core.

None of these are fatal: each is handled by the component that owns it and
reported through the module loggers.
"""


class GalleryError(Exception):
    """Base class for all gallery failures."""

    pass


class ReadFailure(GalleryError):
    """A selected file could not be read into an encoded image string."""

    pass


class LoadFailure(GalleryError):
    """Fetching the collection failed or returned a non-success status."""

    pass


class CreateFailure(GalleryError):
    """The remote store rejected a new record or could not be reached.

    Attributes:
        status_code: HTTP status returned by the store, or None when the
            request never got a response.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
