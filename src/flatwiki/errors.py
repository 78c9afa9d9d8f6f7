"""Error hierarchy and the single error-to-status translation."""


class WikiError(Exception):
    """Base class for all flatwiki errors."""


class InvalidTitle(WikiError):
    """A path or form title does not match the allowed pattern."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Invalid page title: {title!r}")
        self.title = title


class PageNotFound(WikiError):
    """No stored page exists for the title."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageStoreError(WikiError):
    """Reading or writing the page directory failed."""


class RenderError(WikiError):
    """A template failed to render."""


_STATUS_BY_ERROR: list[tuple[type[WikiError], int]] = [
    (InvalidTitle, 404),
    (PageNotFound, 404),
    (PageStoreError, 500),
    (RenderError, 500),
]


def error_status(exc: WikiError) -> int:
    """Return the HTTP status code for an error.

    Unknown WikiError subclasses map to 500.
    """
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500
