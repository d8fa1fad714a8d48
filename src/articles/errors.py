"""Error taxonomy for article operations.

Every error carries the HTTP status code the request handlers respond with.
"""


class BinderError(Exception):
    """Base class for all article errors."""

    status_code = 500


class InvalidUrl(BinderError):
    """Submitted article URL is blank or not an absolute http(s) URL."""

    status_code = 400


class InvalidRequest(BinderError):
    """Request body or query parameters could not be decoded."""

    status_code = 400


class NotFound(BinderError):
    """No article exists with the requested ID."""

    status_code = 404


class ExtractionFailed(BinderError):
    """The content-parsing service failed to fetch or parse the article."""

    status_code = 502


class StoreError(BinderError):
    """The article table or content store failed."""

    status_code = 500


class ConflictError(StoreError):
    """A conditional write lost to a concurrent update."""

    status_code = 409
