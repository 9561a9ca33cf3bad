"""
Domain errors raised by services and adapters.
Each carries the HTTP status the API layer maps it to.
"""


class JobsError(Exception):
    """Base error for the jobs domain."""

    status_code = 500


class NoFieldsError(JobsError):
    """Raised when an update payload has no fields."""

    status_code = 400


class DuplicateEntityError(JobsError):
    """Raised when a job with the same title already exists for a company."""

    status_code = 400


class InvalidReferenceError(JobsError):
    """Raised when a job references a company that does not exist."""

    status_code = 400


class NotFoundEntityError(JobsError):
    """Raised when the requested job does not exist."""

    status_code = 404


class InvalidIdentifierError(NotFoundEntityError):
    """Raised when a job id is not numeric. Reported exactly like not-found."""
