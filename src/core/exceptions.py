"""
Errors raised by the matching engine.

Callers map them to responses: NotFoundError to 404, InvalidArgumentError
to 400, UpstreamFailureError to 500.
"""


class MatchingError(Exception):
    """Base class for matching engine errors."""
    pass


class NotFoundError(MatchingError):
    """Raised when a referenced job does not exist."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found: {resource_id}")


class InvalidArgumentError(MatchingError, ValueError):
    """Raised for malformed input (location, limit, experience, pay)."""
    pass


class UpstreamFailureError(MatchingError):
    """Raised when a store query fails. The driver error is chained as __cause__."""
    pass
