"""Typed failures raised by the tracker core."""


class TrackerError(Exception):
    """Base error with a stable kind and a human-readable message."""

    kind = "tracker_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BackendUnavailable(TrackerError):
    """The persistence backend cannot be reached or is not configured."""

    kind = "backend_unavailable"


class NotFound(TrackerError):
    """A referenced record does not exist."""

    kind = "not_found"


class InvalidRange(TrackerError):
    """A date or date range could not be parsed."""

    kind = "invalid_range"


class ValidationFailed(TrackerError):
    """An input value is outside its legal range."""

    kind = "validation_failed"


class Conflict(TrackerError):
    """A write collided with another writer."""

    kind = "conflict"
