"""Custom exception classes."""


class TalkNotFoundError(Exception):
    """Raised when no talk has the requested title."""
    pass


class ValidationError(Exception):
    """Raised when data fails validation."""
    pass
