"""Domain errors raised by the query and mutation handlers."""


class CercaniaError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(CercaniaError):
    """Raised when a handler receives a value outside its accepted domain."""


class NotFound(CercaniaError):
    """Raised when an id or a named lookup has no matching record."""
