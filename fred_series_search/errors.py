"""Exceptions raised by the FRED search client."""


class FredError(Exception):
    """Base class for all client errors."""


class ValidationError(FredError):
    """A FRED response did not match the expected schema."""


class NotFoundError(FredError):
    """A lookup by series ID returned no series."""


class TransportError(FredError):
    """The HTTP request to FRED failed."""


class FredOperationError(FredError):
    """A public operation failed.

    The message names the operation and carries the underlying message; the
    original exception is available as ``__cause__``.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
