"""
Exception hierarchy for the service layer.
Every error carries a message, a status code for the application layer and
optional details. Wrapping errors keep the original error as their cause.
"""

from typing import Any, List, Optional


class AppException(Exception):
    """Base application exception."""
    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Any = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        self.cause = cause
        if cause is not None:
            # Keep the whole chain readable from str(exc)
            message = f"{message}: {cause}"
            self.__cause__ = cause
        super().__init__(message)

    def full_chain(self) -> List[BaseException]:
        """Return this error followed by every error it wraps."""
        chain: List[BaseException] = []
        current: Optional[BaseException] = self
        while current is not None and current not in chain:
            chain.append(current)
            current = current.__cause__
        return chain


class PreconditionError(AppException):
    """Raised when a caller passes malformed or missing arguments."""
    status_code = 400


class ConfigurationError(AppException):
    """Raised when a requested service or backend is not registered."""
    status_code = 500


class NotFoundError(AppException):
    """Raised by a storage collaborator when an update target is missing."""
    status_code = 404


class StorageError(AppException):
    """Raised by a storage collaborator when the underlying driver fails."""
    status_code = 500


class PersistenceError(AppException):
    """Raised by a service when its storage collaborator fails."""
    status_code = 500


class InvariantViolationError(AppException):
    """Raised when stored data breaks an invariant, e.g. a duplicated id."""
    status_code = 500
