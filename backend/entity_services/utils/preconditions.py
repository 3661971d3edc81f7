"""
Argument checks shared by services and registries.
Each check raises PreconditionError with the caller supplied message.
"""

from collections.abc import Mapping
from typing import Any

from entity_services.core.exceptions import PreconditionError


def require_mapping(value: Any, message: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise PreconditionError(message, details={"received": type(value).__name__})
    return value


def require_string(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value:
        raise PreconditionError(message, details={"received": type(value).__name__})
    return value


def require_string_list(value: Any, message: str) -> list:
    """Accept a list or tuple of strings, empty included."""
    if not isinstance(value, (list, tuple)):
        raise PreconditionError(message, details={"received": type(value).__name__})
    if not all(isinstance(item, str) for item in value):
        raise PreconditionError(message, details={"received": list(value)})
    return list(value)
