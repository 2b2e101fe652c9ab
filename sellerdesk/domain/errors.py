"""Domain-level error types shared by services, use cases, and form controllers.

Three categories cross layer boundaries:

* :class:`StateError` for controllers used before their collaborators are set.
* :class:`ValidationError` for user-correctable field problems.
* :class:`DbError` for failures raised by the persistence services.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional


class StateError(RuntimeError):
    """Raised when an operation runs without its required entity or service."""


class DbError(Exception):
    """Raised by persistence services when a record cannot be read or written."""


class ValidationError(Exception):
    """Field-level validation failure carrying ``field key -> message``."""

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors: Dict[str, str] = dict(errors or {})

    def add_error(self, field_name: str, message: str) -> None:
        self.errors[field_name] = message

    def has_errors(self) -> bool:
        return bool(self.errors)


__all__ = ["DbError", "StateError", "ValidationError"]
