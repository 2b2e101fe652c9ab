from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from ..domain.errors import ValidationError
from .formatting import is_blank

REQUIRED_MESSAGE = "Field can't be empty."
INVALID_DATE_MESSAGE = "Invalid date."


def require(errors: ValidationError, field_name: str, value: Any) -> None:
    """Record the required-field message under ``field_name`` when ``value`` is blank."""
    if is_blank(value):
        errors.add_error(field_name, REQUIRED_MESSAGE)


def error_labels(fields: Iterable[str], errors: Mapping[str, str]) -> Dict[str, str]:
    """Label text per field: the error message, or ``""`` to blank the label."""
    return {name: errors.get(name, "") for name in fields}
