from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from ..domain.entities import Department
from ..domain.errors import ValidationError
from .form_config import FormConfig
from .formatting import format_int, try_parse_int
from .validation import error_labels, require

FIELD_NAME = "name"
DEPARTMENT_ERROR_FIELDS: tuple[str, ...] = (FIELD_NAME,)


@dataclass
class DepartmentFormState:
    """Raw widget values of the department form."""

    id: str = ""
    name: str = ""


def department_to_form(entity: Department) -> DepartmentFormState:
    return DepartmentFormState(id=format_int(entity.id), name=entity.name or "")


def form_to_department(state: DepartmentFormState) -> Department:
    """Build a department from ``state`` or raise ``ValidationError`` with every blank field."""
    errors = ValidationError("Validation error")
    obj = Department()
    obj.id = try_parse_int(state.id)

    require(errors, FIELD_NAME, state.name)
    obj.name = state.name

    if errors.has_errors():
        raise errors
    return obj


class DepartmentFormVM:
    """Keeps department form state and validation, no I/O here."""

    def __init__(self, *, config: Optional[FormConfig] = None) -> None:
        self.config = config or FormConfig()
        self.state = DepartmentFormState()
        self.error_messages: Dict[str, str] = error_labels(DEPARTMENT_ERROR_FIELDS, {})

    def load_entity(self, entity: Department) -> DepartmentFormState:
        self.state = department_to_form(entity)
        return self.state

    def build_entity(self) -> Department:
        return form_to_department(self.state)

    def apply_errors(self, errors: Mapping[str, str]) -> Dict[str, str]:
        self.error_messages = error_labels(DEPARTMENT_ERROR_FIELDS, errors)
        return dict(self.error_messages)
