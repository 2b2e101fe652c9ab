from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..domain.entities import Department, Seller
from ..domain.errors import ValidationError
from .form_config import FormConfig
from .formatting import (
    format_amount,
    format_int,
    is_blank,
    start_of_day,
    to_local_date,
    try_parse_float,
    try_parse_int,
)
from .validation import INVALID_DATE_MESSAGE, REQUIRED_MESSAGE, error_labels, require

FIELD_NAME = "name"
FIELD_EMAIL = "email"
FIELD_BIRTH_DATE = "dataNascimento"
FIELD_BASE_SALARY = "salario"
SELLER_ERROR_FIELDS: tuple[str, ...] = (
    FIELD_NAME,
    FIELD_EMAIL,
    FIELD_BIRTH_DATE,
    FIELD_BASE_SALARY,
)


@dataclass
class SellerFormState:
    """Raw widget values of the seller form.

    Text fields hold exactly what the entries show; ``birth_date`` is the date
    picked in the form and ``department`` the selector's current item.
    ``birth_date_text`` is the picker's raw text, read only to tell a blank
    date from one that did not parse.
    """

    id: str = ""
    name: str = ""
    email: str = ""
    birth_date: Optional[date] = None
    base_salary: str = ""
    department: Optional[Department] = None
    birth_date_text: str = ""


def seller_to_form(
    entity: Seller,
    *,
    config: Optional[FormConfig] = None,
    departments: Sequence[Department] = (),
) -> SellerFormState:
    """Map ``entity`` to form values; without a department the first of ``departments`` is shown."""
    cfg = config or FormConfig()
    department = entity.department
    if department is None and departments:
        department = departments[0]
    return SellerFormState(
        id=format_int(entity.id),
        name=entity.name or "",
        email=entity.email or "",
        birth_date=to_local_date(entity.birth_date),
        base_salary=format_amount(
            entity.base_salary,
            decimal_places=cfg.decimal_places,
            decimal_point=cfg.decimal_point,
        ),
        department=department,
    )


def form_to_seller(state: SellerFormState, *, config: Optional[FormConfig] = None) -> Seller:
    """Build a seller from ``state`` or raise ``ValidationError`` listing every blank required field.

    Unparseable id or salary text becomes ``None`` rather than an error.
    """
    cfg = config or FormConfig()
    errors = ValidationError("Validation error")
    obj = Seller()

    obj.id = try_parse_int(state.id)

    require(errors, FIELD_NAME, state.name)
    obj.name = state.name

    require(errors, FIELD_EMAIL, state.email)
    obj.email = state.email

    if state.birth_date is None:
        if is_blank(state.birth_date_text):
            errors.add_error(FIELD_BIRTH_DATE, REQUIRED_MESSAGE)
        else:
            errors.add_error(FIELD_BIRTH_DATE, INVALID_DATE_MESSAGE)
    else:
        obj.birth_date = start_of_day(state.birth_date)

    require(errors, FIELD_BASE_SALARY, state.base_salary)
    obj.base_salary = try_parse_float(state.base_salary, decimal_point=cfg.decimal_point)

    obj.department = state.department

    if errors.has_errors():
        raise errors
    return obj


class SellerFormVM:
    """Keeps seller form state, the department choices, and validation, no I/O here."""

    def __init__(self, *, config: Optional[FormConfig] = None) -> None:
        self.config = config or FormConfig()
        self.state = SellerFormState()
        self.departments: List[Department] = []
        self.error_messages: Dict[str, str] = error_labels(SELLER_ERROR_FIELDS, {})

    def load_entity(self, entity: Seller) -> SellerFormState:
        self.state = seller_to_form(entity, config=self.config, departments=self.departments)
        return self.state

    def set_departments(self, departments: Iterable[Department]) -> Optional[Department]:
        """Replace the selector items; returns the department that should be visible."""
        self.departments = list(departments)
        if self.state.department is None and self.departments:
            self.state.department = self.departments[0]
        return self.state.department

    def build_entity(self) -> Seller:
        return form_to_seller(self.state, config=self.config)

    def apply_errors(self, errors: Mapping[str, str]) -> Dict[str, str]:
        self.error_messages = error_labels(SELLER_ERROR_FIELDS, errors)
        return dict(self.error_messages)

    @staticmethod
    def department_label(department: Optional[Department]) -> str:
        if department is None:
            return ""
        return department.name or ""
