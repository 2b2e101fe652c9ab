from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from sellerdesk.domain.entities import Department, Seller
from sellerdesk.domain.errors import ValidationError
from sellerdesk.viewmodels.form_config import FormConfig
from sellerdesk.viewmodels.seller_form_vm import (
    SELLER_ERROR_FIELDS,
    SellerFormState,
    SellerFormVM,
    form_to_seller,
    seller_to_form,
)
from sellerdesk.viewmodels.validation import INVALID_DATE_MESSAGE, REQUIRED_MESSAGE

BOOKS = Department(id=1, name="Books")


def _filled_state(**overrides) -> SellerFormState:
    values = dict(
        id="4",
        name="Bob",
        email="bob@example.com",
        birth_date=date(1985, 1, 31),
        base_salary="2100.50",
        department=BOOKS,
    )
    values.update(overrides)
    return SellerFormState(**values)


def test_filled_state_builds_seller() -> None:
    seller = form_to_seller(_filled_state())

    assert seller == Seller(
        id=4,
        name="Bob",
        email="bob@example.com",
        birth_date=datetime(1985, 1, 31),
        base_salary=2100.5,
        department=BOOKS,
    )


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"name": ""}, {"name"}),
        ({"email": "  "}, {"email"}),
        ({"birth_date": None}, {"dataNascimento"}),
        ({"base_salary": ""}, {"salario"}),
        ({"name": "", "base_salary": " "}, {"name", "salario"}),
    ],
)
def test_blank_required_fields_are_reported_exactly(overrides, expected) -> None:
    with pytest.raises(ValidationError) as info:
        form_to_seller(_filled_state(**overrides))

    assert set(info.value.errors) == expected
    assert all(message == REQUIRED_MESSAGE for message in info.value.errors.values())


def test_unparseable_id_and_salary_fall_back_to_none() -> None:
    seller = form_to_seller(_filled_state(id="abc", base_salary="12.3.4"))

    assert seller.id is None
    assert seller.base_salary is None


def test_department_is_optional() -> None:
    assert form_to_seller(_filled_state(department=None)).department is None


def test_seller_to_form_uses_fixed_two_decimals() -> None:
    state = seller_to_form(Seller(base_salary=1234.5))

    assert state.base_salary == "1234.50"
    assert state.id == ""
    assert state.name == ""
    assert state.birth_date is None


def test_seller_to_form_honors_decimal_point_setting() -> None:
    config = FormConfig(decimal_point=",")
    state = seller_to_form(Seller(base_salary=99.0), config=config)

    assert state.base_salary == "99,00"
    assert form_to_seller(_filled_state(base_salary=state.base_salary), config=config).base_salary == 99.0


def test_aware_birth_date_is_shown_as_local_date() -> None:
    stored = datetime(2000, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=0)))

    state = seller_to_form(Seller(birth_date=stored))

    assert state.birth_date == stored.astimezone().date()


def test_round_trip_reproduces_the_entity() -> None:
    original = Seller(
        id=12,
        name="Carol",
        email="carol@example.com",
        birth_date=datetime(1979, 12, 3),
        base_salary=4999.99,
        department=BOOKS,
    )

    assert form_to_seller(seller_to_form(original)) == original


def test_vm_selects_first_department_when_none_is_set() -> None:
    vm = SellerFormVM()
    vm.load_entity(Seller(name="Dan"))

    selected = vm.set_departments([BOOKS, Department(id=2, name="Music")])

    assert selected == BOOKS
    assert vm.state.department == BOOKS


def test_vm_apply_errors_blanks_fields_without_errors() -> None:
    vm = SellerFormVM()

    labels = vm.apply_errors({"email": REQUIRED_MESSAGE})

    assert set(labels) == set(SELLER_ERROR_FIELDS)
    assert labels["email"] == REQUIRED_MESSAGE
    assert labels["name"] == ""
    assert vm.error_messages == labels


def test_department_label_uses_name() -> None:
    assert SellerFormVM.department_label(BOOKS) == "Books"
    assert SellerFormVM.department_label(None) == ""


def test_unparseable_birth_date_text_is_reported_as_invalid() -> None:
    state = _filled_state(birth_date=None, birth_date_text="1990-05-17")

    with pytest.raises(ValidationError) as info:
        form_to_seller(state)

    assert info.value.errors == {"dataNascimento": INVALID_DATE_MESSAGE}


def test_blank_birth_date_text_is_still_required() -> None:
    with pytest.raises(ValidationError) as info:
        form_to_seller(_filled_state(birth_date=None, birth_date_text="  "))

    assert info.value.errors == {"dataNascimento": REQUIRED_MESSAGE}
