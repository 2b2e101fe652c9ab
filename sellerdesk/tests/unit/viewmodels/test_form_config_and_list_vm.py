from __future__ import annotations

from datetime import datetime

import pytest

from sellerdesk.domain.entities import Department, Seller
from sellerdesk.viewmodels.entity_list_vm import (
    SELLER_COLUMNS,
    EntityListVM,
    seller_row,
)
from sellerdesk.viewmodels.form_config import FormConfig, default_form_settings_payload


def test_from_dict_applies_known_keys() -> None:
    config = FormConfig.from_dict({"decimal_places": "3", "seller_name_max": 80})

    assert config.decimal_places == 3
    assert config.seller_name_max == 80
    assert config.date_format == "%d/%m/%Y"


def test_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unsupported"):
        FormConfig.from_dict({"locale": "en_US"})


@pytest.mark.parametrize(
    "payload",
    [
        {"department_name_max": 0},
        {"decimal_places": True},
        {"decimal_point": "12"},
        {"date_format": ""},
        {"debug_logging": "maybe"},
    ],
)
def test_from_dict_rejects_bad_values(payload) -> None:
    with pytest.raises(ValueError):
        FormConfig.from_dict(payload)


def test_defaults_round_trip_through_dict() -> None:
    assert FormConfig.from_dict(default_form_settings_payload()) == FormConfig()


def test_seller_rows_use_form_formatting() -> None:
    vm = EntityListVM(columns=SELLER_COLUMNS, to_row=seller_row)
    seller = Seller(
        id=1,
        name="Ann",
        email="ann@example.com",
        birth_date=datetime(1990, 1, 2),
        base_salary=10,
        department=Department(id=3, name="Books"),
    )

    rows = vm.set_items([seller, Seller(id=2, name="Ben")])

    assert rows[0] == ("1", "Ann", "ann@example.com", "02/01/1990", "10.00", "Books")
    assert rows[1] == ("2", "Ben", "", "", "", "")
    assert len(rows[0]) == len(SELLER_COLUMNS)


def test_item_at_ignores_out_of_range() -> None:
    vm = EntityListVM(columns=SELLER_COLUMNS, to_row=seller_row)
    vm.set_items([Seller(id=1)])

    assert vm.item_at(0) == Seller(id=1)
    assert vm.item_at(5) is None
    assert vm.item_at("x") is None


def test_debug_logging_accepts_bool_or_text() -> None:
    assert FormConfig().debug_logging is False
    assert FormConfig.from_dict({"debug_logging": True}).debug_logging is True
    assert FormConfig.from_dict({"debug_logging": "False"}).debug_logging is False
