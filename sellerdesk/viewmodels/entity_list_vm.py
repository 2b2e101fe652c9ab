from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from ..domain.entities import Department, Seller
from .form_config import FormConfig
from .formatting import format_amount, format_date, format_int, to_local_date

T = TypeVar("T")
Row = Tuple[str, ...]


@dataclass(frozen=True)
class ListColumn:
    key: str
    heading: str
    width: int = 120


DEPARTMENT_COLUMNS: Tuple[ListColumn, ...] = (
    ListColumn("id", "Id", 60),
    ListColumn("name", "Name", 240),
)

SELLER_COLUMNS: Tuple[ListColumn, ...] = (
    ListColumn("id", "Id", 60),
    ListColumn("name", "Name", 180),
    ListColumn("email", "Email", 200),
    ListColumn("birth_date", "Birth Date", 100),
    ListColumn("base_salary", "Base Salary", 100),
    ListColumn("department", "Department", 140),
)


def department_row(department: Department, config: FormConfig) -> Row:
    return (format_int(department.id), department.name or "")


def seller_row(seller: Seller, config: FormConfig) -> Row:
    return (
        format_int(seller.id),
        seller.name or "",
        seller.email or "",
        format_date(to_local_date(seller.birth_date), config.date_format),
        format_amount(
            seller.base_salary,
            decimal_places=config.decimal_places,
            decimal_point=config.decimal_point,
        ),
        (seller.department.name or "") if seller.department else "",
    )


class EntityListVM(Generic[T]):
    """Table state for a list of entities: items in display order plus row text."""

    def __init__(
        self,
        *,
        columns: Tuple[ListColumn, ...],
        to_row: Callable[[T, FormConfig], Row],
        config: Optional[FormConfig] = None,
    ) -> None:
        self.columns = columns
        self._to_row = to_row
        self.config = config or FormConfig()
        self.items: List[T] = []

    def set_items(self, items: Iterable[T]) -> List[Row]:
        self.items = list(items)
        return self.rows()

    def rows(self) -> List[Row]:
        return [self._to_row(item, self.config) for item in self.items]

    def item_at(self, index: Any) -> Optional[T]:
        try:
            position = int(index)
        except (TypeError, ValueError):
            return None
        if 0 <= position < len(self.items):
            return self.items[position]
        return None
