from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from sellerdesk.domain.entities import Department
from sellerdesk.domain.errors import DbError


class FakeFormView:
    """Form view double: holds a state object and records what the controller did."""

    def __init__(self, state: Any = None) -> None:
        self.state = state
        self.shown_states: List[Any] = []
        self.error_messages: Dict[str, str] = {}
        self.error_updates = 0
        self.closed = 0

    def get_state(self) -> Any:
        return self.state

    def set_state(self, state: Any) -> None:
        self.state = state
        self.shown_states.append(state)

    def set_error_messages(self, messages: Mapping[str, str]) -> None:
        self.error_messages = dict(messages)
        self.error_updates += 1

    def close(self) -> None:
        self.closed += 1


class FakeSellerFormView(FakeFormView):
    def __init__(self, state: Any = None) -> None:
        super().__init__(state)
        self.departments: List[Department] = []
        self.selected_department: Optional[Department] = None

    def set_departments(self, departments: List[Department], selected: Optional[Department]) -> None:
        self.departments = list(departments)
        self.selected_department = selected


class FakeService:
    """Service double for both ports; ``fail_with`` makes ``save_or_update`` raise DbError."""

    def __init__(self, items: Optional[List[Any]] = None, fail_with: Optional[str] = None) -> None:
        self.items = list(items or [])
        self.saved: List[Any] = []
        self.fail_with = fail_with
        self.find_all_error: Optional[str] = None

    def save_or_update(self, entity: Any) -> None:
        if self.fail_with:
            raise DbError(self.fail_with)
        self.saved.append(entity)

    def find_all(self) -> List[Any]:
        if self.find_all_error:
            raise DbError(self.find_all_error)
        return list(self.items)


class RecordingAlert:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Optional[str], str, Any]] = []

    def __call__(self, title: str, header: Optional[str], message: str, severity: Any) -> None:
        self.calls.append((title, header, message, severity))


__all__ = ["FakeFormView", "FakeSellerFormView", "FakeService", "RecordingAlert"]
