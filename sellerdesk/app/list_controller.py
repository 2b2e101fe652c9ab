from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Optional, Protocol, TypeVar

from ..domain.ports import DataChangeListener, UseCaseError
from ..usecases.find_all_entities import FindAllEntities
from ..viewmodels.entity_list_vm import EntityListVM, Row
from .views.alerts import AlertType, ShowAlert, show_alert

E = TypeVar("E")

FormOpener = Callable[[E, DataChangeListener], None]


class ListView(Protocol):
    def set_rows(self, rows: Iterable[Row]) -> None: ...


class EntityListController(Generic[E]):
    """Loads a table of entities and opens the edit form for new or selected rows.

    The form opener receives the entity to edit and ``refresh`` as the data
    change listener, so a successful save reloads the table.
    """

    def __init__(
        self,
        *,
        view: ListView,
        vm: EntityListVM[E],
        find_all: FindAllEntities,
        open_form: FormOpener,
        new_entity: Callable[[], E],
        entity_label: str = "Entity",
        alert: Optional[ShowAlert] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.view = view
        self.vm = vm
        self._find_all = find_all
        self._open_form = open_form
        self._new_entity = new_entity
        self.entity_label = entity_label
        self._alert: ShowAlert = alert or show_alert

    def refresh(self) -> None:
        try:
            items = self._find_all()
        except UseCaseError as err:
            self._log.warning("Loading %s list failed: %s", self.entity_label, err.message)
            self._alert(f"Error loading {self.entity_label.lower()}s", None, err.message, AlertType.ERROR)
            return
        self.view.set_rows(self.vm.set_items(items))
        self._log.debug("%s list refreshed (%d rows)", self.entity_label, len(items))

    def on_new(self) -> None:
        self._open_form(self._new_entity(), self.refresh)

    def on_edit(self, index: int) -> None:
        entity = self.vm.item_at(index)
        if entity is None:
            return
        self._open_form(entity, self.refresh)
