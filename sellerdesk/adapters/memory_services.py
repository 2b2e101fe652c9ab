from __future__ import annotations

import copy
import logging
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from ..domain.entities import Department, Seller
from ..domain.errors import DbError
from ..domain.ports import DepartmentService, SellerService

_Record = TypeVar("_Record", Department, Seller)


class _InMemoryTable(Generic[_Record]):
    """Id-keyed record table; callers only ever see copies."""

    def __init__(self, label: str, seed: Optional[Iterable[_Record]] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._label = label
        self._rows: Dict[int, _Record] = {}
        self._next_id = 1
        for record in seed or ():
            self.save_or_update(record)

    def save_or_update(self, record: _Record) -> None:
        if record is None:
            raise DbError(f"{self._label} is null")
        if record.id is None:
            record.id = self._next_id
            self._log.debug("Inserted %s id=%s", self._label, record.id)
        elif record.id not in self._rows:
            raise DbError(f"{self._label} id={record.id} does not exist")
        else:
            self._log.debug("Updated %s id=%s", self._label, record.id)
        self._rows[record.id] = copy.deepcopy(record)
        self._next_id = max(self._next_id, record.id + 1)

    def find_all(self) -> List[_Record]:
        return [copy.deepcopy(self._rows[key]) for key in sorted(self._rows)]


class InMemoryDepartmentService(DepartmentService):
    """In-memory department store used for offline runs and tests."""

    def __init__(self, seed: Optional[Iterable[Department]] = None) -> None:
        self._table: _InMemoryTable[Department] = _InMemoryTable("Department", seed)

    def save_or_update(self, department: Department) -> None:
        self._table.save_or_update(department)

    def find_all(self) -> List[Department]:
        return self._table.find_all()


class InMemorySellerService(SellerService):
    """In-memory seller store used for offline runs and tests."""

    def __init__(self, seed: Optional[Iterable[Seller]] = None) -> None:
        self._table: _InMemoryTable[Seller] = _InMemoryTable("Seller", seed)

    def save_or_update(self, seller: Seller) -> None:
        self._table.save_or_update(seller)

    def find_all(self) -> List[Seller]:
        return self._table.find_all()
