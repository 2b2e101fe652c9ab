from __future__ import annotations
from typing import Callable, List, Protocol

from .entities import Department, Seller

DataChangeListener = Callable[[], None]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (persistence boundaries) ----
class DepartmentService(Protocol):
    """Persistence for departments. Implementations raise ``DbError`` on I/O problems."""

    def save_or_update(self, department: Department) -> None: ...
    def find_all(self) -> List[Department]: ...


class SellerService(Protocol):
    """Persistence for sellers. Implementations raise ``DbError`` on I/O problems."""

    def save_or_update(self, seller: Seller) -> None: ...
    def find_all(self) -> List[Seller]: ...
