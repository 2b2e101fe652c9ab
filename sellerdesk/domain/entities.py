from __future__ import annotations

"""Business records edited by the desktop forms and persisted by the service ports."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Department:
    """Department record; ``id`` stays ``None`` until the service persists it."""

    id: Optional[int] = None
    name: Optional[str] = None

    def __str__(self) -> str:
        return self.name or ""


@dataclass
class Seller:
    """Seller record with its owning department.

    No invariants are enforced here. Field checks happen in the form layer
    right before the record is handed to a service.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[datetime] = None
    """Stored date-time; the form shows only the local calendar date."""
    base_salary: Optional[float] = None
    department: Optional[Department] = None
