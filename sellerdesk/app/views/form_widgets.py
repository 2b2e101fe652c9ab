"""Tk helpers that bind keystroke constraints to entries and render dates as text.

Constraints run as ``validate="key"`` commands on the proposed text (``%P``);
a rejected keystroke leaves the entry unchanged.
"""

from __future__ import annotations

import tkinter as tk
from datetime import date
from tkinter import ttk
from typing import Optional

from ...viewmodels import field_constraints
from ...viewmodels.field_constraints import Constraint
from ...viewmodels.formatting import format_date, parse_date


def bind_constraints(entry: ttk.Entry, *constraints: Constraint) -> None:
    def _accept(proposed: str) -> bool:
        return all(check(proposed) for check in constraints)

    command = (entry.register(_accept), "%P")
    entry.configure(validate="key", validatecommand=command)


def set_entry_integer(entry: ttk.Entry) -> None:
    bind_constraints(entry, field_constraints.accepts_integer)


def set_entry_max_length(entry: ttk.Entry, limit: int) -> None:
    bind_constraints(entry, field_constraints.max_length(limit))


def set_entry_decimal(entry: ttk.Entry, decimal_point: str = ".") -> None:
    bind_constraints(entry, field_constraints.decimal(decimal_point))


class DateEntry(ttk.Entry):
    """Text entry acting as a date picker with a fixed strftime pattern."""

    def __init__(self, parent: tk.Widget, *, date_format: str, **kwargs) -> None:
        self._var = tk.StringVar(value="")
        super().__init__(parent, textvariable=self._var, **kwargs)
        self.date_format = date_format
        bind_constraints(self, field_constraints.date_pattern(date_format))

    def get_date(self) -> Optional[date]:
        return parse_date(self._var.get(), self.date_format)

    def get_text(self) -> str:
        return self._var.get()

    def set_date(self, value: Optional[date]) -> None:
        self._var.set(format_date(value, self.date_format))

    @property
    def pattern_hint(self) -> str:
        return (
            self.date_format.replace("%d", "dd").replace("%m", "mm").replace("%Y", "yyyy")
        )
