from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, List, Mapping, Optional

from ...domain.entities import Department
from ...viewmodels.form_config import FormConfig
from ...viewmodels.seller_form_vm import (
    FIELD_BASE_SALARY,
    FIELD_BIRTH_DATE,
    FIELD_EMAIL,
    FIELD_NAME,
    SELLER_ERROR_FIELDS,
    SellerFormState,
    SellerFormVM,
)
from .form_widgets import DateEntry, set_entry_decimal, set_entry_integer, set_entry_max_length
from .view_utils import center_over_parent, safe_call


class SellerFormDialog(tk.Toplevel):
    """Modal dialog to edit a seller (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        config: Optional[FormConfig] = None,
        on_save: OnVoid = None,
        on_cancel: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title("Seller data")
        self.transient(parent)
        self.resizable(False, False)

        self._config = config or FormConfig()
        self._on_save = on_save
        self._on_cancel = on_cancel
        self._on_close = on_close
        self._closed = False
        self._departments: List[Department] = []
        self._selected_department: Optional[Department] = None

        self.protocol("WM_DELETE_WINDOW", self._on_cancel_clicked)

        self.id_var = tk.StringVar(value="")
        self.name_var = tk.StringVar(value="")
        self.email_var = tk.StringVar(value="")
        self.salary_var = tk.StringVar(value="")
        self.department_var = tk.StringVar(value="")
        self.error_vars: Dict[str, tk.StringVar] = {
            key: tk.StringVar(value="") for key in SELLER_ERROR_FIELDS
        }

        self._build_ui()

        self.update_idletasks()
        self.geometry(center_over_parent(self, 620, 300))
        try:
            self.grab_set()
        except tk.TclError:
            pass
        self.focus_set()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        pad = dict(padx=8, pady=6)

        form = ttk.Frame(self)
        form.grid(row=0, column=0, sticky="ew", **pad)
        form.columnconfigure(1, weight=1)

        ttk.Label(form, text="Id").grid(row=0, column=0, sticky="w")
        self.txt_id = ttk.Entry(form, textvariable=self.id_var, width=10, state="readonly")
        self.txt_id.grid(row=0, column=1, sticky="w", padx=(0, 8))
        set_entry_integer(self.txt_id)

        ttk.Label(form, text="Name").grid(row=1, column=0, sticky="w", pady=(6, 0))
        self.txt_name = ttk.Entry(form, textvariable=self.name_var, width=36)
        self.txt_name.grid(row=1, column=1, sticky="ew", padx=(0, 8), pady=(6, 0))
        set_entry_max_length(self.txt_name, self._config.seller_name_max)
        self._error_label(form, FIELD_NAME, row=1)

        ttk.Label(form, text="Email").grid(row=2, column=0, sticky="w", pady=(6, 0))
        self.txt_email = ttk.Entry(form, textvariable=self.email_var, width=36)
        self.txt_email.grid(row=2, column=1, sticky="ew", padx=(0, 8), pady=(6, 0))
        set_entry_max_length(self.txt_email, self._config.seller_email_max)
        self._error_label(form, FIELD_EMAIL, row=2)

        self.dp_birth_date = DateEntry(form, date_format=self._config.date_format, width=12)
        ttk.Label(form, text=f"Birth date ({self.dp_birth_date.pattern_hint})").grid(
            row=3, column=0, sticky="w", pady=(6, 0)
        )
        self.dp_birth_date.grid(row=3, column=1, sticky="w", padx=(0, 8), pady=(6, 0))
        self._error_label(form, FIELD_BIRTH_DATE, row=3)

        ttk.Label(form, text="Base salary").grid(row=4, column=0, sticky="w", pady=(6, 0))
        self.txt_salary = ttk.Entry(form, textvariable=self.salary_var, width=14)
        self.txt_salary.grid(row=4, column=1, sticky="w", padx=(0, 8), pady=(6, 0))
        set_entry_decimal(self.txt_salary, self._config.decimal_point)
        self._error_label(form, FIELD_BASE_SALARY, row=4)

        ttk.Label(form, text="Department").grid(row=5, column=0, sticky="w", pady=(6, 0))
        self.cb_department = ttk.Combobox(
            form, textvariable=self.department_var, state="readonly", width=24
        )
        self.cb_department.grid(row=5, column=1, sticky="w", padx=(0, 8), pady=(6, 0))
        self.cb_department.bind("<<ComboboxSelected>>", self._on_department_selected)

        footer = ttk.Frame(self)
        footer.grid(row=1, column=0, sticky="ew", **pad)
        ttk.Button(footer, text="Cancel", command=self._on_cancel_clicked).pack(side="right")
        ttk.Button(
            footer,
            text="Save",
            style="Primary.TButton",
            command=lambda: safe_call(self._on_save),
        ).pack(side="right", padx=(0, 6))

        self.txt_name.focus_set()

    def _error_label(self, parent: tk.Widget, key: str, *, row: int) -> None:
        ttk.Label(parent, textvariable=self.error_vars[key], style="Error.TLabel").grid(
            row=row, column=2, sticky="w", pady=(6, 0)
        )

    def _on_department_selected(self, _event=None) -> None:
        index = self.cb_department.current()
        if 0 <= index < len(self._departments):
            self._selected_department = self._departments[index]

    def _select_department(self, department: Optional[Department]) -> None:
        self._selected_department = department
        self.department_var.set(SellerFormVM.department_label(department))

    def _on_cancel_clicked(self) -> None:
        if self._on_cancel:
            safe_call(self._on_cancel)
        else:
            self.close()

    # ------------------------------------------------------------------
    # Form view API (called by SellerFormController)
    # ------------------------------------------------------------------
    def get_state(self) -> SellerFormState:
        return SellerFormState(
            id=self.id_var.get(),
            name=self.name_var.get(),
            email=self.email_var.get(),
            birth_date=self.dp_birth_date.get_date(),
            birth_date_text=self.dp_birth_date.get_text(),
            base_salary=self.salary_var.get(),
            department=self._selected_department,
        )

    def set_state(self, state: SellerFormState) -> None:
        self.id_var.set(state.id)
        self.name_var.set(state.name)
        self.email_var.set(state.email)
        self.dp_birth_date.set_date(state.birth_date)
        self.salary_var.set(state.base_salary)
        self._select_department(state.department)

    def set_departments(
        self, departments: List[Department], selected: Optional[Department]
    ) -> None:
        self._departments = list(departments)
        self.cb_department.configure(
            values=[SellerFormVM.department_label(dep) for dep in self._departments]
        )
        self._select_department(selected)

    def set_error_messages(self, messages: Mapping[str, str]) -> None:
        for key, var in self.error_vars.items():
            var.set(messages.get(key, ""))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        safe_call(self._on_close)
        try:
            self.grab_release()
        except tk.TclError:
            pass
        if self.winfo_exists():
            self.destroy()
