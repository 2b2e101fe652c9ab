from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Mapping, Optional

from ...viewmodels.department_form_vm import FIELD_NAME, DepartmentFormState
from ...viewmodels.form_config import FormConfig
from .form_widgets import set_entry_integer, set_entry_max_length
from .view_utils import center_over_parent, safe_call


class DepartmentFormDialog(tk.Toplevel):
    """Modal dialog to edit a department (UI-only)."""

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
        self.title("Department data")
        self.transient(parent)
        self.resizable(False, False)

        self._config = config or FormConfig()
        self._on_save = on_save
        self._on_cancel = on_cancel
        self._on_close = on_close
        self._closed = False

        self.protocol("WM_DELETE_WINDOW", self._on_cancel_clicked)

        self.id_var = tk.StringVar(value="")
        self.name_var = tk.StringVar(value="")
        self.name_error_var = tk.StringVar(value="")

        self._build_ui()

        self.update_idletasks()
        self.geometry(center_over_parent(self, 460, 160))
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
        self.txt_name = ttk.Entry(form, textvariable=self.name_var, width=30)
        self.txt_name.grid(row=1, column=1, sticky="ew", padx=(0, 8), pady=(6, 0))
        set_entry_max_length(self.txt_name, self._config.department_name_max)
        ttk.Label(form, textvariable=self.name_error_var, style="Error.TLabel").grid(
            row=1, column=2, sticky="w", pady=(6, 0)
        )

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

    def _on_cancel_clicked(self) -> None:
        if self._on_cancel:
            safe_call(self._on_cancel)
        else:
            self.close()

    # ------------------------------------------------------------------
    # Form view API (called by DepartmentFormController)
    # ------------------------------------------------------------------
    def get_state(self) -> DepartmentFormState:
        return DepartmentFormState(id=self.id_var.get(), name=self.name_var.get())

    def set_state(self, state: DepartmentFormState) -> None:
        self.id_var.set(state.id)
        self.name_var.set(state.name)

    def set_error_messages(self, messages: Mapping[str, str]) -> None:
        self.name_error_var.set(messages.get(FIELD_NAME, ""))

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
