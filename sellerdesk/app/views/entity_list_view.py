from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional, Sequence

from ...viewmodels.entity_list_vm import ListColumn, Row
from .view_utils import safe_call


class EntityListView(ttk.Frame):
    """
    Table of entities with a "New" toolbar button.
    Double-clicking a row reports its position to ``on_edit``.
    """

    def __init__(
        self,
        parent: tk.Widget,
        *,
        title: str,
        columns: Sequence[ListColumn],
        on_new: Optional[Callable[[], None]] = None,
        on_edit: Optional[Callable[[int], None]] = None,
    ) -> None:
        super().__init__(parent)
        self._on_new = on_new
        self._on_edit = on_edit

        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        toolbar = ttk.Frame(self)
        toolbar.grid(row=0, column=0, columnspan=2, sticky="ew", padx=8, pady=(8, 4))
        ttk.Label(toolbar, text=title, style="Title.TLabel").pack(side="left")
        ttk.Button(toolbar, text="New", command=lambda: safe_call(self._on_new)).pack(
            side="right"
        )

        keys = tuple(col.key for col in columns)
        self.tree = ttk.Treeview(self, columns=keys, show="headings", height=14)
        for col in columns:
            self.tree.heading(col.key, text=col.heading)
            self.tree.column(col.key, width=col.width, anchor="w")
        yscroll = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=yscroll.set)
        self.tree.grid(row=1, column=0, sticky="nsew", padx=(8, 0), pady=(0, 8))
        yscroll.grid(row=1, column=1, sticky="ns", padx=(0, 8), pady=(0, 8))

        self.tree.bind("<Double-1>", self._on_double_click)
        self.tree.bind("<Return>", self._on_double_click)

    def set_rows(self, rows: Iterable[Row]) -> None:
        self.tree.delete(*self.tree.get_children())
        for index, values in enumerate(rows):
            self.tree.insert("", "end", iid=str(index), values=values)

    def _on_double_click(self, _event=None) -> None:
        selection = self.tree.selection()
        if not selection:
            return
        safe_call(self._on_edit, int(selection[0]))
