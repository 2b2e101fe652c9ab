"""
MainWindowView
---------------
Tkinter main window for sellerdesk. This file contains **only View code**: no
services and no validation. It exposes callback hooks that the composition
root connects to controllers.

The window provides:
  * Menu bar (Registration -> Sellers / Departments, Help -> About)
  * Notebook with one tab per entity list
  * StatusBar at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(self, *, on_about: OnVoid = None) -> None:
        super().__init__()

        self.title("Seller & Department Registry")
        self.geometry("960x600")
        self.minsize(720, 480)

        self._on_about = on_about

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_menu()
        self._build_main_area(self)
        self._build_statusbar(self)

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        registration = tk.Menu(menubar, tearoff=False)
        registration.add_command(label="Sellers", command=lambda: self.tabs.select(self.tab_sellers))
        registration.add_command(
            label="Departments", command=lambda: self.tabs.select(self.tab_departments)
        )
        menubar.add_cascade(label="Registration", menu=registration)

        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="About", command=lambda: self._on_about and self._on_about())
        menubar.add_cascade(label="Help", menu=help_menu)
        self.configure(menu=menubar)

    # ------------------------------------------------------------------
    # Main Area
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        self.tabs = ttk.Notebook(parent)
        self.tabs.grid(row=0, column=0, sticky="nsew", padx=8, pady=(8, 4))

        self.tab_sellers = ttk.Frame(self.tabs)
        self.tab_departments = ttk.Frame(self.tabs)
        self.tabs.add(self.tab_sellers, text="Sellers")
        self.tabs.add(self.tab_departments, text="Departments")

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=1, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def show_toast(self, message: str) -> None:
        """Lightweight user feedback in the statusbar."""
        self.status_message_var.set(message)

    def mount_list(self, view: tk.Widget) -> None:
        """Pack a list view created with one of the tab frames as parent."""
        view.pack(fill="both", expand=True)
