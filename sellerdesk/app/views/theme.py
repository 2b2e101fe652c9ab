"""Shared visual theme for the sellerdesk views.

Centralizes ttk style tokens (including the error-label style used next to
form fields) so dialogs and lists do not carry styling logic themselves.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk


def apply_theme(root: tk.Misc) -> None:
    """Apply the ttk styles used by the main window, lists, and form dialogs.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = "#f4f6fa"
    border = "#d4dae6"
    primary = "#2f5bd3"
    text = "#1f2937"
    error = "#c62828"

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=bg)

    style.configure(".", background=bg, foreground=text)
    style.configure("TFrame", background=bg)
    style.configure("TLabel", background=bg, foreground=text)
    style.configure("Title.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 12, "bold"))
    style.configure("Error.TLabel", background=bg, foreground=error)

    style.configure("TButton", padding=(10, 4), bordercolor=border)
    style.configure("Primary.TButton", background=primary, foreground="#ffffff", bordercolor=primary)
    style.map("Primary.TButton", background=[("active", "#2449ad")])

    style.configure("TNotebook.Tab", padding=(14, 6))
    style.configure("Treeview", rowheight=24)
    style.configure("Treeview.Heading", relief="flat")
    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=border)
