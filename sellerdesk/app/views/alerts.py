"""Modal alert surface used by controllers to report failures to the user."""

from __future__ import annotations

import enum
from typing import Callable, Optional


class AlertType(enum.Enum):
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


ShowAlert = Callable[[str, Optional[str], str, AlertType], None]


def show_alert(
    title: str,
    header: Optional[str],
    message: str,
    severity: AlertType = AlertType.INFORMATION,
    *,
    parent=None,
) -> None:
    """Show a blocking message box; ``header`` becomes the first line when given."""
    from tkinter import messagebox

    text = f"{header}\n\n{message}" if header else message
    if severity is AlertType.ERROR:
        messagebox.showerror(title, text, parent=parent)
    elif severity is AlertType.WARNING:
        messagebox.showwarning(title, text, parent=parent)
    else:
        messagebox.showinfo(title, text, parent=parent)
