from __future__ import annotations

import logging
import tkinter as tk
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    """Run a view callback; failures are logged so the Tk loop keeps running."""
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            _log.exception("View callback failed: %s", exc)


def center_over_parent(window: tk.Misc, width: int, height: int) -> str:
    """Geometry string placing ``window`` centered over its master."""
    try:
        master = window.master
        px, py = master.winfo_rootx(), master.winfo_rooty()
        pw, ph = master.winfo_width(), master.winfo_height()
        x = px + (pw - width) // 2
        y = py + (ph - height) // 3
        return f"{width}x{height}+{max(0, x)}+{max(0, y)}"
    except Exception:
        return f"{width}x{height}"


__all__ = ["center_over_parent", "safe_call"]
