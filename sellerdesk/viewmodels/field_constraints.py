from __future__ import annotations

import re
from typing import Callable, Optional

Constraint = Callable[[str], bool]

_INTEGER_RE = re.compile(r"[0-9]*")


def accepts_integer(proposed: str) -> bool:
    """Digits only (empty text allowed so the field can be cleared)."""
    return _INTEGER_RE.fullmatch(proposed or "") is not None


def accepts_decimal(proposed: str, *, decimal_point: str = ".") -> bool:
    """Digits with at most one decimal point, e.g. ``"12"``, ``"12."``, ``".5"``."""
    pattern = r"[0-9]*(" + re.escape(decimal_point) + r"[0-9]*)?"
    return re.fullmatch(pattern, proposed or "") is not None


def max_length(limit: int) -> Constraint:
    if limit <= 0:
        raise ValueError("limit must be positive.")

    def _check(proposed: str) -> bool:
        return len(proposed or "") <= limit

    return _check


def decimal(decimal_point: str = ".") -> Constraint:
    return lambda proposed: accepts_decimal(proposed, decimal_point=decimal_point)


_DATE_FIELD_WIDTHS = {"d": 2, "m": 2, "Y": 4, "y": 2, "H": 2, "M": 2}


def _date_template(date_format: str) -> Optional[str]:
    """``"%d/%m/%Y"`` -> ``"99/99/9999"``; ``None`` for directives without a fixed width."""
    parts = []
    chars = iter(date_format)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        code = next(chars, "")
        if code == "%":
            parts.append("%")
        elif code in _DATE_FIELD_WIDTHS:
            parts.append("9" * _DATE_FIELD_WIDTHS[code])
        else:
            return None
    return "".join(parts)


def date_pattern(date_format: str) -> Constraint:
    """Accept text that is still a prefix of ``date_format`` filled with digits."""
    template = _date_template(date_format)

    def _check(proposed: str) -> bool:
        text = proposed or ""
        if template is None:
            return True
        if len(text) > len(template):
            return False
        return all(
            ch.isdigit() if slot == "9" else ch == slot for ch, slot in zip(text, template)
        )

    return _check


__all__ = [
    "Constraint",
    "accepts_decimal",
    "accepts_integer",
    "date_pattern",
    "decimal",
    "max_length",
]
