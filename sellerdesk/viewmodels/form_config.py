from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class FormConfig:
    """Formatting and input limits shared by all forms; persisted via StorageLocal."""

    date_format: str = "%d/%m/%Y"
    decimal_places: int = 2
    decimal_point: str = "."
    department_name_max: int = 30
    seller_name_max: int = 150
    seller_email_max: int = 150
    debug_logging: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FormConfig":
        """Build a config from persisted flat keys, falling back to defaults."""

        if not isinstance(payload, Mapping):
            raise ValueError("Form settings payload must be a mapping of flat keys.")

        allowed = set(cls.__annotations__.keys())
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(
                f"Unsupported form settings keys: {', '.join(sorted(str(key) for key in unknown))}"
            )

        updates: Dict[str, Any] = {}
        if "date_format" in payload:
            updates["date_format"] = _coerce_date_format(payload["date_format"])
        if "decimal_places" in payload:
            updates["decimal_places"] = _coerce_int("decimal_places", payload["decimal_places"], minimum=0)
        if "decimal_point" in payload:
            updates["decimal_point"] = _coerce_decimal_point(payload["decimal_point"])
        for key in ("department_name_max", "seller_name_max", "seller_email_max"):
            if key in payload:
                updates[key] = _coerce_int(key, payload[key], minimum=1)
        if "debug_logging" in payload:
            updates["debug_logging"] = _coerce_bool("debug_logging", payload["debug_logging"])
        return cls(**updates)

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce_int(name: str, value: Any, *, minimum: int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced < minimum:
        raise ValueError(f"{name} must be at least {minimum}.")
    return coerced


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise ValueError(f"{name} must be true or false.")


def _coerce_date_format(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("date_format must be a non-empty string.")
    try:
        date(2000, 1, 31).strftime(value)
    except ValueError as exc:
        raise ValueError(f"date_format is not a valid strftime pattern: {value!r}") from exc
    return value


def _coerce_decimal_point(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1 or value.isdigit():
        raise ValueError("decimal_point must be a single non-digit character.")
    return value


def default_form_settings_payload() -> dict:
    """Return a fresh snapshot containing the default form settings."""
    return FormConfig().to_dict()
