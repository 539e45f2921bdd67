"""Site-wide settings consumed by the submission validator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields


def _snake_case(key: str) -> str:
    key = key.strip()
    if "_" in key:
        return key.lower()
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


@dataclass(frozen=True)
class SiteConfig:
    tie_breaker_low: float | None = None
    tie_breaker_high: float | None = None
    stop_submit_toggle: str = "No"
    stop_submit_date_time: str = ""  # ISO-ish timestamp; blank means no deadline
    final_message_too_late: str | None = None
    final_message_submit_off: str | None = None
    # Anything else the sheet carries (site name, footer text, ...)
    extra: dict = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: dict) -> SiteConfig:
        """Build from camelCase (JSON) or snake_case (sheet) keys."""
        known = {f.name for f in fields(cls)} - {"extra"}
        values = {}
        extra = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name in known:
                values[name] = value
            else:
                extra[key] = value

        for bound in ("tie_breaker_low", "tie_breaker_high"):
            if bound in values:
                values[bound] = _to_number(values[bound])
        for text in ("stop_submit_toggle", "stop_submit_date_time"):
            if text in values:
                values[text] = "" if values[text] is None else str(values[text]).strip()

        return cls(**values, extra=extra)


def _to_number(value) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN from an empty spreadsheet cell
        return None
    return int(number) if number.is_integer() else number
