"""
Client configuration.

A TimeEditConfig is built once and handed to TimeEditAPI. It is frozen:
to change a setting, build a new one with dataclasses.replace().
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

KTH_BASE_URL = "https://cloud.timeedit.net/kth/web/public01/"
DEFAULT_TIMEOUT = 30.0


def parse_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date ('2024-01-01') or date-time ('2024-01-01T08:00').

    A bare date means midnight at the start of that day. Offsets are
    rejected: the feed reports naive local times and the two don't compare.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise ValueError(f"Invalid ISO date: {value!r}") from exc
    if parsed.tzinfo is not None:
        raise ValueError(f"Date must be local time without UTC offset: {value!r}")
    return parsed


@dataclass(frozen=True)
class TimeEditConfig:
    base_url: str
    filter_empty: bool = False
    filter_to_semester: bool = False
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    use_kth_places: bool = False
    # The end-date stage is off unless explicitly requested.
    filter_end_date: bool = False
    # False = log bad HTTP status and keep going with the body
    strict: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise ValueError("base_url is required")
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if value is not None:
                parse_date(value)
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
