"""
Data model shared by the fetcher, the filters and the exporters.

RawReservation is the named view of one row of the TimeEdit 'ri.json' feed.
The feed only exposes positional columns, so the column positions are
defined here once and nowhere else.

Event is what callers get back: one scheduled session with real datetimes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Tuple

from timeedit.errors import MalformedData

LECTURERS_COLUMN = 3
LOCATION_COLUMN = 4
TYPE_COLUMN = 5

_DATE_FIELDS = ("startdate", "starttime", "enddate", "endtime")


@dataclass(frozen=True)
class Event:
    """
    Represents one reservation (lecture, lab, exam ...) of a course.

    start_date <= end_date is expected but not checked; the values are
    passed through as reported by TimeEdit, in local time.
    """

    start_date: datetime
    end_date: datetime
    lecturers: Tuple[str, ...]
    location: Tuple[str, ...]
    type: str


@dataclass(frozen=True)
class RawReservation:
    startdate: str
    starttime: str
    enddate: str
    endtime: str
    lecturers: str
    location: str
    type: str

    @classmethod
    def from_json(cls, row: Any) -> "RawReservation":
        """
        Build a RawReservation from one element of the 'reservations' array.

        Raises MalformedData if a date field is missing or the row has
        fewer columns than needed.
        """
        if not isinstance(row, dict):
            raise MalformedData(f"Reservation is not an object: {row!r}")

        values: Dict[str, str] = {}
        for name in _DATE_FIELDS:
            value = row.get(name)
            if not isinstance(value, str):
                raise MalformedData(f"Reservation {row.get('id', '?')} has no {name!r}")
            values[name] = value

        columns = row.get("columns")
        if not isinstance(columns, list) or len(columns) <= TYPE_COLUMN:
            raise MalformedData(
                f"Reservation {row.get('id', '?')} needs at least {TYPE_COLUMN + 1} columns, "
                f"got {len(columns) if isinstance(columns, list) else type(columns).__name__}"
            )
        for idx in (LECTURERS_COLUMN, LOCATION_COLUMN, TYPE_COLUMN):
            if not isinstance(columns[idx], str):
                raise MalformedData(f"Reservation {row.get('id', '?')} column {idx} is not text")

        return cls(
            lecturers=columns[LECTURERS_COLUMN],
            location=columns[LOCATION_COLUMN],
            type=columns[TYPE_COLUMN],
            **values,
        )
