"""
Reservation feed -> list of Event.

The feed ('ri.json') returns a JSON object whose 'reservations' array holds
one row per session. Dates and times come as separate strings and the
interesting fields sit in fixed positions of 'columns' (see model.py).

A single bad row fails the whole fetch; no partial results are returned.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Optional

from timeedit.config import TimeEditConfig
from timeedit.errors import MalformedData
from timeedit.model import Event, RawReservation
from timeedit.places import LocationResolver
from timeedit.transport import check_status, fetch

logger = logging.getLogger(__name__)

SEPARATOR = ", "


def course_url(base_url: str, object_id: str) -> str:
    return f"{base_url}ri.json?h=f&sid=3&p=0.m%2C12.n&objects={object_id}&ox=0&types=0&fe=0&h2=f"


def _parse_datetime(day: str, clock: str) -> datetime:
    text = f"{day}T{clock}"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise MalformedData(f"Invalid reservation timestamp: {text!r}") from exc


def to_event(raw: RawReservation, places: Optional[LocationResolver] = None) -> Event:
    """
    Map one reservation to an Event.

    Splitting keeps empty strings: an empty lecturer column gives ('',).
    """
    location = raw.location.split(SEPARATOR)
    if places is not None:
        location = places.resolve(location)

    return Event(
        start_date=_parse_datetime(raw.startdate, raw.starttime),
        end_date=_parse_datetime(raw.enddate, raw.endtime),
        lecturers=tuple(raw.lecturers.split(SEPARATOR)),
        location=tuple(location),
        type=raw.type,
    )


def parse_reservations(payload: Any, places: Optional[LocationResolver] = None) -> List[Event]:
    if not isinstance(payload, dict):
        raise MalformedData("Reservation feed is not a JSON object")

    rows = payload.get("reservations")
    if not isinstance(rows, list):
        raise MalformedData("Reservation feed has no 'reservations' array")

    return [to_event(RawReservation.from_json(row), places) for row in rows]


class EventFetcher:
    def __init__(self, config: TimeEditConfig) -> None:
        self.config = config
        self.places = LocationResolver() if config.use_kth_places else None

    def fetch(self, object_id: str) -> List[Event]:
        url = course_url(self.config.base_url, object_id)
        result = fetch(url, timeout=self.config.timeout)
        check_status(result, strict=self.config.strict)

        events = parse_reservations(result.json(), self.places)
        logger.info("Fetched %d reservations for object %s", len(events), object_id)
        return events
