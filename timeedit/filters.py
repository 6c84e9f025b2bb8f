"""
Event filters.

Every predicate takes one Event and returns True to keep it. FilterPipeline
chains the enabled predicates in a fixed order:

    1. current semester   (filter_to_semester)
    2. empty fields       (filter_empty)
    3. start date         (start_date set)
    4. end date           (end_date set AND filter_end_date)

The input list is never modified; a new list is returned in the same order.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable, FrozenSet, List, Optional, Sequence

from timeedit.config import TimeEditConfig, parse_date
from timeedit.model import Event

Predicate = Callable[[Event], bool]

SPRING_PERIOD = frozenset(range(1, 7))
AUTUMN_PERIOD = frozenset(range(8, 13))


def kth_period(month: int) -> FrozenSet[int]:
    """
    Months belonging to the KTH period that contains `month`.

    February-June -> spring (1-6), August-December -> autumn (8-12).
    January and July are treated as between periods and return an empty set.
    """
    if 1 < month < 7:
        return SPRING_PERIOD
    if 7 < month <= 12:
        return AUTUMN_PERIOD
    return frozenset()


def event_in_semester(event: Event, today: date) -> bool:
    return event.start_date.year == today.year and event.start_date.month in kth_period(today.month)


def event_has_fields(event: Event) -> bool:
    # [""] (an empty column split on ", ") counts as non-empty
    return len(event.lecturers) > 0 and len(event.location) > 0 and event.type != ""


def event_before_date(event: Event, bound: datetime) -> bool:
    return event.end_date < bound


def event_after_date(event: Event, bound: datetime) -> bool:
    return event.start_date > bound


class FilterPipeline:
    def __init__(self, config: TimeEditConfig, today: Optional[date] = None) -> None:
        self.config = config
        self.today = today

    def predicates(self) -> List[Predicate]:
        cfg = self.config
        today = self.today or date.today()
        preds: List[Predicate] = []

        if cfg.filter_to_semester:
            preds.append(lambda ev: event_in_semester(ev, today))
        if cfg.filter_empty:
            preds.append(event_has_fields)
        if cfg.start_date:
            start = parse_date(cfg.start_date)
            preds.append(lambda ev: event_before_date(ev, start))
        if cfg.end_date and cfg.filter_end_date:
            end = parse_date(cfg.end_date)
            preds.append(lambda ev: event_after_date(ev, end))

        return preds

    def apply(self, events: Sequence[Event]) -> List[Event]:
        out = list(events)
        for pred in self.predicates():
            out = [ev for ev in out if pred(ev)]
        return out
