"""
Unit tests for the filter pipeline.

Semester rule: evaluation month 2-6 -> months 1-6, month 8-12 -> months 8-12,
January and July -> nothing passes.
"""

import unittest
from datetime import date, datetime

from timeedit.config import TimeEditConfig
from timeedit.filters import FilterPipeline, event_has_fields, event_in_semester, kth_period
from timeedit.model import Event

BASE = "https://cloud.timeedit.net/kth/web/public01/"


def ev(
    start: datetime = datetime(2024, 4, 10, 10),
    end: datetime = datetime(2024, 4, 10, 12),
    lecturers: tuple = ("A",),
    location: tuple = ("Room1",),
    kind: str = "Lecture",
) -> Event:
    return Event(start_date=start, end_date=end, lecturers=lecturers, location=location, type=kind)


class TestSemester(unittest.TestCase):
    def test_periods(self) -> None:
        self.assertEqual(kth_period(3), frozenset(range(1, 7)))
        self.assertEqual(kth_period(6), frozenset(range(1, 7)))
        self.assertEqual(kth_period(8), frozenset(range(8, 13)))
        self.assertEqual(kth_period(12), frozenset(range(8, 13)))
        self.assertEqual(kth_period(1), frozenset())
        self.assertEqual(kth_period(7), frozenset())
        self.assertEqual(kth_period(13), frozenset())

    def test_spring(self) -> None:
        today = date(2024, 3, 15)
        self.assertTrue(event_in_semester(ev(start=datetime(2024, 4, 1)), today))
        self.assertFalse(event_in_semester(ev(start=datetime(2024, 8, 20)), today))

    def test_other_year_fails(self) -> None:
        self.assertFalse(event_in_semester(ev(start=datetime(2023, 4, 1)), date(2024, 3, 15)))

    def test_july_lets_nothing_through(self) -> None:
        today = date(2024, 7, 10)
        for month in range(1, 13):
            self.assertFalse(event_in_semester(ev(start=datetime(2024, month, 1)), today))


class TestEmptyFields(unittest.TestCase):
    def test_no_lecturers_dropped(self) -> None:
        self.assertFalse(event_has_fields(ev(lecturers=())))

    def test_empty_type_dropped(self) -> None:
        self.assertFalse(event_has_fields(ev(kind="")))

    def test_no_location_dropped(self) -> None:
        self.assertFalse(event_has_fields(ev(location=())))

    def test_all_fields_pass(self) -> None:
        self.assertTrue(event_has_fields(ev()))

    def test_single_empty_lecturer_is_not_empty(self) -> None:
        # what splitting an empty column yields
        self.assertTrue(event_has_fields(ev(lecturers=("",))))


class TestPipeline(unittest.TestCase):
    def test_no_filters_returns_copy(self) -> None:
        events = [ev(), ev(kind="")]
        out = FilterPipeline(TimeEditConfig(base_url=BASE)).apply(events)
        self.assertEqual(out, events)
        self.assertIsNot(out, events)

    def test_start_date_compares_end_date(self) -> None:
        cfg = TimeEditConfig(base_url=BASE, start_date="2024-01-01")
        before = ev(start=datetime(2023, 12, 31, 8), end=datetime(2023, 12, 31, 10))
        after = ev(start=datetime(2024, 1, 2, 8), end=datetime(2024, 1, 2, 10))
        straddling = ev(start=datetime(2023, 12, 31, 23), end=datetime(2024, 1, 1, 1))

        out = FilterPipeline(cfg).apply([before, after, straddling])

        self.assertEqual(out, [before])

    def test_end_date_ignored_unless_enabled(self) -> None:
        events = [ev(start=datetime(2024, 1, 5)), ev(start=datetime(2024, 3, 5))]

        off = FilterPipeline(TimeEditConfig(base_url=BASE, end_date="2024-02-01")).apply(events)
        on = FilterPipeline(TimeEditConfig(base_url=BASE, end_date="2024-02-01", filter_end_date=True)).apply(events)

        self.assertEqual(off, events)
        self.assertEqual(on, [events[1]])

    def test_combined_filters_keep_order(self) -> None:
        cfg = TimeEditConfig(base_url=BASE, filter_to_semester=True, filter_empty=True)
        a = ev(start=datetime(2024, 2, 1))
        b = ev(start=datetime(2024, 5, 1), kind="")
        c = ev(start=datetime(2023, 5, 1))
        d = ev(start=datetime(2024, 6, 30))

        out = FilterPipeline(cfg, today=date(2024, 4, 1)).apply([a, b, c, d])

        self.assertEqual(out, [a, d])

    def test_input_not_mutated(self) -> None:
        events = [ev(kind=""), ev()]
        FilterPipeline(TimeEditConfig(base_url=BASE, filter_empty=True)).apply(events)
        self.assertEqual(len(events), 2)


if __name__ == "__main__":
    unittest.main()
