"""
Public entry point.

    api = TimeEditAPI(TimeEditConfig(base_url=KTH_BASE_URL, filter_empty=True))
    events = api.fetch_course_events("DD2482")

The client only holds its frozen configuration, so one instance can be
shared between threads.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from timeedit.config import TimeEditConfig
from timeedit.fetch import EventFetcher, course_url
from timeedit.filters import FilterPipeline
from timeedit.model import Event
from timeedit.resolve import IdentifierResolver, search_url


class TimeEditAPI:
    def __init__(self, config: TimeEditConfig) -> None:
        self._config = config
        self._resolver = IdentifierResolver(config)
        self._fetcher = EventFetcher(config)

    @property
    def config(self) -> TimeEditConfig:
        return self._config

    def get_search_url(self, course_code: str) -> str:
        return search_url(self._config.base_url, course_code)

    def get_course_url(self, object_id: str) -> str:
        return course_url(self._config.base_url, object_id)

    def get_course_id(self, course_code: str) -> str:
        """
        Look up the TimeEdit object id of a course code.

        Raises LookupFailure if the search returns nothing.
        """
        return self._resolver.resolve(course_code)

    def get_course_events(self, object_id: str, today: Optional[date] = None) -> List[Event]:
        """
        Fetch, map and filter all reservations of one TimeEdit object.

        `today` overrides the date used by the semester filter.
        """
        events = self._fetcher.fetch(object_id)
        return FilterPipeline(self._config, today=today).apply(events)

    def fetch_course_events(self, course_code: str, today: Optional[date] = None) -> List[Event]:
        object_id = self.get_course_id(course_code)
        return self.get_course_events(object_id, today=today)
