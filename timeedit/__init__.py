"""
Read-only client for TimeEdit timetables.
"""

from timeedit.client import TimeEditAPI
from timeedit.config import KTH_BASE_URL, TimeEditConfig
from timeedit.errors import LookupFailure, MalformedData, TimeEditError, TransportError
from timeedit.model import Event

__all__ = [
    "Event",
    "KTH_BASE_URL",
    "LookupFailure",
    "MalformedData",
    "TimeEditAPI",
    "TimeEditConfig",
    "TimeEditError",
    "TransportError",
]
