"""
Exceptions raised by the TimeEdit client.

All of them derive from TimeEditError so callers can catch one type.
"""

from __future__ import annotations

from typing import Optional


class TimeEditError(RuntimeError):
    pass


class TransportError(TimeEditError):
    """
    Non-success HTTP status or network failure.
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body


class LookupFailure(TimeEditError):
    """
    The search page did not contain an object identifier for the course code.
    """

    def __init__(self, course_code: str) -> None:
        super().__init__(f"No TimeEdit object found for course code {course_code!r}")
        self.course_code = course_code


class MalformedData(TimeEditError):
    """
    The remote payload does not have the expected shape.
    """
