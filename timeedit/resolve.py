"""
Course code -> TimeEdit object identifier.

TimeEdit does not accept course codes in the reservation feed; it needs the
internal object id. The id is scraped from the object search page, which
renders each hit as an element carrying a `data-idonly` attribute.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from bs4 import BeautifulSoup

from timeedit.config import TimeEditConfig
from timeedit.errors import LookupFailure
from timeedit.transport import check_status, fetch

logger = logging.getLogger(__name__)

# TimeEdit object type for courses
COURSE_TYPE_CODE = 5


def search_url(base_url: str, course_code: str, type_code: int = COURSE_TYPE_CODE) -> str:
    return (
        f"{base_url}objects.html?max=1&fr=t&partajax=t&im=f&sid=3"
        f"&search_text={quote(course_code, safe='')}&types={type_code}"
    )


def extract_object_id(html: str) -> Optional[str]:
    """
    Return the data-idonly value of the first search result, or None.
    """
    soup = BeautifulSoup(html, "html.parser")
    results = soup.select("[data-idonly]")
    if not results:
        return None

    object_id = (results[0].get("data-idonly") or "").strip()
    return object_id or None


class IdentifierResolver:
    def __init__(self, config: TimeEditConfig) -> None:
        self.config = config

    def resolve(self, course_code: str) -> str:
        url = search_url(self.config.base_url, course_code)
        result = fetch(url, timeout=self.config.timeout)
        check_status(result, strict=self.config.strict)

        object_id = extract_object_id(result.text)
        if object_id is None:
            logger.warning("No search result for course code %s", course_code)
            raise LookupFailure(course_code)

        logger.info("Resolved %s -> %s", course_code, object_id)
        return object_id
