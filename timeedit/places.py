"""
Rewrite TimeEdit location names into kth.se search links.

The KTH places pages use ids that can't be derived from the display
name, so we link to a site search for the place instead.
"""

from __future__ import annotations

from typing import Iterable, List
from urllib.parse import urlencode

SECTION_MARKER = "§"
KTH_SEARCH_URL = "https://www.kth.se/search"


def place_url(location: str) -> str:
    name = location.replace(SECTION_MARKER, "")
    params = {
        "q": name,
        "entityFilter": "kth-place",
        "filterLabel": "Facilities",
        "lang": "en",
    }
    return f"{KTH_SEARCH_URL}?{urlencode(params)}"


class LocationResolver:
    def resolve(self, locations: Iterable[str]) -> List[str]:
        return [place_url(loc) for loc in locations]
