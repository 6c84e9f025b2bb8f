"""
Shared fixtures for tests: fake HTTP responses and reservation rows.
"""

from __future__ import annotations

import json
from unittest import mock

SEARCH_HTML = """
<html><body>
<div id="objectbasketitemsearch">
  <div class="clickable2 searchObject" data-id="12345.219" data-idonly="12345" data-type="219">
    DD2482 Automated Software Testing and DevOps
  </div>
</div>
</body></html>
"""

EMPTY_SEARCH_HTML = "<html><body><div id='objectbasketitemsearch'></div></body></html>"


def make_row(
    start: str = "2024-04-10 10:00",
    end: str = "2024-04-10 12:00",
    lecturers: str = "Alice Andersson, Bob Berg",
    location: str = "§Q2, D3",
    kind: str = "Lecture",
) -> dict:
    startdate, starttime = start.split()
    enddate, endtime = end.split()
    return {
        "id": "1",
        "startdate": startdate,
        "starttime": starttime,
        "enddate": enddate,
        "endtime": endtime,
        "columns": ["DD2482", "Automated Software Testing", "", lecturers, location, kind, ""],
    }


def fake_response(status_code: int = 200, text: str = "") -> mock.Mock:
    resp = mock.Mock()
    resp.status_code = status_code
    resp.text = text
    return resp


def json_response(payload: object, status_code: int = 200) -> mock.Mock:
    return fake_response(status_code, json.dumps(payload))


def fake_timeedit(search_html: str = SEARCH_HTML, rows: list | None = None):
    """
    side_effect for requests.get answering both TimeEdit endpoints.
    """
    payload = {"columnheaders": [], "reservations": rows or []}

    def _get(url, **kwargs):
        if "objects.html" in url:
            return fake_response(200, search_html)
        if "ri.json" in url:
            return json_response(payload)
        return fake_response(404, "not found")

    return _get
