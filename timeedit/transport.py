"""
HTTP access (GET only).

fetch() never decides what a bad status means: it returns a FetchResult and
lets the resolver/fetcher apply the configured discipline. Only failures
without any response (DNS, timeout, refused connection) are raised here.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import requests

from timeedit.errors import MalformedData, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "timeedit-client/0.1"


@dataclass(frozen=True)
class FetchResult:
    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        try:
            return json.loads(self.text)
        except json.JSONDecodeError as exc:
            raise MalformedData(f"Response from {self.url} is not valid JSON: {exc}") from exc


def fetch(url: str, timeout: float = 30.0) -> FetchResult:
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as exc:
        logger.error("Request to %s failed: %s", url, exc)
        raise TransportError(f"Network error while fetching {url}", url=url) from exc

    return FetchResult(url=url, status_code=resp.status_code, text=resp.text)


def check_status(result: FetchResult, strict: bool) -> None:
    """
    Log a non-success response and, in strict mode, raise TransportError.

    In lenient mode the caller keeps going with whatever body came back.
    """
    if result.ok:
        return

    logger.error("HTTP %s for %s", result.status_code, result.url)
    logger.error("Response body: %s", result.text)
    if strict:
        raise TransportError(
            f"Unexpected HTTP status {result.status_code} for {result.url}",
            url=result.url,
            status_code=result.status_code,
            body=result.text,
        )
