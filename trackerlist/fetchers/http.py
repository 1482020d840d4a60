from __future__ import annotations

from typing import Dict, Optional, Set
from urllib.parse import urlparse

import requests

from ..errors import FetchError
from ..utils.logging import get_logger
from .parsing import parse_tracker_payload

logger = get_logger("trackerlist.fetchers.http")


_DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": "trackerlist/0.1",
    "Accept": "application/json, text/plain, */*",
}


def _validated_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError(url, "not an absolute http(s) URL")
    return url


def fetch_text(url: str, *, timeout: Optional[float] = 30, session: Optional[requests.Session] = None) -> str:
    """GET ``url`` once and return the body; any failure raises ``FetchError``."""
    url = _validated_url(url)
    getter = session.get if session is not None else requests.get
    logger.debug("Fetching tracker list from %s", url)
    try:
        resp = getter(url, headers=_DEFAULT_HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Tracker list request error for %s: %s", url, exc)
        raise FetchError(url, f"request failed: {exc}") from exc
    if not 200 <= resp.status_code < 300:
        logger.warning("Tracker list fetch failed (%s): %s", resp.status_code, url)
        raise FetchError(url, f"unexpected HTTP status {resp.status_code}")
    return resp.text


def fetch_trackers(url: str, *, timeout: Optional[float] = 30, session: Optional[requests.Session] = None) -> Set[str]:
    """Fetch one tracker list URL and parse it into a set of trackers."""
    text = fetch_text(url, timeout=timeout, session=session)
    parsed = parse_tracker_payload(text)
    if not parsed.ok:
        raise FetchError(url, parsed.reason or "unrecognised tracker list format")
    trackers = set(parsed.trackers)
    logger.info("Fetched %d tracker(s) from %s (%s)", len(trackers), url, parsed.shape)
    return trackers
