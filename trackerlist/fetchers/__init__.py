"""Fetching layer for remote tracker lists."""

from .http import fetch_text, fetch_trackers
from .parsing import ParseResult, parse_tracker_payload

__all__ = ["fetch_text", "fetch_trackers", "ParseResult", "parse_tracker_payload"]
