from __future__ import annotations

from typing import Iterable, Set

COMMA_SEPARATOR = ","
BLANK_LINE_SEPARATOR = "\n\n"


def merge(*collections: Iterable[str]) -> Set[str]:
    """Union any number of tracker collections, dropping duplicates by string equality.

    No ordering is promised. Empty input yields an empty set; whether that
    is an error is up to the caller.
    """
    merged: Set[str] = set()
    for items in collections:
        merged.update(items)
    return merged


def join_trackers(trackers: Iterable[str], separator: str = COMMA_SEPARATOR) -> str:
    return separator.join(trackers)


def separator_for_path(path: str) -> str:
    """``/`` is served comma separated; every other path gets blank lines."""
    return COMMA_SEPARATOR if path == "/" else BLANK_LINE_SEPARATOR
