"""Merging of tracker collections into one deduplicated list."""

from .merge import merge, join_trackers, separator_for_path, COMMA_SEPARATOR, BLANK_LINE_SEPARATOR

__all__ = [
    "merge",
    "join_trackers",
    "separator_for_path",
    "COMMA_SEPARATOR",
    "BLANK_LINE_SEPARATOR",
]
