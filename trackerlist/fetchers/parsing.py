"""Tracker list payload parsing.

Sources publish their lists in one of three shapes. The parsers below are
tried in a fixed order and the first one that accepts the payload wins:

1. a JSON or YAML mapping with a ``trackers`` list of strings;
2. comma separated text;
3. blank-line separated text.

Each parser returns a ``ParseResult``; none of them raise for a payload
they simply do not recognise.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import yaml

PayloadShape = str

SHAPE_STRUCTURED: PayloadShape = "structured"
SHAPE_COMMA: PayloadShape = "comma"
SHAPE_BLANK_LINE: PayloadShape = "blank-line"


@dataclass(slots=True)
class ParseResult:
    ok: bool
    shape: Optional[PayloadShape] = None
    trackers: List[str] = field(default_factory=list)
    reason: Optional[str] = None

    @classmethod
    def accepted(cls, shape: PayloadShape, trackers: Iterable[str]) -> "ParseResult":
        return cls(ok=True, shape=shape, trackers=_clean(trackers))

    @classmethod
    def rejected(cls, reason: str) -> "ParseResult":
        return cls(ok=False, reason=reason)


def _clean(entries: Iterable[str]) -> List[str]:
    return [e.strip() for e in entries if e and e.strip()]


def _trackers_field(doc: object) -> Optional[List[str]]:
    if not isinstance(doc, dict):
        return None
    trackers = doc.get("trackers")
    if not isinstance(trackers, list) or not all(isinstance(t, str) for t in trackers):
        return None
    return trackers


def parse_structured(text: str) -> ParseResult:
    try:
        doc = json.loads(text)
    except ValueError:
        try:
            doc = yaml.safe_load(text)
        except yaml.YAMLError:
            return ParseResult.rejected("not a JSON or YAML document")
    trackers = _trackers_field(doc)
    if trackers is None:
        return ParseResult.rejected("document has no 'trackers' list of strings")
    return ParseResult.accepted(SHAPE_STRUCTURED, trackers)


def _split_on(separator: str, shape: PayloadShape) -> Callable[[str], ParseResult]:
    def parse(text: str) -> ParseResult:
        if separator not in text:
            return ParseResult.rejected(f"no {separator!r} separator")
        return ParseResult.accepted(shape, text.split(separator))

    parse.__name__ = f"parse_{shape.replace('-', '_')}"
    return parse


parse_comma_separated = _split_on(",", SHAPE_COMMA)
parse_blank_line_separated = _split_on("\n\n", SHAPE_BLANK_LINE)

DEFAULT_PARSERS: Tuple[Callable[[str], ParseResult], ...] = (
    parse_structured,
    parse_comma_separated,
    parse_blank_line_separated,
)


def parse_tracker_payload(
    text: str,
    parsers: Sequence[Callable[[str], ParseResult]] = DEFAULT_PARSERS,
) -> ParseResult:
    """Run ``parsers`` in order and return the first accepted result.

    When every parser rejects the payload the returned result is rejected
    and ``reason`` joins the individual reasons.
    """
    reasons: List[str] = []
    for parser in parsers:
        result = parser(text)
        if result.ok:
            return result
        if result.reason:
            reasons.append(result.reason)
    return ParseResult.rejected("unrecognised tracker list format (" + "; ".join(reasons) + ")")
