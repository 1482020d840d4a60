from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal, Tuple

SourceKind = Literal["literal", "fetch"]

LITERAL_SUFFIX = "announce"


def classify_descriptor(value: str) -> SourceKind:
    # Suffix match only; a literal tracker URL with a query string is fetched.
    return "literal" if value.endswith(LITERAL_SUFFIX) else "fetch"


@dataclass(frozen=True, slots=True)
class SourceDescriptor:
    """One entry of the sources document: a tracker or a list URL."""

    value: str

    @property
    def kind(self) -> SourceKind:
        return classify_descriptor(self.value)

    @property
    def is_literal(self) -> bool:
        return self.kind == "literal"


def partition_sources(sources: Iterable[SourceDescriptor]) -> Tuple[List[str], List[str]]:
    """Split descriptors into ``(literal_trackers, fetch_urls)`` keeping document order."""
    literals: List[str] = []
    urls: List[str] = []
    for src in sources:
        (literals if src.is_literal else urls).append(src.value)
    return literals, urls
