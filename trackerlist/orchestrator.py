from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Optional, Set

from .fetchers import fetch_trackers
from .models import SourceDescriptor, partition_sources
from .processors import merge
from .utils.logging import get_logger

logger = get_logger("trackerlist.orchestrator")

Fetcher = Callable[[str], Set[str]]


class TrackerCollector:
    """Resolve the configured sources into one deduplicated tracker set.

    Literal trackers pass straight through. Every other descriptor is a
    list URL; all of them are fetched in parallel, each task returning its
    own set, and the sets are merged once every task has finished. A single
    failing source fails the whole collection.
    """

    def __init__(
        self,
        sources: Iterable[SourceDescriptor],
        *,
        timeout: Optional[float] = 30,
        fetcher: Optional[Fetcher] = None,
    ) -> None:
        self.sources = list(sources)
        self.timeout = timeout
        self._fetcher = fetcher

    def _fetch_one(self, url: str) -> Set[str]:
        if self._fetcher is not None:
            return self._fetcher(url)
        return fetch_trackers(url, timeout=self.timeout)

    def fetch_all(self, urls: Iterable[str]) -> List[Set[str]]:
        """Fetch every URL concurrently and return the per-source sets.

        There is no worker cap: one thread per URL so that all requests are
        outstanding at once. Nothing is cancelled on failure; the first
        error is re-raised after the pool has drained.
        """
        url_list = list(dict.fromkeys(urls))
        if not url_list:
            return []

        results: List[Set[str]] = []
        first_error: Optional[BaseException] = None
        logger.debug("Starting concurrent fetch for %d source(s)", len(url_list))
        with ThreadPoolExecutor(max_workers=len(url_list)) as executor:
            future_map = {executor.submit(self._fetch_one, u): u for u in url_list}
            for fut in as_completed(future_map):
                url = future_map[fut]
                try:
                    results.append(fut.result())
                except Exception as exc:
                    logger.error("Fetch failed for %s: %s", url, exc)
                    if first_error is None:
                        first_error = exc

        if first_error is not None:
            raise first_error
        return results

    def collect(self) -> Set[str]:
        t0 = time.perf_counter()
        literals, urls = partition_sources(self.sources)
        logger.info("Collecting trackers: literal=%d, lists=%d", len(literals), len(urls))
        fetched = self.fetch_all(urls)
        trackers = merge(literals, *fetched)
        logger.info(
            "Total trackers: %d (%.1f ms)",
            len(trackers),
            (time.perf_counter() - t0) * 1000,
        )
        return trackers


def collect_trackers(
    sources: Iterable[SourceDescriptor],
    *,
    timeout: Optional[float] = 30,
    fetcher: Optional[Fetcher] = None,
) -> Set[str]:
    return TrackerCollector(sources, timeout=timeout, fetcher=fetcher).collect()
