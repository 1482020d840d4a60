"""Exception types raised across the tracker list service.

Each failure category has its own class so callers can decide whether a
failure aborts the whole invocation. Daemon-side JSON-RPC errors are not
exceptions; they are reported through ``SyncResult``.
"""

from __future__ import annotations

from typing import Optional


class TrackerListError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(TrackerListError):
    """Raised when a required setting or the sources document is invalid or missing."""


class FetchError(TrackerListError):
    """Raised when a single tracker source cannot be fetched or parsed."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


class TransportError(TrackerListError):
    """Raised when the RPC exchange with the daemon fails below the protocol level."""

    def __init__(self, message: str, *, transport: Optional[str] = None) -> None:
        super().__init__(message)
        self.transport = transport
