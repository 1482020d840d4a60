"""Top-level package for the tracker list service.

This package collects BitTorrent trackers from literal entries and remote
lists, serves the merged list over HTTP and pushes it to an aria2 daemon
over JSON-RPC (HTTP or WebSocket).
"""

__all__ = []
