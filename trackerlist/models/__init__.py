"""Typed models used across the application."""

from .source import SourceDescriptor, SourceKind, classify_descriptor, partition_sources
from .rpc import SyncResult, build_sync_request, encode_request, CORRELATION_ID, RPC_METHOD

__all__ = [
    "SourceDescriptor",
    "SourceKind",
    "classify_descriptor",
    "partition_sources",
    "SyncResult",
    "build_sync_request",
    "encode_request",
    "CORRELATION_ID",
    "RPC_METHOD",
]
