"""Delivery of the merged tracker list: aria2 RPC and the plain-text responder."""

from .aria2_client import Aria2Client, select_transport, TRANSPORT_HTTP, TRANSPORT_WEBSOCKET
from .responder import create_app, run_server

__all__ = ["Aria2Client", "select_transport", "TRANSPORT_HTTP", "TRANSPORT_WEBSOCKET", "create_app", "run_server"]
