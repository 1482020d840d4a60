"""aria2 JSON-RPC client used to push the merged tracker list.

The endpoint URL decides the transport: ``http``/``https`` URLs get a
single POST, anything else is treated as a WebSocket endpoint. Over
WebSocket the daemon may push notifications (``aria2.onDownloadStart`` and
friends) on the same connection, so the reply is found by its ``id`` and
every other frame is skipped.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Iterable, Optional
from urllib.parse import urlparse

import aiohttp
import requests

from ..errors import TransportError
from ..models import CORRELATION_ID, SyncResult, build_sync_request, encode_request
from ..utils.logging import get_logger

logger = get_logger("trackerlist.output.aria2")

TRANSPORT_HTTP = "http"
TRANSPORT_WEBSOCKET = "websocket"


def select_transport(url: str) -> str:
    scheme = urlparse(url).scheme.lower()
    return TRANSPORT_HTTP if scheme in ("http", "https") else TRANSPORT_WEBSOCKET


def _decode_reply(text: str, *, transport: str) -> Dict[str, Any]:
    try:
        doc = json.loads(text)
    except ValueError as exc:
        raise TransportError(f"Invalid JSON from aria2: {exc}", transport=transport) from exc
    if not isinstance(doc, dict):
        raise TransportError("aria2 reply is not a JSON object", transport=transport)
    return doc


class Aria2Client:
    def __init__(
        self,
        url: str,
        secret: str,
        *,
        timeout: Optional[float] = 30,
        request_id: str = CORRELATION_ID,
    ) -> None:
        self.url = url
        self.secret = secret
        self.timeout = timeout
        self.request_id = request_id

    @property
    def transport(self) -> str:
        return select_transport(self.url)

    def build_request(self, trackers: Iterable[str]) -> Dict[str, Any]:
        return build_sync_request(trackers, self.secret, request_id=self.request_id)

    def change_global_option(self, trackers: Iterable[str]) -> SyncResult:
        """Replace the daemon's ``bt-tracker`` option with ``trackers``.

        Transport failures raise ``TransportError``. A JSON-RPC ``error``
        reply is logged and returned as a failed ``SyncResult``.
        """
        envelope = self.build_request(trackers)
        logger.info("Pushing trackers to aria2 via %s", self.transport)
        if self.transport == TRANSPORT_HTTP:
            reply = self._post_http(envelope)
        else:
            reply = asyncio.run(self._exchange_ws(envelope))
        return self._interpret(reply)

    async def change_global_option_async(self, trackers: Iterable[str]) -> SyncResult:
        envelope = self.build_request(trackers)
        if self.transport == TRANSPORT_HTTP:
            loop = asyncio.get_running_loop()
            reply = await loop.run_in_executor(None, self._post_http, envelope)
        else:
            reply = await self._exchange_ws(envelope)
        return self._interpret(reply)

    def _interpret(self, reply: Dict[str, Any]) -> SyncResult:
        result = SyncResult.from_reply(reply, transport=self.transport)
        if result.ok:
            logger.info("aria2 result: %s", result.result)
        else:
            logger.error("aria2 error: %s", result.error)
        return result

    # HTTP transport -------------------------------------------------------

    def _post_http(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = requests.post(
                self.url,
                data=encode_request(envelope),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"aria2 HTTP request failed: {exc}", transport=TRANSPORT_HTTP) from exc
        # aria2 answers RPC errors with a 4xx status and a JSON body, so the
        # status code alone is not a transport failure.
        if resp.status_code >= 500:
            raise TransportError(f"aria2 HTTP status {resp.status_code}", transport=TRANSPORT_HTTP)
        return _decode_reply(resp.text, transport=TRANSPORT_HTTP)

    # WebSocket transport --------------------------------------------------

    async def _exchange_ws(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        async with aiohttp.ClientSession() as session:
            try:
                ws = await session.ws_connect(self.url)
            except (aiohttp.ClientError, OSError, ValueError) as exc:
                raise TransportError(f"aria2 WebSocket connect failed: {exc}", transport=TRANSPORT_WEBSOCKET) from exc
            async with ws:
                logger.info("Connected to websocket")
                receive = asyncio.create_task(self._receive_reply(ws))
                send = asyncio.create_task(self._send(ws, encode_request(envelope)))
                try:
                    await send
                except TransportError:
                    receive.cancel()
                    await asyncio.gather(receive, return_exceptions=True)
                    raise
                return await receive

    async def _send(self, ws: aiohttp.ClientWebSocketResponse, text: str) -> None:
        try:
            await ws.send_str(text)
        except (aiohttp.ClientError, ConnectionError) as exc:
            raise TransportError(f"aria2 WebSocket send failed: {exc}", transport=TRANSPORT_WEBSOCKET) from exc
        logger.info("Message sent")

    async def _receive_reply(self, ws: aiohttp.ClientWebSocketResponse) -> Dict[str, Any]:
        """Read frames until one carries our request id.

        No timeout: a daemon that never answers keeps this waiting until the
        connection drops.
        """
        async for msg in ws:
            if msg.type == aiohttp.WSMsgType.TEXT:
                frame = _decode_reply(msg.data, transport=TRANSPORT_WEBSOCKET)
                if frame.get("id") == self.request_id:
                    return frame
                logger.debug("Skipping unrelated frame: %s", frame.get("method") or frame.get("id"))
            elif msg.type == aiohttp.WSMsgType.ERROR:
                raise TransportError(f"aria2 WebSocket error: {ws.exception()}", transport=TRANSPORT_WEBSOCKET)
        raise TransportError("aria2 WebSocket closed before reply", transport=TRANSPORT_WEBSOCKET)
