from __future__ import annotations

import asyncio
from typing import Callable, Iterable

from aiohttp import web

from ..processors import join_trackers, separator_for_path
from ..utils.logging import get_logger

logger = get_logger("trackerlist.output.responder")

Collect = Callable[[], Iterable[str]]

COLLECT_KEY = web.AppKey("collect", Collect)


async def handle_trackers(request: web.Request) -> web.Response:
    """Serve a freshly collected list; ``/`` is comma separated, other paths blank-line separated."""
    collect = request.app[COLLECT_KEY]
    loop = asyncio.get_running_loop()
    trackers = await loop.run_in_executor(None, collect)
    body = join_trackers(trackers, separator_for_path(request.path))
    logger.info("Served %s (%d bytes)", request.path, len(body))
    return web.Response(text=body, content_type="text/plain")


def create_app(collect: Collect) -> web.Application:
    """Create the aiohttp application.

    ``collect`` is called once per request and must return the merged
    trackers; it runs in the default executor because collection blocks.
    """
    app = web.Application()
    app[COLLECT_KEY] = collect
    app.router.add_get("/{tail:.*}", handle_trackers)
    return app


def run_server(collect: Collect, *, host: str = "0.0.0.0", port: int = 8080) -> None:
    logger.info("Serving tracker list on %s:%d", host, port)
    web.run_app(create_app(collect), host=host, port=port, print=None)
