"""Application entrypoint for the tracker list service.

Commands:
1) ``show``  - collect the trackers once and print them
2) ``serve`` - answer HTTP requests with a freshly collected list
3) ``sync``  - collect the trackers and push them to aria2, once or on an interval
"""

from __future__ import annotations

import argparse
import time
from typing import List, Optional, Sequence

from .errors import TrackerListError
from .models import SourceDescriptor
from .orchestrator import collect_trackers
from .output import Aria2Client, run_server
from .processors import BLANK_LINE_SEPARATOR, COMMA_SEPARATOR, join_trackers
from .utils.config_loader import load_sources_config
from .utils.logging import configure_logging, get_logger
from .utils.settings import Settings

logger = get_logger("trackerlist.main")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge public BitTorrent tracker lists and push them to aria2"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the tracker sources document (YAML); defaults to $TRACKERS_CONFIG or config/trackers.yaml",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to $LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the merged tracker list")
    show.add_argument(
        "--separator",
        choices=["comma", "blank-line"],
        default="comma",
        help="How to separate trackers in the output",
    )

    serve = sub.add_parser("serve", help="Serve the merged tracker list over HTTP")
    serve.add_argument("--host", default=None, help="Listen address (defaults to $LISTEN_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Listen port (defaults to $LISTEN_PORT)")

    sync = sub.add_parser("sync", help="Push the merged tracker list to aria2")
    sync.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Repeat every N seconds; 0 runs once (defaults to $SYNC_INTERVAL)",
    )
    return parser.parse_args(argv)


def run_sync(settings: Settings, sources: List[SourceDescriptor]) -> bool:
    """One fetch-and-sync cycle. Returns True when aria2 accepted the list."""
    aria2_url, secret = settings.require_aria2()
    trackers = collect_trackers(sources, timeout=settings.fetch_timeout)
    client = Aria2Client(aria2_url, secret, timeout=settings.fetch_timeout)
    return client.change_global_option(trackers).ok


def sync_forever(settings: Settings, sources: List[SourceDescriptor], interval: float) -> None:
    logger.info("Syncing every %.0fs", interval)
    while True:
        try:
            run_sync(settings, sources)
        except TrackerListError as exc:
            logger.error("Sync cycle failed: %s", exc)
        time.sleep(interval)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Optional: load .env
    try:
        from dotenv import load_dotenv  # type: ignore

        load_dotenv(override=False)
    except Exception:
        pass
    args = parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        settings = Settings.from_env()
        config_path = args.config or settings.sources_path
        logger.info("Loading tracker sources from %s", config_path)
        sources = load_sources_config(config_path)
    except TrackerListError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1
    logger.info("Loaded %d source(s)", len(sources))

    if args.command == "serve":
        run_server(
            lambda: collect_trackers(sources, timeout=settings.fetch_timeout),
            host=settings.listen_host if args.host is None else args.host,
            port=settings.listen_port if args.port is None else args.port,
        )
        return 0

    if args.command == "sync":
        interval = settings.sync_interval if args.interval is None else args.interval
        if interval > 0:
            try:
                settings.require_aria2()
            except TrackerListError as exc:
                logger.error("%s", exc)
                return 1
            sync_forever(settings, sources, interval)
            return 0
        try:
            return 0 if run_sync(settings, sources) else 2
        except TrackerListError as exc:
            logger.error("Sync failed: %s", exc)
            return 1

    try:
        trackers = collect_trackers(sources, timeout=settings.fetch_timeout)
    except TrackerListError as exc:
        logger.error("Failed to collect trackers: %s", exc)
        return 1
    separator = COMMA_SEPARATOR if args.separator == "comma" else BLANK_LINE_SEPARATOR
    print(join_trackers(trackers, separator))
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
