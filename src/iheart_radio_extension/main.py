#!/usr/bin/env python3
"""Command-line entry point for browsing the station directory through the extension."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
from pydantic import TypeAdapter, ValidationError

from iheart_radio_extension.domain.media.entities import Streamable, StreamableMedia, Tab, Track
from iheart_radio_extension.domain.media.value_objects import StreamKind
from iheart_radio_extension.domain.shared.exceptions import ExtensionError
from iheart_radio_extension.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from iheart_radio_extension.config.container import Container

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iheart-radio",
        description="Browse iHeartRadio stations the way the host application sees them.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    tabs = sub.add_parser("tabs", help="List home genre tabs")
    tabs.add_argument(
        "--all-genres",
        action="store_true",
        help="Derive genres from the full station list instead of the curated list",
    )

    feed = sub.add_parser("feed", help="List the stations of one genre")
    feed.add_argument("genre_id")

    search = sub.add_parser("search", help="Search stations by keywords")
    search.add_argument("query")

    resolve = sub.add_parser("resolve", help="Resolve a stream URL into a playable source")
    resolve.add_argument("url")
    resolve.add_argument(
        "--type",
        dest="stream_type",
        choices=[kind.value for kind in StreamKind],
        default=StreamKind.HLS.value,
    )
    return parser


def _dump(annotation: object, value: object) -> str:
    return TypeAdapter(annotation).dump_json(value, indent=2).decode()


async def run_command(args: argparse.Namespace, container: Container) -> str:
    """Execute one sub-command and return its JSON output."""
    logger.debug(LogTemplates.CLI_COMMAND, args.command)
    try:
        if args.command == "tabs":
            if args.all_genres:
                container.settings_store.put_boolean("default_genres", False)
            return _dump(list[Tab], await container.extension.get_home_tabs())

        if args.command == "feed":
            feed = container.extension.get_home_feed(Tab(id=args.genre_id, title=args.genre_id))
            shelves = await feed.load_all()
            return _dump(list[Track], [shelf.item for shelf in shelves])

        if args.command == "search":
            shelves = await container.extension.search_feed(args.query).load_all()
            return _dump(list[Track], [shelf.item for shelf in shelves])

        streamable = Streamable.server(args.url, 0, None, {"type": args.stream_type})
        media = await container.extension.load_streamable_media(streamable)
        return _dump(StreamableMedia, media)
    finally:
        await container.shutdown()


def main(argv: list[str] | None = None) -> int:
    from iheart_radio_extension.config.settings import get_settings

    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    from iheart_radio_extension.config.container import create_container

    container = create_container(settings)

    try:
        output = asyncio.run(run_command(args, container))
    except (ExtensionError, httpx.HTTPError, ValidationError) as e:
        logger.error(LogTemplates.CLI_COMMAND_FAILED, args.command, e)
        return 1

    print(output)
    return 0


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
