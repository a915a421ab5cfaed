# src/todoist_deck/cli/main.py

"""
CLI entrypoint (started by the Stream Deck host).

Initializes logging, connects to the host and serves the task count action
until the host closes the connection.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from ..cli.bootstrap import create_action, parse_launch_args
from ..config import Settings, get_settings
from ..connectors.streamdeck import LaunchInfo, StreamDeckConnector
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def serve(launch: LaunchInfo, settings: Settings) -> None:
    connector = StreamDeckConnector(
        launch,
        action_uuid=settings.action_uuid,
        reply_timeout_seconds=settings.host_reply_timeout_seconds,
    )
    action = create_action(connector, settings=settings)
    try:
        await connector.run(action.handle)
    finally:
        await action.shutdown()


def main(argv: Sequence[str] | None = None) -> None:
    launch = parse_launch_args(argv)
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (action=%s)...", settings.app_name, settings.action_uuid)

    try:
        asyncio.run(serve(launch, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
