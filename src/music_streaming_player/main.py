#!/usr/bin/env python3
"""Main entry point for the Music Streaming Player HTTP service."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path

from music_streaming_player.domain.shared.messages import LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO", config_path: Path = _LOGGING_CONFIG_PATH) -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(config_path) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.warning("Could not load %s, falling back to basic config", config_path)

    logging.getLogger().setLevel(resolved_level)


def main() -> int:
    import uvicorn

    from music_streaming_player.config.container import create_container
    from music_streaming_player.config.settings import get_settings
    from music_streaming_player.infrastructure.http.app import create_app

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.SERVICE_STARTING, settings.environment)

    app = create_app(create_container(settings))

    try:
        logger.info(LogTemplates.SERVICE_LISTENING, settings.api.host, settings.api.port)
        # log_config=None keeps uvicorn on the handlers configured above.
        uvicorn.run(app, host=settings.api.host, port=settings.api.port, log_config=None)
        logger.info(LogTemplates.SERVICE_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.SERVICE_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.SERVICE_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
