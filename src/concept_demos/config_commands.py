"""Configuration commands for the concept-demos CLI."""

import sys

import structlog
from cyclopts import App

from concept_demos.config import DEFAULT_LOG_LEVEL, LOG_LEVELS, get_config

logger = structlog.get_logger()

KNOWN_KEYS = ("log_level",)

config_app = App(name="config", help="Inspect configuration")


@config_app.command
def show(global_: bool = False) -> None:
    """Show the effective log level and where it comes from.

    Args:
        global_: If True, read global config only. If False, read local config with global fallback.
    """
    config = get_config(use_global=global_)
    source = config.source("log_level")
    if source is None:
        print(f"log_level = {DEFAULT_LOG_LEVEL} (default)")
    else:
        print(f"log_level = {config.get('log_level')} ({source})")

    for key in sorted(set(config.list()) - set(KNOWN_KEYS)):
        print(f"Ignored unknown setting: {key}")


@config_app.command
def check(global_: bool = False) -> None:
    """Validate configuration, exiting with status 1 if it is unusable.

    Args:
        global_: If True, check global config only. If False, check local config with global fallback.
    """
    try:
        level = get_config(use_global=global_).get_log_level()
    except ValueError as e:
        logger.error("Invalid configuration", error=str(e))
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    print(f"Configuration OK (log_level = {level}; valid levels: {', '.join(LOG_LEVELS)})")
