"""Logging configuration for hn-companion.

Logs always go to stderr. Stdout carries command output for the CLI and is
the transport for the MCP server on stdio.
"""

import sys

from loguru import logger

CLI_FORMAT = "{level.icon} {message}"
# Server logs land in the MCP client's log files, so they carry time and origin.
SERVER_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"


def configure_logging(*, verbose: bool = False, server: bool = False) -> None:
    """Replace loguru's sinks with one stderr sink, DEBUG when verbose else INFO."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    if server:
        logger.add(sys.stderr, level=level, format=SERVER_FORMAT, colorize=False)
    else:
        logger.add(sys.stderr, level=level, format=CLI_FORMAT)
