"""Logging setup for the claimsync entry points."""

from __future__ import annotations

import logging

# One log line per SPARQL request is emitted by these; keep them out of INFO output.
_HTTP_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for service and CLI output.

    HTTP client loggers stay at WARNING unless ``level`` is DEBUG, in which case
    they follow ``level`` so request traffic shows up next to the SPARQL statements.
    ``force=True`` replaces handlers installed earlier, e.g. by a test runner.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        force=force,
    )
    http_level = level if level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
