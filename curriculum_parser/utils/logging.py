# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

Logs are formatted as JSON in production and as colored console output
in development for better readability.

Example:
    >>> from curriculum_parser.utils.logging import setup_logging, get_logger
    >>> from curriculum_parser.core.config import get_settings
    >>> setup_logging(get_settings())
    >>> logger = get_logger(__name__)
    >>> logger.info("project_parsed", slug="cipher", locale="es-ES")
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from curriculum_parser.core.config.settings import Settings


def setup_logging(settings: "Settings") -> None:
    """Configure structured logging for the parser.

    Sets up structlog with appropriate processors based on environment:
    - Development: Colored console output with pretty formatting
    - Production: JSON output for log aggregation

    Logs go to stderr so that the CLI can keep stdout for the parsed record.

    Args:
        settings: Settings containing log_level and debug flag.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development or settings.debug:
        processors: list[Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    # Third-party loggers stay quiet unless something goes wrong
    for logger_name in ["httpx", "httpcore", "asyncio", "PIL", "markdown_it"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger("curriculum_parser").setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A lazily configured structlog logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("thumbnail_created", size=1024)
    """
    return structlog.get_logger(name)


@contextmanager
def bound_context(**kwargs: object) -> Iterator[None]:
    """Bind context variables to log calls made inside the block.

    Previously bound values are restored on exit, so nested parses and
    callers' own context are left untouched.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> with bound_context(project_dir="/curriculum/projects/01-cipher"):
        ...     logger.info("readme_loaded")  # Will include project_dir
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
