"""Logging setup for diario.

Core modules log structured events with structlog.get_logger(__name__);
the CLI calls configure_logging once so those events go to stderr.
"""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Render log events to stderr.

    Args:
        verbose: Show debug events too. Otherwise only warnings and errors.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
