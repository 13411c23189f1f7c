"""
Logging configuration.

All logs go to stderr through the standard library root logger; structlog
renders the key-value context of each event as plain text.

Usage:
    from commit_iter.config.logging import configure_logging
    configure_logging(level="DEBUG")
"""

import logging
import sys

import structlog


class GitPopenFilter(logging.Filter):
    """Drop GitPython's Popen debug chatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "Popen(['git'" not in record.getMessage()


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib and structlog output to stderr at the given level."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers = []

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(GitPopenFilter())
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
