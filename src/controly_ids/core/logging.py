"""structlog configuration."""

import logging
import sys

import structlog


def setup_logging(
    json_logs: bool = False,
    log_level_name: str = "INFO",
) -> None:
    """Configure structlog for console or JSON output.

    Args:
        json_logs: Render events as JSON lines instead of console output
        log_level_name: Minimum level to emit

    """
    level = logging.getLevelNamesMapping().get(log_level_name.upper(), logging.INFO)

    renderer: structlog.typing.Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
