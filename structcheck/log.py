"""structlog output for structcheck.

The library only emits events through ``structlog.get_logger(__name__)``.
Applications that want to see them call ``configure_logging`` once; it
routes structcheck's loggers to stderr and leaves the root logger alone.
"""

import logging
import sys

import structlog

LOGGER_NAME = "structcheck"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structcheck events to stderr.

    Args:
        verbose: Show DEBUG events (one per failed validation). When False, only WARNING+.
        log_json: Render JSON lines instead of console output.
    """
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
