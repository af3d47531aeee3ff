"""structlog setup for a library that logs through the host's ``logging``."""

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger


PACKAGE_LOGGER = "sassc_embedded"


def configure_structlog(*, formatter: bool = False) -> None:
    """Route structlog events to stdlib loggers named after their module.

    Events below the stdlib logger's effective level are dropped, so debug
    events stay silent until the host enables them and warnings reach
    whatever handler the host installed (stderr by default).

    Args:
        formatter: Leave the event dict for a ``ProcessorFormatter`` instead
            of rendering it to a ``key=value`` line
    """
    renderer = (
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter
        if formatter
        else structlog.processors.KeyValueRenderer(key_order=["event"])
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(
    json_logs: bool | None = None, log_level: str | None = None
) -> BoundLogger:
    """
    Give the package logger its own stderr handler.

    Optional for hosts that already configure ``logging``. Arguments left as
    None come from Settings.
    """
    from sassc_embedded.config.settings import get_settings

    settings = get_settings()
    if json_logs is None:
        json_logs = settings.json_logs
    if log_level is None:
        log_level = settings.log_level

    configure_structlog(formatter=True)

    handler = logging.StreamHandler(sys.stderr)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.propagate = False
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    return structlog.get_logger(PACKAGE_LOGGER)  # type: ignore[no-any-return]


def get_logger(name: str | None = None) -> BoundLogger:
    return structlog.get_logger(name)  # type: ignore[no-any-return]


if not structlog.is_configured():
    configure_structlog()
