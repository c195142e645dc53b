import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """
    Route iconfig events through structlog to stderr.

    Only the ``iconfig`` logger gets a handler, so the host application's
    own logging setup is left as it is. Calling it again replaces the
    previous handler.
    """
    processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: Processor = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))

    package_logger = logging.getLogger("iconfig")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level.upper())
    package_logger.propagate = False


class IConfigStructLogger:
    """
    Structured logger for the iconfig package.

    Thin wrapper over a structlog stdlib logger. ``bind`` returns a new
    wrapper carrying the extra fields, so each component keeps its own
    context instead of sharing process-wide context variables.
    """

    def __init__(self, log_name: str = "iconfig", logger=None):
        self.name = log_name
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    def bind(self, **new_values: Any) -> "IConfigStructLogger":
        """Return a logger with ``new_values`` attached to every event."""
        return IConfigStructLogger(self.name, self.logger.bind(**new_values))

    def unbind(self, *keys: str) -> "IConfigStructLogger":
        return IConfigStructLogger(self.name, self.logger.unbind(*keys))

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_iconfig_logger(name: str = "iconfig") -> IConfigStructLogger:
    """Get the package logger. Output is governed by the host application's logging setup."""
    return IConfigStructLogger(name)


def init_logger(settings=None):
    """
    Initialize structured logging for the iconfig package.

    Args:
        settings: ``LoggingSettings`` instance, defaults are used when omitted

    Returns:
        IConfigStructLogger: Configured structured logger instance
    """
    if settings is None:
        from iconfig.settings import LoggingSettings
        settings = LoggingSettings()

    setup_logging(json_logs=settings.json_logs, log_level=settings.level)

    return IConfigStructLogger("iconfig")
