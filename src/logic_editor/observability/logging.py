"""Structured logging: swappable formatter via config.

    LogFormatter decides HOW records are structured (structlog or stdlib).
    setup_logging(config) asks the formatter for a logging.Formatter,
    puts it on a stderr handler and attaches that handler to the root logger.

Modules log through get_logger(__name__), which accepts structured
keyword arguments whether or not setup_logging() has run:

    get_logger(__name__).warning("components.duplicate", name="add")

Swapping:
    LOGIC_EDITOR_LOG_FORMATTER=structlog   (default)
    LOGIC_EDITOR_LOG_FORMATTER=stdlib
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from logic_editor.observability.config import ObservabilityConfig


@runtime_checkable
class LogFormatter(Protocol):
    """Strategy: how log records are structured.

    setup() configures the formatting pipeline and returns a
    logging.Formatter for the handler.

    get_logger() returns a logger that takes event + key=value kwargs.
    """

    def setup(self, config: ObservabilityConfig) -> logging.Formatter: ...

    def get_logger(self, name: str, **kwargs: Any) -> Any: ...


class StructlogFormatter:
    """structlog processor pipeline + stdlib bridge.

    After setup(), both structlog.get_logger() and logging.getLogger()
    produce structured output.
    """

    def setup(self, config: ObservabilityConfig) -> logging.Formatter:
        import structlog

        shared_processors: list = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]

        if config.log_format == "console":
            renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
        else:
            renderer = structlog.processors.JSONRenderer()

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *shared_processors,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        return structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )

    def get_logger(self, name: str, **kwargs: Any) -> Any:
        import structlog

        return structlog.get_logger(name, **kwargs)


class StdlibFormatter:
    """Pure stdlib logging with JSON or console formatting."""

    def setup(self, config: ObservabilityConfig) -> logging.Formatter:
        if config.log_format == "console":
            return logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        return _StdlibJsonFormatter()

    def get_logger(self, name: str, **kwargs: Any) -> Any:
        return _StructuredStdlibLogger(logging.getLogger(name))


class _StdlibJsonFormatter(logging.Formatter):
    """JSON formatter for stdlib logging (no structlog dependency)."""

    def format(self, record: logging.LogRecord) -> str:
        d: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if hasattr(record, "_structured"):
            d.update(record._structured)  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            d["exception"] = self.formatException(record.exc_info)
        return json.dumps(d, default=str)


class _StructuredStdlibLogger:
    """Gives stdlib loggers a structlog-like kwargs API.

    logger.warning("components.duplicate", name="add") stores the kwargs
    on the LogRecord for the formatter.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, event: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        record = self._logger.makeRecord(
            self._logger.name,
            level,
            "(unknown)",
            0,
            event,
            (),
            None,
        )
        record._structured = kwargs  # type: ignore[attr-defined]
        self._logger.handle(record)

    def debug(self, event: str, **kw: Any) -> None:
        self._log(logging.DEBUG, event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._log(logging.WARNING, event, **kw)


_FORMATTERS: dict[str, type] = {
    "structlog": StructlogFormatter,
    "stdlib": StdlibFormatter,
}


_active_formatter: LogFormatter | None = None


def setup_logging(config: ObservabilityConfig) -> None:
    """Build the configured formatter and wire a stderr handler to the root logger.

    Only the handler installed by a previous call is replaced; handlers
    attached by others (pytest caplog, host applications) are kept.
    """
    global _active_formatter

    formatter_cls = _FORMATTERS.get(config.log_formatter)
    if formatter_cls is None:
        raise ValueError(
            f"Unknown log formatter: {config.log_formatter!r}. "
            f"Available: {list(_FORMATTERS)}."
        )

    formatter = formatter_cls()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter.setup(config))

    handler._logic_editor_managed = True  # type: ignore[attr-defined]
    root_logger = logging.getLogger()
    root_logger.handlers = [
        h for h in root_logger.handlers
        if not getattr(h, "_logic_editor_managed", False)
    ]
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))

    _active_formatter = formatter


def get_logger(name: str = "", **kwargs: Any) -> Any:
    """Get a logger from the active formatter.

    Before setup_logging() this wraps a stdlib logger so structured
    kwargs still work.
    """
    if _active_formatter is not None:
        return _active_formatter.get_logger(name, **kwargs)
    return _StructuredStdlibLogger(logging.getLogger(name))


def reset_logging() -> None:
    """Forget the active formatter and remove the managed handler. For tests."""
    global _active_formatter
    _active_formatter = None
    root_logger = logging.getLogger()
    root_logger.handlers = [
        h for h in root_logger.handlers
        if not getattr(h, "_logic_editor_managed", False)
    ]
