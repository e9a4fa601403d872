import sys
from typing import Optional, Iterator, Protocol, runtime_checkable
from contextvars import ContextVar
from contextlib import contextmanager
from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Trace ID context variables (thread-safe, async-safe)
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ) -> Iterator[None]: ...

    def set_trace_id(self, trace_id: str) -> None: ...

    def get_trace_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Loguru wrapper with trace ID support.

    An evaluation run is tagged with a trace id so that the per-scope debug
    lines of one dashboard request can be grepped together:

        logger = Logger(LoggerConfig(level="DEBUG"))
        with logger.trace_context(trace_id="eval_2024-05-01"):
            engine.evaluate(current, prev)
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Remove default handler
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def inject_context(record):
            record["extra"].setdefault(SERVICE_KEY, self.config.service_name)
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or ""
            request_id = _request_id_var.get()
            if request_id:
                record["extra"][REQUEST_ID_KEY] = request_id
            return True

        parts = [LOG_FORMAT_TIME, LOG_FORMAT_LEVEL, LOG_FORMAT_SERVICE]
        if self.config.enable_trace_id:
            parts.append(LOG_FORMAT_TRACE)
        format_str = " | ".join(parts) + f" | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"

        _loguru_logger.add(
            sys.stderr,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=inject_context,
        )

    @contextmanager
    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ):
        """Scope a trace id (and optionally a request id) to a block."""
        prev_trace_id = _trace_id_var.get()
        prev_request_id = _request_id_var.get()

        if trace_id:
            _trace_id_var.set(trace_id)
        if request_id:
            _request_id_var.set(request_id)

        try:
            yield
        finally:
            _trace_id_var.set(prev_trace_id)
            _request_id_var.set(prev_request_id)

    def set_trace_id(self, trace_id: str) -> None:
        _trace_id_var.set(trace_id)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).exception(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
