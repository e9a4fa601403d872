from dataclasses import dataclass
from .constant import *


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable console output
        colorize: Enable colored console output
        service_name: Service name stamped on every record
        enable_trace_id: Include the trace id column in console output
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    service_name: str = DEFAULT_SERVICE_NAME
    enable_trace_id: bool = DEFAULT_ENABLE_TRACE_ID

    def __post_init__(self):
        if isinstance(self.level, str) and not isinstance(self.level, LogLevel):
            normalized = self.level.strip().upper()
            if normalized in LEVEL_ALIASES:
                self.level = LEVEL_ALIASES[normalized]
            else:
                try:
                    self.level = LogLevel(normalized)
                except ValueError:
                    valid_levels = [l.value for l in LogLevel]
                    raise ValueError(
                        f"Invalid log level: {self.level}. Must be one of {valid_levels}"
                    )
        if not self.service_name:
            raise ValueError("service_name cannot be empty")
