import logging
from enum import Enum
from typing import Callable, Optional


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorHandler:
    def __init__(self, logger: logging.Logger, console_callback: Optional[Callable[[str, ErrorSeverity], None]] = None):
        self._logger = logger
        self._console_callback = console_callback

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        # Log the error
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method(f"{error.__class__.__name__}: {error}", extra=context or {})

        # Notify console
        if self._console_callback and severity is not ErrorSeverity.INFO:
            self._console_callback(str(error), severity)
