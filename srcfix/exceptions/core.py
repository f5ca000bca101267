from typing import Any

from structlog.types import FilteringBoundLogger


class SrcfixError(Exception):
    """Base exception for all srcfix errors.

    Each exception defines a log_category and may carry extra fields
    (such as the settings file being read) that are logged alongside it.
    """

    log_category: str = 'srcfix_error'

    def __init__(self, *args: object, **log_fields: Any) -> None:
        super().__init__(*args)
        self.log_fields = {key: value for key, value in log_fields.items() if value is not None}

    @classmethod
    def get_log_category(cls) -> str:
        """Get the log category for this exception type."""
        return cls.log_category


def log_exception(logger: FilteringBoundLogger, exc: Exception) -> None:
    """Log an exception under its category, together with any fields it carries.

    Args:
        logger: The logger instance to use (from hotlog.get_logger)
        exc: The exception to log
    """
    if isinstance(exc, SrcfixError):
        logger.exception(exc.get_log_category(), error=str(exc), **exc.log_fields)
        return
    logger.exception(exc.__class__.__name__.lower(), error=str(exc))
