"""Error handling helpers for best-effort operations and batch commands"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from ..exceptions import RandomWordsError

T = TypeVar("T")


def handle_errors(
    default_return: Any = None,
    log_level: int = logging.ERROR,
    reraise_on: type[Exception] | tuple[type[Exception], ...] | None = None,
    operation_name: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Log a failed call and return ``default_return`` instead of raising.

    Application errors are logged as one line, with their details at debug
    level. Anything else is logged with its traceback.

    Args:
        default_return: Value to return when the call fails
        log_level: Level for the failure message
        reraise_on: Exception type(s) passed through untouched
        operation_name: Name used in messages (derived from the function name)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        op_name = operation_name or func.__name__.strip("_").replace("_", " ")
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if reraise_on and isinstance(e, reraise_on):
                    raise
                if isinstance(e, RandomWordsError):
                    logger.log(log_level, f"Could not {op_name}: {e.message}")
                    if e.details:
                        logger.debug(f"{op_name} details: {e.details}")
                else:
                    logger.log(
                        log_level,
                        f"Unexpected failure during {op_name}: {e}",
                        exc_info=True,
                    )
                return cast(T, default_return)

        return wrapper

    return decorator


class ErrorCollector:
    """Per-item outcomes of a batch, so one bad item does not stop the rest"""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        self.succeeded: list[str] = []
        self.failed: list[tuple[str, Exception]] = []

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def add_success(self, item: str) -> None:
        self.succeeded.append(item)

    def add_error(self, item: str, error: Exception) -> None:
        self.failed.append((item, error))

    def has_errors(self) -> bool:
        return bool(self.failed)

    def get_summary(self) -> str:
        """One header line, then one line per failed item"""
        if not self.failed:
            return f"{self.operation}: {len(self.succeeded)} of {self.total} succeeded"
        lines = [f"{self.operation}: {len(self.failed)} of {self.total} failed"]
        for item, error in self.failed:
            reason = error.message if isinstance(error, RandomWordsError) else error
            lines.append(f"  • {item}: {reason}")
        return "\n".join(lines)

    def log_all(self, logger: logging.Logger) -> None:
        for item, error in self.failed:
            if isinstance(error, RandomWordsError):
                logger.error(f"{self.operation} failed for {item}: {error}")
            else:
                logger.error(
                    f"{self.operation} failed for {item}: {error}", exc_info=error
                )
