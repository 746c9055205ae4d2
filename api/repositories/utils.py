"""Repository utility functions for common database operations."""

import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Concatenate, ParamSpec, TypeVar

from core.logger import get_logger

logger = get_logger(__name__)

# Threshold for logging slow queries (milliseconds)
SLOW_QUERY_THRESHOLD_MS = 500

S = TypeVar("S")
P = ParamSpec("P")
R = TypeVar("R")


def operation_label(instance: object, operation: str) -> str:
    """``CustomerRepository-get_by_id`` style label for log lines."""
    return f"{type(instance).__name__}-{operation}"


def logged_operation(
    operation: str,
) -> Callable[
    [Callable[Concatenate[S, P], Awaitable[R]]],
    Callable[Concatenate[S, P], Awaitable[R]],
]:
    """Decorator to log failed and slow repository operations.

    Logs at ERROR level for exceptions (re-raises after logging).
    Logs at WARNING level for calls exceeding SLOW_QUERY_THRESHOLD_MS.

    Usage:
        @logged_operation("get_by_id")
        async def get_by_id(self, entity_id: str) -> Customer:
            ...
    """

    def decorator(
        func: Callable[Concatenate[S, P], Awaitable[R]],
    ) -> Callable[Concatenate[S, P], Awaitable[R]]:
        @wraps(func)
        async def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> R:
            label = operation_label(self, operation)
            start_time = time.perf_counter()
            try:
                result = await func(self, *args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    "repository.operation.failed",
                    label=label,
                    error=str(e),
                    error_type=type(e).__name__,
                    duration_ms=round(duration_ms, 2),
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            if duration_ms > SLOW_QUERY_THRESHOLD_MS:
                logger.warning(
                    "repository.slow_query",
                    label=label,
                    duration_ms=round(duration_ms, 2),
                )
            return result

        return wrapper

    return decorator
