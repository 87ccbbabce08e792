"""Cross-cutting concern decorators for the sample operations.

Logging, timing and audit entries are layered around the thin client calls
without touching their request/response contract. None of these decorators
retry or swallow errors.
"""

from collections.abc import Callable
from datetime import UTC, datetime
import functools
import inspect
import logging
import time
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def _qualified_name(func: Callable[..., Any]) -> str:
    return f"{func.__module__}.{func.__qualname__}"


def log_execution(
    level: int = logging.INFO,
    *,
    include_args: bool = False,
    include_result: bool = False,
) -> Callable[[F], F]:
    """Decorator to log function execution.

    Args:
        level: Logging level (default: INFO)
        include_args: Whether to log function arguments
        include_result: Whether to log function result

    Returns:
        Decorated function with logging capabilities
    """

    def _log_entry(func_name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        log_msg = "Executing %s"
        log_args = [func_name]
        if include_args:
            log_msg += " with args=%s, kwargs=%s"
            log_args.extend([str(args), str(kwargs)])
        logger.log(level, log_msg, *log_args)

    def _log_exit(func_name: str, result: Any) -> None:
        completion_msg = "Completed %s"
        completion_args = [func_name]
        if include_result:
            completion_msg += " -> %s"
            completion_args.append(result)
        logger.log(level, completion_msg, *completion_args)

    def decorator(func: F) -> F:
        func_name = _qualified_name(func)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            _log_entry(func_name, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Error in %s", func_name)
                raise
            else:
                _log_exit(func_name, result)
                return result

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _log_entry(func_name, args, kwargs)
            try:
                result = await func(*args, **kwargs)
            except Exception:
                logger.exception("Error in %s", func_name)
                raise
            else:
                _log_exit(func_name, result)
                return result

        if inspect.iscoroutinefunction(func):
            return cast("F", async_wrapper)
        return cast("F", sync_wrapper)

    return decorator


def measure_execution_time(
    log_level: int = logging.INFO,
    threshold_ms: float | None = None,
) -> Callable[[F], F]:
    """Decorator to measure and log execution time.

    Args:
        log_level: Logging level for timing information
        threshold_ms: Only log if execution time exceeds threshold (milliseconds)

    Returns:
        Decorated function with timing capabilities
    """

    def _report(func_name: str, start_time: float, *, failed: bool) -> None:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        if failed:
            logger.log(log_level, "%s failed after %.2fms", func_name, execution_time_ms)
        elif threshold_ms is None or execution_time_ms > threshold_ms:
            logger.log(log_level, "%s executed in %.2fms", func_name, execution_time_ms)

    def decorator(func: F) -> F:
        func_name = _qualified_name(func)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                _report(func_name, start_time, failed=True)
                raise
            _report(func_name, start_time, failed=False)
            return result

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception:
                _report(func_name, start_time, failed=True)
                raise
            _report(func_name, start_time, failed=False)
            return result

        if inspect.iscoroutinefunction(func):
            return cast("F", async_wrapper)
        return cast("F", sync_wrapper)

    return decorator


def audit_trail(
    operation: str,
    resource_param: str | None = None,
) -> Callable[[F], F]:
    """Decorator to create an audit trail for destructive operations.

    The resource identifier is looked up by parameter name among the bound
    call arguments, so it is found whether it was passed positionally or by
    keyword.

    Args:
        operation: Description of the operation being performed
        resource_param: Parameter name holding the resource identifier

    Returns:
        Decorated function with audit trail capabilities
    """

    def decorator(func: F) -> F:
        func_name = _qualified_name(func)
        signature = inspect.signature(func)

        def _audit_info(args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
            resource_id = None
            if resource_param:
                bound = signature.bind_partial(*args, **kwargs)
                resource_id = bound.arguments.get(resource_param)
            return {
                "operation": operation,
                "function": func_name,
                "timestamp": datetime.now(UTC).isoformat(),
                "resource_id": resource_id,
            }

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            audit_info = _audit_info(args, kwargs)
            logger.info("Audit: %s", audit_info)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                audit_info["status"] = "failed"
                audit_info["error"] = str(e)
                logger.warning("Audit failed: %s", audit_info)
                raise
            else:
                audit_info["status"] = "success"
                logger.info("Audit completed: %s", audit_info)
                return result

        return cast("F", wrapper)

    return decorator


def sample_operation(
    log_level: int = logging.DEBUG,
    timing_threshold_ms: float | None = None,
) -> Callable[[F], F]:
    """Composite decorator for sample operations.

    Combines execution logging and timing.

    Args:
        log_level: Logging level for execution logs
        timing_threshold_ms: Threshold for logging execution time

    Returns:
        Decorated function with sample operation capabilities
    """

    def decorator(func: F) -> F:
        decorated = measure_execution_time(
            log_level=log_level, threshold_ms=timing_threshold_ms
        )(func)
        return log_execution(level=log_level)(decorated)

    return decorator
