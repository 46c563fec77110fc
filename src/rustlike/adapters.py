"""Boundary adapters: turn raising or awaitable computations into containers.

``try_catch`` and ``@safe`` run a callable and capture its exception as Err.
``result_from_deferred`` and ``option_from_deferred`` await an awaitable
exactly once and convert its outcome; the Option variant discards the
exception since Empty has no slot for it.

Only the captured exception types are converted (``get_config().capture``,
``(Exception,)`` by default). ``KeyboardInterrupt``, ``SystemExit`` and
``asyncio.CancelledError`` always propagate.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from rustlike._config import get_config
from rustlike._logging import get_logger
from rustlike.option import Empty, Option, Some
from rustlike.result import Err, Ok, Result

__all__ = [
    'option_from_deferred',
    'result_from_deferred',
    'safe',
    'safe_async',
    'try_catch',
]

logger = get_logger(__name__)


def _capture(exceptions: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    return exceptions if exceptions is not None else get_config().capture


def try_catch[T](
    f: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]:
    """Call ``f`` now and wrap its outcome.

    Args:
        f: Zero-argument callable to invoke.
        exceptions: Exception types to capture. Defaults to the configured
            capture set.

    Returns:
        Ok(f()) on normal return, Err(exception) if ``f`` raised a captured
        exception type.

    Example:
        ```python
        try_catch(lambda: 1 / 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    try:
        return Ok(f())
    except _capture(exceptions) as e:
        logger.debug('exception_captured', adapter='try_catch', exception_type=type(e).__name__)
        return Err(e)


async def result_from_deferred[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]:
    """Await ``awaitable`` once and wrap its outcome.

    Args:
        awaitable: A coroutine, task or future.
        exceptions: Exception types to capture. Defaults to the configured
            capture set.

    Returns:
        Ok(value) on fulfillment, Err(exception) on a captured rejection.
    """
    try:
        return Ok(await awaitable)
    except _capture(exceptions) as e:
        logger.debug('exception_captured', adapter='result_from_deferred', exception_type=type(e).__name__)
        return Err(e)


async def option_from_deferred[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Option[T]:
    """Await ``awaitable`` once; Some(value) on fulfillment, Empty on rejection.

    The rejection reason is dropped.
    """
    try:
        return Some(await awaitable)
    except _capture(exceptions) as e:
        logger.debug('exception_discarded', adapter='option_from_deferred', exception_type=type(e).__name__)
        return Empty


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Result[Any, E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator form of ``try_catch``.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to the
            configured capture set, resolved on each call.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(value=5.0)
        divide(10, 0)  # Err(error=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        return try_catch(lambda: wrapped(*args, **kwargs), exceptions=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Result[Any, E]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async decorator form of ``result_from_deferred``.

    Wraps a coroutine function so that awaiting it returns Ok(value) or
    Err(exception) instead of raising.

    Example:
        ```python
        @safe_async(exceptions=(OSError,))
        async def fetch(url: str) -> bytes:
            return await http_get(url)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        try:
            awaitable = wrapped(*args, **kwargs)
        except _capture(exceptions) as e:
            logger.debug('exception_captured', adapter='safe_async', exception_type=type(e).__name__)
            return Err(e)
        return await result_from_deferred(awaitable, exceptions=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper
