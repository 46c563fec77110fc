"""Result type: Ok[T] | Err[E] for explicit error handling.

Both variants are immutable. Failures are ordinary data carried by ``Err``
and propagated by chaining combinators; only extraction on the wrong
variant raises, with :class:`~rustlike.errors.UnwrapError`.

Example:
    ```python
    from rustlike import success, failure

    (
        success(5)
        .map(lambda x: x * 2)
        .and_then(lambda x: success(str(x)) if x > 5 else failure('too small'))
        .map_err(lambda e: f'Error: {e}')
        .unwrap_or('default')
    )  # '10'
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from rustlike.errors import UnwrapError

if TYPE_CHECKING:
    from rustlike.option import EmptyType, Some

__all__ = [
    'Err',
    'Ok',
    'Result',
    'collect_results',
    'failure',
    'is_failure',
    'is_success',
    'success',
]


def _fault(message: str, payload: Any) -> UnwrapError:
    """Build the extraction fault, chaining the payload when it is an exception."""
    error = UnwrapError(message, payload)
    if isinstance(payload, BaseException):
        error.__cause__ = payload
    return error


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_success(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_failure(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_success_and(self, predicate: Callable[[T], bool]) -> bool:
        """Test if the value satisfies a predicate.

        Args:
            predicate: A callable that takes the value and returns a boolean.

        Returns:
            bool: The predicate applied to the value.
        """
        return predicate(self.value)

    def is_failure_and(self, _predicate: Callable[[Any], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def success_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from rustlike.option import Some

        return Some(self.value)

    def failure_option(self) -> EmptyType:
        """Convert to Option, returning Empty since this is Ok."""
        from rustlike.option import Empty

        return Empty

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default_fn: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``, ignoring the default factory."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call a function with the value for side effects.

        Args:
            f: A callable that takes the value and performs side effects.

        Returns:
            Ok[T]: Returns self unchanged.
        """
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self without calling ``f``."""
        return self

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since this is Ok."""
        return other

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Result[T, F]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def or_else[F](self, _f: Callable[[Any], Result[T, F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error to unwrap.

        Raises:
            UnwrapError: Always, carrying the Ok value as payload.
        """
        raise _fault(f'Called Result.unwrap_err() on an Ok value: {self.value!r}', self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since this is Ok.

        Raises:
            UnwrapError: Always, with ``msg``.
        """
        raise _fault(msg, self.value)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def into_ok(self) -> T:
        """Return the contained value.

        Use when the error type is known to be uninhabited.
        """
        return self.value

    def into_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, carrying the Ok value as payload.
        """
        raise _fault(f'Called Result.into_err() on an Ok value: {self.value!r}', self.value)

    def iter(self) -> Iterator[T]:
        """Yield the contained value once."""
        yield self.value

    def flatten(self) -> Result[Any, Any]:
        """Remove one level of nesting.

        ``Ok(Ok(x))`` becomes ``Ok(x)`` and ``Ok(Err(e))`` becomes ``Err(e)``.
        A non-nested Ok is returned as is.
        """
        if isinstance(self.value, Ok | Err):
            return self.value
        return self

    def transpose(self) -> Ok[T]:
        """Return a new Ok holding the same value.

        The payload is not awaited or unwrapped, even when it is awaitable.
        """
        return Ok(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    The error is ordinary data: it may be any value, not only an exception.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_failure()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_success(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_failure(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_success_and(self, _predicate: Callable[[Any], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_failure_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return the predicate applied to the error."""
        return predicate(self.error)

    def success_option(self) -> EmptyType:
        """Convert to Option, returning Empty since this is Err."""
        from rustlike.option import Empty

        return Empty

    def failure_option(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from rustlike.option import Some

        return Some(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since this is Err."""
        return default

    def map_or_else[T, U](self, default_fn: Callable[[E], U], _f: Callable[[T], U]) -> U:
        """Return ``default_fn(error)`` since this is Err."""
        return default_fn(self.error)

    def inspect[T](self, _f: Callable[[T], Any]) -> Err[E]:
        """Return self without calling ``f``."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call a function with the error for side effects.

        Returns:
            Err[E]: Returns self unchanged.
        """
        f(self.error)
        return self

    def and_[U](self, _other: Result[U, E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Result[U, E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Err."""
        return other

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            UnwrapError: Always, carrying the error as payload. An exception
                payload is chained as ``__cause__``.
        """
        raise _fault(f'Called Result.unwrap() on an Err value: {self.error!r}', self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message since this is Err.

        Raises:
            UnwrapError: Always, with ``msg``.
        """
        raise _fault(msg, self.error)

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error since this is Err."""
        return f(self.error)

    def into_ok(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            UnwrapError: Always, carrying the error as payload.
        """
        raise _fault(f'Called Result.into_ok() on an Err value: {self.error!r}', self.error)

    def into_err(self) -> E:
        """Return the contained error.

        Use when the success type is known to be uninhabited.
        """
        return self.error

    def iter(self) -> Iterator[Any]:
        """Yield nothing."""
        yield from ()

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def transpose(self) -> Err[E]:
        """Return a new Err holding the same error."""
        return Err(self.error)


type Result[T, E] = Ok[T] | Err[E]


def success[T](value: T) -> Ok[T]:
    """Wrap a value in Ok."""
    return Ok(value)


def failure[E](error: E) -> Err[E]:
    """Wrap an error in Err."""
    return Err(error)


def is_success[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Check if a Result is Ok.

    Args:
        result: The Result to check.

    Returns:
        bool: True if the Result is Ok, False if Err.
    """
    return isinstance(result, Ok)


def is_failure[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Check if a Result is Err.

    Args:
        result: The Result to check.

    Returns:
        bool: True if the Result is Err, False if Ok.
    """
    return isinstance(result, Err)


def collect_results[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect_results([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect_results([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
