"""Option type: Some[T] | Empty for values that may be absent.

``Some`` owns its payload in a replaceable slot so that ``take`` and
``replace`` can move values in and out without changing the container's
identity. ``Empty`` is a frozen singleton.

Example:
    ```python
    from rustlike import some, empty, option_from_nullable

    some(10).map(lambda x: x * 2).filter(lambda x: x > 15).unwrap_or(0)  # 20
    option_from_nullable(None)  # EmptyType()
    option_from_nullable(0)  # Some(value=0)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from rustlike.errors import UnwrapError

if TYPE_CHECKING:
    from rustlike.result import Err, Ok

__all__ = [
    'Empty',
    'EmptyType',
    'Option',
    'Some',
    'collect_options',
    'empty',
    'is_empty',
    'is_occupied',
    'option_from_nullable',
    'some',
]

UNWRAP_EMPTY_MESSAGE = 'Called Option.unwrap() on an Empty value'


class Some[T](msgspec.Struct):
    """Occupied variant of Option holding a value of type T.

    The payload slot is mutable: ``take``, ``take_if`` and ``replace`` move
    values out of and into it in place. Every other operation leaves the
    receiver untouched.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(5).xor(Empty)
        Some(value=5)
    """

    value: T

    def is_occupied(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return False since this is Some."""
        return False

    def is_occupied_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the predicate applied to the contained value."""
        return predicate(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            A new Some containing ``f(value)``.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``, ignoring the default factory."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call ``f`` with the contained value for its side effect and return self."""
        f(self.value)
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other since this is Some."""
        return other

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        """Return self if other is Empty, else Empty.

        Exactly one occupied side wins; two occupied sides cancel out.
        """
        if isinstance(other, Some):
            return Empty
        return self

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def unwrap_or_default(self, default_factory: Callable[[], T] | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default factory."""
        return self.value

    def take(self) -> Some[T]:
        """Move the value out of the slot into a new Some.

        The receiver keeps its class (it is still a Some) but its slot is
        cleared to ``None``; a later ``unwrap()`` on it returns ``None``.

        Returns:
            A new Some holding the value that was present.
        """
        value = self.value
        self.value = None  # type: ignore[assignment]
        return Some(value)

    def take_if(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Take the value only if the predicate holds on it.

        Returns:
            The result of ``take()`` when ``predicate(value)`` is true,
            otherwise Empty with the receiver left untouched.
        """
        if predicate(self.value):
            return self.take()
        return Empty

    def replace(self, value: T) -> Some[T]:
        """Store a new value in the slot, returning the previous one.

        Args:
            value: The value to put in the slot.

        Returns:
            A new Some holding the previous value.
        """
        previous = self.value
        self.value = value
        return Some(previous)

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Combine two Some values into a tuple.

        Returns Some((self.value, other.value)) if other is Some, else Empty.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Empty

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Combine two Some values with a function.

        Returns Some(f(self.value, other.value)) if other is Some, else Empty.
        """
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return Empty

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate holds on the value, else Empty."""
        if predicate(self.value):
            return self
        return Empty

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting.

        Returns the inner Option when the payload is one, otherwise the
        receiver itself.
        """
        if isinstance(self.value, Some | EmptyType):
            return self.value
        return self

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from rustlike.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from rustlike.result import Ok

        return Ok(self.value)

    def iter(self) -> Iterator[T]:
        """Yield the contained value once."""
        yield self.value


class EmptyType(msgspec.Struct, frozen=True, gc=False):
    """Empty variant of Option representing absence of a value.

    This is a singleton - use the ``Empty`` constant (or ``empty()``)
    instead of instantiating directly. Empty has no slot, so the mutation
    operations never change it.

    Examples:
        >>> Empty.is_empty()
        True
        >>> Empty.unwrap_or(0)
        0
    """

    def is_occupied(self) -> TypeIs[Some[Any]]:
        """Return False since this is Empty."""
        return False

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return True since this is Empty."""
        return True

    def is_occupied_and(self, _predicate: Callable[[Any], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def map[T, U](self, _f: Callable[[T], U]) -> EmptyType:
        """Return Empty since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since this is Empty."""
        return default

    def map_or_else[T, U](self, default_fn: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute and return the default since this is Empty."""
        return default_fn()

    def inspect[T](self, _f: Callable[[T], Any]) -> EmptyType:
        """Return Empty without calling ``f``."""
        return self

    def and_[U](self, _other: Option[U]) -> EmptyType:
        """Return Empty since self is Empty."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Option[U]]) -> EmptyType:
        """Return Empty since there's no value to bind."""
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since self is Empty."""
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Empty.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[T](self, other: Option[T]) -> Option[T]:
        """Return other: it is the only occupied side, or Empty as well."""
        return other

    def unwrap(self) -> NoReturn:
        """Raise since Empty has no value to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(UNWRAP_EMPTY_MESSAGE)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with ``msg``.
        """
        raise UnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Empty."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Empty."""
        return f()

    def unwrap_or_default[T](self, default_factory: Callable[[], T] | None = None) -> T | None:
        """Return ``default_factory()``, or ``None`` when no factory is given."""
        if default_factory is None:
            return None
        return default_factory()

    def take(self) -> EmptyType:
        """Return Empty; there is nothing to take."""
        return self

    def take_if[T](self, _predicate: Callable[[T], bool]) -> EmptyType:
        """Return Empty without calling the predicate."""
        return self

    def replace[T](self, value: T) -> Some[T]:
        """Return a new Some holding ``value``.

        The singleton itself is not modified; callers holding it must rebind
        to the returned container.
        """
        return Some(value)

    def zip[U](self, _other: Option[U]) -> EmptyType:
        """Return Empty since self is Empty."""
        return self

    def zip_with[U, R](self, _other: Option[U], _f: Callable[[Any, U], R]) -> EmptyType:
        """Return Empty since self is Empty."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> EmptyType:
        """Return Empty since there's no value to filter."""
        return self

    def flatten(self) -> EmptyType:
        """Return Empty since there's nothing to flatten."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from rustlike.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err(f())."""
        from rustlike.result import Err

        return Err(f())

    def iter(self) -> Iterator[Any]:
        """Yield nothing."""
        yield from ()


Empty: EmptyType = EmptyType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | EmptyType


def some[T](value: T) -> Some[T]:
    """Wrap a value in Some.

    ``some(None)`` is a Some holding ``None``, not Empty.
    """
    return Some(value)


def empty() -> EmptyType:
    """Return the Empty singleton."""
    return Empty


def option_from_nullable[T](value: T | None) -> Option[T]:
    """Map ``None`` to Empty and any other value to Some.

    Falsy values such as ``0``, ``''`` and ``False`` are still present.

    Examples:
        >>> option_from_nullable(None)
        EmptyType()
        >>> option_from_nullable(0)
        Some(value=0)
    """
    if value is None:
        return Empty
    return Some(value)


def is_occupied[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Check if an Option is Some."""
    return isinstance(option, Some)


def is_empty[T](option: Option[T]) -> TypeIs[EmptyType]:
    """Check if an Option is Empty."""
    return isinstance(option, EmptyType)


def collect_options[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect an iterable of Options into an Option of list.

    Short-circuits on the first Empty encountered.

    Examples:
        >>> collect_options([Some(1), Some(2)])
        Some(value=[1, 2])
        >>> collect_options([Some(1), Empty, Some(3)])
        EmptyType()
    """
    values: list[T] = []
    for option in options:
        if isinstance(option, EmptyType):
            return Empty
        values.append(option.value)
    return Some(values)
