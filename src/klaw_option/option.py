"""Option type: Some[T] | Nothing for optional values.

An Option either holds exactly one value (`Some`) or holds nothing
(`Nothing`). Absent values never hide inside a `Some`: `Some(None)` is
rejected at construction and `some(None)` collapses to `Nothing` (see
`klaw_option.absent` for what counts as absent).

Examples:
    >>> from klaw_option import Nothing, some
    >>> some(21).map(lambda x: x * 2)
    Some(42)
    >>> some(None)
    Nothing
    >>> print(Nothing.map(lambda x: x * 2))
    None
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_option._config import get_config
from klaw_option._logging import trace_absent_unwrap
from klaw_option.absent import is_absent
from klaw_option.errors import AbsentValueError
from klaw_option.propagate import Propagate

__all__ = ['AbsentError', 'Nothing', 'NothingType', 'Option', 'Some']

type AbsentError = str | Callable[[], BaseException] | None
"""What to raise when unwrapping Nothing: None for the default AbsentValueError,
a message to append to it, or a zero-argument factory building the exception."""


def _absent_error(operation: str, error: AbsentError) -> BaseException:
    """Build the exception raised when `operation` is attempted on Nothing."""
    exc = error() if callable(error) else AbsentValueError(error)
    if get_config().trace_unwraps:
        trace_absent_unwrap(operation, exc)
    return exc


def _wrap[T](value: T) -> Some[T] | NothingType:
    if is_absent(value):
        return Nothing
    return Some(value)


def _is_option(value: object) -> bool:
    return isinstance(value, Some | NothingType)


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Construct through `some()` unless the value is known to be present;
    `Some(None)` raises TypeError.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(84)
        >>> with Some(42) as value:
        ...     print(value)
        42
    """

    value: T

    def __post_init__(self) -> None:
        if is_absent(self.value):
            msg = f'Some cannot wrap an absent value ({self.value!r}); use some() to collapse it to Nothing'
            raise TypeError(msg)

    def __enter__(self) -> T:
        """Context manager entry - returns the contained value."""
        return self.value

    def __exit__(self, *_: object) -> None:
        pass

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f'Some({self.value!r})'

    def __str__(self) -> str:
        return f'Some({self.value})'

    # -- inspection --------------------------------------------------------

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        Narrows the type: after checking is_some(), the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies `pred`."""
        return pred(self.value)

    def is_none_or(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies `pred`."""
        return pred(self.value)

    def iter(self) -> Iterator[T]:
        """Iterate over the single contained value."""
        return iter(self)

    def to_optional(self) -> T | None:
        """Return the contained value."""
        return self.value

    # -- unwrapping --------------------------------------------------------

    def unwrap(self, error: AbsentError = None) -> T:  # noqa: ARG002
        """Return the contained value; `error` is only used by Nothing."""
        return self.value

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    async def unwrap_or_else_async(self, f: Callable[[], Awaitable[T]]) -> T:  # noqa: ARG002
        """Return the contained value without awaiting the fallback."""
        return self.value

    def raise_if_none(self, error: AbsentError = None) -> Some[T]:  # noqa: ARG002
        """Return self unchanged; only Nothing raises."""
        return self

    def bail(self) -> T:
        """Return the contained value.

        The equivalent of Rust's ? operator: Nothing.bail() raises Propagate,
        which @returns_option turns back into a Nothing return value.
        """
        return self.value

    # -- transformation ----------------------------------------------------

    def map[U](self, f: Callable[[T], U]) -> Some[U] | NothingType:
        """Apply `f` to the value and wrap the result with some().

        Returns Nothing if `f` returns an absent value such as None.
        """
        return _wrap(f(self.value))

    def starmap[U](self, f: Callable[..., U]) -> Some[U] | NothingType:
        """Map with `f(*value)`, for options carrying tuples.

        Example:
            >>> some(2).and_(some(3)).starmap(lambda a, b: a * b)
            Some(6)
        """
        return _wrap(f(*self.value))  # type: ignore[arg-type]

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Some[U] | NothingType:
        """Await `f(value)` and wrap the result with some()."""
        return _wrap(await f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Return exactly `f(value)`.

        Also known as and_then or bind. Equivalent to `map(f).flatten()`
        without the intermediate nested option.
        """
        return f(self.value)

    and_then = flat_map

    async def flat_map_async[U](
        self, f: Callable[[T], Awaitable[Some[U] | NothingType]]
    ) -> Some[U] | NothingType:
        """Return exactly `await f(value)`."""
        return await f(self.value)

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Remove one level of nesting from Option[Option[U]].

        Raises:
            TypeError: If the contained value is not an Option.
        """
        inner = self.value
        if not _is_option(inner):
            msg = f'flatten() requires a nested Option, got Some({inner!r})'
            raise TypeError(msg)
        return inner

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if `predicate(value)` holds."""
        if predicate(self.value):
            return self
        return Nothing

    # -- matching and side effects ----------------------------------------

    def match[U](self, when_some: Callable[[T], U], when_none: U) -> U:  # noqa: ARG002
        """Return `when_some(value)`."""
        return when_some(self.value)

    def match_else[U](self, when_some: Callable[[T], U], when_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Return `when_some(value)` without calling `when_none`."""
        return when_some(self.value)

    async def match_async[U](
        self,
        when_some: Callable[[T], Awaitable[U]],
        when_none: Callable[[], Awaitable[U]],  # noqa: ARG002
    ) -> U:
        """Return `await when_some(value)`."""
        return await when_some(self.value)

    def match_do(self, when_some: Callable[[T], Any], when_none: Callable[[], Any]) -> Some[T]:  # noqa: ARG002
        """Call `when_some(value)` for its side effect and return self."""
        when_some(self.value)
        return self

    def do(self, action: Callable[[T], Any]) -> Some[T]:
        """Call `action(value)` for its side effect and return self.

        Example:
            >>> user = find_user(name).do(lambda u: log.info('user_found', id=u.id))
        """
        action(self.value)
        return self

    def do_if_none(self, action: Callable[[], Any]) -> Some[T]:  # noqa: ARG002
        """Return self without calling `action`."""
        return self

    # -- logical combination ----------------------------------------------

    def and_[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two options into Some((a, b)) if both are Some, else Nothing."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    zip = and_

    def or_(self, other: Some[T] | NothingType) -> Some[T]:  # noqa: ARG002
        """Return self since this is Some."""
        return self

    def or_else(self, f: Callable[[], Some[T] | NothingType]) -> Some[T]:  # noqa: ARG002
        """Return self without calling the fallback."""
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return self if `other` is Nothing, else Nothing."""
        if isinstance(other, NothingType):
            return self
        return Nothing

    # -- value equality ----------------------------------------------------

    def value_eq(self, other: object) -> bool:
        """Return True iff `other` is Some with an equal value.

        Unlike `==`, this is never True when either side is Nothing.
        """
        return isinstance(other, Some) and self.value == other.value

    def value_ne(self, other: object) -> bool:
        """Negation of value_eq()."""
        return not self.value_eq(other)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing the absence of a value.

    Use the `Nothing` singleton. `NothingType()` is a valid default value and
    compares (and hashes) equal to `Nothing`.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __enter__(self) -> NoReturn:
        """Context manager entry - raises Propagate for Nothing."""
        raise Propagate(self)

    def __exit__(self, *_: object) -> None:
        pass

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return 'Nothing'

    def __str__(self) -> str:
        return 'None'

    # -- inspection --------------------------------------------------------

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        Narrows the type: after checking is_none(), the option is NothingType.
        """
        return True

    def is_some_and[T](self, pred: Callable[[T], bool]) -> bool:  # noqa: ARG002
        """Return False since there is no value to test."""
        return False

    def is_none_or[T](self, pred: Callable[[T], bool]) -> bool:  # noqa: ARG002
        """Return True since there is no value to test."""
        return True

    def iter(self) -> Iterator[Any]:
        """Iterate over nothing."""
        return iter(self)

    def to_optional(self) -> None:
        """Return None."""
        return None

    # -- unwrapping --------------------------------------------------------

    def unwrap(self, error: AbsentError = None) -> NoReturn:
        """Raise since Nothing has no value.

        Args:
            error: None for the default AbsentValueError, a message to append
                to it, or a zero-argument factory returning the exception to raise.

        Raises:
            AbsentValueError: Unless `error` is a factory.
        """
        raise _absent_error('unwrap', error)

    def expect(self, msg: str) -> NoReturn:
        """Raise AbsentValueError with `msg` appended."""
        raise _absent_error('expect', msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Return the result of calling the fallback."""
        return f()

    async def unwrap_or_else_async[T](self, f: Callable[[], Awaitable[T]]) -> T:
        """Return the awaited result of calling the fallback."""
        return await f()

    def raise_if_none(self, error: AbsentError = None) -> NoReturn:
        """Raise as unwrap() does.

        Lets a chain assert presence without unwrapping:

            rate = find_user(name).raise_if_none('no such user').map(rate_for).unwrap()
        """
        raise _absent_error('raise_if_none', error)

    def bail(self) -> NoReturn:
        """Raise Propagate carrying Nothing.

        Inside a function decorated with @returns_option the function
        returns Nothing at this point.
        """
        raise Propagate(self)

    # -- transformation ----------------------------------------------------

    def map[T, U](self, f: Callable[[T], U]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling `f`."""
        return self

    def starmap[U](self, f: Callable[..., U]) -> NothingType:  # noqa: ARG002
        return self

    async def map_async[T, U](self, f: Callable[[T], Awaitable[U]]) -> NothingType:  # noqa: ARG002
        return self

    def flat_map[T, U](self, f: Callable[[T], Some[U] | NothingType]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling `f`."""
        return self

    and_then = flat_map

    async def flat_map_async[T, U](
        self,
        f: Callable[[T], Awaitable[Some[U] | NothingType]],  # noqa: ARG002
    ) -> NothingType:
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there is nothing to flatten."""
        return self

    def filter[T](self, predicate: Callable[[T], bool]) -> NothingType:  # noqa: ARG002
        return self

    # -- matching and side effects ----------------------------------------

    def match[T, U](self, when_some: Callable[[T], U], when_none: U) -> U:  # noqa: ARG002
        """Return `when_none` without calling `when_some`."""
        return when_none

    def match_else[T, U](self, when_some: Callable[[T], U], when_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Return `when_none()` without calling `when_some`."""
        return when_none()

    async def match_async[T, U](
        self,
        when_some: Callable[[T], Awaitable[U]],  # noqa: ARG002
        when_none: Callable[[], Awaitable[U]],
    ) -> U:
        """Return `await when_none()`."""
        return await when_none()

    def match_do[T](self, when_some: Callable[[T], Any], when_none: Callable[[], Any]) -> NothingType:  # noqa: ARG002
        """Call `when_none()` for its side effect and return self."""
        when_none()
        return self

    def do[T](self, action: Callable[[T], Any]) -> NothingType:  # noqa: ARG002
        return self

    def do_if_none(self, action: Callable[[], Any]) -> NothingType:
        """Call `action()` for its side effect and return self."""
        action()
        return self

    # -- logical combination ----------------------------------------------

    def and_[U](self, other: Some[U] | NothingType) -> NothingType:  # noqa: ARG002
        """Return Nothing since self is Nothing."""
        return self

    zip = and_

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return `other` since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the option produced by the fallback."""
        return f()

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return `other`: Some if it is Some, Nothing otherwise."""
        return other

    # -- value equality ----------------------------------------------------

    def value_eq(self, other: object) -> bool:  # noqa: ARG002
        """Return False: Nothing has no value to be equal to, not even Nothing's."""
        return False

    def value_ne(self, other: object) -> bool:  # noqa: ARG002
        """Return True."""
        return True


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
