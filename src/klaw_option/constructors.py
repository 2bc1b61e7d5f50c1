"""Option constructors and free-function helpers.

These are the supported ways to produce an Option:

    none()                          -> Nothing
    some(value)                     -> Some(value), or Nothing if value is absent
    some_if(condition, value)       -> some(value) if condition else Nothing
    some_if_lazy(condition, fn)     -> some(fn()) if condition else Nothing
    some_if_not_null(value)         -> some(value), named for None-returning APIs
    pure                            -> some itself, as a T -> Option[T] function

The module also hosts the free-function forms of flatten and of the two
equality relations.
"""

from __future__ import annotations

from collections.abc import Callable

from klaw_option.option import Nothing, NothingType, Option, Some, _wrap

__all__ = [
    'equivalent',
    'flatten',
    'none',
    'pure',
    'some',
    'some_if',
    'some_if_lazy',
    'some_if_not_null',
    'value_eq',
    'value_ne',
]


def none[T]() -> Option[T]:
    """Return Nothing."""
    return Nothing


def some[T](value: T | None) -> Option[T]:
    """Wrap `value` in Some, collapsing absent values to Nothing.

    Args:
        value: The value to wrap.

    Returns:
        Nothing if `value` is absent (None, msgspec.UNSET, or a registered
        absent type), Some(value) otherwise.

    Examples:
        >>> some(42)
        Some(42)
        >>> some(None)
        Nothing
    """
    return _wrap(value)


def some_if[T](condition: bool, value: T | None) -> Option[T]:  # noqa: FBT001
    """Return some(value) if `condition` holds, Nothing otherwise.

    `value` is evaluated by the caller either way; use some_if_lazy() when
    computing it is expensive or has side effects.
    """
    if condition:
        return _wrap(value)
    return Nothing


def some_if_lazy[T](condition: bool, producer: Callable[[], T | None]) -> Option[T]:  # noqa: FBT001
    """Return some(producer()) if `condition` holds, Nothing otherwise.

    `producer` is not called when `condition` is false.

    Example:
        >>> some_if_lazy(user.is_admin, lambda: load_permissions(user))
    """
    if condition:
        return _wrap(producer())
    return Nothing


def some_if_not_null[T](value: T | None) -> Option[T]:
    """Adapt the result of a None-returning API into an Option.

    Same as some(); the name documents intent at the boundary.

    Example:
        >>> some_if_not_null(os.environ.get('HOME'))
    """
    return _wrap(value)


def flatten[T](option: Option[Option[T]]) -> Option[T]:
    """Collapse Option[Option[T]] into Option[T].

    Nothing and Some(Nothing) both give Nothing; Some(Some(v)) gives Some(v).
    """
    return option.flatten()


def equivalent(left: Option[object], right: Option[object]) -> bool:
    """Full equivalence: Nothing is equivalent to Nothing, Some(a) to Some(b) iff a == b.

    Same relation as `==` and consistent with hash().
    """
    if isinstance(left, NothingType):
        return isinstance(right, NothingType)
    return isinstance(right, Some) and left.value == right.value


def value_eq(left: Option[object], right: Option[object]) -> bool:
    """Value equality: True only when both are Some with equal values.

    `value_eq(Nothing, Nothing)` is False.
    """
    return left.value_eq(right)


def value_ne(left: Option[object], right: Option[object]) -> bool:
    """Negation of value_eq(): `value_ne(Nothing, Nothing)` is True."""
    return not left.value_eq(right)


pure = some
"""The `value -> Option` unit, for composing option-returning functions.

    >>> Some(3).flat_map(pure)
    Some(3)
"""
