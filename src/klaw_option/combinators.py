"""All-or-nothing combinators over 2 to 8 options.

    and_all(opt1, opt2, ...)          -> Some((v1, v2, ...)) iff every option is Some
    and_all_lazy(fn1, fn2, ...)       -> same, calling the producers left to right
                                         and stopping at the first Nothing

Both are implemented once for every arity; the overloads only exist so type
checkers can infer the tuple type.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from klaw_option.option import Nothing, NothingType, Option, Some

__all__ = ['MAX_ARITY', 'MIN_ARITY', 'and_all', 'and_all_lazy']

MIN_ARITY = 2
MAX_ARITY = 8

T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
T6 = TypeVar('T6')
T7 = TypeVar('T7')
T8 = TypeVar('T8')


def _check_arity(name: str, count: int) -> None:
    if not MIN_ARITY <= count <= MAX_ARITY:
        msg = f'{name}() takes {MIN_ARITY} to {MAX_ARITY} arguments ({count} given)'
        raise TypeError(msg)


# Overloads for type inference (2 to 8 options)
@overload
def and_all(opt1: Option[T1], opt2: Option[T2], /) -> Option[tuple[T1, T2]]: ...
@overload
def and_all(opt1: Option[T1], opt2: Option[T2], opt3: Option[T3], /) -> Option[tuple[T1, T2, T3]]: ...
@overload
def and_all(
    opt1: Option[T1], opt2: Option[T2], opt3: Option[T3], opt4: Option[T4], /
) -> Option[tuple[T1, T2, T3, T4]]: ...
@overload
def and_all(
    opt1: Option[T1],
    opt2: Option[T2],
    opt3: Option[T3],
    opt4: Option[T4],
    opt5: Option[T5],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5]]: ...
@overload
def and_all(
    opt1: Option[T1],
    opt2: Option[T2],
    opt3: Option[T3],
    opt4: Option[T4],
    opt5: Option[T5],
    opt6: Option[T6],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5, T6]]: ...
@overload
def and_all(
    opt1: Option[T1],
    opt2: Option[T2],
    opt3: Option[T3],
    opt4: Option[T4],
    opt5: Option[T5],
    opt6: Option[T6],
    opt7: Option[T7],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5, T6, T7]]: ...
@overload
def and_all(
    opt1: Option[T1],
    opt2: Option[T2],
    opt3: Option[T3],
    opt4: Option[T4],
    opt5: Option[T5],
    opt6: Option[T6],
    opt7: Option[T7],
    opt8: Option[T8],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5, T6, T7, T8]]: ...


def and_all(*options: Option[Any]) -> Option[tuple[Any, ...]]:
    """Combine already-built options into Some of a tuple of their values.

    Every option is checked before any value is read; a single Nothing makes
    the whole result Nothing.

    Args:
        *options: Two to eight options.

    Returns:
        Some((v1, ..., vn)) if every option is Some, Nothing otherwise.

    Raises:
        TypeError: If fewer than two or more than eight options are given.

    Example:
        ```python
        and_all(some(1), some(True))
        # Some((1, True))

        and_all(some(1), Nothing, some('x'))
        # Nothing
        ```
    """
    _check_arity('and_all', len(options))
    if any(isinstance(opt, NothingType) for opt in options):
        return Nothing
    return Some(tuple(opt.value for opt in options))  # type: ignore[union-attr]


# Overloads for type inference (2 to 8 producers)
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]], fn2: Callable[[], Option[T2]], /
) -> Option[tuple[T1, T2]]: ...
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]], fn2: Callable[[], Option[T2]], fn3: Callable[[], Option[T3]], /
) -> Option[tuple[T1, T2, T3]]: ...
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]],
    fn2: Callable[[], Option[T2]],
    fn3: Callable[[], Option[T3]],
    fn4: Callable[[], Option[T4]],
    /,
) -> Option[tuple[T1, T2, T3, T4]]: ...
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]],
    fn2: Callable[[], Option[T2]],
    fn3: Callable[[], Option[T3]],
    fn4: Callable[[], Option[T4]],
    fn5: Callable[[], Option[T5]],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5]]: ...
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]],
    fn2: Callable[[], Option[T2]],
    fn3: Callable[[], Option[T3]],
    fn4: Callable[[], Option[T4]],
    fn5: Callable[[], Option[T5]],
    fn6: Callable[[], Option[T6]],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5, T6]]: ...
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]],
    fn2: Callable[[], Option[T2]],
    fn3: Callable[[], Option[T3]],
    fn4: Callable[[], Option[T4]],
    fn5: Callable[[], Option[T5]],
    fn6: Callable[[], Option[T6]],
    fn7: Callable[[], Option[T7]],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5, T6, T7]]: ...
@overload
def and_all_lazy(
    fn1: Callable[[], Option[T1]],
    fn2: Callable[[], Option[T2]],
    fn3: Callable[[], Option[T3]],
    fn4: Callable[[], Option[T4]],
    fn5: Callable[[], Option[T5]],
    fn6: Callable[[], Option[T6]],
    fn7: Callable[[], Option[T7]],
    fn8: Callable[[], Option[T8]],
    /,
) -> Option[tuple[T1, T2, T3, T4, T5, T6, T7, T8]]: ...


def and_all_lazy(*producers: Callable[[], Option[Any]]) -> Option[tuple[Any, ...]]:
    """Call option producers left to right, stopping at the first Nothing.

    Producer k is called only if producers 1..k-1 all returned Some, so later
    producers may rely on the side effects of earlier ones, and expensive
    producers are skipped once the result is known to be Nothing.

    Args:
        *producers: Two to eight zero-argument functions returning options.

    Returns:
        Some((v1, ..., vn)) if every producer returned Some, Nothing otherwise.

    Raises:
        TypeError: If fewer than two or more than eight producers are given.

    Example:
        ```python
        and_all_lazy(
            lambda: find_user(name),
            lambda: load_profile(name),  # not called if the user is missing
        )
        ```
    """
    _check_arity('and_all_lazy', len(producers))
    values: list[Any] = []
    for producer in producers:
        opt = producer()
        if isinstance(opt, NothingType):
            return Nothing
        values.append(opt.value)
    return Some(tuple(values))
