"""@returns_option decorator for catching Propagate exceptions."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from klaw_option.option import NothingType, Some
from klaw_option.propagate import Propagate

__all__ = ['returns_option']

P = ParamSpec('P')
T = TypeVar('T')


def returns_option(
    func: Callable[P, Some[T] | NothingType] | Callable[P, Awaitable[Some[T] | NothingType]],
) -> Callable[P, Some[T] | NothingType] | Callable[P, Awaitable[Some[T] | NothingType]]:
    """Decorator that returns Nothing when a .bail() inside the function hits Nothing.

    This gives Rust-like ? operator semantics for Options. Async functions
    are detected and wrapped accordingly.

    Args:
        func: The function to wrap. Must return an Option.

    Returns:
        A wrapped function that catches Propagate and returns the carried Nothing.

    Example:
        ```python
        @returns_option
        def full_name(user_id: int) -> Option[str]:
            user = find_user(user_id).bail()        # returns Nothing early
            middle = user.middle_name_opt().bail()
            return some(f'{user.first} {middle} {user.last}')

        @returns_option
        def first_two(items: list[int]) -> Option[int]:
            with get_at(items, 0) as a, get_at(items, 1) as b:
                return some(a + b)
        ```
    """
    if inspect.iscoroutinefunction(func):

        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[P, Awaitable[Some[T] | NothingType]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Some[T] | NothingType:
            try:
                return await wrapped(*args, **kwargs)
            except Propagate as p:
                return p.value

        return async_wrapper(func)  # type: ignore[return-value]

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, Some[T] | NothingType],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value

    return sync_wrapper(func)  # type: ignore[return-value]
