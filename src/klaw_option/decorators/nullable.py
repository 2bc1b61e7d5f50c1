"""@nullable and @nullable_async: adapt None-returning functions to Option."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from klaw_option.option import Nothing, NothingType, Some, _wrap

__all__ = ['nullable', 'nullable_async']

P = ParamSpec('P')
T = TypeVar('T')


@overload
def nullable[**P, T](
    func: Callable[P, T | None],
) -> Callable[P, Some[T] | NothingType]: ...


@overload
def nullable(
    func: None = None,
    *,
    absent_on: tuple[type[BaseException], ...] = (),
) -> Callable[[Callable[P, T | None]], Callable[P, Some[T] | NothingType]]: ...


def nullable[**P, T](
    func: Callable[P, T | None] | None = None,
    *,
    absent_on: tuple[type[BaseException], ...] = (),
) -> Any:
    """Decorator that turns a `T | None` return into an Option.

    The return value goes through some(), so None (or any other absent value)
    becomes Nothing. Exceptions listed in `absent_on` are also read as
    absence; anything else propagates.

    Can be used with or without arguments:
        @nullable
        def find(name): ...

        @nullable(absent_on=(KeyError,))
        def lookup(key): ...

    Args:
        func: The function to wrap (when used without parentheses).
        absent_on: Exception types that mean "no value".

    Returns:
        A wrapped function that returns Option[T] instead of T | None.

    Example:
        ```python
        getenv = nullable(os.environ.get)
        getenv('HOME')
        # Some('/home/ada')
        getenv('NO_SUCH_VARIABLE')
        # Nothing
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        try:
            value = wrapped(*args, **kwargs)
        except absent_on:
            return Nothing
        return _wrap(value)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def nullable_async[**P, T](
    func: Callable[P, Awaitable[T | None]],
) -> Callable[P, Awaitable[Some[T] | NothingType]]: ...


@overload
def nullable_async(
    func: None = None,
    *,
    absent_on: tuple[type[BaseException], ...] = (),
) -> Callable[[Callable[P, Awaitable[T | None]]], Callable[P, Awaitable[Some[T] | NothingType]]]: ...


def nullable_async[**P, T](
    func: Callable[P, Awaitable[T | None]] | None = None,
    *,
    absent_on: tuple[type[BaseException], ...] = (),
) -> Any:
    """Async form of @nullable.

    Example:
        ```python
        @nullable_async
        async def fetch_user(user_id: int) -> User | None:
            return await db.get(User, user_id)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T | None]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Some[T] | NothingType:
        try:
            value = await wrapped(*args, **kwargs)
        except absent_on:
            return Nothing
        return _wrap(value)

    if func is not None:
        return wrapper(func)
    return wrapper
