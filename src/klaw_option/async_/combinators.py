"""Async form of the lazy all-or-nothing combinator."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from klaw_option.combinators import _check_arity
from klaw_option.option import Nothing, NothingType, Option, Some

__all__ = ['async_and_all_lazy']


async def async_and_all_lazy(*producers: Callable[[], Awaitable[Option[Any]]]) -> Option[tuple[Any, ...]]:
    """Await option producers one at a time, left to right.

    Same contract as and_all_lazy: producer k is called (and awaited) only if
    producers 1..k-1 all produced Some. Producers never run concurrently.

    Args:
        *producers: Two to eight zero-argument async functions returning options.

    Returns:
        Some((v1, ..., vn)) if every producer gave Some, Nothing otherwise.

    Example:
        ```python
        pair = await async_and_all_lazy(
            lambda: fetch_user(user_id),
            lambda: fetch_account(account_id),
        )
        ```
    """
    _check_arity('async_and_all_lazy', len(producers))
    values: list[Any] = []
    for producer in producers:
        opt = await producer()
        if isinstance(opt, NothingType):
            return Nothing
        values.append(opt.value)
    return Some(tuple(values))
