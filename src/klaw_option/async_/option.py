"""AsyncOption type for async-aware Option operations.

AsyncOption wraps an Awaitable[Option[T]] and lifts the synchronous
combinators into async chains. Every step awaits the previous option and
then applies exactly the synchronous rule; callbacks and fallbacks run at
most once and only on the branch that is selected.

Example:
    ```python
    async def find_user(name: str) -> Option[User]:
        ...

    greeting = await (
        AsyncOption(find_user('ada'))
        .amap(lambda u: u.display_name)
        .aunwrap_or('guest')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

import anyio

from klaw_option.option import AbsentError, Nothing, NothingType, Option

__all__ = ['AsyncOption']


class AsyncOption[T]:
    """Async-aware Option wrapper for composing async Option operations.

    Methods return new AsyncOption instances, so a chain only runs when the
    final AsyncOption (or the coroutine returned by an `aunwrap*` method) is
    awaited.

    Note:
        AsyncOption is single-shot when wrapping a coroutine object.
        Awaiting it twice raises RuntimeError. Use from_some/from_nothing/
        from_option for reusable values.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Option[T]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        return self._awaitable.__await__()

    @classmethod
    def from_some(cls, value: T | None) -> AsyncOption[T]:
        """Create an AsyncOption of some(value); None collapses to Nothing."""
        from klaw_option.constructors import some

        return cls.from_option(some(value))

    @classmethod
    def from_nothing(cls) -> AsyncOption[T]:
        """Create an AsyncOption of Nothing."""
        return cls.from_option(Nothing)

    @classmethod
    def from_option(cls, option: Option[T]) -> AsyncOption[T]:
        """Create an AsyncOption from a synchronous Option."""

        async def _option() -> Option[T]:
            return option

        return cls(_option())

    # -- transformation ----------------------------------------------------

    def amap[U](self, f: Callable[[T], U]) -> AsyncOption[U]:
        """Apply a sync function to the Some value (see Some.map)."""

        async def _mapped() -> Option[U]:
            return (await self._awaitable).map(f)

        return AsyncOption(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncOption[U]:
        """Apply an async function to the Some value (see Some.map_async)."""

        async def _mapped() -> Option[U]:
            return await (await self._awaitable).map_async(f)

        return AsyncOption(_mapped())

    def aflat_map[U](self, f: Callable[[T], Option[U]]) -> AsyncOption[U]:
        """Chain with a sync function returning an Option."""

        async def _chained() -> Option[U]:
            return (await self._awaitable).flat_map(f)

        return AsyncOption(_chained())

    def aflat_map_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> AsyncOption[U]:
        """Chain with an async function returning an Option.

        Example:
            ```python
            async def load_profile(user: User) -> Option[Profile]:
                ...

            profile = await AsyncOption(find_user('ada')).aflat_map_async(load_profile)
            ```
        """

        async def _chained() -> Option[U]:
            return await (await self._awaitable).flat_map_async(f)

        return AsyncOption(_chained())

    def afilter(self, predicate: Callable[[T], bool]) -> AsyncOption[T]:
        """Keep the value only if `predicate(value)` holds."""

        async def _filtered() -> Option[T]:
            return (await self._awaitable).filter(predicate)

        return AsyncOption(_filtered())

    def ado(self, action: Callable[[T], Any]) -> AsyncOption[T]:
        """Run a side effect on the Some value, passing the option through unchanged."""

        async def _done() -> Option[T]:
            return (await self._awaitable).do(action)

        return AsyncOption(_done())

    # -- logical combination ----------------------------------------------

    def aor(self, other: Option[T]) -> AsyncOption[T]:
        """Fall back to an already-built option when Nothing."""

        async def _or() -> Option[T]:
            return (await self._awaitable).or_(other)

        return AsyncOption(_or())

    def aor_else(self, f: Callable[[], Option[T]]) -> AsyncOption[T]:
        """Fall back to `f()` when Nothing; `f` is not called for Some."""

        async def _or_else() -> Option[T]:
            return (await self._awaitable).or_else(f)

        return AsyncOption(_or_else())

    def aor_else_async(self, f: Callable[[], Awaitable[Option[T]]]) -> AsyncOption[T]:
        """Fall back to `await f()` when Nothing; `f` is not called for Some."""

        async def _or_else() -> Option[T]:
            option = await self._awaitable
            if isinstance(option, NothingType):
                return await f()
            return option

        return AsyncOption(_or_else())

    def aand[U](self, other: AsyncOption[U]) -> AsyncOption[tuple[T, U]]:
        """Combine two AsyncOptions into Some((a, b)).

        Both awaitables run concurrently (both are already-built options, as
        with the eager Some.and_). The result is Some only if both are Some.
        """

        async def _combined() -> Option[tuple[T, U]]:
            first: Option[T] | None = None
            second: Option[U] | None = None

            async with anyio.create_task_group() as tg:

                async def run_self() -> None:
                    nonlocal first
                    first = await self._awaitable

                async def run_other() -> None:
                    nonlocal second
                    second = await other._awaitable

                tg.start_soon(run_self)
                tg.start_soon(run_other)

            assert first is not None
            assert second is not None
            return first.and_(second)

        return AsyncOption(_combined())

    # -- terminal operations -----------------------------------------------

    def aunwrap(self, error: AbsentError = None) -> Coroutine[Any, Any, T]:
        """Await and unwrap; raises as Nothing.unwrap() does."""

        async def _unwrap() -> T:
            return (await self._awaitable).unwrap(error)

        return _unwrap()

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Await and unwrap, returning `default` for Nothing."""

        async def _unwrap() -> T:
            return (await self._awaitable).unwrap_or(default)

        return _unwrap()

    def aunwrap_or_else_async(self, f: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, T]:
        """Await and unwrap, awaiting `f()` only for Nothing."""

        async def _unwrap() -> T:
            return await (await self._awaitable).unwrap_or_else_async(f)

        return _unwrap()

    def amatch_async[U](
        self,
        when_some: Callable[[T], Awaitable[U]],
        when_none: Callable[[], Awaitable[U]],
    ) -> Coroutine[Any, Any, U]:
        """Await the option, then await only the selected branch."""

        async def _matched() -> U:
            return await (await self._awaitable).match_async(when_some, when_none)

        return _matched()

    def __repr__(self) -> str:
        return f'AsyncOption({self._awaitable!r})'
