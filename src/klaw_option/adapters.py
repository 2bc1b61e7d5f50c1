"""Adapters from ambiguous absence conventions to Option.

Python signals absence in several ways: StopIteration or an empty loop,
KeyError, IndexError (or silent negative indexing), and None returns.
These adapters turn each of them into Nothing, and reduce iterables of
options.

Examples:
    >>> first_or_nothing([])
    Nothing
    >>> get_key({'a': 1}, 'z')
    Nothing
    >>> get_at([10, 20], -1)
    Nothing
    >>> map_unwrap([some(0), some(1), some(2)])
    Some([0, 1, 2])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Reversible, Sequence, Sized

from klaw_option.option import Nothing, NothingType, Option, Some, _wrap

__all__ = [
    'FilterMapUnwrap',
    'count_if_sized',
    'filter_map_unwrap',
    'first_or_nothing',
    'get_at',
    'get_key',
    'last_or_nothing',
    'map_unwrap',
]

_MISSING = object()


def first_or_nothing[T](
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
) -> Option[T]:
    """Return the first element (matching `predicate`, if given).

    Stops consuming `iterable` at the first match.

    Args:
        iterable: The elements to search.
        predicate: Optional filter; the first element it accepts is returned.

    Returns:
        some(element) for the first match, Nothing if the iterable is empty
        or nothing matches.
    """
    for item in iterable:
        if predicate is None or predicate(item):
            return _wrap(item)
    return Nothing


def last_or_nothing[T](
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
) -> Option[T]:
    """Return the last element (matching `predicate`, if given).

    Reversible inputs (lists, tuples, ranges, dicts...) are searched from the
    end and stop at the first match; other iterables are scanned fully.
    """
    if isinstance(iterable, Reversible):
        return first_or_nothing(reversed(iterable), predicate)

    last: object = _MISSING
    for item in iterable:
        if predicate is None or predicate(item):
            last = item
    if last is _MISSING:
        return Nothing
    return _wrap(last)  # type: ignore[arg-type]


def get_key[K, V](mapping: Mapping[K, V], key: K) -> Option[V]:
    """Look up `key` without raising KeyError.

    Uses a membership test first, so a defaultdict is never populated by the
    lookup.
    """
    if key in mapping:
        return _wrap(mapping[key])
    return Nothing


def get_at[T](sequence: Sequence[T], index: int) -> Option[T]:
    """Return the element at `index` if `0 <= index < len(sequence)`.

    Negative indices give Nothing rather than counting from the end.
    """
    if 0 <= index < len(sequence):
        return _wrap(sequence[index])
    return Nothing


def count_if_sized(iterable: Iterable[object]) -> Option[int]:
    """Return the number of elements when it is known without iterating.

    Returns:
        Some(len(iterable)) for Sized collections, Nothing for iterators,
        generators and other lazy views whose size would require consuming them.
    """
    if isinstance(iterable, Sized):
        return Some(len(iterable))
    return Nothing


def map_unwrap[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn an iterable of options into Some of the list of their values.

    Stops at the first Nothing and returns Nothing; the values gathered so far
    are dropped.
    """
    values: list[T] = []
    for opt in options:
        if isinstance(opt, NothingType):
            return Nothing
        values.append(opt.value)
    return Some(values)


class FilterMapUnwrap[T]:
    """Lazy iterable over the values of the Some elements of `options`.

    Each iteration re-iterates the source, so the result can be iterated again
    exactly when the source can.
    """

    __slots__ = ('_options',)

    def __init__(self, options: Iterable[Option[T]]) -> None:
        self._options = options

    def __iter__(self) -> Iterator[T]:
        for opt in self._options:
            if isinstance(opt, Some):
                yield opt.value

    def __repr__(self) -> str:
        return f'FilterMapUnwrap({self._options!r})'


def filter_map_unwrap[T](options: Iterable[Option[T]]) -> FilterMapUnwrap[T]:
    """Return a lazy iterable of the values of the Some elements, skipping Nothing."""
    return FilterMapUnwrap(options)
