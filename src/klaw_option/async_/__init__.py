"""Async utilities: AsyncOption and async combinators.

- AsyncOption: wrapper for chaining async Option operations
- async_and_all_lazy: sequential, short-circuiting all-or-nothing over async producers

Examples:
    >>> from klaw_option.async_ import AsyncOption, async_and_all_lazy
    >>>
    >>> async def main():
    ...     name = await AsyncOption(find_user(1)).amap(lambda u: u.name).aunwrap_or('guest')
"""

from klaw_option.async_.combinators import async_and_all_lazy
from klaw_option.async_.option import AsyncOption

__all__ = [
    'AsyncOption',
    'async_and_all_lazy',
]
