"""Decorators: @nullable, @nullable_async and @returns_option."""

from klaw_option.decorators.nullable import nullable, nullable_async
from klaw_option.decorators.returns_option import returns_option

__all__ = [
    'nullable',
    'nullable_async',
    'returns_option',
]
