"""Propagate exception for the .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Raised by `Nothing.bail()` to carry Nothing up the call stack.

    Caught by the `@returns_option` decorator, which returns the carried value.
    Not an error: it is control flow, hence no "Error" suffix.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The value being propagated."""
        return self._value
