"""Error types raised at the unwrap boundary of an Option."""

from __future__ import annotations

__all__ = ['DEFAULT_UNWRAP_MESSAGE', 'AbsentValueError']

DEFAULT_UNWRAP_MESSAGE = 'Cannot unwrap Nothing.'


class AbsentValueError(RuntimeError):
    """A value was demanded from Nothing.

    Raised only by the unwrap family (`unwrap`, `expect`, `raise_if_none`).
    Every other Option operation represents absence instead of raising it.

    Attributes:
        detail: The caller-supplied message appended to the default one, if any.
    """

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        if detail:
            super().__init__(f'{DEFAULT_UNWRAP_MESSAGE} {detail}')
        else:
            super().__init__(DEFAULT_UNWRAP_MESSAGE)
