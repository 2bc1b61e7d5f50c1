"""The "has an absent representation" capability.

`some(x)` collapses to `Nothing` when `is_absent(x)` holds. In Python the
native absent representation is `None`; sentinel types from other libraries
can opt in by registering an instance:

    ```python
    from klaw_option.absent import is_absent

    @is_absent.instance(MissingType)
    def _missing_is_absent(value: MissingType) -> bool:
        return True
    ```
"""

from __future__ import annotations

import msgspec

from klaw_option.typeclass import typeclass

__all__ = ['is_absent']


@typeclass
def is_absent(value: object) -> bool:
    """Return True if `value` is an absent representation for its type."""
    return value is None


@is_absent.instance(msgspec.UnsetType)
def _unset_is_absent(value: msgspec.UnsetType) -> bool:
    return True
