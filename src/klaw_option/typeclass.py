"""@typeclass decorator: per-type capabilities with runtime dispatch.

Used to express capabilities that only some types have, such as having an
absent representation (see `klaw_option.absent`). The decorated function is
the default instance; `@tc.instance(T)` registers an override for `T` and
its subclasses.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A capability function with registered per-type instances.

    Dispatch is on the type of the first positional argument: an exact
    match wins, then the closest registered base class in the MRO, then the
    default implementation.

    Example:
        ```python
        @typeclass
        def describe(value) -> str:
            return 'thing'

        @describe.instance(int)
        def describe_int(value: int) -> str:
            return 'number'

        describe(3)      # 'number'
        describe(True)   # 'number' (bool is an int)
        describe('x')    # 'thing'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default = default_fn
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for `type_`.

        Args:
            type_: The type (and its subclasses) the implementation applies to.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def has_instance(self, type_: type) -> bool:
        """Return True if an implementation is registered for `type_` or one of its bases."""
        return any(base in self._self_instances for base in type_.__mro__)

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        value_type = type(value)
        if value_type in self._self_instances:
            return self._self_instances[value_type]
        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)
        return self._self_default(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Turn `fn` into a typeclass whose default instance is `fn` itself."""
    return TypeClass(fn)
