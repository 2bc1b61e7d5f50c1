"""klaw-option: a Rust-inspired Option type for Python 3.13+.

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing, some, none, some_if
    from klaw_option import and_all, and_all_lazy, get_key, get_at, map_unwrap

Submodule imports (for organization):
    from klaw_option.option import Some, Nothing, Option
    from klaw_option.adapters import first_or_nothing, last_or_nothing
    from klaw_option.async_ import AsyncOption
    from klaw_option.decorators import nullable, returns_option
"""

# Types
from klaw_option.option import AbsentError, Nothing, NothingType, Option, Some

# Constructors and equality helpers
from klaw_option.constructors import (
    equivalent,
    flatten,
    none,
    pure,
    some,
    some_if,
    some_if_lazy,
    some_if_not_null,
    value_eq,
    value_ne,
)

# All-or-nothing combinators
from klaw_option.combinators import and_all, and_all_lazy

# Adapters
from klaw_option.adapters import (
    FilterMapUnwrap,
    count_if_sized,
    filter_map_unwrap,
    first_or_nothing,
    get_at,
    get_key,
    last_or_nothing,
    map_unwrap,
)

# Absent-value capability
from klaw_option.absent import is_absent

# Errors and propagation
from klaw_option.errors import AbsentValueError
from klaw_option.propagate import Propagate

# Decorators
from klaw_option.decorators import nullable, nullable_async, returns_option

# Async
from klaw_option.async_ import AsyncOption, async_and_all_lazy

# Configuration and logging
from klaw_option._config import OptionConfig, get_config, init
from klaw_option._logging import configure_logging, get_logger

__all__ = [
    'AbsentError',
    'AbsentValueError',
    'AsyncOption',
    'FilterMapUnwrap',
    'Nothing',
    'NothingType',
    'Option',
    'OptionConfig',
    'Propagate',
    'Some',
    'and_all',
    'and_all_lazy',
    'async_and_all_lazy',
    'configure_logging',
    'count_if_sized',
    'equivalent',
    'filter_map_unwrap',
    'first_or_nothing',
    'flatten',
    'get_at',
    'get_config',
    'get_key',
    'get_logger',
    'init',
    'is_absent',
    'last_or_nothing',
    'map_unwrap',
    'none',
    'pure',
    'nullable',
    'nullable_async',
    'returns_option',
    'some',
    'some_if',
    'some_if_lazy',
    'some_if_not_null',
    'value_eq',
    'value_ne',
]
