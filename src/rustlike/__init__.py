"""rustlike: Option and Result containers for Python 3.13+.

Flat imports (preferred):
    from rustlike import Option, Some, Empty, some, empty
    from rustlike import Result, Ok, Err, success, failure
    from rustlike import try_catch, result_from_deferred, option_from_deferred, safe

Submodule imports (for organization):
    from rustlike.option import Some, Empty, Option
    from rustlike.result import Ok, Err, Result
    from rustlike.adapters import try_catch, safe
"""

# Configuration and logging
from rustlike._config import Config, configure, get_config
from rustlike._logging import configure_logging, get_logger

# Boundary adapters
from rustlike.adapters import (
    option_from_deferred,
    result_from_deferred,
    safe,
    safe_async,
    try_catch,
)

# Errors
from rustlike.errors import UnwrapError

# Option types
from rustlike.option import (
    Empty,
    EmptyType,
    Option,
    Some,
    collect_options,
    empty,
    is_empty,
    is_occupied,
    option_from_nullable,
    some,
)

# Result types
from rustlike.result import (
    Err,
    Ok,
    Result,
    collect_results,
    failure,
    is_failure,
    is_success,
    success,
)

__all__ = [
    'Config',
    'Empty',
    'EmptyType',
    'Err',
    'Ok',
    'Option',
    'Result',
    'Some',
    'UnwrapError',
    'collect_options',
    'collect_results',
    'configure',
    'configure_logging',
    'empty',
    'failure',
    'get_config',
    'get_logger',
    'is_empty',
    'is_failure',
    'is_occupied',
    'is_success',
    'option_from_deferred',
    'option_from_nullable',
    'result_from_deferred',
    'safe',
    'safe_async',
    'some',
    'success',
    'try_catch',
]
