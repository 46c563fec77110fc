"""Library configuration: which exceptions the adapters capture, and logging."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from rustlike._logging import configure_logging

__all__ = [
    'Config',
    'configure',
    'get_config',
    'reset_config',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Config:
    """Configuration for rustlike.

    Attributes:
        capture: Exception types turned into Err/Empty by the boundary
            adapters when no explicit ``exceptions`` argument is given.
            Anything else propagates.
        log_level: Logging level for the ``rustlike`` loggers (e.g. "DEBUG").
            None = silent.
    """

    capture: tuple[type[BaseException], ...] = (Exception,)
    log_level: str | None = None


# Current configuration (set by configure(), or lazily from the environment)
_config: Config | None = None


def _validate_capture(capture: tuple[type[BaseException], ...]) -> tuple[type[BaseException], ...]:
    capture = tuple(capture)
    if not capture:
        msg = 'capture must name at least one exception type'
        raise TypeError(msg)
    for exc_type in capture:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f'capture entries must be exception types, got {exc_type!r}'
            raise TypeError(msg)
    return capture


def _detect_log_level() -> str | None:
    """Read the logging level from RUSTLIKE_LOG_LEVEL, if set."""
    env_level = os.environ.get('RUSTLIKE_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.getLogger('rustlike').warning("Unknown RUSTLIKE_LOG_LEVEL value '%s', logging stays silent", env_level)
        return None
    return env_level


def _validate_log_level(log_level: str | None) -> str | None:
    if log_level is None:
        return None
    level = log_level.upper()
    if level not in _LEVELS:
        msg = f'log_level must be one of {", ".join(_LEVELS)}, got {log_level!r}'
        raise ValueError(msg)
    return level


def configure(
    capture: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
) -> Config:
    """Set the library configuration.

    Args:
        capture: Exception types captured by the adapters. Defaults to
            ``(Exception,)``.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The Config that was set.

    Raises:
        TypeError: If ``capture`` is empty or holds something other than
            exception types.
        ValueError: If ``log_level`` is not a known logging level.

    Example:
        ```python
        from rustlike import configure, try_catch

        configure(capture=(ValueError,), log_level='DEBUG')
        try_catch(lambda: int('x'))  # Err(error=ValueError(...))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_capture = _validate_capture(capture) if capture is not None else (Exception,)
    resolved_level = _validate_log_level(log_level)

    _config = Config(capture=resolved_capture, log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    The first call without a prior ``configure()`` builds the default,
    honouring ``RUSTLIKE_LOG_LEVEL``.
    """
    if _config is None:
        return configure(log_level=_detect_log_level())
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next ``get_config()`` rebuilds it."""
    global _config  # noqa: PLW0603
    _config = None
