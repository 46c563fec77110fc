"""Programmer-error faults raised by extraction on the wrong variant."""

from __future__ import annotations

from typing import Any

__all__ = ['UnwrapError']


class UnwrapError(RuntimeError):
    """Extraction was called on a variant that does not hold the requested payload.

    This is a bug in the calling code, not a represented failure. Containers
    never raise it for ordinary control flow and never recover from it;
    use the default-supplying extractors (``unwrap_or``, ``unwrap_or_else``)
    or the predicates when absence or failure is expected.

    Attributes:
        payload: The value held by the variant that was actually present
            (the error of an ``Err``, the value of an ``Ok``, ``None`` for
            ``Empty``).
    """

    __slots__ = ('_payload',)

    def __init__(self, message: str, payload: Any = None) -> None:
        self._payload = payload
        super().__init__(message)

    @property
    def payload(self) -> Any:
        """The payload of the variant that was present."""
        return self._payload
