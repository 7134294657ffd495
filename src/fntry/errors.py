"""Exception hierarchy for fntry."""

from __future__ import annotations

from typing import Any


class FntryError(Exception):
    """Base exception for all fntry errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FntryError):
    """Configuration validation failed."""


class InternalError(FntryError):
    """An fntry internal error (bug) or invariant violation."""


class MissingOperationError(FntryError):
    """An entry point was called without an operation to run."""

    def __init__(self, entry_point: str) -> None:
        super().__init__(
            f"No operation supplied to {entry_point}()",
            hint="Pass a callable; None is recorded as a failed chain.",
        )
        self.entry_point = entry_point


class PredicateNotMatchedError(FntryError):
    """A ``filter`` predicate rejected the current value.

    The rejected value stays available on the chain and on ``value``.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(f"Predicate not matched for value {value!r}")
        self.value = value


class NoValueError(FntryError):
    """An empty Option was asked for its value."""


class LiftedError(FntryError):
    """A recoverable failure escalated to a fatal one.

    Raised by ``lifted`` and by fallbacks that must not fail
    (``or_else_consume``, ``or_else_get``). The original exception is
    available as ``cause`` and as ``__cause__``.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause
