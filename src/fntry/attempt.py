"""Entry points that start a chain.

Instead of nesting try blocks around each fallible call::

    try:
        config = load(path)
    except OSError:
        config = None
    ...

start a chain and decide what to do with a failure once, at the end::

    config = of(lambda: load(path)).apply(validate).or_else(DEFAULTS)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from fntry._capture import captured_types, lift, record
from fntry.carrier import Carrier
from fntry.errors import LiftedError, MissingOperationError
from fntry.option import Option
from fntry.result import Result
from fntry.step import Step

if TYPE_CHECKING:
    from fntry.types import Action, Supplier

T = TypeVar("T")


def identity(value: T) -> T:
    """No-op operation, handy as a placeholder in ``apply``/``map``."""
    return value


def empty() -> Result[None]:
    """A healthy result with no value."""
    return Result(Carrier.empty())


def failed(error: BaseException) -> Step[Any]:
    """A chain that has already failed with *error* and holds no value."""
    return Step(Carrier.failure(error))


def with_(value: T) -> Step[T]:
    """Start a healthy chain holding *value*."""
    return Step(Carrier.healthy(value))


def with_supplier(supplier: Supplier[T] | None) -> Step[T]:
    """Start a chain from the result of *supplier*, called immediately."""
    return _start(supplier, entry_point="with_supplier")


def of(operation: Supplier[T] | None = None) -> Step[T]:
    """Start a chain from a fallible operation.

    A missing operation yields a failed chain holding
    ``MissingOperationError``.
    """
    return _start(operation, entry_point="of")


def just(action: Action | None = None) -> Result[None]:
    """Run *action* for its side effect and report how it went."""
    if action is None:
        return failed(MissingOperationError("just")).get_result()
    try:
        action()
    except captured_types() as exc:
        return failed(record(exc, stage="just", operation=action)).get_result()
    return empty()


def get(operation: Supplier[T] | None = None) -> Option[T]:
    """Run *operation* and return its value as an Option; failures give empty."""
    if operation is None:
        return Option.empty()
    try:
        return Option.of(operation())
    except captured_types() as exc:
        record(exc, stage="get", operation=operation)
        return Option.empty()


def lifted(operation: Supplier[T] | None) -> T:
    """Return ``operation()`` or raise ``LiftedError`` wrapping its failure.

    For call sites that treat the failure as unrecoverable.
    """
    if operation is None:
        missing = MissingOperationError("lifted")
        raise LiftedError(missing) from missing
    return lift(operation)


def _start(operation: Supplier[T] | None, *, entry_point: str) -> Step[T]:
    if operation is None:
        return failed(MissingOperationError(entry_point))
    try:
        value = operation()
    except captured_types() as exc:
        return failed(record(exc, stage=entry_point, operation=operation))
    return with_(value)
