"""The chain engine: a Step holds one carrier and exposes the combinators.

Each combinator either runs its operation against the current value or, when
the chain has already failed, returns without calling it. The first captured
error is therefore the only one a chain ever records.

``apply``, ``consume`` and ``filter`` keep the value type, so a failure keeps
the last good value around for fallbacks. ``map`` changes the type and drops
the value on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from fntry._capture import captured_types, record
from fntry.carrier import Carrier
from fntry.errors import PredicateNotMatchedError
from fntry.result import Result

if TYPE_CHECKING:
    from fntry.types import Consumer, Predicate, Transformer, UnaryOperator

T = TypeVar("T")
U = TypeVar("U")


class Step(Result[T]):
    """An in-progress chain. Every Step is also a usable Result."""

    __slots__ = ()

    def apply(self, operation: UnaryOperator[T]) -> Step[T]:
        """Replace the value with ``operation(value)``."""
        carrier = self._carrier
        if carrier.failed:
            return self
        try:
            value = operation(carrier.value)  # type: ignore[arg-type]
        except captured_types() as exc:
            record(exc, stage="apply", operation=operation)
            return Step(Carrier.failure(exc, carrier.value))
        return Step(Carrier.healthy(value))

    def consume(self, operation: Consumer[T]) -> Step[T]:
        """Run ``operation(value)`` for its side effect only."""
        carrier = self._carrier
        if carrier.failed:
            return self
        try:
            operation(carrier.value)  # type: ignore[arg-type]
        except captured_types() as exc:
            record(exc, stage="consume", operation=operation)
            return Step(Carrier.failure(exc, carrier.value))
        return self

    def map(self, operation: Transformer[T, U]) -> Result[U]:
        """Transform the value into a new type and end the chain."""
        carrier = self._carrier
        if carrier.failed:
            return Result(Carrier.failure(carrier.error))  # type: ignore[arg-type]
        try:
            value = operation(carrier.value)  # type: ignore[arg-type]
        except captured_types() as exc:
            record(exc, stage="map", operation=operation)
            return Result(Carrier.failure(exc))
        return Result(Carrier.healthy(value))

    def filter(self, predicate: Predicate[T]) -> Step[T]:
        """Fail the chain with ``PredicateNotMatchedError`` unless *predicate* holds."""
        carrier = self._carrier
        if carrier.failed:
            return self
        try:
            matched = predicate(carrier.value)  # type: ignore[arg-type]
        except captured_types() as exc:
            record(exc, stage="filter", operation=predicate)
            return Step(Carrier.failure(exc, carrier.value))
        if matched:
            return self
        mismatch = record(
            PredicateNotMatchedError(carrier.value),
            stage="filter",
            operation=predicate,
        )
        return Step(Carrier.failure(mismatch, carrier.value))

    def get_result(self) -> Result[T]:
        return Result(self._carrier)
