"""Terminal view of a chain and the fallback strategies available on it."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from fntry._capture import captured_types, lift, record
from fntry.option import Option

if TYPE_CHECKING:
    from fntry.carrier import Carrier
    from fntry.types import Action, Consumer, ErrorHandler, Supplier, UnaryOperator

T = TypeVar("T")


class FallbackStrategy(Protocol[T]):
    """Ways to extract a value, or react, once a chain may have failed."""

    def or_else(self, other: T) -> T: ...

    def or_else_consume(self, action: Consumer[T | None]) -> None: ...

    def or_simply(self, action: Action) -> None: ...

    def or_else_get(self, supplier: Supplier[T]) -> T: ...

    def or_then(self, operation: UnaryOperator[T | None]) -> T | None: ...

    def otherwise(self, handler: ErrorHandler) -> None: ...


class Result(Generic[T]):
    """Read-only outcome of a chain.

    Produced by ``Step.get_result()``, ``Step.map()`` and ``just()``. Every
    ``Step`` is also a ``Result``, so fallbacks can be applied mid-chain.

    Example:
        name = of(lambda: load_user(uid)).map(lambda u: u.name).or_else("guest")
    """

    __slots__ = ("_carrier",)

    def __init__(self, carrier: Carrier[T]) -> None:
        self._carrier = carrier

    # --- Observation -----------------------------------------------------

    @property
    def failed(self) -> bool:
        return self._carrier.failed

    def is_failed(self) -> bool:
        return self._carrier.failed

    def get_exception(self) -> BaseException | None:
        """Return the first error the chain captured, if any."""
        return self._carrier.error

    def get(self) -> T | None:
        """Return the held value; may be a retained value on a failed chain."""
        return self._carrier.value

    def as_optional(self) -> Option[T]:
        """Wrap the held value regardless of failure state."""
        return Option.of(self._carrier.value)

    # --- Fallback strategies ---------------------------------------------

    def or_else(self, other: T) -> T:
        if self._carrier.failed:
            return other
        return self._carrier.value  # type: ignore[return-value]

    def or_else_previous(self) -> T | None:
        """Return the last good value whether or not the chain failed."""
        return self._carrier.value

    def or_else_consume(self, action: Consumer[T | None]) -> None:
        """On failure, hand the retained value to *action*.

        Raises:
            LiftedError: If *action* itself fails.
        """
        if self._carrier.failed:
            lift(action, self._carrier.value)

    def or_simply(self, action: Action) -> None:
        if self._carrier.failed:
            action()

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """Like ``or_else`` but builds the fallback only when needed.

        Raises:
            LiftedError: If *supplier* fails.
        """
        if self._carrier.failed:
            return lift(supplier)
        return self._carrier.value  # type: ignore[return-value]

    def or_then(self, operation: UnaryOperator[T | None]) -> T | None:
        """On failure, recover from the retained value; best effort.

        Returns None when *operation* itself fails.
        """
        value = self._carrier.value
        if not self._carrier.failed:
            return value
        try:
            return operation(value)
        except captured_types() as exc:
            record(exc, stage="or_then", operation=operation)
            return None

    def otherwise(self, handler: ErrorHandler) -> None:
        if self._carrier.failed:
            handler(self._carrier.error)  # type: ignore[arg-type]

    # --- Dunder helpers --------------------------------------------------

    def __bool__(self) -> bool:
        return not self._carrier.failed

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._carrier.failed:
            return f"{name}(failed={self._carrier.error!r}, value={self._carrier.value!r})"
        return f"{name}({self._carrier.value!r})"
