"""The value/error/failed triple behind every Step and Result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fntry.errors import InternalError

T = TypeVar("T")


@dataclass(frozen=True)
class Carrier(Generic[T]):
    """Immutable chain state.

    ``value`` is the last good value (``None`` means empty). A failed carrier
    may still hold the value that was current when the failure happened.
    """

    value: T | None = None
    error: BaseException | None = None
    failed: bool = False

    def __post_init__(self) -> None:
        """Reject carriers that break the failed/error pairing."""
        if self.failed and self.error is None:
            raise InternalError("A failed carrier must record its error")
        if not self.failed and self.error is not None:
            raise InternalError(
                f"A healthy carrier cannot hold an error, got {self.error!r}"
            )

    @classmethod
    def healthy(cls, value: T | None) -> Carrier[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException, value: Any = None) -> Carrier[Any]:
        return cls(value=value, error=error, failed=True)

    @classmethod
    def empty(cls) -> Carrier[Any]:
        return _EMPTY


_EMPTY: Carrier[Any] = Carrier()
