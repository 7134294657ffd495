"""Present-or-empty wrapper returned by ``get`` and ``Result.as_optional``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fntry.errors import NoValueError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Option(Generic[T]):
    """A value that may be absent.

    ``None`` is never a present value: ``Option.of(None)`` is empty.
    """

    value: T | None = None
    present: bool = False

    @classmethod
    def of(cls, value: T | None) -> Option[T]:
        if value is None:
            return cls.empty()
        return cls(value=value, present=True)

    @classmethod
    def empty(cls) -> Option[Any]:
        return _EMPTY

    def is_present(self) -> bool:
        return self.present

    def is_empty(self) -> bool:
        return not self.present

    def get(self) -> T:
        """Return the value or raise ``NoValueError`` when empty."""
        if not self.present:
            raise NoValueError("Option is empty", hint="Check is_present() first.")
        return self.value  # type: ignore[return-value]

    def or_else(self, other: T) -> T:
        return self.value if self.present else other  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U | None]) -> Option[U]:
        if not self.present:
            return _EMPTY
        return Option.of(fn(self.value))  # type: ignore[arg-type]

    def if_present(self, fn: Callable[[T], Any]) -> None:
        if self.present:
            fn(self.value)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self.present

    def __iter__(self) -> Iterator[T]:
        if self.present:
            yield self.value  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"Option({self.value!r})" if self.present else "Option.empty()"


_EMPTY: Option[Any] = Option()
