"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: value types to push through chains and
recorders that count how often an operation ran.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class Boom(Exception):
    """Marker error raised by failing operations in tests."""


@dataclass(frozen=True)
class Bar:
    field_value: int = 0


@dataclass(frozen=True)
class Foo:
    dummy_value: int = 0

    def copy(self) -> Foo:
        return Foo(self.dummy_value)

    def to_bar(self, value: int) -> Bar:
        return Bar(value)

    def to_bar_same_value(self) -> Bar:
        return Bar(self.dummy_value)

    def to_bar_exceptionally(self) -> Bar:
        raise Boom("cannot convert")


def raise_boom(*_args: Any) -> Any:
    raise Boom("boom")


@dataclass
class Recorder:
    """Callable double that records its arguments.

    Set ``error`` to make every call raise it after recording.
    """

    result: Any = None
    error: BaseException | None = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.calls)
