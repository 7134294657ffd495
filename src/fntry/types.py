"""Operation shapes accepted by chains.

Every operation is a plain callable. Failure is signalled by raising; there
is no per-operation error type to declare.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")

#: Zero-argument producer, e.g. the first operation of a chain.
Supplier = Callable[[], T]
#: One-argument side effect; the return value is ignored.
Consumer = Callable[[T], Any]
#: One-argument transformer that may change the value type.
Transformer = Callable[[T], U]
#: One-argument transformer that keeps the value type.
UnaryOperator = Callable[[T], T]
#: Zero-argument side effect.
Action = Callable[[], Any]
Predicate = Callable[[T], bool]
ErrorHandler = Callable[[BaseException], Any]

__all__ = [
    "Action",
    "Consumer",
    "ErrorHandler",
    "Predicate",
    "Supplier",
    "T",
    "Transformer",
    "U",
    "UnaryOperator",
]
