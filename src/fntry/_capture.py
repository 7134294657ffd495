"""Capture and escalation helpers shared by steps, results and entry points."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from fntry.config import get_config
from fntry.errors import LiftedError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger = logging.getLogger(__name__)


def captured_types() -> tuple[type[BaseException], ...]:
    """Exception types a chain records instead of propagating."""
    return get_config().capture


def operation_name(operation: object) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def record(exc: BaseException, *, stage: str, operation: object) -> BaseException:
    """Log a captured failure and hand it back for storage on a carrier."""
    if get_config().log_captured:
        logger.debug(
            "%s captured %s from %s: %s",
            stage,
            type(exc).__name__,
            operation_name(operation),
            exc,
        )
    return exc


def lift(operation: Callable[..., T], *args: Any) -> T:
    """Run *operation*, escalating any captured failure to ``LiftedError``."""
    try:
        return operation(*args)
    except captured_types() as exc:
        logger.debug(
            "Escalating %s from %s", type(exc).__name__, operation_name(operation)
        )
        raise LiftedError(exc) from exc
