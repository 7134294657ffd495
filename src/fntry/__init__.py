"""fntry: chain fallible operations and handle failure once, at the end.

Public API:
    - with_(), with_supplier(), of(): Start a chain (a Step)
    - just(): Run a side effect and get a Result
    - get(): Run an operation and get an Option
    - lifted(): Run an operation, escalating failure to LiftedError
    - Step / Result: Combinators and fallback strategies
    - Config: Capture and logging configuration
"""

from __future__ import annotations

import logging

from fntry.attempt import (
    empty,
    failed,
    get,
    identity,
    just,
    lifted,
    of,
    with_,
    with_supplier,
)
from fntry.carrier import Carrier
from fntry.config import Config, configured, get_config, set_config
from fntry.errors import (
    ConfigurationError,
    FntryError,
    InternalError,
    LiftedError,
    MissingOperationError,
    NoValueError,
    PredicateNotMatchedError,
)
from fntry.option import Option
from fntry.result import FallbackStrategy, Result
from fntry.step import Step

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fntry")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fntry").addHandler(logging.NullHandler())

__all__ = [
    "Carrier",
    "Config",
    "ConfigurationError",
    "FallbackStrategy",
    "FntryError",
    "InternalError",
    "LiftedError",
    "MissingOperationError",
    "NoValueError",
    "Option",
    "PredicateNotMatchedError",
    "Result",
    "Step",
    "configured",
    "empty",
    "failed",
    "get",
    "get_config",
    "identity",
    "just",
    "lifted",
    "of",
    "set_config",
    "with_",
    "with_supplier",
]
