"""Configuration: Frozen Config controlling what a chain captures and logs."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fntry.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator

load_dotenv()

_LOG_CAPTURED_ENV_VAR = "FNTRY_LOG_CAPTURED"
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class Config:
    """Immutable configuration for fntry chains.

    ``capture`` decides which exceptions a chain records as failures; anything
    outside it propagates out of the combinator untouched. ``log_captured`` is
    auto-resolved from ``FNTRY_LOG_CAPTURED`` when left as *None*.

    Example:
        set_config(Config(capture=(ValueError, OSError)))
    """

    capture: tuple[type[BaseException], ...] = field(default=(Exception,))
    #: Emit a DEBUG record for every captured failure.
    log_captured: bool | None = None

    def __post_init__(self) -> None:
        """Resolve environment defaults and validate configuration."""
        if not isinstance(self.capture, tuple) or not self.capture:
            raise ConfigurationError(
                f"capture must be a non-empty tuple, got {self.capture!r}",
                hint="Use e.g. capture=(Exception,) to record ordinary errors.",
            )
        for exc_type in self.capture:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                raise ConfigurationError(
                    f"capture entries must be exception classes, got {exc_type!r}",
                    hint="Pass classes such as ValueError, not instances or strings.",
                )

        if self.log_captured is None:
            raw = os.environ.get(_LOG_CAPTURED_ENV_VAR)
            resolved = True if raw is None else _parse_flag(raw)
            object.__setattr__(self, "log_captured", resolved)

    def captures(self, exc: BaseException) -> bool:
        """Return True when *exc* should be recorded on a chain."""
        return isinstance(exc, self.capture)


def _parse_flag(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid {_LOG_CAPTURED_ENV_VAR} value: {raw!r}",
        hint="Use one of 1/0, true/false, yes/no, on/off.",
    )


_current: Config | None = None


def get_config() -> Config:
    """Return the active configuration, building the default on first use."""
    global _current
    if _current is None:
        _current = Config()
    return _current


def set_config(config: Config | None) -> None:
    """Replace the active configuration; *None* restores the defaults lazily."""
    global _current
    if config is not None and not isinstance(config, Config):
        raise ConfigurationError(
            f"Expected a Config instance, got {type(config).__name__}",
            hint="Build one with fntry.Config(...).",
        )
    _current = config


@contextmanager
def configured(config: Config) -> Iterator[Config]:
    """Temporarily activate *config*, restoring the previous one on exit."""
    global _current
    previous = _current
    set_config(config)
    try:
        yield config
    finally:
        _current = previous
