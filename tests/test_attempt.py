"""Entry points: starting chains, side-effect runs, options and lifting."""

from __future__ import annotations

import pytest

from fntry import (
    LiftedError,
    MissingOperationError,
    Option,
    Result,
    Step,
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
from tests.helpers import Boom, Foo, Recorder, raise_boom

pytestmark = pytest.mark.unit


# =============================================================================
# with_ / with_supplier / of
# =============================================================================


def test_with_starts_healthy_chain() -> None:
    step = with_(Foo(1))

    assert isinstance(step, Step)
    assert not step.is_failed()
    assert step.get_exception() is None
    assert step.get() == Foo(1)


def test_with_accepts_none_as_empty_value() -> None:
    step = with_(None)

    assert not step.is_failed()
    assert step.as_optional().is_empty()


def test_with_keeps_callables_as_values() -> None:
    step = with_(raise_boom)

    assert not step.is_failed()
    assert step.get() is raise_boom


def test_with_supplier_evaluates_immediately() -> None:
    supplier = Recorder(result=Foo(2))

    step = with_supplier(supplier)

    assert supplier.call_count == 1
    assert step.get() == Foo(2)


def test_with_supplier_failure_starts_failed_chain_with_empty_value() -> None:
    step = with_supplier(raise_boom)

    assert step.is_failed()
    assert step.get() is None
    assert isinstance(step.get_exception(), Boom)


def test_of_success_is_healthy() -> None:
    result = of(Foo).apply(identity).get_result()

    assert not result.is_failed()
    assert isinstance(result.get(), Foo)


def test_of_failure_falls_back() -> None:
    assert of(raise_boom).consume(Recorder()).or_else(Foo(2)) == Foo(2)


def test_of_without_operation_is_missing_operation_failure() -> None:
    consumer = Recorder()

    result = of(None).consume(consumer)

    assert result.is_failed()
    assert result.get() is None
    assert isinstance(result.get_exception(), MissingOperationError)
    assert result.get_exception().entry_point == "of"
    assert consumer.call_count == 0


def test_of_with_no_argument_is_missing_operation_failure() -> None:
    assert isinstance(of().get_exception(), MissingOperationError)


def test_with_supplier_none_is_missing_operation_failure() -> None:
    error = with_supplier(None).get_exception()

    assert isinstance(error, MissingOperationError)
    assert error.entry_point == "with_supplier"


# =============================================================================
# just
# =============================================================================


def test_just_success_is_empty_healthy_result() -> None:
    action = Recorder()

    result = just(action)

    assert isinstance(result, Result)
    assert not isinstance(result, Step)
    assert action.call_count == 1
    assert not result.is_failed()
    assert result.get() is None


def test_just_failure_captures_error() -> None:
    error = Boom("close failed")

    result = just(Recorder(error=error))

    assert result.is_failed()
    assert result.get_exception() is error


def test_just_does_not_raise_on_failure() -> None:
    just(raise_boom)


def test_just_without_action_is_missing_operation_failure() -> None:
    result = just(None)

    assert result.is_failed()
    assert type(result.get_exception()) is MissingOperationError


# =============================================================================
# get
# =============================================================================


def test_get_returns_present_option_on_success() -> None:
    option = get("a".upper)

    assert isinstance(option, Option)
    assert option.get() == "A"


def test_get_returns_empty_option_on_failure() -> None:
    assert get(raise_boom).is_empty()


def test_get_returns_empty_option_without_operation() -> None:
    assert get(None).is_empty()
    assert get().is_empty()


def test_get_failure_supports_fallback_value() -> None:
    assert get(raise_boom).or_else(Foo(20)) == Foo(20)


# =============================================================================
# lifted
# =============================================================================


def test_lifted_returns_value_on_success() -> None:
    assert lifted(lambda: Foo(3)) == Foo(3)


def test_lifted_raises_wrapping_error() -> None:
    with pytest.raises(LiftedError) as exc_info:
        lifted(raise_boom)

    assert isinstance(exc_info.value.cause, Boom)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_lifted_without_operation_raises_wrapping_missing_operation() -> None:
    with pytest.raises(LiftedError) as exc_info:
        lifted(None)

    assert isinstance(exc_info.value.cause, MissingOperationError)


# =============================================================================
# empty / failed / identity
# =============================================================================


def test_empty_is_healthy_without_value() -> None:
    result = empty()

    assert not result.is_failed()
    assert result.get() is None


def test_failed_starts_chain_in_failed_state() -> None:
    error = Boom("pre-failed")

    step = failed(error)

    assert step.is_failed()
    assert step.get_exception() is error
    assert step.or_else("fallback") == "fallback"


def test_identity_returns_argument() -> None:
    marker = object()

    assert identity(marker) is marker
