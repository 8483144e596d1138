"""Tests for the @do decorator."""

from __future__ import annotations

import inspect

import pytest
from beartype import beartype
from beartype.roar import BeartypeCallHintParamViolation

from trampa import Computation, ComputationGenerator, ContinuationResultError, do, pure


@do
def add_all(*values: int) -> ComputationGenerator[int]:
    total = 0
    for value in values:
        total += yield pure(value)
    return total


@do
def total(n: int) -> ComputationGenerator[int]:
    if n == 0:
        return 0
    rest = yield total(n - 1)
    return rest + n


def test_do_binds_yielded_computations():
    assert add_all(1, 2, 3).run() == 6


def test_do_returns_a_computation():
    assert isinstance(add_all(), Computation)
    assert add_all().run() == 0


def test_do_is_lazy():
    started = []

    @do
    def program() -> ComputationGenerator[str]:
        started.append(True)
        value = yield pure("x")
        return value * 2

    computation = program()

    assert started == []
    assert computation.run() == "xx"
    assert started == [True]


def test_do_rerun_starts_a_fresh_generator():
    computation = add_all(4, 5)

    assert computation.run() == 9
    assert computation.run() == 9


def test_do_recursion_is_stack_safe(deep):
    assert total(deep).run() == deep * (deep + 1) // 2


def test_do_yielding_plain_value_fails():
    @do
    def program() -> ComputationGenerator[int]:
        value = yield 5
        return value

    with pytest.raises(ContinuationResultError, match="@do generator yield must return a Computation"):
        program().run()


def test_do_errors_propagate():
    @do
    def program() -> ComputationGenerator[int]:
        yield pure(1)
        raise LookupError("gone")

    with pytest.raises(LookupError, match="gone"):
        program().run()


def test_do_non_generator_value_is_lifted():
    @do
    def constant(x: int):
        return x + 1

    assert constant(1).run() == 2


def test_do_non_generator_computation_is_continued():
    @do
    def passthrough(x: int):
        return pure(x).map(lambda v: v * 10)

    assert passthrough(4).run() == 40


def test_do_composes_with_map_and_bind():
    computation = add_all(1, 2).map(lambda x: x * 100).bind(lambda x: add_all(x, 1))
    assert computation.run() == 301


def test_do_preserves_metadata():
    assert total.__name__ == "total"
    assert total.__wrapped__.__name__ == "total"
    assert list(inspect.signature(total).parameters) == ["n"]


def test_do_rejects_non_callable():
    with pytest.raises(TypeError, match="@do expects a callable"):
        do(None)


def test_beartype_checks_arguments_when_run():
    @do
    @beartype
    def typed(x: int) -> ComputationGenerator[int]:
        value = yield pure(x)
        return value + 1

    assert typed(1).run() == 2

    computation = typed("one")
    with pytest.raises(BeartypeCallHintParamViolation):
        computation.run()
