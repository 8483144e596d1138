"""
Fixed-point iteration loops.

Each loop is written as self-recursion: "if the solution is good enough return
it, otherwise improve it and try again". The ``*_recursive`` forms recurse on
the native stack and fail once the iteration count passes the interpreter's
recursion limit. The ``*_computation`` forms express the same recursion as
Computations, and the plain names (``simple_optimize``, ``prepare``,
``prepared_optimize``) run those, so any number of iterations is fine.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from trampa.trampoline import Computation

A = TypeVar("A")

Predicate = Callable[[A], bool]
Improve = Callable[[A], A]


def simple_optimize_recursive(is_solved: Predicate[A], next_solution: Improve[A], solution: A) -> A:
    if is_solved(solution):
        return solution
    return simple_optimize_recursive(is_solved, next_solution, next_solution(solution))


def simple_optimize_computation(
    is_solved: Predicate[A], next_solution: Improve[A], solution: A
) -> Computation[A]:
    if is_solved(solution):
        return Computation.pure(solution)
    return Computation.defer(
        lambda: simple_optimize_computation(is_solved, next_solution, next_solution(solution))
    )


def simple_optimize(is_solved: Predicate[A], next_solution: Improve[A], solution: A) -> A:
    """Apply ``next_solution`` until ``is_solved`` holds, then return the solution."""

    return simple_optimize_computation(is_solved, next_solution, solution).run()


def prepare_recursive(is_prepared: Predicate[A], calc_prepared: Improve[A], solution: A) -> A:
    if is_prepared(solution):
        return solution
    return prepare_recursive(is_prepared, calc_prepared, calc_prepared(solution))


def prepare_computation(
    is_prepared: Predicate[A], calc_prepared: Improve[A], solution: A
) -> Computation[A]:
    if is_prepared(solution):
        return Computation.pure(solution)
    return Computation.defer(
        lambda: prepare_computation(is_prepared, calc_prepared, calc_prepared(solution))
    )


def prepare(is_prepared: Predicate[A], calc_prepared: Improve[A], solution: A) -> A:
    return prepare_computation(is_prepared, calc_prepared, solution).run()


def prepared_optimize_recursive(
    is_prepared: Predicate[A],
    calc_prepared: Improve[A],
    is_solved: Predicate[A],
    next_solution: Improve[A],
    solution: A,
) -> A:
    if is_solved(solution):
        return solution
    prepared = prepare_recursive(is_prepared, calc_prepared, solution)
    return prepared_optimize_recursive(
        is_prepared,
        calc_prepared,
        is_solved,
        next_solution,
        next_solution(prepared),
    )


def prepared_optimize_computation(
    is_prepared: Predicate[A],
    calc_prepared: Improve[A],
    is_solved: Predicate[A],
    next_solution: Improve[A],
    solution: A,
) -> Computation[A]:
    if is_solved(solution):
        return Computation.pure(solution)
    return prepare_computation(is_prepared, calc_prepared, solution).bind(
        lambda prepared: prepared_optimize_computation(
            is_prepared,
            calc_prepared,
            is_solved,
            next_solution,
            next_solution(prepared),
        )
    )


def prepared_optimize(
    is_prepared: Predicate[A],
    calc_prepared: Improve[A],
    is_solved: Predicate[A],
    next_solution: Improve[A],
    solution: A,
) -> A:
    """Like ``simple_optimize``, but bring the solution into the prepared state
    (``calc_prepared`` until ``is_prepared``) before every improvement step."""

    return prepared_optimize_computation(
        is_prepared, calc_prepared, is_solved, next_solution, solution
    ).run()


__all__ = [
    "prepare",
    "prepare_computation",
    "prepare_recursive",
    "prepared_optimize",
    "prepared_optimize_computation",
    "prepared_optimize_recursive",
    "simple_optimize",
    "simple_optimize_computation",
    "simple_optimize_recursive",
]
