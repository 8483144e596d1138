"""
The do decorator for trampa.

This module provides the @do decorator that turns generator functions into
functions returning Computations, so chains of ``bind`` can be written as
straight-line code.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from functools import partial, wraps
from typing import Any, ParamSpec, TypeVar

from trampa.errors import ContinuationResultError
from trampa.trampoline.computation import Bound, Computation, Done, defer

P = ParamSpec("P")
T = TypeVar("T")

ComputationGenerator = Generator[Computation[Any], Any, T]


def _resume(gen: ComputationGenerator[T], value: Any) -> Computation[T]:
    try:
        yielded = gen.send(value)
    except StopIteration as stop_exc:
        return Done(stop_exc.value)
    if not isinstance(yielded, Computation):
        gen.close()
        raise ContinuationResultError("@do generator yield", yielded)
    return Bound(yielded, partial(_resume, gen))


def do(
    func: Callable[P, ComputationGenerator[T]],
) -> Callable[P, Computation[T]]:
    """
    Decorator that converts a generator function into a Computation factory.

    Inside the generator, ``value = yield computation`` binds ``computation``
    and resumes with its result; ``return value`` finishes the chain.

    Calling the decorated function evaluates nothing. The generator is created
    when the driver reaches the returned Computation, so every ``run`` starts
    a fresh generator and recursion through decorated functions is stack safe:

        @do
        def total(n: int) -> ComputationGenerator[int]:
            if n == 0:
                return 0
            rest = yield total(n - 1)
            return rest + n

        total(100_000).run()  # 5000050000

    A decorated function that is not a generator function may return a plain
    value (lifted with ``pure``) or a Computation (continued as is).

    Args:
        func: A generator function that yields Computations and returns T

    Returns:
        A function with the same signature returning ``Computation[T]``.
    """

    if func is None or not callable(func):
        raise TypeError(f"@do expects a callable; got {type(func).__name__}")

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Computation[T]:
        def start() -> Computation[T]:
            gen_or_value = func(*args, **kwargs)
            if inspect.isgenerator(gen_or_value):
                return _resume(gen_or_value, None)
            return Computation.lift(gen_or_value)

        return defer(start)

    return wrapper


__all__ = ["ComputationGenerator", "do"]
