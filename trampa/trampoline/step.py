"""Driver for the trampa trampoline: single-step rewrite and the ``run`` loop."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from trampa.errors import ContinuationResultError
from trampa.trampoline.computation import Bound, Computation, Done
from trampa.utils import CreationContext

T = TypeVar("T")


def _expect_computation(
    result: Any, created_at: CreationContext | None
) -> Computation[Any]:
    if not isinstance(result, Computation):
        raise ContinuationResultError("continuation", result, created_at)
    return result


def _reassociate(
    inner: Callable[[Any], Computation[Any]],
    inner_created_at: CreationContext | None,
    outer: Callable[[Any], Computation[T]],
    outer_created_at: CreationContext | None,
) -> Callable[[Any], Computation[T]]:
    def composed(value: Any) -> Computation[T]:
        return Bound(_expect_computation(inner(value), inner_created_at), outer, outer_created_at)

    return composed


def step(computation: Computation[T]) -> Computation[T]:
    """Perform one rewrite of ``computation``.

    - ``Done`` is returned unchanged.
    - ``Bound(Done(x), k)`` becomes ``k(x)``.
    - ``Bound(Bound(m, f), g)`` becomes ``Bound(m, x -> Bound(f(x), g))`` without
      calling ``f`` or ``g``.

    Each rewrite does a constant amount of work and never recurses into
    ``source``, which is what keeps ``run`` at constant stack depth for chains
    nested in either direction.
    """

    if isinstance(computation, Done):
        return computation
    if not isinstance(computation, Bound):
        raise TypeError(f"step expects a Computation; got {type(computation).__name__}")

    source = computation.source
    if isinstance(source, Done):
        return _expect_computation(computation.continuation(source.value), computation.created_at)

    return Bound(
        source.source,
        _reassociate(
            source.continuation,
            source.created_at,
            computation.continuation,
            computation.created_at,
        ),
        source.created_at,
    )


def run(computation: Computation[T]) -> T:
    """Evaluate ``computation`` to its final value.

    Exceptions raised by continuations, transforms or thunks propagate
    unchanged.
    """

    if not isinstance(computation, Computation):
        raise TypeError(f"run expects a Computation; got {type(computation).__name__}")

    current: Computation[Any] = computation
    while isinstance(current, Bound):
        current = step(current)
    return current.value


__all__ = ["run", "step"]
