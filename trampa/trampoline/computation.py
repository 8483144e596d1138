"""
Computation type for the trampa trampoline.

A Computation is a lazily evaluated, possibly very long chain of steps. It has
exactly two shapes:

- ``Done(value)``: the chain is finished and holds its result.
- ``Bound(source, continuation)``: evaluate ``source`` first, then feed its
  result to ``continuation`` to obtain the rest of the chain.

Building a Computation never evaluates anything; ``run`` (see
``trampa.trampoline.step``) reduces it to its value in constant stack space.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Generic, TypeVar

from trampa.errors import InvalidContinuationError, SealedComputationError
from trampa.utils import CreationContext, capture_creation_context

T = TypeVar("T")
U = TypeVar("U")

_VARIANTS = frozenset({"Done", "Bound"})


def _require_callable(value: Any, role: str) -> None:
    if value is None or not callable(value):
        raise InvalidContinuationError(role, value)


class Computation(Generic[T]):
    """A deferred computation producing a value of type ``T``.

    The only subclasses are ``Done`` and ``Bound``; the driver relies on that
    being exhaustive, so further subclassing is rejected.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise SealedComputationError(cls)

    def map(self, transform: Callable[[T], U]) -> Computation[U]:
        """Transform the eventual result with a plain function.

        ``transform`` runs as an ordinary call when the driver reaches it. If it
        needs deep recursion itself, express it with ``bind`` instead.
        """

        _require_callable(transform, "transform")

        def apply_transform(value: T) -> Computation[U]:
            return Done(transform(value))

        return Bound(self, apply_transform, created_at=capture_creation_context())

    def bind(self, continuation: Callable[[T], Computation[U]]) -> Computation[U]:
        """Sequence ``continuation`` after this computation (monadic bind)."""

        return Bound(self, continuation, created_at=capture_creation_context())

    def flat_map(self, continuation: Callable[[T], Computation[U]]) -> Computation[U]:
        """Alias for ``bind``."""

        return Bound(self, continuation, created_at=capture_creation_context())

    def run(self) -> T:
        """Evaluate this computation to completion and return its value."""

        from trampa.trampoline.step import run

        return run(self)

    @staticmethod
    def pure(value: U) -> Computation[U]:
        return Done(value)

    @staticmethod
    def of(value: U) -> Computation[U]:
        return Done(value)

    @staticmethod
    def defer(thunk: Callable[[], Computation[U]]) -> Computation[U]:
        """Delay calling ``thunk`` until the driver reaches this node."""

        _require_callable(thunk, "thunk")
        return Bound(_UNIT, partial(_call_thunk, thunk), created_at=capture_creation_context())

    @staticmethod
    def suspend(thunk: Callable[[], Computation[U]]) -> Computation[U]:
        """Alias for ``defer``."""

        _require_callable(thunk, "thunk")
        return Bound(_UNIT, partial(_call_thunk, thunk), created_at=capture_creation_context())

    @staticmethod
    def lift(value: Computation[U] | U) -> Computation[U]:
        if isinstance(value, Computation):
            return value
        return Done(value)

    @staticmethod
    def flatten(nested: Computation[Computation[U]]) -> Computation[U]:
        """Collapse a computation whose result is itself a computation."""

        if not isinstance(nested, Computation):
            raise TypeError(f"flatten expects a Computation; got {type(nested).__name__}")
        return Bound(nested, _identity, created_at=capture_creation_context())

    @staticmethod
    def sequence(computations: Iterable[Computation[U]]) -> Computation[list[U]]:
        """Run ``computations`` in order and collect their results in a list.

        Each run collects into a fresh list.
        """

        items = tuple(computations)
        for item in items:
            if not isinstance(item, Computation):
                raise TypeError(
                    f"sequence expects Computation items; got {type(item).__name__}"
                )

        def collect() -> Computation[list[U]]:
            chain: Computation[list[U]] = Done([])
            for item in items:
                chain = Bound(chain, partial(_collect_into, item))
            return chain

        return Bound(_UNIT, partial(_call_thunk, collect), created_at=capture_creation_context())

    @staticmethod
    def traverse(
        items: Iterable[T],
        func: Callable[[T], Computation[U]],
    ) -> Computation[list[U]]:
        _require_callable(func, "func")
        return Computation.sequence([func(item) for item in items])


@dataclass(frozen=True, slots=True)
class Done(Computation[T]):
    """A finished computation holding its result."""

    value: T


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Bound(Computation[T]):
    """Evaluate ``source``, then continue with ``continuation(result)``.

    The intermediate result type of ``source`` is erased to ``Any``. Bound nodes
    compare by identity; their repr does not descend into ``source`` so that
    deeply nested chains can still be printed.
    """

    source: Computation[Any]
    continuation: Callable[[Any], Computation[T]]
    created_at: CreationContext | None = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.source, Computation):
            raise TypeError(
                f"Bound source must be a Computation; got {type(self.source).__name__}"
            )
        _require_callable(self.continuation, "continuation")

    def __repr__(self) -> str:
        return f"Bound(source=<{type(self.source).__name__}>, continuation={self.continuation!r})"


_UNIT: Done[None] = Done(None)


def _call_thunk(thunk: Callable[[], Computation[T]], _: Any) -> Computation[T]:
    return thunk()


def _identity(value: Computation[T]) -> Computation[T]:
    return value


def _collect_into(item: Computation[T], collected: list[T]) -> Computation[list[T]]:
    def append(value: T) -> Computation[list[T]]:
        collected.append(value)
        return Done(collected)

    return Bound(item, append)


def pure(value: T) -> Computation[T]:
    """Module-level shorthand for ``Computation.pure``."""

    return Done(value)


def defer(thunk: Callable[[], Computation[T]]) -> Computation[T]:
    """Module-level shorthand for ``Computation.defer``."""

    _require_callable(thunk, "thunk")
    return Bound(_UNIT, partial(_call_thunk, thunk), created_at=capture_creation_context())


__all__ = [
    "Bound",
    "Computation",
    "Done",
    "defer",
    "pure",
]
