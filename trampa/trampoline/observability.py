"""
Execution observability for the trampa driver.

Public API:
    - StepKind: Literal type for the two driver rewrites
    - StepSnapshot: The node about to be rewritten, passed to ``on_step``
    - RunStats: Counters collected over a whole run
    - RunResult: Outcome of ``run_result`` (value or captured error, plus stats)

Example usage (callback-based):
    def log_step(snapshot: StepSnapshot):
        print(f"Step {snapshot.step_count}: {snapshot.kind}")

    result = run_result(my_computation, on_step=log_step)
    print(result.stats.reassociations)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, Literal, TypeVar, cast

if TYPE_CHECKING:
    from trampa.trampoline.computation import Bound

T = TypeVar("T")

# "apply": Bound(Done(x), k) -> k(x)
# "reassociate": Bound(Bound(m, f), g) -> Bound(m, x -> Bound(f(x), g))
StepKind = Literal["apply", "reassociate"]


@dataclass(frozen=True)
class StepSnapshot:
    """
    The node the driver is about to rewrite.

    Attributes:
        step_count: 1-based index of this step within the run.
        kind: Which rewrite is about to happen.
        computation: The Bound node being rewritten.
    """

    step_count: int
    kind: StepKind
    computation: Bound[Any]


@dataclass(frozen=True)
class RunStats:
    steps: int = 0
    applications: int = 0
    reassociations: int = 0


@dataclass
class RunResult(Generic[T]):
    value: T | None = None
    error: BaseException | None = None
    stats: RunStats = field(default_factory=RunStats)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)


StepObserver = Callable[[StepSnapshot], None]


__all__ = [
    "RunResult",
    "RunStats",
    "StepKind",
    "StepObserver",
    "StepSnapshot",
]
