"""
trampa - Stack-safe deferred computations for Python.

Recursive algorithms written against ``Computation`` build their "next step"
as data instead of as a pending stack frame. ``run`` then evaluates the chain
iteratively, in constant stack space, no matter how deep it is or in which
direction it was nested.

Example:
    >>> from trampa import Computation
    >>>
    >>> def total(n: int) -> Computation[int]:
    ...     if n == 0:
    ...         return Computation.pure(0)
    ...     return Computation.defer(lambda: total(n - 1).map(lambda acc: acc + n))
    >>>
    >>> total(100_000).run()
    5000050000
"""

from trampa.do import ComputationGenerator, do
from trampa.errors import (
    ContinuationResultError,
    InvalidContinuationError,
    SealedComputationError,
)
from trampa.trampoline import (
    Bound,
    Computation,
    Done,
    RunResult,
    RunStats,
    StepKind,
    StepSnapshot,
    defer,
    pure,
    run,
    run_result,
    step,
)
from trampa.utils import CreationContext

__version__ = "0.1.0"

__all__ = [
    "Bound",
    "Computation",
    "ComputationGenerator",
    "ContinuationResultError",
    "CreationContext",
    "Done",
    "InvalidContinuationError",
    "RunResult",
    "RunStats",
    "SealedComputationError",
    "StepKind",
    "StepSnapshot",
    "defer",
    "do",
    "pure",
    "run",
    "run_result",
    "step",
]
