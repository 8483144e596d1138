from trampa.trampoline.computation import Bound, Computation, Done, defer, pure
from trampa.trampoline.observability import (
    RunResult,
    RunStats,
    StepKind,
    StepObserver,
    StepSnapshot,
)
from trampa.trampoline.run import run_result
from trampa.trampoline.step import run, step

__all__ = [
    "Bound",
    "Computation",
    "Done",
    "RunResult",
    "RunStats",
    "StepKind",
    "StepObserver",
    "StepSnapshot",
    "defer",
    "pure",
    "run",
    "run_result",
    "step",
]
