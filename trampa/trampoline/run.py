from __future__ import annotations

import logging
from typing import Any, TypeVar

from trampa.trampoline.computation import Bound, Computation, Done
from trampa.trampoline.observability import (
    RunResult,
    RunStats,
    StepObserver,
    StepSnapshot,
)
from trampa.trampoline.step import step

T = TypeVar("T")

logger = logging.getLogger(__name__)


def run_result(
    computation: Computation[T],
    on_step: StepObserver | None = None,
) -> RunResult[T]:
    """Run ``computation`` like ``run``, but report the outcome instead of raising.

    ``on_step`` is called with a ``StepSnapshot`` before every rewrite. An
    exception raised by the computation (or by ``on_step``) is captured in
    ``RunResult.error``; ``RunResult.unwrap()`` re-raises it.
    """

    if not isinstance(computation, Computation):
        raise TypeError(f"run_result expects a Computation; got {type(computation).__name__}")

    steps = 0
    applications = 0
    reassociations = 0
    current: Computation[Any] = computation

    try:
        while isinstance(current, Bound):
            steps += 1
            if isinstance(current.source, Done):
                applications += 1
                kind = "apply"
            else:
                reassociations += 1
                kind = "reassociate"
            if on_step is not None:
                on_step(StepSnapshot(step_count=steps, kind=kind, computation=current))
            current = step(current)
    except Exception as e:
        stats = RunStats(steps=steps, applications=applications, reassociations=reassociations)
        logger.debug("Computation failed at step %d: %r", steps, e, exc_info=e)
        return RunResult(error=e, stats=stats)

    stats = RunStats(steps=steps, applications=applications, reassociations=reassociations)
    logger.debug(
        "Computation finished in %d steps (%d applications, %d reassociations)",
        stats.steps,
        stats.applications,
        stats.reassociations,
    )
    return RunResult(value=current.value, stats=stats)


__all__ = ["run_result"]
