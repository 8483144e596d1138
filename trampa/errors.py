"""Exception types raised by trampa."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trampa.utils import CreationContext


class InvalidContinuationError(TypeError):
    """Raised when a computation is built with a missing or non-callable function.

    This is a construction-time error: it is raised by the call that builds the
    offending node (``bind``, ``map``, ``defer`` or ``Bound(...)``), never later
    by ``run``.

    Attributes:
        role: What the callable was supposed to be ("continuation", "thunk", ...).
        value: The object that was passed instead.
    """

    def __init__(self, role: str, value: Any) -> None:
        self.role = role
        self.value = value
        if value is None:
            message = f"{role} is required; got None"
        else:
            message = f"{role} must be callable; got {type(value).__name__}"
        super().__init__(message)


class ContinuationResultError(TypeError):
    """Raised when a continuation or thunk returns something that is not a Computation.

    Example:
        >>> Computation.pure(1).bind(lambda x: x + 1).run()  # forgot Computation.pure
        Traceback (most recent call last):
        ...
        ContinuationResultError: continuation must return a Computation; got int
    """

    def __init__(
        self,
        role: str,
        result: Any,
        created_at: CreationContext | None = None,
    ) -> None:
        self.role = role
        self.result = result
        self.created_at = created_at
        message = f"{role} must return a Computation; got {type(result).__name__}"
        if created_at is not None:
            message += f"\n  bound at {created_at.format()}"
            if created_at.code:
                message += f"\n    {created_at.code}"
        super().__init__(message)


class SealedComputationError(TypeError):
    """Raised when code outside trampa tries to add a Computation variant."""

    def __init__(self, cls: type) -> None:
        self.cls = cls
        super().__init__(
            f"Computation is sealed; {cls.__module__}.{cls.__qualname__} cannot subclass it. "
            "Build computations with Computation.pure/defer/bind instead."
        )


__all__ = [
    "ContinuationResultError",
    "InvalidContinuationError",
    "SealedComputationError",
]
