"""
Pytest configuration for trampa tests.

Provides the deep-chain size used by the stack-safety tests and a helper that
measures native stack depth, so tests can check that evaluation depth does not
grow with chain length.
"""

from __future__ import annotations

import sys
from collections.abc import Callable

import pytest

# Far beyond the interpreter's default recursion limit (1000).
DEEP = 100_000

# Rock-paper-scissors "best of" table: RPS_BEST_OF[a][b] is the winner of a vs b.
# It is not associative, which makes it a good probe for the associativity law:
#   RPS_BEST_OF[RPS_BEST_OF[0][1]][2] == 2
#   RPS_BEST_OF[0][RPS_BEST_OF[1][2]] == 0
RPS_BEST_OF = (
    (0, 1, 0),
    (1, 1, 2),
    (0, 2, 2),
)


def current_stack_depth() -> int:
    frame = sys._getframe(1)
    depth = 0
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@pytest.fixture
def deep() -> int:
    return DEEP


@pytest.fixture
def rps_best_of() -> tuple[tuple[int, ...], ...]:
    return RPS_BEST_OF


@pytest.fixture
def stack_depth() -> Callable[[], int]:
    """Return a function reporting the caller's native stack depth."""

    return current_stack_depth
