"""
Singly linked list with stack-safe folds.

Both folds are written as direct recursion over the tail, but every recursive
call goes through ``Computation.defer`` so that folding a list of any length
uses constant stack space.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from trampa.trampoline import Computation

A = TypeVar("A")
B = TypeVar("B")


class LinkedList(Generic[A]):
    """Immutable cons list: either ``Nil`` or ``Cons(head, tail)``."""

    __slots__ = ()

    @staticmethod
    def from_iterable(values: Iterable[A]) -> LinkedList[A]:
        result: LinkedList[A] = NIL
        for value in reversed(list(values)):
            result = Cons(value, result)
        return result

    def fold_left(self, reduce: Callable[[B, A], B], init: B) -> B:
        return self.fold_left_computation(reduce, init).run()

    def fold_left_computation(
        self, reduce: Callable[[B, A], B], init: B
    ) -> Computation[B]:
        if isinstance(self, Cons):
            head, tail = self.head, self.tail
            return Computation.defer(
                lambda: tail.fold_left_computation(reduce, reduce(init, head))
            )
        return Computation.pure(init)

    def fold_right(self, reduce: Callable[[A, B], B], init: B) -> B:
        return self.fold_right_computation(reduce, init).run()

    def fold_right_computation(
        self, reduce: Callable[[A, B], B], init: B
    ) -> Computation[B]:
        if isinstance(self, Cons):
            head, tail = self.head, self.tail
            return Computation.defer(
                lambda: tail.fold_right_computation(reduce, init).map(
                    lambda folded: reduce(head, folded)
                )
            )
        return Computation.pure(init)

    def size(self) -> int:
        return self.fold_left(lambda count, _: count + 1, 0)

    def to_list(self) -> list[A]:
        def append(acc: list[A], value: A) -> list[A]:
            acc.append(value)
            return acc

        return self.fold_left(append, [])


@dataclass(frozen=True, slots=True)
class Nil(LinkedList[A]):
    pass


# eq=False: structural equality would recurse once per element
@dataclass(frozen=True, slots=True, eq=False)
class Cons(LinkedList[A]):
    head: A
    tail: LinkedList[A]


NIL: Nil = Nil()


__all__ = ["NIL", "Cons", "LinkedList", "Nil"]
