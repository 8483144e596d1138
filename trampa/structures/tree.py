"""
Trees with leaf, unary and binary nodes, and their left folds.

``fold_left_recursive`` is the textbook recursive fold and overflows the stack
on deep trees; ``fold_left`` computes the same result on the trampoline.
Leaves are visited left to right.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from trampa.trampoline import Computation

A = TypeVar("A")
B = TypeVar("B")


class Tree(Generic[A]):
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Leaf(Tree[A]):
    value: A


@dataclass(frozen=True, slots=True, eq=False)
class UnaryBranch(Tree[A]):
    child: Tree[A]


@dataclass(frozen=True, slots=True, eq=False)
class BinaryBranch(Tree[A]):
    left: Tree[A]
    right: Tree[A]


def leaf(value: A) -> Tree[A]:
    return Leaf(value)


def unary_branch(child: Tree[A]) -> Tree[A]:
    return UnaryBranch(child)


def binary_branch(left: Tree[A], right: Tree[A]) -> Tree[A]:
    return BinaryBranch(left, right)


def fold_left_recursive(tree: Tree[A], reduce: Callable[[B, A], B], init: B) -> B:
    if isinstance(tree, Leaf):
        return reduce(init, tree.value)
    if isinstance(tree, UnaryBranch):
        return fold_left_recursive(tree.child, reduce, init)
    if isinstance(tree, BinaryBranch):
        left_acc = fold_left_recursive(tree.left, reduce, init)
        return fold_left_recursive(tree.right, reduce, left_acc)
    raise TypeError(f"Expected a Tree; got {type(tree).__name__}")


def fold_left_computation(
    tree: Tree[A], reduce: Callable[[B, A], B], init: B
) -> Computation[B]:
    if isinstance(tree, Leaf):
        return Computation.pure(reduce(init, tree.value))
    if isinstance(tree, UnaryBranch):
        child = tree.child
        return Computation.defer(lambda: fold_left_computation(child, reduce, init))
    if isinstance(tree, BinaryBranch):
        left, right = tree.left, tree.right
        left_acc = Computation.defer(lambda: fold_left_computation(left, reduce, init))
        return left_acc.bind(lambda acc: fold_left_computation(right, reduce, acc))
    raise TypeError(f"Expected a Tree; got {type(tree).__name__}")


def fold_left(tree: Tree[A], reduce: Callable[[B, A], B], init: B) -> B:
    return fold_left_computation(tree, reduce, init).run()


__all__ = [
    "BinaryBranch",
    "Leaf",
    "Tree",
    "UnaryBranch",
    "binary_branch",
    "fold_left",
    "fold_left_computation",
    "fold_left_recursive",
    "leaf",
    "unary_branch",
]
