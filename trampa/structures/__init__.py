"""Immutable data structures whose folds run on the trampoline."""

from trampa.structures.linked_list import NIL, Cons, LinkedList, Nil
from trampa.structures.tree import (
    BinaryBranch,
    Leaf,
    Tree,
    UnaryBranch,
    binary_branch,
    leaf,
    unary_branch,
)

__all__ = [
    "NIL",
    "BinaryBranch",
    "Cons",
    "Leaf",
    "LinkedList",
    "Nil",
    "Tree",
    "UnaryBranch",
    "binary_branch",
    "leaf",
    "unary_branch",
]
