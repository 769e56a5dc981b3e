# scalargrad/core/var.py
from __future__ import annotations
from typing import List, Optional

from .node import Node, Op
from .tape import Tape


class Var:
    """
    Handle to one node of a tape.

    A Var holds no numbers itself: value, gradient and provenance live in the
    tape record it points to. Two Vars are equal when they point at the same
    record, so a Var can be used as a dict key or set member for identity-based
    deduplication.

    Attributes
    ----------
    tape  : Tape
        Arena the node lives in.
    index : int
        Stable handle of the node in `tape`.
    """

    __slots__ = ("tape", "index")

    def __init__(self, tape: Tape, index: int):
        self.tape = tape
        self.index = index

    @property
    def node(self) -> Node:
        return self.tape.nodes[self.index]

    @property
    def value(self) -> float:
        return self.node.value

    @property
    def grad(self) -> float:
        return self.node.grad

    @grad.setter
    def grad(self, g: float):
        self.node.grad = g

    @property
    def op(self) -> Op:
        return self.node.op

    @property
    def label(self) -> Optional[str]:
        return self.node.label

    @label.setter
    def label(self, name: Optional[str]):
        self.node.label = name

    @property
    def operands(self) -> List["Var"]:
        return [Var(self.tape, h) for h in self.node.operands]

    def __eq__(self, other):
        return isinstance(other, Var) and self.tape is other.tape and self.index == other.index

    def __hash__(self):
        return hash((id(self.tape), self.index))

    def __repr__(self):
        return (f"Var(value={self.value!r}, grad={self.grad!r}, op={self.op.name}, "
                f"label={self.label!r})")

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)
