# scalargrad/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Op(Enum):
    """
    Closed set of operations a node can record.

    Each member carries (symbol, arity):
      - symbol : short display string ("+", "*"); empty for leaves
      - arity  : number of operands the node must hold
    """
    LEAF = ("", 0)
    ADD = ("+", 2)
    MUL = ("*", 2)

    def __init__(self, symbol: str, arity: int):
        self.symbol = symbol
        self.arity = arity


@dataclass
class Node:
    """
    One record in the tape arena.

    Attributes
    ----------
    value    : float
        Forward value, computed eagerly when the node is pushed. Never changes.
    op       : Op
        Operation tag; selects the local gradient rule.
    operands : Tuple[int, ...]
        Tape handles of the operands, in order (left, right).
    grad     : float
        Accumulator for d(root)/d(this node). Starts at 0.0.
    label    : Optional[str]
        Display name only.
    """
    value: float
    op: Op
    operands: Tuple[int, ...] = ()
    grad: float = 0.0
    label: Optional[str] = None
