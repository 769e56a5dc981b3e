# scalargrad/core/tape.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence
from contextlib import contextmanager
from .node import Node, Op

logger = logging.getLogger(__name__)


class Tape:
    """
    Arena of Nodes recorded in forward order.
    A node's handle is its index in `nodes`; handles never move.
    """
    def __init__(self):
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def reset(self):
        self.nodes.clear()

    def push_node(self, *, op: Op, value: float, operands: Sequence[int] = (),
                  label: Optional[str] = None) -> int:
        """
        Append Node(value, op, operands) and return its handle.
        Operands must already be on this tape, so the graph stays acyclic.
        """
        operands = tuple(operands)
        if len(operands) != op.arity:
            raise ValueError(
                f"{op.name} expects {op.arity} operand(s), got {len(operands)}"
            )
        for h in operands:
            if not 0 <= h < len(self.nodes):
                raise ValueError(f"operand handle {h} is not on this tape")

        self.nodes.append(Node(value=value, op=op, operands=operands, label=label))
        idx = len(self.nodes) - 1
        logger.debug("push %s -> node %d (value=%r, operands=%s)", op.name, idx, value, operands)
        return idx


# Global active tape
global_tape = Tape()


def active_tape() -> Tape:
    """Return the tape new nodes are recorded on."""
    return global_tape


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily record on another (by default fresh) tape:
        with use_tape():
            ... build computation ...
            reverse(y)
    """
    from . import tape as _tape_mod  # local import to avoid cycles
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
