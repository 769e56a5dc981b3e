# scalargrad/ops/arithmetic.py
from typing import Optional
import numpy as np
from ..core.node import Op
from ..core.var import Var
from ..core.tape import Tape, active_tape

_NUMERIC = (int, float, np.integer, np.floating)


def leaf(value, label: Optional[str] = None, *, tape: Optional[Tape] = None) -> Var:
    """
    Record an input node on `tape` (default: the active tape).
    The value is stored as float64; there are no operands and grad starts at 0.
    """
    if not isinstance(value, _NUMERIC):
        raise TypeError(
            f"leaf() only accepts numeric scalars (int, float, numpy scalar), "
            f"but got {type(value)}"
        )
    tape = tape if tape is not None else active_tape()
    idx = tape.push_node(op=Op.LEAF, value=np.float64(value), label=label)
    return Var(tape, idx)


def _target_tape(x, y) -> Tape:
    """Tape shared by the Var operands; the active tape when both are plain numbers."""
    tapes = [v.tape for v in (x, y) if isinstance(v, Var)]
    if not tapes:
        return active_tape()
    if len(tapes) == 2 and tapes[0] is not tapes[1]:
        raise ValueError("operands live on different tapes")
    return tapes[0]


def _as_var(x, tape: Tape) -> Var:
    """Ensure x is a Var; otherwise record it as an unlabeled constant leaf."""
    return x if isinstance(x, Var) else leaf(x, tape=tape)


def _binary(x, y, f, op: Op) -> Var:
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value) eagerly
      - pushes a Node with operands (x, y) in that order
    Neither operand is modified.
    """
    tape = _target_tape(x, y)
    x = _as_var(x, tape)
    y = _as_var(y, tape)
    idx = tape.push_node(op=op, value=f(x.value, y.value), operands=(x.index, y.index))
    return Var(tape, idx)


def add(x, y): return _binary(x, y, lambda a, b: a + b, Op.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Op.MUL)
