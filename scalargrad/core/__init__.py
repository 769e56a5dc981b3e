# scalargrad/core/__init__.py

"""
Core public API for scalargrad.

Exports:
    Op            : Closed set of recorded operations (LEAF, ADD, MUL).
    Var           : Handle to a node recorded on a tape.
    Tape          : Arena of node records addressed by integer handles.
    global_tape   : The default tape new nodes are recorded on.
    use_tape      : Context manager to temporarily switch the active tape.
    topo_order    : Reachable handles in topological (operands-first) order.
    reverse       : Run a single reverse pass to accumulate gradients.
    zero_grads    : Reset gradients to zero.
    grad, grads, grads_list, value : convenience helpers.
"""

from .node import Op, Node
from .var import Var
from .tape import Tape, global_tape, use_tape
from .engine import topo_order, local_grads, reverse, zero_grads
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Op", "Node", "Var",
    "Tape", "global_tape", "use_tape",
    "topo_order", "local_grads", "reverse", "zero_grads",
    "grad", "grads", "grads_list", "value",
]
