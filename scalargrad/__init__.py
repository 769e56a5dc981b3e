# scalargrad/__init__.py
# Scalar reverse-mode automatic differentiation

# core first: it pulls in ops.arithmetic itself
from .core.var import Var
from .core.node import Op
from .core.tape import Tape, global_tape, use_tape
from .core.engine import (
    topo_order,
    reverse,
    zero_grads,
)
from .core.seeds import grad, grads, grads_list, value
from .ops import leaf, add, mul

__all__ = [
    # Core
    'Var',
    'Op',
    'Tape',
    'global_tape',
    'use_tape',
    # Constructors
    'leaf',
    'add',
    'mul',
    # Engine
    'topo_order',
    'reverse',
    'zero_grads',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
]
