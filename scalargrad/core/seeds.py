# scalargrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through a fresh tape.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .var import Var
from .tape import use_tape
from .engine import reverse
from ..ops.arithmetic import leaf


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Var) else x


def _backprop(y: Any) -> bool:
    """Reverse from y if it is a Var; a plain number means f ignored its inputs."""
    if not isinstance(y, Var):
        return False
    reverse(y, seed=1.0)
    return True


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Any], x0: float) -> float:
    """
    Derivative of y=f(x) at x0.
    Runs one reverse pass within a fresh, isolated tape.
    """
    with use_tape():
        x = leaf(x0, "x")
        if not _backprop(f(x)):
            return 0.0
        return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a Var
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    with use_tape():
        vars_ad: Dict[str, Var] = {k: leaf(v, k) for k, v in inputs.items()}
        if not _backprop(f(vars_ad)):
            return {k: 0.0 for k in inputs}
        return {k: vars_ad[k].grad for k in inputs}


def grads_list(f: Callable[[List[Var]], Any],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs: List[Var] = [leaf(v, f"x{i}") for i, v in enumerate(x0_list)]
        if not _backprop(f(xs)):
            return [0.0] * len(xs)
        return [x.grad for x in xs]
