# scalargrad/core/engine.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple
from .node import Op
from .tape import Tape, active_tape
from .var import Var

logger = logging.getLogger(__name__)


def topo_order(root: Var) -> List[int]:
    """
    Handles of every node reachable from `root`, operands before their users.

    Depth-first postorder: a node is appended only once all of its operands
    have been appended, and each node is appended exactly once however many
    paths reach it. Walking the result backwards therefore visits a node only
    after every user that can contribute to its gradient.

    Uses an explicit stack so long chains do not hit the recursion limit.
    """
    nodes = root.tape.nodes
    order: List[int] = []
    visited = set()
    stack: List[Tuple[int, bool]] = [(root.index, False)]
    while stack:
        h, done = stack.pop()
        if done:
            order.append(h)
            continue
        if h in visited:
            continue
        visited.add(h)
        stack.append((h, True))
        # reversed so the left operand is explored first
        for o in reversed(nodes[h].operands):
            if o not in visited:
                stack.append((o, False))
    return order


def local_grads(op: Op, grad: float, operand_values: Sequence[float]) -> Tuple[float, ...]:
    """
    Chain-rule contribution of a node to each of its operands.

    Args:
        op: operation tag of the node.
        grad: the node's own (already final) gradient.
        operand_values: forward values of the operands, in order.

    Returns:
        One delta per operand, to be added into that operand's gradient.

    Raises:
        ValueError: operand count does not match the arity of `op`.
        NotImplementedError: `op` has no rule.
    """
    if len(operand_values) != op.arity:
        raise ValueError(
            f"{op.name} node has {len(operand_values)} operand(s), expected {op.arity}"
        )

    if op is Op.LEAF:
        return ()
    if op is Op.ADD:
        return (grad, grad)
    if op is Op.MUL:
        a, b = operand_values
        return (grad * b, grad * a)

    raise NotImplementedError(f"no gradient rule for {op.name}")


def reverse(root: Var, seed: float = 1.0) -> List[int]:
    """
    Run a single reverse pass from `root`.

    Seeds root.grad = seed, then walks `topo_order(root)` backwards and, for
    each node, adds `local_grads(...)` into its operands' gradients.

    Gradients are accumulated, never reset: run on a freshly built graph or
    call `zero_grads` first. Returns the topological order that was used.
    """
    nodes = root.tape.nodes
    if root.grad != 0.0:
        logger.warning(
            "reverse(): root node %d already has grad=%r; gradients from an "
            "earlier pass will be accumulated (call zero_grads first)",
            root.index, root.grad,
        )

    root.grad = float(seed)
    order = topo_order(root)
    logger.debug("reverse pass from node %d over %d node(s)", root.index, len(order))

    for h in reversed(order):
        node = nodes[h]
        deltas = local_grads(node.op, node.grad, [nodes[o].value for o in node.operands])
        # a repeated operand (x * x) receives both deltas
        for o, d in zip(node.operands, deltas):
            nodes[o].grad += d
    return order


def zero_grads(root: Optional[Var] = None, *, tape: Optional[Tape] = None):
    """
    Set gradients back to zero.

    With `root`, only the nodes reachable from it are reset; otherwise every
    node on `tape` (default: the active tape).
    """
    if root is not None:
        nodes = root.tape.nodes
        handles = topo_order(root)
    else:
        nodes = (tape if tape is not None else active_tape()).nodes
        handles = range(len(nodes))
    for h in handles:
        nodes[h].grad = 0.0
