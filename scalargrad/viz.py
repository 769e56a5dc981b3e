# scalargrad/viz.py
from graphviz import Digraph

from .core.graph_utils import trace
from .core.var import Var


def draw_dot(root: Var, fmt: str = "svg", rankdir: str = "LR") -> Digraph:
    """
    Build a Graphviz graph of everything reachable from `root`.

    Every node gets a record box "label | data | grad"; every non-leaf also
    gets a small operator node between its operands and itself. Graph node
    names come from tape handles, so two nodes that happen to print the same
    are still drawn separately.
    """
    dot = Digraph(format=fmt, graph_attr={"rankdir": rankdir})

    nodes, edges = trace(root)
    for n in nodes:
        uid = f"n{n.index}"
        name = n.label if n.label is not None else "--"
        dot.node(
            name=uid,
            label="{ %s | data %.4f | grad %.4f }" % (name, n.value, n.grad),
            shape="record",
        )
        if n.op.symbol:
            dot.node(name=uid + "_op", label=n.op.symbol)
            dot.edge(uid + "_op", uid)

    for src, dst in edges:
        # operand -> operator node of its user
        dot.edge(f"n{src.index}", f"n{dst.index}_op")

    return dot
