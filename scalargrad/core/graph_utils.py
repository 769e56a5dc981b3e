"""
Graph utilities.
Enumerate, summarise and print the computation graph reachable from a root.
"""

import numpy as np
from typing import Dict, List, Tuple
from collections import Counter

from .var import Var


def trace(root: Var) -> Tuple[List[Var], List[Tuple[Var, Var]]]:
    """
    Collect every node reachable from `root` and the (operand, user) edges.

    Nodes are deduplicated by identity (tape handle), never by their printed
    form, and returned in handle order (operands before users). A node using
    the same operand twice contributes one edge per operand slot.
    """
    nodes, edges = [], []
    seen = set()
    stack = [root.index]
    while stack:
        h = stack.pop()
        if h in seen:
            continue
        seen.add(h)
        for o in root.tape.nodes[h].operands:
            if o not in seen:
                stack.append(o)

    for h in sorted(seen):
        v = Var(root.tape, h)
        nodes.append(v)
        for o in v.node.operands:
            edges.append((Var(root.tape, o), v))
    return nodes, edges


def get_graph_stats(root: Var) -> Dict:
    """
    Graph statistics for the subgraph reachable from `root` (no printing).

    Returns:
        dict with nodes, edges, max/avg fan-in, max/avg fan-out and an
        op-name -> count breakdown
    """
    nodes, edges = trace(root)
    n_nodes = len(nodes)

    # fan-in: operand slots per node
    fan_ins = [len(v.node.operands) for v in nodes]

    # fan-out: users per node, counted over edges
    out_count = Counter(src.index for src, _ in edges)
    fan_outs = [out_count.get(v.index, 0) for v in nodes]

    op_counter = Counter(v.op.name for v in nodes)

    return {
        'nodes': n_nodes,
        'edges': len(edges),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root: Var, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: output node of the graph
        detailed: also list every node (graphs of up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_name, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_name:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        nodes, _ = trace(root)
        for v in nodes:
            parent_info = ", ".join(f"Node{o}" for o in v.node.operands)
            print(f"Node {v.index:3d}: {v.op.name:12s} <- [{parent_info}]")

    print("="*70 + "\n")

    return stats


def print_computation_graph(root: Var, max_nodes: int = 20) -> None:
    """
    Print one line per reachable node: handle, op, value, grad, label, operands.

    Args:
        root: output node of the graph
        max_nodes: print at most this many nodes
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    nodes, _ = trace(root)
    for v in nodes[:max_nodes]:
        name = v.label if v.label is not None else "--"
        head = (f"Node {v.index:4d}: {v.op.name:6s} {name:8s} "
                f"data={float(v.value):10.4f} grad={float(v.grad):10.4f}")
        if v.node.operands:
            parent_info = ", ".join(f"Node{o}" for o in v.node.operands)
            print(f"{head} <- [{parent_info}]")
        else:
            print(f"{head} [leaf/input]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")
