"""
Build one of the example expressions, optionally run the backward pass, and
print the resulting graph.

    scalargrad-demo --example original --format dot
    scalargrad-demo --example chain --backward --format nodes
"""

import argparse
import logging
import sys

from .core.engine import reverse
from .core.graph_utils import print_computation_graph, print_graph_summary
from .core.tape import use_tape
from .ops.arithmetic import leaf
from .viz import draw_dot

logger = logging.getLogger(__name__)


def build_original():
    """e = (a + b) * (a * b) with a=1.1, b=2.0."""
    a = leaf(1.1, "a")
    b = leaf(2.0, "b")
    c = a + b
    c.label = "c"
    d = a * b
    d.label = "d"
    e = c * d
    e.label = "e"
    return e


def build_diamond():
    """e = (a * b) * (a + b) with a=2.0, b=-3.0."""
    a = leaf(2.0, "a")
    b = leaf(-3.0, "b")
    c = a * b
    c.label = "c"
    d = a + b
    d.label = "d"
    e = c * d
    e.label = "e"
    return e


def build_chain():
    """l = (a * b + c) * f with a=2.0, b=-3.0, c=10.0, f=-2.0."""
    a = leaf(2.0, "a")
    b = leaf(-3.0, "b")
    c = leaf(10.0, "c")
    f = leaf(-2.0, "f")
    e = a * b
    e.label = "e"
    d = e + c
    d.label = "d"
    out = d * f
    out.label = "l"
    return out


EXAMPLES = {
    "original": build_original,
    "diamond": build_diamond,
    "chain": build_chain,
}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Build an example expression graph and print it',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--example', choices=sorted(EXAMPLES), default='original',
                        help='Which expression to build')
    parser.add_argument('--backward', action='store_true',
                        help='Run the reverse pass before printing')
    parser.add_argument('--format', choices=['summary', 'nodes', 'dot'], default='dot',
                        help='Output: statistics, node listing or Graphviz DOT source')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with use_tape() as tape:
        root = EXAMPLES[args.example]()
        logger.info("built %r example: %d node(s) on tape", args.example, len(tape))
        if args.backward:
            reverse(root)

        if args.format == 'summary':
            print_graph_summary(root, detailed=True)
        elif args.format == 'nodes':
            print_computation_graph(root)
        else:
            print(draw_dot(root).source)
    return 0


if __name__ == "__main__":
    sys.exit(main())
