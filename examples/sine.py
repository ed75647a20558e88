from __future__ import annotations

import argparse
import logging
import math

from blockgraph import Graph, GridStyle


def build_graph(samples: int = 100) -> Graph:
    graph = Graph.hist(100, 40, lambda v: 0.5 + (v / 3.0), style=GridStyle.detect_terminal())
    graph.set_data([math.sin(i / 5.0) for i in range(samples)])
    return graph


def main() -> int:
    parser = argparse.ArgumentParser(description="Histogram of a sampled sine wave.")
    parser.add_argument("--samples", type=int, default=100)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    build_graph(args.samples).print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
