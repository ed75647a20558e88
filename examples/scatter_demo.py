from __future__ import annotations

import argparse
import logging

import numpy as np

from blockgraph import GridStyle, scatter_xy


def main() -> int:
    parser = argparse.ArgumentParser(description="Scatter plot of a noisy spiral.")
    parser.add_argument("--points", type=int, default=400)
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    rng = np.random.default_rng(args.seed)
    t = np.linspace(0.0, 6.0 * np.pi, args.points)
    xs = t * np.cos(t) + rng.normal(scale=0.4, size=t.size)
    ys = t * np.sin(t) + rng.normal(scale=0.4, size=t.size)

    scatter_xy(xs, ys, width=120, height=60, style=GridStyle.detect_terminal()).print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
