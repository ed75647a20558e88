from __future__ import annotations

import argparse

from blockgraph import GridStyle, hbar


def main() -> int:
    parser = argparse.ArgumentParser(description="Labelled horizontal bars.")
    parser.add_argument("--width", type=int, default=40)
    args = parser.parse_args()

    style = GridStyle.detect_terminal()
    readings = {"cpu": 0.42, "mem": 0.873, "disk": 0.125, "net": 1.0}
    label_w = max(len(name) for name in readings)
    for name, value in readings.items():
        bar = hbar(value, width=args.width, style=style)
        print(f"{name:<{label_w}} {bar.render_text()} {value:6.1%}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
