from __future__ import annotations

import argparse
import time
from typing import Dict

from isorelief.cli import demo_grid
from isorelief.color import colormap_mapper
from isorelief.render.pipeline import SurfaceRequest, render_surface


def run_benchmark(rows: int = 300, cols: int = 300, repeats: int = 5) -> Dict[str, float]:
    grid = demo_grid(rows, cols)
    request = SurfaceRequest(
        grid=grid,
        min_value=100.0,
        max_value=460.0,
        metric_label="lux",
        width=1280.0,
        height=800.0,
    )
    mapper = colormap_mapper()

    t0 = time.perf_counter()
    first = render_surface(request, mapper)
    t1 = time.perf_counter()
    for _ in range(max(int(repeats) - 1, 0)):
        render_surface(request, mapper)
    t2 = time.perf_counter()

    rest = max(int(repeats) - 1, 1)
    return {
        "cells": float(rows * cols),
        "primitives": float(len(first)),
        "first_render_s": t1 - t0,
        "mean_render_s": (t2 - t1) / rest,
    }


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="bench_render")
    p.add_argument("--rows", type=int, default=300)
    p.add_argument("--cols", type=int, default=300)
    p.add_argument("--repeats", type=int, default=5)
    args = p.parse_args(argv)

    res = run_benchmark(args.rows, args.cols, args.repeats)
    print("bench_render")
    print(f"  cells: {int(res['cells'])}")
    print(f"  primitives: {int(res['primitives'])}")
    print(f"  first_render_s: {res['first_render_s']:.4f}")
    print(f"  mean_render_s: {res['mean_render_s']:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
