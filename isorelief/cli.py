from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from isorelief.color import colormap_mapper
from isorelief.io.grid_csv import GridLoadError, load_grid_csv, write_grid_csv
from isorelief.logging_config import setup_logging
from isorelief.render.pipeline import SurfaceRequest, build_surface
from isorelief.render.raster import write_surface_png
from isorelief.surface.depth import DepthMode
from isorelief.surface.preprocess import display_range

logger = logging.getLogger(__name__)


def demo_grid(rows: int = 24, cols: int = 32) -> np.ndarray:
    """Two Gaussian bumps over a gentle slope, with a small hole of missing cells."""
    rows, cols = max(int(rows), 0), max(int(cols), 0)
    if rows == 0 or cols == 0:
        return np.zeros((rows, cols), dtype=float)
    r, c = np.indices((rows, cols), dtype=float)
    u = c / max(cols - 1, 1)
    v = r / max(rows - 1, 1)
    z = (
        300.0 * np.exp(-((u - 0.3) ** 2 + (v - 0.35) ** 2) / 0.02)
        + 180.0 * np.exp(-((u - 0.7) ** 2 + (v - 0.7) ** 2) / 0.04)
        + 60.0 * u
        + 100.0
    )
    if rows >= 4 and cols >= 4:
        z[rows // 2, cols // 2] = np.nan
        z[rows // 2, cols // 2 + 1] = np.nan
    return z


def _cmd_demo(args: argparse.Namespace) -> int:
    out = write_grid_csv(Path(args.out), demo_grid(args.rows, args.cols))
    print(f"Saved demo grid to: {out}")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    grid_path = Path(args.file).expanduser().resolve()
    try:
        grid = load_grid_csv(grid_path)
    except GridLoadError as exc:
        print(f"[ERROR] {exc}")
        return 2

    lo, hi = display_range(grid)
    min_value = float(args.min) if args.min is not None else lo
    max_value = float(args.max) if args.max is not None else hi
    if args.width <= 0 or args.height <= 0:
        print(f"[ERROR] Canvas must be positive, got {args.width}x{args.height}")
        return 2

    request = SurfaceRequest(
        grid=grid,
        min_value=min_value,
        max_value=max_value,
        metric_label=str(args.label),
        width=float(args.width),
        height=float(args.height),
        is_dark=bool(args.dark),
    )
    depth_mode = DepthMode(args.depth_mode)
    try:
        mapper = colormap_mapper(args.cmap)
    except KeyError:
        print(f"[ERROR] Unknown colormap: {args.cmap}")
        return 2
    logger.info("Rendering %s (%dx%d) range=[%g, %g]", grid_path.name, grid.shape[0], grid.shape[1], min_value, max_value)
    out = write_surface_png(request, Path(args.out), color_mapper=mapper, depth_mode=depth_mode)
    tris = build_surface(request, depth_mode)

    print("Isorelief Render")
    print(f"  File: {grid_path}")
    print(f"  Grid: {grid.shape[0]} x {grid.shape[1]}")
    print(f"  Range: [{min_value:g}, {max_value:g}] {args.label}")
    print(f"  Triangles: {len(tris)}")
    print(f"  Saved: {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="isorelief")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", default=None, help="Also write log output to this file")
    sub = p.add_subparsers(dest="cmd", required=True)

    demo = sub.add_parser("demo", help="Write a synthetic demo grid (CSV) to disk.")
    demo.add_argument("--out", default="out/demo_grid.csv", help="Output .csv path")
    demo.add_argument("--rows", type=int, default=24, help="Grid rows")
    demo.add_argument("--cols", type=int, default=32, help="Grid columns")
    demo.set_defaults(func=_cmd_demo)

    r = sub.add_parser("render", help="Render a CSV grid as a shaded isometric surface (PNG).")
    r.add_argument("file", help="Path to grid .csv file")
    r.add_argument("--out", default="out/surface.png", help="Output .png path")
    r.add_argument("--min", type=float, default=None, help="Display range minimum (default: grid minimum)")
    r.add_argument("--max", type=float, default=None, help="Display range maximum (default: grid maximum)")
    r.add_argument("--label", default="value", help="Metric label passed to the colour mapper")
    r.add_argument("--width", type=int, default=800, help="Canvas width in pixels")
    r.add_argument("--height", type=int, default=600, help="Canvas height in pixels")
    r.add_argument("--dark", action="store_true", help="Dark background and light wireframe")
    r.add_argument("--cmap", default="inferno", help="Matplotlib colormap name")
    r.add_argument(
        "--depth-mode",
        choices=[m.value for m in DepthMode],
        default=DepthMode.HEURISTIC.value,
        help="Triangle ordering: row+col heuristic or screen-space centroid",
    )
    r.set_defaults(func=_cmd_render)

    args = p.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
