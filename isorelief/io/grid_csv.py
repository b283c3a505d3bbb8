from __future__ import annotations

import csv
import math
from pathlib import Path
from typing import List

import numpy as np


class GridLoadError(ValueError):
    pass


_MISSING_TOKENS = {"", "nan", "na", "null", "none"}


def _parse_cell(token: str, line_no: int) -> float:
    t = token.strip()
    if t.lower() in _MISSING_TOKENS:
        return math.nan
    try:
        return float(t)
    except ValueError as exc:
        raise GridLoadError(f"line {line_no}: cannot parse value {token!r}") from exc


def load_grid_csv(path: Path) -> np.ndarray:
    """
    Read a rows x cols grid from comma-separated text.

    Blank cells and nan/na/null/none tokens become NaN; inf/-inf parse as
    infinities. Blank lines and lines starting with '#' are skipped.
    """
    p = Path(path).expanduser()
    if not p.exists():
        raise GridLoadError(f"File not found: {p}")
    if not p.is_file():
        raise GridLoadError(f"Not a file: {p}")

    rows: List[List[float]] = []
    with p.open("r", encoding="utf-8", newline="") as f:
        for line_no, raw in enumerate(csv.reader(f), start=1):
            if not raw or (len(raw) == 1 and not raw[0].strip()):
                continue
            if raw[0].lstrip().startswith("#"):
                continue
            rows.append([_parse_cell(tok, line_no) for tok in raw])

    if not rows:
        return np.zeros((0, 0), dtype=float)
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise GridLoadError(f"row {i} has {len(row)} values, expected {width}")
    return np.asarray(rows, dtype=float)


def write_grid_csv(path: Path, grid: np.ndarray) -> Path:
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    arr = np.asarray(grid, dtype=float)
    with out.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        for row in arr.tolist():
            w.writerow(["nan" if math.isnan(v) else f"{v:.6g}" for v in row])
    return out
