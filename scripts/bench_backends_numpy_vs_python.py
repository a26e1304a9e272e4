"""
scripts/bench_backends_numpy_vs_python.py

Benchmark script (NOT a unit test) to compare ndview performance between:
1) the python backend (list buffer, element-by-element control paths)
2) the numpy backend (ndarray buffer, vectorized control paths)

Every operation runs on a non-trivial view (flip + transpose + slice) so the
affine index resolution is part of the measured cost.

Usage examples
--------------
# Default: benchmark a single 128x128 shape
python scripts/bench_backends_numpy_vs_python.py

# Benchmark a custom shape
python scripts/bench_backends_numpy_vs_python.py --rows 256 --cols 256

# More repeats (more stable)
python scripts/bench_backends_numpy_vs_python.py --repeats 30 --warmup 5

# Benchmark the preset shapes (32x32, 128x128, 256x512)
python scripts/bench_backends_numpy_vs_python.py --presets

Notes
-----
- Reductions (`sum`) fold over the iterator on both backends, so expect
  little difference there; gathers, addition and clipping are vectorized on
  the numpy backend.
"""

from __future__ import annotations

import os
import sys

# Ensure repo_root/src is importable when running this file directly:
# repo_root/
#   src/ndview/...
#   scripts/bench_backends_numpy_vs_python.py
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import argparse
import statistics
import time
from typing import Callable

import numpy as np

from ndview import NDArray


def _time_one(fn: Callable[[], None], *, warmup: int, repeats: int) -> list[float]:
    # Warmup
    for _ in range(warmup):
        fn()

    times: list[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def _fmt_seconds(x: float) -> str:
    if x < 1e-6:
        return f"{x*1e9:.2f} ns"
    if x < 1e-3:
        return f"{x*1e6:.2f} µs"
    if x < 1:
        return f"{x*1e3:.2f} ms"
    return f"{x:.3f} s"


def _print_row(name: str, python_s: float, numpy_s: float) -> None:
    speedup = (python_s / numpy_s) if numpy_s > 0 else float("inf")
    print(
        f"{name:<14}  "
        f"python(median)={_fmt_seconds(python_s):>10}  "
        f"numpy(median)={_fmt_seconds(numpy_s):>10}  "
        f"speedup={speedup:>7.2f}x"
    )


def _make_view(values: np.ndarray, shape: tuple[int, int], backend: str) -> NDArray:
    buffer = values if backend == "numpy" else values.tolist()
    a = NDArray(buffer, shape, backend=backend)
    rows, cols = shape
    return a.flip(0).transpose().slice([(0, cols - 1), (1, rows)])


def bench_one(*, rows: int, cols: int, warmup: int, repeats: int) -> None:
    rng = np.random.default_rng(0)
    values = rng.standard_normal(rows * cols)

    views = {
        backend: _make_view(values, (rows, cols), backend)
        for backend in ("python", "numpy")
    }

    ops: dict[str, Callable[[NDArray], object]] = {
        "to_list": lambda v: v.to_list(),
        "sum": lambda v: v.sum(),
        "add": lambda v: v + v,
        "scale": lambda v: v * 2.0,
        "clip": lambda v: v.clip(-0.5, 0.5),
        "reshape": lambda v: v.reshape(v.size),
    }

    print("\n" + "=" * 80)
    print(
        f"Shape: {rows}x{cols}  view={views['numpy'].shape}  "
        f"(warmup={warmup}, repeats={repeats})"
    )
    print("-" * 80)
    for name, op in ops.items():
        t_python = _time_one(
            lambda: op(views["python"]), warmup=warmup, repeats=repeats
        )
        t_numpy = _time_one(lambda: op(views["numpy"]), warmup=warmup, repeats=repeats)
        _print_row(name, statistics.median(t_python), statistics.median(t_numpy))


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=128)
    ap.add_argument("--cols", type=int, default=128)
    ap.add_argument("--warmup", type=int, default=3)
    ap.add_argument("--repeats", type=int, default=10)
    ap.add_argument(
        "--presets",
        action="store_true",
        help="Benchmark a small set of preset shapes instead of a single shape.",
    )
    args = ap.parse_args()

    if args.presets:
        shapes = [(32, 32), (128, 128), (256, 512)]
    else:
        shapes = [(args.rows, args.cols)]

    for rows, cols in shapes:
        bench_one(rows=rows, cols=cols, warmup=args.warmup, repeats=args.repeats)


if __name__ == "__main__":
    main()
