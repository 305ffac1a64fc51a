"""Benchmarks for the four kernels.

Compares CPU and GPU point kernels and times the sequential scans under
controlled, reproducible settings. Run with
``python -m densepy.benchmark.bench_kernels``.
"""

from __future__ import annotations

import argparse
import os

import numpy as np
import pyperf

from densepy import interp_nearest, kmatrix2, quickfind, quickmax
from densepy.backends import cuda_available


def _set_reproducible_thread_env() -> None:
    """Set conservative thread environment variables.

    Notes
    -----
    Uses ``os.environ.setdefault`` so user-provided values win.
    """
    defaults = {
        "OMP_NUM_THREADS": "1",
        "MKL_NUM_THREADS": "1",
        "OPENBLAS_NUM_THREADS": "1",
        "NUMEXPR_NUM_THREADS": "1",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


def _add_worker_args(cmd: list[str], args: argparse.Namespace) -> None:
    """Populate pyperf worker command-line arguments."""
    cmd.extend(["--points", str(args.points)])
    cmd.extend(["--centers", str(args.centers)])
    cmd.extend(["--dimensions", str(args.dimensions)])
    cmd.extend(["--radius", str(args.radius)])
    cmd.extend(["--mask-size", str(args.mask_size)])
    cmd.extend(["--seed", str(args.seed)])

    if getattr(args, "gpu", False):
        cmd.append("--gpu")


def _build_runner() -> tuple[pyperf.Runner, argparse.ArgumentParser]:
    """Create the pyperf runner and CLI parser."""
    parser = argparse.ArgumentParser(
        description="Benchmark nearest-center, kernel-matrix and mask-scan kernels",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--points",
        type=int,
        default=2000,
        help="Number of query points (rows of the kernel matrix)",
    )
    parser.add_argument(
        "--centers",
        type=int,
        default=500,
        help="Number of centers (columns of the kernel matrix)",
    )
    parser.add_argument(
        "--dimensions",
        type=int,
        default=2,
        help="Point dimension for nearest-center interpolation",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=0.05,
        help="Support radius for nearest-center interpolation",
    )
    parser.add_argument(
        "--mask-size",
        type=int,
        default=1_000_000,
        dest="mask_size",
        help="Element count for quickfind / quickmax",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="RNG seed for deterministic inputs",
    )
    parser.add_argument(
        "--gpu",
        action="store_true",
        help="Run point kernels on Numba CUDA (falls back to CPU if unavailable)",
    )

    runner = pyperf.Runner(
        _argparser=parser,
        add_cmdline_args=_add_worker_args,
        processes=1,
        warmups=1,
    )
    return runner, parser


def main() -> None:
    """CLI entry point for the kernel benchmark."""
    _set_reproducible_thread_env()

    runner, _ = _build_runner()
    args = runner.parse_args()

    # pyperf may sanitize the worker environment; re-check after parsing args.
    gpu = bool(args.gpu) and cuda_available()

    rng = np.random.default_rng(args.seed)
    points = rng.random((args.points, args.dimensions))
    centers = rng.random((args.centers, args.dimensions))
    values = rng.random((args.centers, 1))
    a = rng.random((args.points, 2))
    b = rng.random((args.centers, 2))

    matrix = rng.random(args.mask_size)
    mask = rng.random(args.mask_size) < 0.5
    order = rng.permutation(args.mask_size).astype(np.uint32) + 1
    tf = np.zeros(args.mask_size, dtype=bool)

    # Warm up Numba compilation and caches.
    interp_nearest(points, centers, values, args.radius, gpu=gpu)
    kmatrix2(a, b, gpu=gpu)
    quickfind(tf, order)
    quickmax(matrix, mask)

    suffix = "gpu" if gpu else "cpu"
    runner.bench_func(
        f"interp_nearest_{suffix}",
        lambda: interp_nearest(points, centers, values, args.radius, gpu=gpu),
    )
    runner.bench_func(f"kmatrix2_{suffix}", lambda: kmatrix2(a, b, gpu=gpu))
    runner.bench_func("quickfind_no_match", lambda: quickfind(tf, order))
    runner.bench_func("quickmax", lambda: quickmax(matrix, mask))


if __name__ == "__main__":
    main()
