# pyright: ignore

"""CUDA kernels accelerated with Numba.

GPU versions of the data-parallel point kernels. Each thread owns exactly one
output slot, so no atomics are needed.
"""

from math import log, nan

import numpy as np
from numba import cuda


@cuda.jit
def interp_nearest_gpu(
    points: np.ndarray,
    centers: np.ndarray,
    values: np.ndarray,
    radius_sq: float,
    out: np.ndarray,
    index: np.ndarray,
):
    """Nearest-center interpolation, one thread per query point.

    Mirrors `densepy.functions.cpu_numba.interp_nearest`; `out` and `index` are
    preallocated device arrays of shape `(np, nv)` and `(np,)`.
    """

    ip = cuda.grid(1)
    if ip >= points.shape[0]:
        return

    min_dsq = radius_sq
    nearest = -1

    for ic in range(centers.shape[0]):
        dsq = 0.0
        for k in range(points.shape[1]):
            d = points[ip, k] - centers[ic, k]
            dsq += d * d

        if dsq < min_dsq:
            min_dsq = dsq
            nearest = ic
            if dsq == 0.0:
                break

    if nearest >= 0:
        index[ip] = nearest + 1
        for k in range(values.shape[1]):
            out[ip, k] = values[nearest, k]
    else:
        index[ip] = 0
        for k in range(values.shape[1]):
            out[ip, k] = nan


@cuda.jit(fastmath=True)
def kmatrix2_gpu(a: np.ndarray, b: np.ndarray, k: np.ndarray):
    """Thin-plate spline kernel matrix, one thread per `(i, j)` cell."""

    i, j = cuda.grid(2)
    if i >= a.shape[0] or j >= b.shape[0]:
        return

    dx = a[i, 0] - b[j, 0]
    dy = a[i, 1] - b[j, 1]
    dsq = dx * dx + dy * dy
    if dsq > 0.0:
        k[i, j] = dsq * log(dsq)
    else:
        k[i, j] = 0.0
