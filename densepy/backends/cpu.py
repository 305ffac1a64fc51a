"""CPU implementation of the point kernels.

This module implements :class:`densepy.backends.ops.PointKernelOps` using the
parallel Numba kernels in :mod:`densepy.functions.cpu_numba`. The outer loop
over query points (or matrix rows) is split across the Numba thread pool.
"""

from __future__ import annotations

import numpy as np

from densepy.backends.ops import PointKernelOps
from densepy.functions.cpu_numba import interp_nearest, kmatrix2


class CpuPointKernelOps(PointKernelOps):
    """CPU point kernels backed by ``numba.prange`` loops."""

    name = "cpu"

    def interp_nearest(
        self,
        points: np.ndarray,
        centers: np.ndarray,
        values: np.ndarray,
        radius_sq: float,
    ) -> tuple[np.ndarray, np.ndarray]:
        return interp_nearest(points, centers, values, float(radius_sq))

    def kmatrix2(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return kmatrix2(a, b)
