"""Protocol for the data-parallel point kernels.

:func:`densepy.spline.interp_nearest` and :func:`densepy.spline.kmatrix2` do not
call a kernel directly. They ask :func:`densepy.backends.get_point_kernel_ops`
for an object implementing :class:`PointKernelOps`, which is either the CPU
(``prange``) or the CUDA implementation.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np


class PointKernelOps(Protocol):
    """Protocol for the nearest-center and kernel-matrix computations.

    Inputs are already validated, contiguous ``float64`` arrays.
    """

    name: str

    def interp_nearest(
        self,
        points: np.ndarray,
        centers: np.ndarray,
        values: np.ndarray,
        radius_sq: float,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Nearest-center interpolation.

        Parameters
        ----------
        points:
            Query points, shape ``(np, d)``.
        centers:
            Centers, shape ``(nc, d)``.
        values:
            Center values, shape ``(nc, nv)``.
        radius_sq:
            Squared support radius.

        Returns
        -------
        tuple[numpy.ndarray, numpy.ndarray]
            Interpolated values ``(np, nv)`` (NaN where unmatched) and the
            1-based nearest center index ``(np,)`` (0 where unmatched).
        """

    def kmatrix2(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        """Thin-plate spline kernel matrix between two ``(n, 2)`` point sets."""
