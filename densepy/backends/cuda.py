"""CUDA implementation of the point kernels.

This module implements :class:`densepy.backends.ops.PointKernelOps` using Numba's
CUDA backend. Inputs are uploaded per call, results are copied back into fresh
host arrays.

Environment Variables
---------------------
- ``DENSEPY_CUDA_THREADS_PER_BLOCK``: threads per block for the 1-D
  nearest-center launch (default 128)
- ``DENSEPY_CUDA_BLOCK_EDGE``: edge length of the square 2-D block used for the
  kernel-matrix launch (default 16)
"""

from __future__ import annotations

import logging
from math import ceil

import numpy as np
from numba import cuda

from densepy.backends.env import BLOCK_EDGE_ENV, THREADS_PER_BLOCK_ENV, parse_int_env
from densepy.backends.ops import PointKernelOps
from densepy.functions.cuda_numba import interp_nearest_gpu, kmatrix2_gpu


class CudaPointKernelOps(PointKernelOps):
    """CUDA point kernels, one thread per output slot.

    Notes
    -----
    Launch geometry is read from the environment once, when the instance is
    created by :func:`densepy.backends.factory.get_point_kernel_ops`.
    """

    name = "cuda"

    def __init__(self):
        self.log = logging.getLogger(self.__class__.__module__)
        self._threads_per_block = parse_int_env(
            THREADS_PER_BLOCK_ENV, default=128, minimum=1
        )
        self._block_edge = parse_int_env(BLOCK_EDGE_ENV, default=16, minimum=1)
        self.log.debug(
            f"CUDA launch geometry: {self._threads_per_block} threads per block, "
            f"{self._block_edge}x{self._block_edge} 2D blocks"
        )

    def interp_nearest(
        self,
        points: np.ndarray,
        centers: np.ndarray,
        values: np.ndarray,
        radius_sq: float,
    ) -> tuple[np.ndarray, np.ndarray]:
        point_number = points.shape[0]
        channels = values.shape[1]

        out = np.empty((point_number, channels), dtype=np.float64)
        index = np.zeros(point_number, dtype=np.int64)
        if point_number == 0:
            return out, index

        points_device = cuda.to_device(points)
        centers_device = cuda.to_device(centers)
        values_device = cuda.to_device(values)
        out_device = cuda.device_array_like(out)
        index_device = cuda.device_array_like(index)

        threads_per_block = self._threads_per_block
        blocks_per_grid = ceil(point_number / threads_per_block)
        interp_nearest_gpu[blocks_per_grid, threads_per_block](
            points_device,
            centers_device,
            values_device,
            float(radius_sq),
            out_device,
            index_device,
        )

        out_device.copy_to_host(out)
        index_device.copy_to_host(index)
        return out, index

    def kmatrix2(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        na = a.shape[0]
        nb = b.shape[0]

        k = np.zeros((na, nb), dtype=np.float64)
        if na == 0 or nb == 0:
            return k

        a_device = cuda.to_device(a)
        b_device = cuda.to_device(b)
        k_device = cuda.device_array_like(k)

        edge = self._block_edge
        threads_per_block = (edge, edge)
        blocks_per_grid = (ceil(na / edge), ceil(nb / edge))
        kmatrix2_gpu[blocks_per_grid, threads_per_block](a_device, b_device, k_device)

        k_device.copy_to_host(k)
        return k
