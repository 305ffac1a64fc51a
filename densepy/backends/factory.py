"""Factory for point-kernel operations.

This module provides a single entry point :func:`get_point_kernel_ops` that
selects the CPU or CUDA implementation at runtime.
"""

from __future__ import annotations

import logging

from densepy.backends.env import gpu_requested
from densepy.backends.ops import PointKernelOps

log = logging.getLogger(__name__)

_ops_cache: dict[str, PointKernelOps] = {}


def cuda_available() -> bool:
    """Whether Numba CUDA can run kernels on a device in this process."""

    from numba import cuda

    if not cuda.is_available():
        return False
    try:
        cuda.get_current_device()
    except Exception:
        return False
    return True


def get_point_kernel_ops(gpu: bool | None = None) -> PointKernelOps:
    """Return a point-kernel ops instance.

    Parameters
    ----------
    gpu:
        Request the CUDA implementation. ``None`` reads ``DENSEPY_GPU``.

    Returns
    -------
    PointKernelOps
        A CPU or CUDA implementation of
        :class:`densepy.backends.ops.PointKernelOps`.

    Notes
    -----
    Instances are cached per implementation, so repeated calls reuse them.

    If the GPU is requested but Numba CUDA is unavailable, the factory falls
    back to CPU ops (and emits a warning).
    """

    if gpu is None:
        gpu = gpu_requested()

    if gpu:
        cached = _ops_cache.get("cuda")
        if cached is not None:
            return cached

        if cuda_available():
            from densepy.backends.cuda import CudaPointKernelOps

            ops: PointKernelOps = CudaPointKernelOps()
            _ops_cache["cuda"] = ops
            return ops

        log.warning("Numba CUDA not available; falling back to CPU point kernels.")

    cached = _ops_cache.get("cpu")
    if cached is not None:
        return cached

    from densepy.backends.cpu import CpuPointKernelOps

    ops = CpuPointKernelOps()
    _ops_cache["cpu"] = ops
    return ops
