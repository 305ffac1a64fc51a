"""Point-kernel backends.

The data-parallel kernels (nearest-center interpolation and the thin-plate
spline kernel matrix) run through an object implementing
:class:`densepy.backends.ops.PointKernelOps`, selected by
:func:`densepy.backends.factory.get_point_kernel_ops`. The ordered scans in
:mod:`densepy.unwrap` are sequential and always run on the CPU.
"""

from __future__ import annotations

from densepy.backends.factory import cuda_available, get_point_kernel_ops
from densepy.backends.ops import PointKernelOps

__all__ = [
    "PointKernelOps",
    "cuda_available",
    "get_point_kernel_ops",
]
