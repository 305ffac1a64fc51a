"""Low-level numerical kernels.

This subpackage contains the Numba-compiled inner loops (CPU and CUDA) behind
the public functions in :mod:`densepy.spline` and :mod:`densepy.unwrap`.
"""
