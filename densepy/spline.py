"""Spline helpers: nearest-center interpolation and the thin-plate kernel.

Both functions are the Python boundary of data-parallel Numba kernels. They
marshal inputs into contiguous ``float64`` arrays, then delegate to the
point-kernel backend returned by
:func:`densepy.backends.factory.get_point_kernel_ops` (CPU or CUDA).
"""

from __future__ import annotations

import logging
from numbers import Real
from time import time

import numpy as np

from densepy.backends import get_point_kernel_ops
from densepy.errors import DomainError, InvalidInputError

log = logging.getLogger(__name__)

INTERP_NEAREST_ID = "interpnearest:invalidInput"


def _real_matrix(array, name: str, shape_hint: str) -> np.ndarray:
    """Return ``array`` as a contiguous 2D ``float64`` array or raise."""

    array = np.asarray(array)
    if (
        array.ndim != 2
        or array.dtype == np.bool_
        or not np.issubdtype(array.dtype, np.number)
        or np.issubdtype(array.dtype, np.complexfloating)
    ):
        raise InvalidInputError(
            INTERP_NEAREST_ID, f"'{name}' must be an {shape_hint} matrix of doubles."
        )
    return np.ascontiguousarray(array, dtype=np.float64)


def _support_radius(radius) -> float:
    radius = np.asarray(radius)
    message = "Support radius must be a finite positive scalar double."
    if (
        radius.size != 1
        or radius.dtype == np.bool_
        or not isinstance(radius.item(), Real)
    ):
        raise DomainError(INTERP_NEAREST_ID, message)
    c = float(radius.item())
    if not np.isfinite(c) or c <= 0:
        raise DomainError(INTERP_NEAREST_ID, message)
    return c


def interp_nearest(
    points,
    centers,
    values,
    radius,
    return_index: bool = False,
    gpu: bool | None = None,
):
    """Interpolate center values onto query points by nearest center.

    Each query point takes the value row of the closest center whose squared
    distance is strictly below ``radius**2``. Among equidistant centers the
    first one in row order wins.

    Parameters
    ----------
    points:
        Query points, shape ``(np, d)``.
    centers:
        Centers, shape ``(nc, d)``.
    values:
        Center values, shape ``(nc, nv)``; row ``i`` belongs to ``centers[i]``.
    radius:
        Support radius. Must be a finite scalar greater than zero.
    return_index:
        Also return the 1-based index of the matched center.
    gpu:
        Use the CUDA backend. ``None`` defers to ``DENSEPY_GPU``.

    Returns
    -------
    numpy.ndarray or tuple[numpy.ndarray, numpy.ndarray]
        Interpolated values of shape ``(np, nv)``, NaN for query points with no
        center inside the radius. With ``return_index``, also an int64 array of
        shape ``(np,)`` holding 1-based center indices, 0 where unmatched.

    Raises
    ------
    InvalidInputError
        If an array is not a 2D real matrix, the column counts of ``points``
        and ``centers`` differ, or ``values`` and ``centers`` have different
        row counts.
    DomainError
        If ``radius`` is not a finite positive scalar.
    """

    points = _real_matrix(points, "points", "[NxD]")

    centers = _real_matrix(centers, "centers", "[MxD]")
    if centers.shape[1] != points.shape[1]:
        raise InvalidInputError(
            INTERP_NEAREST_ID,
            f"'centers' must be an [MxD] matrix of doubles with D={points.shape[1]}.",
        )

    values = _real_matrix(values, "values", "[MxV]")
    if values.shape[0] != centers.shape[0]:
        raise InvalidInputError(
            INTERP_NEAREST_ID,
            f"'values' must be an [MxV] matrix of doubles with M={centers.shape[0]}.",
        )

    c = _support_radius(radius)

    ops = get_point_kernel_ops(gpu)
    log.debug(
        f"interp_nearest ({ops.name}): {points.shape[0]} points, "
        f"{centers.shape[0]} centers, {values.shape[1]} value columns ..."
    )
    start = time()
    out, index = ops.interp_nearest(points, centers, values, c * c)
    log.debug(f"\t done in {time() - start} seconds.")

    if return_index:
        return out, index
    return out


def kmatrix2(a, b, gpu: bool | None = None) -> np.ndarray:
    """Thin-plate spline kernel matrix between two sets of 2D points.

    ``K[i, j] = d2 * ln(d2)`` with ``d2`` the squared Euclidean distance between
    ``a[i]`` and ``b[j]``, and ``K[i, j] = 0`` where the points coincide.

    Parameters
    ----------
    a:
        First point set, shape ``(na, 2)``. Indexes the rows of ``K``.
    b:
        Second point set, shape ``(nb, 2)``. Indexes the columns of ``K``.
    gpu:
        Use the CUDA backend. ``None`` defers to ``DENSEPY_GPU``.

    Returns
    -------
    numpy.ndarray
        Dense ``(na, nb)`` float64 matrix.

    Notes
    -----
    There is NO shape checking, for speed: this is called from the inner loop of
    spline fitting. Inputs are only made contiguous ``float64``. Point sets with
    fewer than two columns read out of bounds; extra columns are ignored.
    """

    a = np.ascontiguousarray(a, dtype=np.float64)
    b = np.ascontiguousarray(b, dtype=np.float64)
    return get_point_kernel_ops(gpu).kmatrix2(a, b)
