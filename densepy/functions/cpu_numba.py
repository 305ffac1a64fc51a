from numba import jit, prange, float64, int64

import numpy as np


@jit(nopython=True, parallel=True, nogil=True, cache=True)
def interp_nearest(
    points: np.ndarray,
    centers: np.ndarray,
    values: np.ndarray,
    radius_sq: float,
):
    """Nearest-center interpolation with a finite support radius.

    Parameters
    ----------
    points : np.ndarray
        Query points of shape `(np, d)`.
    centers : np.ndarray
        Centers of shape `(nc, d)`.
    values : np.ndarray
        Center values of shape `(nc, nv)`. Row `i` belongs to `centers[i]`.
    radius_sq : float
        Squared support radius. A center is accepted only if its squared
        distance is strictly below the smallest distance seen so far, which
        starts at `radius_sq`.

    Returns
    -------
        A tuple `(out, index)`. `out` has shape `(np, nv)` and holds the value row
        of the nearest center, or NaN where no center lies inside the radius.
        `index` holds the 1-based row of the nearest center, 0 if unmatched.

    """
    point_number = points.shape[0]
    center_number = centers.shape[0]
    dimensions = points.shape[1]
    channels = values.shape[1]

    out = np.empty((point_number, channels), dtype=float64)
    index = np.zeros(point_number, dtype=int64)

    for ip in prange(point_number):
        min_dsq = radius_sq
        nearest = -1

        for ic in range(center_number):
            dsq = 0.0
            for k in range(dimensions):
                d = points[ip, k] - centers[ic, k]
                dsq += d * d

            if dsq < min_dsq:
                min_dsq = dsq
                nearest = ic
                # exact hit, nothing closer exists
                if dsq == 0.0:
                    break

        if nearest >= 0:
            index[ip] = nearest + 1
            for k in range(channels):
                out[ip, k] = values[nearest, k]
        else:
            for k in range(channels):
                out[ip, k] = np.nan

    return out, index


@jit(nopython=True, parallel=True, nogil=True, fastmath=True, cache=True)
def kmatrix2(a: np.ndarray, b: np.ndarray):
    """Thin-plate spline kernel `r^2 ln(r^2)` between two sets of 2D points.

    No bounds checking is done. Both inputs must have exactly two columns.

    Parameters
    ----------
    a : np.ndarray
        First point set of shape `(na, 2)`, the rows of the output.
    b : np.ndarray
        Second point set of shape `(nb, 2)`, the columns of the output.

    Returns
    -------
        The dense kernel matrix of shape `(na, nb)`. Coincident points give 0.

    """
    na = a.shape[0]
    nb = b.shape[0]

    k = np.zeros((na, nb), dtype=float64)

    for i in prange(na):
        for j in range(nb):
            dx = a[i, 0] - b[j, 0]
            dy = a[i, 1] - b[j, 1]
            dsq = dx * dx + dy * dy
            if dsq > 0.0:
                k[i, j] = dsq * np.log(dsq)

    return k


@jit(nopython=True, nogil=True, cache=True)
def quickfind(tf: np.ndarray, idx: np.ndarray):
    """Search a flat boolean array in a given order for the first true entry.

    Parameters
    ----------
    tf : np.ndarray
        Flat boolean array.
    idx : np.ndarray
        Flat int64 array of 1-based positions into `tf`, scanned in order.

    Returns
    -------
        A tuple `(found, bad)`. `found` is the first entry of `idx` at which
        `tf` is true, or -1. `bad` is the 0-based position in `idx` of the first
        entry outside `[1, tf.size]`, or -1 if the scan met none. Scanning stops
        at the first match or the first bad entry, whichever comes first.

    """
    size = tf.size

    for k in range(idx.size):
        i = idx[k]
        if i < 1 or i > size:
            return -1, k
        if tf[i - 1]:
            return i, -1

    return -1, -1


@jit(nopython=True, nogil=True, cache=True)
def quickmax(matrix: np.ndarray, mask: np.ndarray):
    """Maximum of a flat array over a boolean mask.

    Parameters
    ----------
    matrix : np.ndarray
        Flat float64 array.
    mask : np.ndarray
        Flat boolean array of the same size.

    Returns
    -------
        A tuple `(value, index)` with the maximum masked value and the 1-based
        position of its first occurrence, or `(-inf, -1)` if no masked value
        exceeds -inf.

    """
    value = -np.inf
    index = -1

    for k in range(matrix.size):
        if mask[k] and matrix[k] > value:
            value = matrix[k]
            index = k

    if index != -1:
        index += 1

    return value, index
