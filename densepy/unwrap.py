"""Phase-unwrapping helpers: ordered mask search and masked maximum.

Both scans are order dependent (first match, first occurrence), so they run
sequentially on the CPU. Arrays of any shape are accepted and flattened in
NumPy's default (row-major) order; all positions in and out are 1-based.
"""

from __future__ import annotations

import numpy as np

from densepy.errors import IndexOutOfRangeError, InvalidInputError
from densepy.functions import cpu_numba


def quickfind(tf, idx) -> int:
    """Search ``tf`` in the order given by ``idx`` for the first true value.

    Parameters
    ----------
    tf:
        Boolean array to search.
    idx:
        Integer search order, 1-based positions into the flattened ``tf``.

    Returns
    -------
    int
        The first entry of ``idx`` at which ``tf`` is true, or -1 if ``idx`` is
        empty or no scanned entry is true.

    Raises
    ------
    InvalidInputError
        If ``tf`` is not boolean or ``idx`` is not an integer array.
    IndexOutOfRangeError
        If an entry met during the scan lies outside ``[1, tf.size]``. Entries
        after the first match are not checked.
    """

    tf = np.asarray(tf)
    if tf.dtype != np.bool_:
        raise InvalidInputError(
            "quickfind:inputerror", "First input must be logical array."
        )

    idx = np.asarray(idx)
    if idx.size == 0:
        return -1
    if not np.issubdtype(idx.dtype, np.integer):
        raise InvalidInputError(
            "quickfind:inputerror", "Second input must be integer array."
        )

    found, bad = cpu_numba.quickfind(
        np.ascontiguousarray(tf).ravel(),
        np.ascontiguousarray(idx, dtype=np.int64).ravel(),
    )
    if bad >= 0:
        raise IndexOutOfRangeError(
            "quickfind:indexerror",
            f"IDX indices must be within the matrix TF "
            f"(entry {bad + 1} is {idx.ravel()[bad]}, TF has {tf.size} elements).",
        )
    return int(found)


def quickmax(matrix, mask) -> tuple[float, int]:
    """Maximum value of ``matrix`` where ``mask`` is true.

    Parameters
    ----------
    matrix:
        Real array to search.
    mask:
        Boolean array with the same number of elements.

    Returns
    -------
    tuple[float, int]
        The maximum masked value and the 1-based flattened position of its
        first occurrence. ``(-inf, -1)`` if the mask has no true entry or every
        masked value is -inf.

    Raises
    ------
    InvalidInputError
        If ``matrix`` is not real, ``mask`` is not boolean, or their element
        counts differ.
    """

    matrix = np.asarray(matrix)
    if (
        matrix.dtype == np.bool_
        or not np.issubdtype(matrix.dtype, np.number)
        or np.issubdtype(matrix.dtype, np.complexfloating)
    ):
        raise InvalidInputError(
            "quickmax:inputerror", "First input must be double array"
        )

    mask = np.asarray(mask)
    if mask.dtype != np.bool_:
        raise InvalidInputError(
            "quickmax:inputerror", "Second input must be logical array"
        )

    if matrix.size != mask.size:
        raise InvalidInputError(
            "quickmax:inputerror", "MATRIX and MASK must be of the same size."
        )

    value, index = cpu_numba.quickmax(
        np.ascontiguousarray(matrix, dtype=np.float64).ravel(),
        np.ascontiguousarray(mask).ravel(),
    )
    return float(value), int(index)
