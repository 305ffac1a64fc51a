"""Environment-variable helpers for point-kernel backends.

These helpers centralize parsing of the environment variables that control
backend selection (``DENSEPY_GPU``) and CUDA launch geometry
(``DENSEPY_CUDA_THREADS_PER_BLOCK``, ``DENSEPY_CUDA_BLOCK_EDGE``).

Notes
-----
These are intentionally forgiving: invalid inputs fall back to defaults rather
than raising, to keep CLI and batch runs robust.
"""

from __future__ import annotations

import os

GPU_ENV = "DENSEPY_GPU"
THREADS_PER_BLOCK_ENV = "DENSEPY_CUDA_THREADS_PER_BLOCK"
BLOCK_EDGE_ENV = "DENSEPY_CUDA_BLOCK_EDGE"


def parse_bool_env(name: str, *, default: bool) -> bool:
    """Read an on/off switch such as ``DENSEPY_GPU``.

    ``1``, ``true``, ``yes`` and ``on`` (any case) switch on; ``0``, ``false``,
    ``no`` and ``off`` switch off. An unset, empty or unrecognised value gives
    ``default``.
    """

    raw = os.environ.get(name, "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def parse_int_env(name: str, *, default: int, minimum: int = 1) -> int:
    """Read a CUDA launch size such as ``DENSEPY_CUDA_THREADS_PER_BLOCK``.

    Parameters
    ----------
    name:
        Environment variable holding a decimal integer.
    default:
        Launch size used when the variable is unset or not an integer.
    minimum:
        Smallest launch size returned; smaller values are raised to it.

    Returns
    -------
    int
        The launch size, never below ``minimum``.
    """

    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


def gpu_requested() -> bool:
    """Whether ``DENSEPY_GPU`` asks for the CUDA backend (default: no)."""

    return parse_bool_env(GPU_ENV, default=False)
