"""Exceptions raised by the kernel wrappers.

Every validation failure carries an ``identifier`` naming the kernel and the
failure category (for example ``interpnearest:invalidInput``) next to a
human-readable ``message``. The classes also derive from the matching builtin
exception, so callers may catch ``ValueError`` / ``IndexError`` instead.
"""

from __future__ import annotations


class KernelError(Exception):
    """Base class for kernel validation failures.

    Parameters
    ----------
    identifier:
        Category string of the form ``"<kernel>:<category>"``.
    message:
        Human-readable description of the failure.
    """

    def __init__(self, identifier: str, message: str):
        super().__init__(f"{identifier}: {message}")
        self.identifier = identifier
        self.message = message


class InvalidInputError(KernelError, ValueError):
    """Shape, dtype or dimensionality mismatch of an input buffer."""


class DomainError(KernelError, ValueError):
    """A scalar parameter lies outside its domain."""


class IndexOutOfRangeError(KernelError, IndexError):
    """A supplied index does not address an element of the buffer."""
