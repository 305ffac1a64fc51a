from .errors import DomainError, IndexOutOfRangeError, InvalidInputError, KernelError
from .spline import interp_nearest, kmatrix2
from .unwrap import quickfind, quickmax

__version__ = "0.1.0"
