import os

# Run CUDA kernels on Numba's simulator unless the caller chose otherwise.
# Must happen before numba.cuda is first imported.
os.environ.setdefault("NUMBA_ENABLE_CUDASIM", "1")
