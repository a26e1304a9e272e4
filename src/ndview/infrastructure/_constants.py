"""
Module-level defaults for array construction.

These values are read at call time by the constructors and factories, so
they can be overridden per call through the corresponding keyword arguments
(`dtype=`, `backend=`).
"""

import numpy as np

# Element dtype for numeric factories (`zeros`, `ones`) when none is given
DEFAULT_DTYPE = np.float32

# Backend selected for non-ndarray buffers (lists, tuples, generators)
DEFAULT_BACKEND_FOR_SEQUENCES = "python"

# Backend selected for numpy.ndarray buffers
DEFAULT_BACKEND_FOR_NDARRAYS = "numpy"
