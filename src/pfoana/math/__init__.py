"""Module with fast, Numba-accelerated, compiled math routines.

This includes multiple submodules:
- `decomposition.py` includes principal component analysis routines
- `fit.py` includes the sliding local-linear trajectory fit
"""

# Expose submodules
from . import decomposition, fit
