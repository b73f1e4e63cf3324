"""Writers of the analysis output."""

from .hdf5 import HDF5Writer

__all__ = ["HDF5Writer"]
