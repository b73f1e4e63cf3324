"""Readers of the analysis input and output."""

from .hdf5 import HDF5RecordReader
from .yaml import YAMLReader

__all__ = ["YAMLReader", "HDF5RecordReader"]
