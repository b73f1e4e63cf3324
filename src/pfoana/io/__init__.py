"""Input/output of events and analysis records."""

from .factories import reader_factory, writer_factory
from .parse import parse_event
from .read import HDF5RecordReader, YAMLReader
from .write import HDF5Writer
