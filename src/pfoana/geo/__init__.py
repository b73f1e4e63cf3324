"""Detector geometry service.

Provides the wire pitch of each readout view, shared by all TPC volumes.
"""

from .base import Geometry, TPCVolume
from .factories import geo_factory
from .manager import GeoManager
