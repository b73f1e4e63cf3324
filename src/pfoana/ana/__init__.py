"""Analysis scripts.

Analysis scripts build one output record per event from the content of the
event store. Available scripts:
- `beam`: beam trigger information and beam candidate features
"""

from .base import AnaBase
from .beam import BeamAna
from .manager import AnaManager
