"""Data structures shared across the package.

- :class:`CaloHit`, :class:`Pfo`, :class:`MCParticle` and :class:`Event`
  describe the input of the analysis (produced upstream)
- :class:`TrackState` and :class:`ShowerPCA` hold direction fit outputs
- :class:`TruthRecord` and :class:`EventRecord` form the output record
"""

from .event import Event
from .hit import CaloHit
from .particle import MCParticle
from .pfo import Pfo
from .record import RECORD_FIELDS, EventFeatureSet, EventRecord, TruthRecord
from .track import ShowerPCA, TrackState
