"""Reconstruction of beam candidate features.

- `pfo`: access to the hits, points and vertex of a candidate (view projection)
- `classify`: selection of beam-like candidates and track/shower dispatch
- `direction`: trajectory (tracks) and shape (showers) direction estimators
"""

from .classify import BeamClassifier, ShowerEstimate, TrackEstimate
from .direction import ShapeEstimator, TrajectoryEstimator
