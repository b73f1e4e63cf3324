"""Beam candidate feature extraction from reconstructed particle-flow objects.

The package selects the beam-like particle-flow objects (PFOs) of each
event, classifies them as track-like or shower-like, estimates their
direction, counts their hits in each wire view and assembles one record
per event, along with the beam trigger information.

Subpackages
-----------
- `data`: input and output data structures
- `geo`: detector geometry service
- `math`: numerical primitives (PCA, sliding track fit)
- `reco`: candidate selection, classification and direction estimation
- `post`: event content post-processors
- `ana`: analysis scripts which build the per-event records
- `io`: event readers and record writers
- `config`: configuration loading
"""

from .version import __version__
