"""Module which contains all global variables shared across the project."""

import numpy as np

# Hit types (views) of calorimetric hits
TPC_VIEW_U = 0  # First induction view
TPC_VIEW_V = 1  # Second induction view
TPC_VIEW_W = 2  # Collection view
TPC_3D = 3  # Hits matched across views into 3D space

# Views which correspond to a physical wire plane
WIRE_VIEWS = (TPC_VIEW_U, TPC_VIEW_V, TPC_VIEW_W)

# Labels of the wire views
VIEW_LABELS = {TPC_VIEW_U: "u", TPC_VIEW_V: "v", TPC_VIEW_W: "w"}

# Particle data group codes
E_MINUS = 11
MU_MINUS = 13
PI_PLUS = 211
PROTON = 2212
PHOTON = 22

# Shape ID of each type of reconstructed candidate
SHOWR_SHP = 0
TRACK_SHP = 1

# Sentinel values written in place of missing quantities
FLT_MAX = float(np.finfo(np.float32).max)
INT_MAX = int(np.iinfo(np.int32).max)
DIR_UNSET = float(INT_MAX)

# Default half-width of the sliding track fit window (in layers)
SLIDING_FIT_HALF_WINDOW = 20

# Name of the PFO metadata property which flags beam-like candidates
TEST_BEAM_PROPERTY = "IsTestBeam"
