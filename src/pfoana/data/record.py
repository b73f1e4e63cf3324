"""Module with the immutable per-event output record.

The record holds optional values internally (`None` for quantities which
could not be evaluated). The legacy sentinel encoding expected by the
downstream analysis tooling (maximum representable values) is only applied
when the record is converted to a row by :meth:`EventRecord.as_dict`.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from pfoana.utils.globals import DIR_UNSET, FLT_MAX, INT_MAX

__all__ = [
    "TruthRecord",
    "EventFeatureSet",
    "FrozenFeatureSet",
    "EventRecord",
    "RECORD_FIELDS",
]

# Output fields as (name, dtype, is_sequence), in the order they are written
RECORD_FIELDS = (
    ("eventNumber", np.int32, False),
    ("isTriggered", np.int32, False),
    ("beamMomentum", np.float32, False),
    ("beamPositionX", np.float32, False),
    ("beamPositionY", np.float32, False),
    ("beamPositionZ", np.float32, False),
    ("beamDirectionX", np.float32, False),
    ("beamDirectionY", np.float32, False),
    ("beamDirectionZ", np.float32, False),
    ("tof", np.float32, False),
    ("ckov0Status", np.int32, False),
    ("ckov1Status", np.int32, False),
    ("nBeamPfos", np.int32, False),
    ("nTrkBeamPfos", np.int32, False),
    ("nShwBeamPfos", np.int32, False),
    ("nHitsRecoU", np.int32, True),
    ("nHitsRecoV", np.int32, True),
    ("nHitsRecoW", np.int32, True),
    ("nHitsRecoTotal", np.int32, True),
    ("recoParticleId", np.int32, True),
    ("recoDirectionX", np.float32, True),
    ("recoDirectionY", np.float32, True),
    ("recoDirectionZ", np.float32, True),
)

Vector = Tuple[float, float, float]


def _or(value, sentinel):
    return sentinel if value is None else value


@dataclass(frozen=True)
class TruthRecord:
    """Beam trigger (truth) information of one event.

    Either all the optional attributes are set (exactly one trigger particle
    in the event) or none of them are.

    Attributes
    ----------
    is_triggered : bool
        Whether at least one trigger particle exists in the event
    momentum : float, optional
        Beam momentum (energy of the trigger particle)
    position : Tuple[float, float, float], optional
        Beam position at the entrance of the detector
    direction : Tuple[float, float, float], optional
        Beam momentum vector
    tof : float, optional
        Time-of-flight
    ckov0_status : int, optional
        Status of the first Cherenkov detector
    ckov1_status : int, optional
        Status of the second Cherenkov detector
    """

    is_triggered: bool = False
    momentum: Optional[float] = None
    position: Optional[Vector] = None
    direction: Optional[Vector] = None
    tof: Optional[float] = None
    ckov0_status: Optional[int] = None
    ckov1_status: Optional[int] = None

    @classmethod
    def from_particle(cls, particle):
        """Builds a fully populated record from a single trigger particle.

        Parameters
        ----------
        particle : MCParticle
            Trigger particle

        Returns
        -------
        TruthRecord
            Populated truth record
        """
        ckov0, ckov1 = particle.ckov_status
        return cls(
            is_triggered=True,
            momentum=float(particle.energy),
            position=tuple(float(v) for v in particle.vertex),
            direction=tuple(float(v) for v in particle.momentum),
            tof=particle.tof,
            ckov0_status=ckov0,
            ckov1_status=ckov1,
        )

    @property
    def is_set(self):
        """Whether the trigger particle information is available.

        Returns
        -------
        bool
            `True` if the record is populated
        """
        return self.momentum is not None

    def as_dict(self):
        """Converts the record to output fields, filling in sentinels.

        Returns
        -------
        dict
            Truth block of the output row
        """
        position = _or(self.position, (None,) * 3)
        direction = _or(self.direction, (None,) * 3)
        return {
            "isTriggered": int(self.is_triggered),
            "beamMomentum": _or(self.momentum, FLT_MAX),
            "beamPositionX": _or(position[0], FLT_MAX),
            "beamPositionY": _or(position[1], FLT_MAX),
            "beamPositionZ": _or(position[2], FLT_MAX),
            "beamDirectionX": _or(direction[0], FLT_MAX),
            "beamDirectionY": _or(direction[1], FLT_MAX),
            "beamDirectionZ": _or(direction[2], FLT_MAX),
            "tof": _or(self.tof, FLT_MAX),
            "ckov0Status": _or(self.ckov0_status, INT_MAX),
            "ckov1Status": _or(self.ckov1_status, INT_MAX),
        }


@dataclass
class EventFeatureSet:
    """Per-candidate features of one event, stored as parallel sequences.

    Index `i` of every sequence refers to the same candidate. Entries can
    only be added through :meth:`append`, which keeps the sequences aligned.
    """

    n_hits_u: list = field(default_factory=list)
    n_hits_v: list = field(default_factory=list)
    n_hits_w: list = field(default_factory=list)
    n_hits_total: list = field(default_factory=list)
    particle_id: list = field(default_factory=list)
    direction: list = field(default_factory=list)

    def append(self, n_hits_u, n_hits_v, n_hits_w, particle_id, direction=None):
        """Adds the features of one candidate.

        Parameters
        ----------
        n_hits_u : int
            Number of hits in the U view
        n_hits_v : int
            Number of hits in the V view
        n_hits_w : int
            Number of hits in the W view
        particle_id : int
            Particle data group code of the candidate
        direction : np.ndarray, optional
            (3) Direction estimate, `None` if it could not be estimated
        """
        self.n_hits_u.append(int(n_hits_u))
        self.n_hits_v.append(int(n_hits_v))
        self.n_hits_w.append(int(n_hits_w))
        self.n_hits_total.append(int(n_hits_u + n_hits_v + n_hits_w))
        self.particle_id.append(int(particle_id))
        if direction is not None:
            direction = tuple(float(v) for v in direction)
        self.direction.append(direction)

    def __len__(self):
        return len(self.particle_id)

    def freeze(self):
        """Returns an immutable copy of the feature set.

        Returns
        -------
        FrozenFeatureSet
            Immutable feature set
        """
        return FrozenFeatureSet(
            n_hits_u=tuple(self.n_hits_u),
            n_hits_v=tuple(self.n_hits_v),
            n_hits_w=tuple(self.n_hits_w),
            n_hits_total=tuple(self.n_hits_total),
            particle_id=tuple(self.particle_id),
            direction=tuple(self.direction),
        )


@dataclass(frozen=True)
class FrozenFeatureSet:
    """Immutable version of :class:`EventFeatureSet`."""

    n_hits_u: Tuple[int, ...] = ()
    n_hits_v: Tuple[int, ...] = ()
    n_hits_w: Tuple[int, ...] = ()
    n_hits_total: Tuple[int, ...] = ()
    particle_id: Tuple[int, ...] = ()
    direction: Tuple[Optional[Vector], ...] = ()

    def __len__(self):
        return len(self.particle_id)


@dataclass(frozen=True)
class EventRecord:
    """Immutable record of the features of one event.

    Attributes
    ----------
    event_number : int
        Sequence number of the event in the process
    truth : TruthRecord
        Beam trigger information
    n_beam_pfos : int
        Number of beam-like candidates
    n_trk_beam_pfos : int
        Number of track-like beam candidates
    n_shw_beam_pfos : int
        Number of shower-like beam candidates
    features : FrozenFeatureSet
        Per-candidate features
    """

    event_number: int
    truth: TruthRecord = field(default_factory=TruthRecord)
    n_beam_pfos: int = 0
    n_trk_beam_pfos: int = 0
    n_shw_beam_pfos: int = 0
    features: FrozenFeatureSet = field(default_factory=FrozenFeatureSet)

    def __post_init__(self):
        """Checks the internal consistency of the record."""
        assert self.n_beam_pfos == self.n_trk_beam_pfos + self.n_shw_beam_pfos, (
            "The number of beam candidates must be the sum of the number "
            "of track-like and shower-like candidates."
        )
        assert len(self.features) == self.n_beam_pfos, (
            f"The number of feature entries ({len(self.features)}) does not "
            f"match the number of beam candidates ({self.n_beam_pfos})."
        )

    def as_dict(self):
        """Converts the record to an output row, filling in sentinels.

        The keys are ordered as in :data:`RECORD_FIELDS`. Scalars are cast
        to their output type, per-candidate sequences are returned as numpy
        arrays.

        Returns
        -------
        dict
            Output row
        """
        feats = self.features
        dirs = [_or(d, (DIR_UNSET,) * 3) for d in feats.direction]
        dirs = np.array(dirs, dtype=np.float32).reshape(-1, 3)
        row = {"eventNumber": self.event_number, **self.truth.as_dict()}
        row["nBeamPfos"] = self.n_beam_pfos
        row["nTrkBeamPfos"] = self.n_trk_beam_pfos
        row["nShwBeamPfos"] = self.n_shw_beam_pfos
        row["nHitsRecoU"] = np.array(feats.n_hits_u, dtype=np.int32)
        row["nHitsRecoV"] = np.array(feats.n_hits_v, dtype=np.int32)
        row["nHitsRecoW"] = np.array(feats.n_hits_w, dtype=np.int32)
        row["nHitsRecoTotal"] = np.array(feats.n_hits_total, dtype=np.int32)
        row["recoParticleId"] = np.array(feats.particle_id, dtype=np.int32)
        row["recoDirectionX"] = dirs[:, 0]
        row["recoDirectionY"] = dirs[:, 1]
        row["recoDirectionZ"] = dirs[:, 2]

        return {
            key: row[key] if is_seq else dtype(row[key])
            for key, dtype, is_seq in RECORD_FIELDS
        }
