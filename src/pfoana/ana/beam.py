"""Beam candidate analysis script.

For every event, this script extracts the beam instrumentation (trigger)
information and, for every beam-like reconstructed candidate, the hit
counts in each wire view, the particle code and a direction estimate:
- track-like candidates use the start direction of a sliding linear fit;
- shower-like candidates use the primary axis of their 3D points.
"""

from pfoana.data import EventFeatureSet, EventRecord, TruthRecord
from pfoana.reco import (
    BeamClassifier,
    ShapeEstimator,
    ShowerEstimate,
    TrajectoryEstimator,
)
from pfoana.reco.pfo import count_view_hits, is_test_beam
from pfoana.utils.errors import MissingListError, PfoAnaError
from pfoana.utils.globals import SLIDING_FIT_HALF_WINDOW, TEST_BEAM_PROPERTY
from pfoana.utils.logger import logger

from .base import AnaBase

__all__ = ["BeamAna"]


class BeamAna(AnaBase):
    """Builds one :class:`EventRecord` per event from the beam candidates.

    Typical configuration should look like:

    .. code-block:: yaml

        ana:
          beam:
            mc_particle_list_name: Input
            pfo_list_name: ParticleFlowObjects
            tree_name: beam
    """

    # Name of the analysis script (as specified in the configuration)
    name = "beam"

    # Alternative allowed names of the analysis script
    aliases = ("protodune_beam",)

    def configure(
        self,
        mc_particle_list_name,
        pfo_list_name,
        tree_name="beam",
        half_window=SLIDING_FIT_HALF_WINDOW,
        pitch_view="w",
        beam_property=TEST_BEAM_PROPERTY,
        geometry=None,
    ):
        """Store the analysis parameters.

        Parameters
        ----------
        mc_particle_list_name : str
            Name of the truth (trigger) particle list
        pfo_list_name : str
            Name of the particle-flow object list
        tree_name : str, default 'beam'
            Name of the output table
        half_window : int, default 20
            Half-width of the sliding track fit window, in layers
        pitch_view : Union[str, int], default 'w'
            View whose wire pitch sets the layer pitch of the track fit
        beam_property : str, default 'IsTestBeam'
            Name of the PFO property which flags beam-like candidates
        geometry : Geometry, optional
            Detector geometry. If not provided, the geometry singleton is used
        """
        # Validate and store the list and table names
        self.mc_particle_list_name = self.check_name(
            "mc_particle_list_name", mc_particle_list_name
        )
        self.pfo_list_name = self.check_name("pfo_list_name", pfo_list_name)
        self.tree_name = self.check_name("tree_name", tree_name)
        self.beam_property = self.check_name("beam_property", beam_property)

        # Initialize the classifier and the direction estimators
        self.classifier = BeamClassifier(
            predicate=self.is_beam_like, pitch_view=pitch_view, geometry=geometry
        )
        self.track_estimator = TrajectoryEstimator(half_window)
        self.shower_estimator = ShapeEstimator()

        # Sequence number of the last processed event
        self.event_number = 0

    def is_beam_like(self, pfo):
        """Checks whether a candidate is flagged as beam-like.

        Parameters
        ----------
        pfo : Pfo
            Particle-flow object

        Returns
        -------
        bool
            `True` if the beam property of the PFO is set
        """
        return is_test_beam(pfo, self.beam_property)

    def get_truth_record(self, particles):
        """Builds the truth block of the record.

        The block is only populated if there is exactly one trigger particle.

        Parameters
        ----------
        particles : List[MCParticle]
            Truth (trigger) particles of the event

        Returns
        -------
        TruthRecord
            Truth block
        """
        if len(particles) == 1:
            return TruthRecord.from_particle(particles[0])

        if len(particles) > 1:
            logger.debug(
                "Event %d: %d trigger particles, truth left unset.",
                self.event_number,
                len(particles),
            )

        return TruthRecord(is_triggered=len(particles) > 0)

    def process(self, event):
        """Builds the record of one event.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        EventRecord
            Record of the event
        """
        # Count the event, whatever happens next
        self.event_number += 1

        # Fetch the truth information, which must be available
        try:
            particles = event.get_list(self.mc_particle_list_name)
        except MissingListError as err:
            logger.error("Event %d: %s", self.event_number, err)
            raise

        truth = self.get_truth_record(particles)

        # Fetch the candidates, a missing list means no candidate
        if event.has_list(self.pfo_list_name):
            pfos = event.get_list(self.pfo_list_name)
        else:
            logger.debug(
                "Event %d: PFO list `%s` not found, no candidate.",
                self.event_number,
                self.pfo_list_name,
            )
            pfos = []

        # Loop over the beam-like candidates
        features = EventFeatureSet()
        n_trk, n_shw = 0, 0
        for i, pfo in enumerate(self.classifier.select(pfos)):
            try:
                estimate = self.classifier.dispatch(pfo)
                direction = estimate.estimate(
                    self.track_estimator, self.shower_estimator
                )
            except PfoAnaError as err:
                logger.error(
                    "Event %d, beam candidate %d: %s: %s",
                    self.event_number,
                    i,
                    type(err).__name__,
                    err,
                )
                raise

            if isinstance(estimate, ShowerEstimate):
                n_shw += 1
            else:
                n_trk += 1
                if direction is None:
                    logger.debug(
                        "Event %d, beam candidate %d: empty trajectory.",
                        self.event_number,
                        i,
                    )

            features.append(*count_view_hits(pfo), pfo.particle_id, direction)

        logger.debug(
            "Event %d: %d beam candidate(s) (%d track-like, %d shower-like).",
            self.event_number,
            len(features),
            n_trk,
            n_shw,
        )

        return EventRecord(
            event_number=self.event_number,
            truth=truth,
            n_beam_pfos=n_trk + n_shw,
            n_trk_beam_pfos=n_trk,
            n_shw_beam_pfos=n_shw,
            features=features.freeze(),
        )
