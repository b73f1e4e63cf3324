"""Post-processor which reorganizes the named lists of an event."""

from pfoana.config.errors import ConfigValidationError
from pfoana.utils.logger import logger

from .base import PostBase

__all__ = ["ListMergingProcessor"]


class ListMergingProcessor(PostBase):
    """Moves the objects of source lists into target lists.

    Each source list is paired with the target list at the same position.
    The objects are appended to the target list (created if needed) and the
    source list is removed. Missing or empty source lists are reported but
    do not interrupt the processing.

    Typical configuration should look like:

    .. code-block:: yaml

        post:
          merge_lists:
            source_pfo_list_names: [TrackParticles3D, ShowerParticles3D]
            target_pfo_list_names: [ParticleFlowObjects, ParticleFlowObjects]
    """

    # Name of the post-processor (as specified in the configuration)
    name = "merge_lists"

    # Alternative allowed names of the post-processor
    aliases = ("list_merging",)

    def __init__(
        self,
        source_cluster_list_names=(),
        target_cluster_list_names=(),
        source_pfo_list_names=(),
        target_pfo_list_names=(),
    ):
        """Store the list pairs.

        Parameters
        ----------
        source_cluster_list_names : List[str], optional
            Names of the cluster lists to move objects from
        target_cluster_list_names : List[str], optional
            Names of the cluster lists to move objects to
        source_pfo_list_names : List[str], optional
            Names of the PFO lists to move objects from
        target_pfo_list_names : List[str], optional
            Names of the PFO lists to move objects to
        """
        self.pairs = []
        for obj, sources, targets in (
            ("cluster", source_cluster_list_names, target_cluster_list_names),
            ("pfo", source_pfo_list_names, target_pfo_list_names),
        ):
            if len(sources) != len(targets):
                raise ConfigValidationError(
                    f"Invalid list configuration: {len(sources)} source {obj} "
                    f"list(s) for {len(targets)} target {obj} list(s)."
                )

            for source, target in zip(sources, targets):
                self.pairs.append((obj, source, target))

    def process(self, event):
        """Moves the objects of each source list into its target list.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        Dict[str, int]
            Number of objects moved into each target list
        """
        counts = {}
        for obj, source, target in self.pairs:
            if not event.has_list(source):
                logger.warning(
                    "%s list not found, source: %s, target: %s",
                    obj.capitalize(),
                    source,
                    target,
                )
                continue

            count = event.save_list(source, target)
            if not count:
                logger.warning(
                    "No %ss to move, source: %s, target: %s", obj, source, target
                )

            counts[target] = counts.get(target, 0) + count

        return counts
