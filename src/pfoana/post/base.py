"""Contains base class of all post-processors."""

from abc import ABC, abstractmethod

__all__ = ["PostBase"]


class PostBase(ABC):
    """Base class of all post-processors.

    Post-processors modify the content of the event store (e.g. reorganize
    its named lists) before the analysis scripts are run on it.

    Attributes
    ----------
    name : str
        Name of the post-processor as defined in the configuration file
    aliases : Tuple[str]
        Alternative acceptable names for a post-processor
    """

    # Name of the post-processor (as specified in the configuration)
    name = None

    # Alternative allowed names of the post-processor
    aliases = ()

    def __call__(self, event):
        """Calls the post processor on one event.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        dict
            Summary of the changes made to the event, if any
        """
        return self.process(event)

    @abstractmethod
    def process(self, event):
        """Place-holder method to be defined in each post-processor.

        Parameters
        ----------
        event : Event
            Event to process
        """
        raise NotImplementedError
