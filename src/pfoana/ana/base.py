"""Base class of all analysis scripts."""

from abc import ABC, abstractmethod

from pfoana.config.errors import ConfigValidationError

__all__ = ["AnaBase"]


class AnaBase(ABC):
    """Parent class of all analysis scripts.

    An analysis script is configured once and then called on every event.
    Each call returns one record which is handed to the output writer under
    the name of the script table (`tree_name`).

    Attributes
    ----------
    name : str
        Name of the analysis script (to call it from a configuration file)
    aliases : Tuple[str]
        Alternative allowed names of the analysis script
    tree_name : str
        Name of the output table the records are written to
    """

    # Name of the analysis script (as specified in the configuration)
    name = None

    # Alternative allowed names of the analysis script
    aliases = ()

    def __init__(self, **options):
        """Initialize the analysis script from its configuration.

        Parameters
        ----------
        **options : dict
            Configuration options of the analysis script
        """
        self.tree_name = None
        self.configure(**options)

    @abstractmethod
    def configure(self, **options):
        """Parses and validates the configuration of the analysis script.

        Parameters
        ----------
        **options : dict
            Configuration options of the analysis script
        """
        raise NotImplementedError

    @abstractmethod
    def process(self, event):
        """Runs the analysis script on one event.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        object
            Output record of the event (must provide `as_dict()`)
        """
        raise NotImplementedError

    @staticmethod
    def check_name(key, value):
        """Checks that a configured name is a non-empty string.

        Parameters
        ----------
        key : str
            Name of the configuration parameter
        value : object
            Configured value

        Returns
        -------
        str
            Validated name

        Raises
        ------
        ConfigValidationError
            If the value is not a non-empty string
        """
        if not isinstance(value, str) or not value.strip():
            raise ConfigValidationError(
                f"The `{key}` parameter must be a non-empty string, got {value!r}."
            )

        return value

    def __call__(self, event):
        """Runs the analysis script on one event.

        Parameters
        ----------
        event : Event
            Event to process

        Returns
        -------
        object
            Output record of the event
        """
        return self.process(event)
