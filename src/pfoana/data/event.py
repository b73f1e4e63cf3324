"""Module with a data class object which represents one event.

An event is a store of named object lists (truth particles, PFOs, clusters,
...), as produced by the upstream reconstruction.
"""

from dataclasses import dataclass
from typing import Dict, List

from pfoana.utils.errors import MissingListError

from .base import DataBase

__all__ = ["Event"]


@dataclass(eq=False)
class Event(DataBase):
    """Event information and named object lists.

    Attributes
    ----------
    run : int
        Run ID
    subrun : int
        Sub-run ID
    event : int
        Event ID
    lists : Dict[str, List[object]]
        Named lists of objects available in the event
    """

    run: int = -1
    subrun: int = -1
    event: int = -1
    lists: Dict[str, List[object]] = None

    # Attributes which hold free-form dictionaries
    _dict_attrs = ("lists",)

    def has_list(self, name):
        """Checks whether a named list exists in the event.

        Parameters
        ----------
        name : str
            Name of the list

        Returns
        -------
        bool
            `True` if the list exists
        """
        return name in self.lists

    def get_list(self, name):
        """Fetches a named list of objects.

        Parameters
        ----------
        name : str
            Name of the list

        Returns
        -------
        List[object]
            List of objects

        Raises
        ------
        MissingListError
            If the list does not exist in the event
        """
        if name not in self.lists:
            raise MissingListError(name)

        return self.lists[name]

    def set_list(self, name, objects):
        """Stores a named list of objects, replacing any existing one.

        Parameters
        ----------
        name : str
            Name of the list
        objects : List[object]
            List of objects
        """
        self.lists[name] = list(objects)

    def save_list(self, source, target):
        """Moves the objects of a source list into a target list.

        The target list is created if it does not exist, otherwise the
        objects are appended to it. The source list is removed.

        Parameters
        ----------
        source : str
            Name of the list to move objects from
        target : str
            Name of the list to move objects to

        Returns
        -------
        int
            Number of objects moved

        Raises
        ------
        MissingListError
            If the source list does not exist in the event
        """
        objects = self.get_list(source)
        if not len(objects) or source == target:
            return 0

        self.lists.setdefault(target, []).extend(objects)
        del self.lists[source]

        return len(objects)

    def __eq__(self, other):
        if self.__class__ != other.__class__:
            return False

        return (self.run, self.subrun, self.event) == (
            other.run,
            other.subrun,
            other.event,
        ) and self.lists == other.lists
