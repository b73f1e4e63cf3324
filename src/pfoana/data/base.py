"""Module with a parent class of all data structures."""

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    # Fixed-length attributes as (key, size) or (key, (size, dtype)) pairs
    _fixed_length_attrs = ()

    # Variable-length attributes as (key, dtype) or (key, (width, dtype)) pairs
    _var_length_attrs = ()

    # Attributes which hold lists of objects
    _list_attrs = ()

    # Attributes which hold free-form dictionaries
    _dict_attrs = ()

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Gives default values to array-like, list and dictionary attributes.
        If a default value was provided in the attribute definition, all
        instances of this class would point to the same memory location. It
        also casts array-like inputs (e.g. lists parsed from YAML) to arrays.
        """
        # Provide default values to the fixed-length array attributes
        for attr, size in self._fixed_length_attrs:
            dtype = np.float64
            if isinstance(size, tuple):
                size, dtype = size
            if getattr(self, attr) is None:
                setattr(self, attr, np.full(size, -np.inf, dtype=dtype))
            else:
                value = np.asarray(getattr(self, attr), dtype=dtype)
                assert value.shape == (size,), (
                    f"Attribute `{attr}` of {self.__class__.__name__} must "
                    f"have {size} components, got shape {value.shape}."
                )
                setattr(self, attr, value)

        # Provide default values to the variable-length array attributes
        for attr, dtype in self._var_length_attrs:
            width = None
            if isinstance(dtype, tuple):
                width, dtype = dtype
            if getattr(self, attr) is None:
                shape = 0 if width is None else (0, width)
                setattr(self, attr, np.empty(shape, dtype=dtype))
            else:
                value = np.asarray(getattr(self, attr), dtype=dtype)
                if width is not None:
                    value = value.reshape(-1, width)
                setattr(self, attr, value)

        # Provide default values to the list and dictionary attributes
        for attr in self._list_attrs:
            if getattr(self, attr) is None:
                setattr(self, attr, [])
            else:
                setattr(self, attr, list(getattr(self, attr)))

        for attr in self._dict_attrs:
            if getattr(self, attr) is None:
                setattr(self, attr, {})

    def __eq__(self, other):
        """Checks that all attributes of two class instances are the same.

        This overloads the default dataclass `__eq__` method to include an
        appopriate check for vector (numpy) attributes.

        Parameters
        ----------
        other : obj
            Other instance of the same object class

        Returns
        -------
        bool
            `True` if all attributes of both objects are identical
        """
        # Check that the two objects belong to the same class
        if self.__class__ != other.__class__:
            return False

        # Check that all base attributes are identical
        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if isinstance(v, np.ndarray):
                if v.shape != v_other.shape or (v_other != v).any():
                    return False
            elif v != v_other:
                return False

        return True
