"""Module which contains enumerated variables shared across the project."""

from enum import IntEnum
from numbers import Integral

from .globals import *

__all__ = ["enum_factory", "HitTypeEnum", "ShapeEnum"]


def enum_factory(enum, value):
    """Parses an enumerated object from string name(s) to value(s).

    Parameters
    ----------
    enum : str
        Name of the enumerated type
    value : Union[str, int, List[Union[str, int]]]
        Name or names of the enumerated objects (from config)

    Returns
    -------
    Union[int, List[int]]
        Value or values of the enumerated objects
    """
    # Get the enumerated type
    ENUM_DICT = {"view": HitTypeEnum, "shape": ShapeEnum}
    if enum not in ENUM_DICT:
        raise ValueError(
            f"Enumerated type not recognized: {enum}. Must be one of "
            f"{list(ENUM_DICT.keys())}."
        )
    enum = ENUM_DICT[enum]

    # Translate enumerated strings into values
    if isinstance(value, (str, Integral)):
        return _parse_enum(enum, value)

    return [_parse_enum(enum, v) for v in value]


def _parse_enum(enum, value):
    if isinstance(value, Integral):
        return enum(int(value)).value

    name = value.upper()
    if name not in enum.__members__:
        raise ValueError(
            f"Enumerated object not recognized: {value}. Must be one "
            f"of {[e.name for e in enum]}."
        )

    return enum[name].value


class HitTypeEnum(IntEnum):
    """Enumerates all possible hit types."""

    U = TPC_VIEW_U
    V = TPC_VIEW_V
    W = TPC_VIEW_W
    THREE_D = TPC_3D


class ShapeEnum(IntEnum):
    """Enumerates all possible candidate topologies."""

    SHOWER = SHOWR_SHP
    TRACK = TRACK_SHP
