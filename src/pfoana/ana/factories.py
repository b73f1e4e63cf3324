"""Construct an analysis script module class from its name."""

from pfoana.utils.factory import instantiate, module_dict

from . import beam


def ana_dict(name=None):
    """Builds a dictionary of available analysis script modules.

    Parameters
    ----------
    name : str, optional
        Name requested in the configuration. If it is a deprecated alias,
        a warning is issued

    Returns
    -------
    dict
        Dictionary which maps names onto analysis script classes
    """
    classes = {}
    for module in [beam]:
        classes.update(**module_dict(module, class_name=name))

    return classes


# Dictionary of available analysis script modules
ANA_DICT = ana_dict()


def ana_script_factory(name, cfg, geometry=None):
    """Instantiates an analysis script module from a configuration dictionary.

    Parameters
    ----------
    name : str
        Name of the analysis script module
    cfg : dict
        Analysis script module configuration
    geometry : Geometry, optional
        Detector geometry to provide to the analysis script

    Returns
    -------
    object
         Initialized analysis script object
    """
    # Provide the name to the configuration
    cfg["name"] = name

    # Instantiate the analysis script module
    classes = ana_dict(name)
    if geometry is not None:
        return instantiate(classes, cfg, geometry=geometry)

    return instantiate(classes, cfg)
