"""Construct a post-processor module class from its name."""

from pfoana.utils.factory import instantiate, module_dict

from . import merge


def post_dict(name=None):
    """Builds a dictionary of available post-processor modules.

    Parameters
    ----------
    name : str, optional
        Name requested in the configuration. If it is a deprecated alias,
        a warning is issued

    Returns
    -------
    dict
        Dictionary which maps names onto post-processor classes
    """
    classes = {}
    for module in [merge]:
        classes.update(**module_dict(module, class_name=name))

    return classes


# Dictionary of available post-processor modules
POST_DICT = post_dict()


def post_processor_factory(name, cfg):
    """Instantiates a post-processor module from a configuration dictionary.

    Parameters
    ----------
    name : str
        Name of the post-processor module
    cfg : dict
        Post-processor module configuration

    Returns
    -------
    object
         Initialized post-processor object
    """
    # Provide the name to the configuration
    cfg["name"] = name

    # Instantiate the post-processor module
    return instantiate(post_dict(name), cfg)
