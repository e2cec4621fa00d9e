#
#    Copyright (c) 2018-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#

"""Convenience functions for ConfigObj"""

import logging
from io import StringIO

import configobj

import lunarphase

log = logging.getLogger(__name__)

# Defaults used when the host supplies no configuration file, or leaves options out of it.
DEFAULT_CONFIG_STR = """
# Set to 1 for extra debug information
debug = 0

# Label used in log messages
log_label = lunarphase

# Tailor the logging here. See lunarutil.logger for the defaults.
[Logging]
"""


def search_up(d, k, *default):
    """Search a ConfigObj dictionary for a key. If it's not found, try my parent, and so on
    to the root.

    d: An instance of configobj.Section

    k: A key to be searched for. If not found in d, it's parent will be searched

    default: If the key is not found, then the default is returned. If no default is given,
    then an AttributeError exception is raised.

    Example:

    >>> c = configobj.ConfigObj({"debug": "0", "Logging": {"root": {"level": "INFO"}}})
    >>> print(search_up(c['Logging']['root'], 'debug'))
    0
    >>> print(search_up(c['Logging'], 'log_label', 'lunarphase'))
    lunarphase
    >>> try:
    ...   print(search_up(c['Logging'], 'log_label'))
    ... except AttributeError:
    ...   print('not found')
    not found
    """
    if k in d:
        return d[k]
    if d.parent is d:
        if len(default):
            return default[0]
        else:
            raise AttributeError(k)
    else:
        return search_up(d.parent, k, *default)


def conditional_merge(a_dict, b_dict):
    """Merge fields from b_dict into a_dict, but only if they do not yet
    exist in a_dict

    Example:
    >>> a = configobj.ConfigObj({"debug": "1"})
    >>> conditional_merge(a, {"debug": "0", "log_label": "moon", "Logging": {}})
    >>> print(a['debug'], a['log_label'], a['Logging'])
    1 moon {}
    """
    # Go through each key in b_dict
    for k in b_dict:
        if isinstance(b_dict[k], dict):
            if k not in a_dict:
                # It's a new section. Initialize it...
                a_dict[k] = {}
                # ... and transfer over the section comments, if available
                try:
                    a_dict.comments[k] = b_dict.comments[k]
                except AttributeError:
                    pass
            conditional_merge(a_dict[k], b_dict[k])
        elif k not in a_dict:
            # It's a scalar. Transfer over the value...
            a_dict[k] = b_dict[k]
            # ... then its comments, if available:
            try:
                a_dict.comments[k] = b_dict.comments[k]
            except AttributeError:
                pass


def config_from_str(input_str):
    """Return a ConfigObj from a string. Values will be in Unicode."""
    return configobj.ConfigObj(StringIO(input_str), encoding='utf-8', default_encoding='utf-8')


def read_config(config_path=None, defaults=None):
    """Read a configuration file, filling in anything missing from the defaults.

    Args:
        config_path (str|None): Path to a configuration file. If None, only the defaults
            are used.
        defaults (dict|None): The defaults. If None, DEFAULT_CONFIG_STR is used.

    Returns:
        tuple[str|None, configobj.ConfigObj]: The path and the resulting configuration.

    Raises:
        lunarphase.ConfigError: The file is missing or cannot be parsed.
    """
    if defaults is None:
        defaults = config_from_str(DEFAULT_CONFIG_STR)

    if config_path is None:
        config_dict = configobj.ConfigObj(encoding='utf-8', default_encoding='utf-8')
    else:
        try:
            config_dict = configobj.ConfigObj(config_path, file_error=True, encoding='utf-8',
                                              default_encoding='utf-8')
        except (IOError, configobj.ConfigObjError) as e:
            raise lunarphase.ConfigError("Unable to read configuration file %s: %s"
                                         % (config_path, e)) from e
        log.debug("Read configuration file %s", config_path)

    conditional_merge(config_dict, defaults)
    return config_path, config_dict
