#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Utilities used when a host application starts using lunarphase"""

import logging

import lunarphase
import lunarutil.config
import lunarutil.logger
from lunarutil.config import search_up
from lunarutil.lunarutil import tobool

log = logging.getLogger(__name__)


def start(config_path=None):
    """Read the config file, set up logging, and log various bits of information.

    Args:
        config_path (str|None): Path to a configuration file. If None, defaults are used.

    Returns:
        tuple[str|None, configobj.ConfigObj]: The path and the configuration dictionary.

    Raises:
        lunarphase.ConfigError: The configuration could not be read, or an option in it
            is unusable.
    """
    config_path, config_dict = lunarutil.config.read_config(config_path)

    try:
        lunarphase.debug = tobool(config_dict.get('debug', 0))
    except ValueError as e:
        raise lunarphase.ConfigError("Bad value for option 'debug': %s" % e) from e

    # A label in the [Logging] section takes precedence over one at the top level
    log_label = search_up(config_dict['Logging'], 'log_label', 'lunarphase')

    # Customize the logging with user settings.
    try:
        lunarutil.logger.setup(log_label, config_dict)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        lunarutil.logger.log_traceback(log.error, "    ****  ")
        raise lunarphase.ConfigError("Unable to set up logger: %s" % e) from e

    # Announce the startup
    log.info("Initializing %s version %s", log_label, lunarphase.__version__)
    log.info("Config file:  %s", config_path)
    log.info("Debug:        %s", lunarphase.debug)

    return config_path, config_dict
