#
#    Copyright (c) 2020-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""lunarphase logging facility"""

import logging.config
from io import StringIO

import configobj

import lunarphase

# The logging defaults. Note that two kinds of placeholders are used:
#
#  {value}: these are plugged in by the function setup().
#  %(value)s: these are plugged in by the Python logging module.
#
LOGGING_STR = """[Logging]
    version = 1
    disable_existing_loggers = False

    # Root logger
    [[root]]
      level = {log_level}
      handlers = console,

    # Additional loggers would go in the following section. This is useful for tailoring logging
    # for individual modules.
    [[loggers]]

    # Definitions of possible logging destinations
    [[handlers]]

        # Log to console
        [[[console]]]
            level = DEBUG
            formatter = standard
            class = logging.StreamHandler
            # Alternate choice is 'ext://sys.stdout'
            stream = ext://sys.stderr

        # Log to a set of rotating files. Add 'rotate' to the root handlers to use it.
        [[[rotate]]]
            level = DEBUG
            formatter = verbose
            class = logging.handlers.RotatingFileHandler
            filename = {process_name}.log
            maxBytes = 10000000
            backupCount = 4
            delay = True

    # How to format log messages
    [[formatters]]
        [[[simple]]]
            format = "%(levelname)s %(message)s"
        [[[standard]]]
            format = "{process_name}[%(process)d] %(levelname)s %(name)s: %(message)s"
        [[[verbose]]]
            format = "%(asctime)s  {process_name}[%(process)d] %(levelname)s %(name)s: %(message)s"
            # Format to use for dates and times:
            datefmt = %Y-%m-%d %H:%M:%S
"""


def setup(process_name, user_log_dict):
    """Set up the lunarphase logging facility.

    Args:
        process_name (str): The label to be used in log messages.
        user_log_dict (dict): A dictionary, possibly holding a 'Logging' section with
            user additions or changes to the defaults.

    Returns:
        dict: The dictionary handed to logging.config.dictConfig().
    """
    # The %(...)s directives in the template are for the logging module, not configobj
    log_config = configobj.ConfigObj(StringIO(LOGGING_STR), interpolation=False, encoding='utf-8')

    # A plain dict has no interpolation to switch off
    old_interpolation = getattr(user_log_dict, 'interpolation', None)
    if old_interpolation is not None:
        user_log_dict.interpolation = False
    try:
        log_config.merge(user_log_dict)
    finally:
        if old_interpolation is not None:
            user_log_dict.interpolation = old_interpolation

    placeholders = {
        'log_level': 'DEBUG' if lunarphase.debug else 'INFO',
        'process_name': process_name,
    }

    def _fill_in(section, key):
        value = section[key]
        if isinstance(value, (list, tuple)):
            section[key] = [_typed(item.format(**placeholders)) for item in value]
        else:
            section[key] = _typed(value.format(**placeholders))

    log_config['Logging'].walk(_fill_in)

    log_dict = log_config.dict().get('Logging', {})
    logging.config.dictConfig(log_dict)
    return log_dict


def log_traceback(log_fn, prefix=''):
    """Log the stack traceback into a logger.

    log_fn: One of the logging.Logger logging functions, such as logging.Logger.warning.

    prefix: A string, which will be put in front of each log entry. Default is no string.
    """
    import traceback
    sfd = StringIO()
    traceback.print_exc(file=sfd)
    sfd.seek(0)
    for line in sfd:
        log_fn("%s%s", prefix, line.rstrip('\n'))


def _typed(value):
    """Convert an option string to a bool, float or int where it looks like one.

    >>> _typed('True'), _typed('4'), _typed('0.5'), _typed('console.log')
    (True, 4, 0.5, 'console.log')
    """
    lowered = value.lower()
    if lowered in ('true', 'false'):
        return lowered == 'true'
    convert = float if value.count('.') == 1 else int
    try:
        return convert(value)
    except ValueError:
        return value
