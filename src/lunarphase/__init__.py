#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Package lunarphase, a not-so-precise moon calendar for 1900-2100."""

__version__ = "1.0.0"

# Set to true for extra debug information:
debug = False


# =============================================================================
#           Define possible exceptions that could get thrown.
# =============================================================================

class LunarPhaseError(Exception):
    """Base class of exceptions thrown by lunarphase."""


class ConfigError(LunarPhaseError):
    """Exception thrown when a configuration file cannot be read, or holds an
    unusable value."""


class ViolatedPrecondition(LunarPhaseError):
    """Exception thrown when a function is called with violated
    preconditions."""


from lunarphase.moon import (raw, fraction, moon_day, numeric_phase, verbal_phase, phase_name,
                             moon_fullness, moon_phase_ts, moon_phase)
