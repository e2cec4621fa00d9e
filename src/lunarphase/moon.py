#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Given a timestamp, determine the phase of the moon.

The algorithm is claimed to give lunar data for the period 1900-2100. All functions
take a unix epoch timestamp in seconds, which may be negative (before 1970).

    >>> verbal_phase(947182440)
    'new'
    >>> verbal_phase(1578684180)
    'full'
    >>> numeric_phase(0), verbal_phase(0)
    (6, 'last quarter')
"""

import logging
import math

import lunarphase
from lunarutil.lunarutil import utc_to_ts

log = logging.getLogger(__name__)

LUNAR_DAYS = 29.53058770576
LUNAR_SECS = LUNAR_DAYS * (24.0 * 60.0 * 60.0)

# New moon of 6-Jan-2000 at 18:14 UTC
MILLENNIUM_NEW_MOON = 947182440

# Closed intervals, in moon days, for each phase index. Neighbours share an endpoint.
PHASE_BOUNDARIES = ((0.0, 1.0),
                    (1.0, 6.38264692644),
                    (6.38264692644, 8.38264692644),
                    (8.38264692644, 13.76529385288),
                    (13.76529385288, 15.76529385288),
                    (15.76529385288, 21.14794077932),
                    (21.14794077932, 23.14794077932),
                    (23.14794077932, 28.53058770576),
                    (28.53058770576, LUNAR_DAYS))

moon_phases = ("new",
               "waxing crescent",
               "first quarter",
               "waxing gibbous",
               "full",
               "waning gibbous",
               "last quarter",
               "waning crescent",
               "new")

# Index used when a moon day falls outside the table
DEFAULT_PHASE = 5

ERROR_PHASE = "error"


def _check_ts(time_ts):
    if isinstance(time_ts, bool) or not isinstance(time_ts, (int, float)):
        raise lunarphase.ViolatedPrecondition("Timestamp must be a number, not %r" % (time_ts,))
    if isinstance(time_ts, float) and not math.isfinite(time_ts):
        raise lunarphase.ViolatedPrecondition("Timestamp must be finite, not %r" % time_ts)


def raw(time_ts):
    """Return the number of seconds into the current lunar cycle.

    Args:
        time_ts (int): A unix epoch timestamp.

    Returns:
        int: Seconds since the last new moon, in [0, LUNAR_SECS).

    Example:
        >>> raw(947182440)
        0
        >>> raw(0)
        1954273
    """
    _check_ts(time_ts)
    total_secs = time_ts - MILLENNIUM_NEW_MOON
    # math.fmod keeps the sign of the dividend. The float % operator does not.
    moon_second = math.fmod(float(total_secs), LUNAR_SECS)
    # A remainder of -0.0 also counts as negative, and becomes the end of the cycle.
    if math.copysign(1.0, moon_second) < 0:
        moon_second += LUNAR_SECS
    return int(moon_second)


def fraction(time_ts):
    """Return the fraction of the lunar cycle. Multiply by 100 for percent."""
    return raw(time_ts) / LUNAR_SECS


def moon_day(time_ts):
    """Return the number of days into the current lunation."""
    return fraction(time_ts) * LUNAR_DAYS


def phase_index(day):
    """Classify a moon day into a phase index 0-8.

    Every interval is checked, so a day sitting exactly on a shared boundary takes the
    later index. A day outside the table gets DEFAULT_PHASE.

    Example:
        >>> phase_index(0.5), phase_index(1.0), phase_index(29.0)
        (0, 1, 8)
        >>> phase_index(-1.0)
        5
    """
    index = None
    for i, (lo, hi) in enumerate(PHASE_BOUNDARIES):
        if lo <= day <= hi:
            index = i
    if index is None:
        log.debug("Moon day %s is outside the phase table. Using index %d", day, DEFAULT_PHASE)
        index = DEFAULT_PHASE
    return index


def numeric_phase(time_ts):
    """Return the moon phase as an index 0-8. Indexes 0 and 8 are both a new moon."""
    return phase_index(moon_day(time_ts))


def phase_name(index):
    """Return the name of a phase index. Anything outside 0-8 is an 'error'.

    Example:
        >>> phase_name(4)
        'full'
        >>> phase_name(9)
        'error'
    """
    if isinstance(index, int) and 0 <= index < len(moon_phases):
        return moon_phases[index]
    return ERROR_PHASE


def verbal_phase(time_ts):
    """Return the moon phase as a human-readable word or phrase."""
    return phase_name(numeric_phase(time_ts))


def moon_fullness(time_ts):
    """Return the percent illumination of the moon, rounded to the nearest integer.

    Example:
        >>> moon_fullness(947182440)
        0
    """
    position = fraction(time_ts)
    return int(100.0 * (1.0 - math.cos(2.0 * math.pi * position)) / 2.0 + 0.5)


def moon_phase_ts(time_ts):
    """Calculates the phase of the moon, given a timestamp.

    Returns:
        tuple: First value is the phase index, suitable for phase_name(). Second value is
        the percent fullness of the moon.
    """
    return numeric_phase(time_ts), moon_fullness(time_ts)


def moon_phase(year, month, day, hour=12):
    """Calculates the phase of the moon, given a year, month, day in UTC.

    Args:
        year (int): The year.
        month (int): The month.
        day (int): The day.
        hour (float): Hours since midnight UTC. Default is noon.

    Returns:
        tuple: The phase index and the percent fullness of the moon.

    Example:
        >>> moon_phase(2020, 1, 10, 19.5)
        (4, 100)
    """
    return moon_phase_ts(utc_to_ts(year, month, day, hour))
