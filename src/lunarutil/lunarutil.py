#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Various handy utilities that don't belong anywhere else."""

import calendar
import time


def utc_to_ts(y, m, d, hrs_utc):
    """Converts from a tuple-time in UTC to unix epoch time.

    Args:
        y (int): The year for which the conversion is desired.
        m (int): The month.
        d (int): The day.
        hrs_utc (float): Floating point number with the number of hours since midnight in UTC.

    Returns:
        int: The corresponding unix epoch time, rounded to the nearest second.

    Example:
        >>> print(utc_to_ts(2009, 3, 27, 14.5))
        1238164200
        >>> print(utc_to_ts(1930, 1, 14, 22.35))
        -1261100340
    """
    # Construct a time tuple with the time at midnight, UTC:
    daystart_utc_tt = (y, m, d, 0, 0, 0, 0, 0, -1)
    # Convert the time tuple to a time stamp and add on the number of seconds since midnight:
    return calendar.timegm(daystart_utc_tt) + int(round(hrs_utc * 3600.0))


def timestamp_to_gmtime(ts):
    """Return a string formatted for GMT

    Args:
        ts (float): A unix-epoch timestamp

    Returns:
        str: The time in UTC as a string

    Example:
        >>> print(timestamp_to_gmtime(1196705700))
        2007-12-03 18:15:00 UTC (1196705700)
        >>> print(timestamp_to_gmtime(None))
        ******* N/A *******     (    N/A   )
    """
    if ts is not None:
        return "%s (%d)" % (time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime(ts)), ts)
    else:
        return "******* N/A *******     (    N/A   )"


def tobool(x):
    """Convert an object to boolean.

    Examples:
    >>> print(tobool('TRUE'))
    True
    >>> print(tobool(1))
    True
    >>> print(tobool('no'))
    False
    >>> print(tobool('0'))
    False
    >>> print(tobool('Foo'))
    Traceback (most recent call last):
    ValueError: Unknown boolean specifier: 'Foo'.
    """

    try:
        if x.lower() in ('true', 'yes', 'y'):
            return True
        elif x.lower() in ('false', 'no', 'n'):
            return False
    except AttributeError:
        pass
    try:
        return bool(int(x))
    except (ValueError, TypeError):
        pass
    raise ValueError("Unknown boolean specifier: '%s'." % x)
