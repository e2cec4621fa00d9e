#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Almanac data for the moon at a given time"""

import copy
import time

import lunarphase.moon
from lunarutil.lunarutil import timestamp_to_gmtime

# Map from almanac attribute to the function that calculates it
_moon_attrs = {
    'moon_raw': lunarphase.moon.raw,
    'moon_fraction': lunarphase.moon.fraction,
    'moon_day': lunarphase.moon.moon_day,
    'moon_index': lunarphase.moon.numeric_phase,
    'moon_phase': lunarphase.moon.verbal_phase,
    'moon_fullness': lunarphase.moon.moon_fullness,
}


class Almanac:
    """Moon phase information for a single point in time.

    Example:

    >>> almanac = Almanac(1578684180)
    >>> print(almanac.moon_phase, almanac.moon_index, almanac.moon_fullness)
    full 4 100
    >>> print(almanac)
    2020-01-10 19:23:00 UTC (1578684180): full (100%)

    Override the time by calling the almanac as a functor:

    >>> print(almanac(almanac_time=947182440).moon_phase)
    new
    >>> print(almanac.moon_foo)
    Traceback (most recent call last):
        ...
    AttributeError: Unknown attribute moon_foo
    """

    def __init__(self, time_ts=None):
        """Initialize an instance of Almanac

        Args:

            time_ts (int): A unix epoch timestamp with the time of the almanac. If None, the
                present time will be used.
        """
        self.time_ts = time_ts if time_ts is not None else int(time.time())

    def __call__(self, **kwargs):
        """Call an almanac object as a functor. This allows overriding the values
        used when the Almanac instance was initialized.

        Named arguments:

            almanac_time: The time in unix epoch time.
        """
        # Make a copy of myself.
        almanac = copy.copy(self)
        # Now set a new value for any named arguments.
        for key in kwargs:
            if key == 'almanac_time':
                almanac.time_ts = kwargs['almanac_time']
            else:
                raise AttributeError("Cannot override attribute %s" % key)

        return almanac

    def __getattr__(self, attr):
        if attr.startswith('__'):
            raise AttributeError(attr)
        try:
            fn = _moon_attrs[attr]
        except KeyError:
            raise AttributeError("Unknown attribute %s" % attr)
        return fn(self.time_ts)

    def __str__(self):
        return "%s: %s (%d%%)" % (timestamp_to_gmtime(self.time_ts),
                                  self.moon_phase, self.moon_fullness)
