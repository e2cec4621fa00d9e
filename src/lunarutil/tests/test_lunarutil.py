#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Test module lunarutil.lunarutil"""
import doctest
import unittest

import lunarutil.lunarutil
from lunarutil.lunarutil import *


class TestUtilities(unittest.TestCase):

    def test_utc_to_ts(self):
        self.assertEqual(utc_to_ts(2000, 1, 6, 18 + 14 / 60.0), 947182440)
        self.assertEqual(utc_to_ts(1970, 1, 1, 0), 0)
        self.assertEqual(utc_to_ts(1969, 12, 31, 23.5), -1800)
        self.assertIsInstance(utc_to_ts(2009, 3, 27, 14.5), int)

    def test_timestamp_to_gmtime(self):
        self.assertEqual(timestamp_to_gmtime(0), "1970-01-01 00:00:00 UTC (0)")
        self.assertEqual(timestamp_to_gmtime(947182440),
                         "2000-01-06 18:14:00 UTC (947182440)")

    def test_tobool(self):
        for x in ('true', 'Yes', 'y', 1, '1', True):
            self.assertTrue(tobool(x))
        for x in ('FALSE', 'no', 'N', 0, '0', False):
            self.assertFalse(tobool(x))
        with self.assertRaises(ValueError):
            tobool('maybe')
        with self.assertRaises(ValueError):
            tobool(None)

    def test_doctests(self):
        self.assertEqual(doctest.testmod(lunarutil.lunarutil).failed, 0)


if __name__ == '__main__':
    unittest.main()
