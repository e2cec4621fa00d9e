#!/usr/bin/env python
#
#    lunarphase --- A not-so-precise moon calendar for 1900-2100
#
#    Copyright (c) 2009-2024 Tom Keffer <tkeffer@gmail.com>
#
#    See the file LICENSE.txt for your full rights.
#
"""Customized setup file for lunarphase."""

import os.path
import re
import sys

from setuptools import setup

if sys.version_info < (3, 7):
    sys.exit("lunarphase requires Python V3.7 or greater.")

this_file = os.path.join(os.getcwd(), __file__)
this_dir = os.path.abspath(os.path.dirname(this_file))


def get_version():
    """Read the version out of the package, without importing it."""
    with open(os.path.join(this_dir, 'src', 'lunarphase', '__init__.py')) as fd:
        for line in fd:
            match = re.match(r'__version__\s*=\s*["\'](.*)["\']', line)
            if match:
                return match.group(1)
    raise RuntimeError("Unable to find version string.")


# ==============================================================================
# main entry point
# ==============================================================================

if __name__ == "__main__":
    setup(name='lunarphase',
          version=get_version(),
          description='A not-so-precise moon calendar for 1900-2100',
          long_description="lunarphase calculates the phase of the moon for a unix epoch "
                           "timestamp, as seconds into the lunation, a fraction of the cycle, "
                           "a moon day, and a named phase.",
          author='Tom Keffer',
          author_email='tkeffer@gmail.com',
          license='GPLv3',
          python_requires='>=3.7',
          package_dir={'': 'src'},
          packages=['lunarphase',
                    'lunarutil'],
          install_requires=['configobj>=5.0.6'],
          extras_require={
              'test': ['pytest>=7'],
          },
          )
