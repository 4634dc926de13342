#!/usr/bin/env python

"""Set up the pyexceldate package.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pyexceldate

To install with the test requirements:

    pip install 'pyexceldate[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pyexceldate', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pyexceldate/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pyexceldate',
    version=VERSION,
    author='pyexceldate developers',
    description='Spreadsheet serial day numbers to and from calendar dates',
    keywords='excel lotus serial date calendar',
    packages=['pyexceldate'],
    license='BSD License',
    long_description=open(readme).read(),
    python_requires='>=3.9',
    install_requires=['jdcal>=1.4', 'tzlocal>=4.0'],
    extras_require=dict(test='pytest>=6'),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Office/Business :: Financial :: Spreadsheet',
    ],
)
