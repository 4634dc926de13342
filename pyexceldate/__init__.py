"""Spreadsheet serial day numbers to and from calendar dates.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .calendar import ymd2day, day2ymd, is_valid_ymd, is_leap_year, weekday
from .datatype import *    # pylint: disable=wildcard-import
from .dateformat import *  # pylint: disable=wildcard-import
from .exception import *   # pylint: disable=wildcard-import
