"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

try:
    from typing import List, Tuple  # pylint: disable=unused-import
except ImportError:
    pass

_log = logging.getLogger("pyexceldatetest")

# (YYYY-MM-DD, serial day) pairs that must convert both ways.
DATE_PAIRS = [
    ("1900-01-00", 0),          # the "no date" value
    ("1900-01-01", 1),
    ("1900-01-02", 2),
    ("1900-01-31", 31),
    ("1900-02-01", 32),

    ("1900-02-28", 59),
    ("1900-02-29", 60),         # Lotus 1-2-3 leap day
    ("1900-03-01", 61),

    ("1900-12-30", 365),
    ("1900-12-31", 366),
    ("1901-01-01", 367),

    ("1999-12-31", 36525),
    ("2000-01-01", 36526),
    ("2000-02-28", 36584),
    ("2000-02-29", 36585),      # multiple of 400: leap year
    ("2000-03-01", 36586),

    ("2020-01-01", 43831),
    ("2020-12-31", 44196),

    ("2036-11-21", 50000),
    ("2091-08-25", 70000),

    ("2099-12-31", 73050),
    ("2100-01-01", 73051),
    ("2100-02-28", 73109),      # multiple of 100: not a leap year
    ("2100-03-01", 73110),

    ("2173-10-14", 100000),

    ("2299-12-30", 146097),
    ("2299-12-31", 146098),
    ("2300-01-01", 146099),     # 400 years after 1900
    ("2300-02-28", 146157),
    ("2300-03-01", 146158),

    ("2447-07-30", 200000),
    ("3268-12-12", 500000),
    ("4637-11-26", 1000000),
    ("7375-10-23", 2000000),

    ("9999-12-31", 2958465),    # last spreadsheet date

    ("5881510-07-10", 2147483647),
]  # type: List[Tuple[str, int]]


def month_days(year, month):
    # type: (int, int) -> int
    """Length of the month, written out independently of the package."""
    if month == 2:
        if year == 1900 or year % 400 == 0 or (year % 4 == 0 and year % 100 != 0):
            return 29
        return 28
    if month <= 7:
        return 30 if month % 2 == 0 else 31
    return 31 if month % 2 == 0 else 30


def fmt(year, month, day):
    # type: (int, int, int) -> str
    return "%04d-%02d-%02d" % (year, month, day)
