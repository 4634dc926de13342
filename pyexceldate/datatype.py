"""A module for housing the date value type and its adapters.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
DateOnly -- An immutable (year, month, day) value; not checked on creation.

Exported Functions:
DateToSerial -- Converts a DateOnly, date or (y, m, d) tuple to a serial day.
DateFromSerial -- Converts a serial day to a DateOnly.
PyDateFromSerial -- Converts a serial day to a datetime.date.
SerialFromTicks -- Converts Unix ticks to the serial day of that instant.
SerialToday -- Returns the serial day of the current date.
SerialToJD -- Converts a serial day to a two-part Julian date.
SerialFromJD -- Converts a two-part Julian date to a serial day.
"""

__all__ = ['DateOnly', 'DateToSerial', 'DateFromSerial', 'PyDateFromSerial',
           'SerialFromTicks', 'SerialToday', 'SerialToJD', 'SerialFromJD',
           'LOCALZONE', 'LOCALZONE_NAME']

import math
import time
from collections import namedtuple
from datetime import datetime as Timestamp, date as Date
from datetime import timedelta as TimeDelta, timezone
from datetime import tzinfo  # pylint: disable=unused-import

try:
    from typing import Any, Tuple  # pylint: disable=unused-import
except ImportError:
    pass

import jdcal
import tzlocal

from .exception import DataError, ProgrammingError
from .calendar import EPOCH_YEAR, MAX_SERIAL
from .calendar import ymd2day, day2ymd, is_valid_ymd

UTC = timezone.utc
UNIX_EPOCH = Timestamp(1970, 1, 1, tzinfo=UTC)

LOCALZONE = tzlocal.get_localzone()
LOCALZONE_NAME = tzlocal.get_localzone_name()


class DateOnly(namedtuple('DateOnly', ['year', 'month', 'day'])):
    """A date and only a date: no hours, minutes or seconds.

    DateOnly() is 1900-01-00, serial day 0.  Nothing is checked when a
    DateOnly is created, so that slightly invalid dates such as 2020-02-31
    can still be converted; call is_valid() to check one.

    To store many dates, or to use them as keys, keep the serial day
    instead: it is a plain int.
    """

    __slots__ = ()

    def __new__(cls, year=EPOCH_YEAR, month=1, day=0):
        # type: (int, int, int) -> DateOnly
        return super(DateOnly, cls).__new__(cls, year, month, day)

    @classmethod
    def from_ymd(cls, year, month, day):
        # type: (int, int, int) -> DateOnly
        return cls(year, month, day)

    @classmethod
    def from_dmy(cls, day, month, year):
        # type: (int, int, int) -> DateOnly
        return cls(year, month, day)

    def is_valid(self):
        # type: () -> bool
        return is_valid_ymd(self.year, self.month, self.day)

    def to_date(self):
        # type: () -> Date
        """Return the datetime.date for this date.

        Raises DataError if there is none: 1900-01-00, 1900-02-29, any
        invalid date and any date after 9999-12-31.
        """
        if not self.is_valid():
            raise DataError("Invalid date: %s" % (self))
        try:
            return Date(self.year, self.month, self.day)
        except ValueError as ex:
            raise DataError("Date %s has no datetime.date: %s" % (self, ex))

    def __str__(self):
        # type: () -> str
        return "%04d-%02d-%02d" % (self.year, self.month, self.day)


def DateToSerial(value):
    # type: (Any) -> int
    """Convert a date to a serial day, or -1 if it is out of range.

    value may be a DateOnly, a datetime.date or datetime.datetime (the time
    is ignored) or a (year, month, day) tuple.
    """
    if isinstance(value, Date):
        return ymd2day(value.year, value.month, value.day)
    if isinstance(value, tuple) and len(value) == 3:
        year, month, day = value
        return ymd2day(year, month, day)
    raise ProgrammingError("Cannot convert %s to a serial day"
                           % (type(value).__name__))


def DateFromSerial(serial):
    # type: (int) -> DateOnly
    """Convert a serial day to a DateOnly.  Every int has a result."""
    return DateOnly(*day2ymd(serial))


def PyDateFromSerial(serial):
    # type: (int) -> Date
    """Convert a serial day to a datetime.date."""
    return DateFromSerial(serial).to_date()


def SerialFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> int
    """Return the serial day of the date on which the instant ticks
    (seconds since 1970-01-01 UTC) falls in timezone zoneinfo.
    """
    try:
        dt = (UNIX_EPOCH + TimeDelta(seconds=ticks)).astimezone(zoneinfo)
    except (OverflowError, ValueError) as ex:
        raise DataError("Invalid ticks %r: %s" % (ticks, ex))
    return ymd2day(dt.year, dt.month, dt.day)


def SerialToday(zoneinfo=LOCALZONE):
    # type: (tzinfo) -> int
    """Return the serial day of the current date in timezone zoneinfo."""
    return SerialFromTicks(time.time(), zoneinfo)


def SerialToJD(serial):
    # type: (int) -> Tuple[float, float]
    """Convert a serial day to a two-part Julian date (see jdcal).

    The sum of the two parts is the Julian date of midnight at the start
    of the day.  Serial days 0 and 60 are not real days and raise
    DataError.
    """
    if serial < 1 or serial > MAX_SERIAL:
        raise DataError("Invalid serial day %d: out of range" % (serial))
    if serial == 60:
        raise DataError("Serial day 60 (1900-02-29) has no Julian date")
    year, month, day = day2ymd(serial)
    return jdcal.gcal2jd(year, month, day)


def SerialFromJD(jd1, jd2=0.0):
    # type: (float, float) -> int
    """Convert a two-part Julian date to the serial day it falls on.

    Returns -1 if that day is before 1900-01-01 or after 5881510-07-10.
    Raises DataError if either part is NaN or infinite.
    """
    if not (math.isfinite(jd1) and math.isfinite(jd2)):
        raise DataError("Invalid Julian date %r, %r" % (jd1, jd2))
    year, month, day, _ = jdcal.jd2gcal(jd1, jd2)
    return ymd2day(year, month, day)
