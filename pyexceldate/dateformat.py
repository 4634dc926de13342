"""Conversions between serial day numbers and YYYY-MM-DD strings.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

The parser accepts any number of digits in each field and checks nothing
else; the range checks are those of pyexceldate.calendar.ymd2day().  Each
field must fit in a signed 32-bit integer.  Instead of raising, the parser
returns the default supplied by the caller.
"""

__all__ = ['SerialFromString', 'SerialToString', 'DateOnlyFromString']

import logging
import re

try:
    from typing import Optional, TypeVar, Union  # pylint: disable=unused-import
    T = TypeVar('T')
except ImportError:
    pass

from .calendar import MAX_SERIAL, INVALID, ymd2day, day2ymd
from .datatype import DateOnly

_log = logging.getLogger(__name__)

_DASHES = re.compile(r'^([0-9]+)-([0-9]+)-([0-9]+)\Z')


def _parse_int32(digits):
    # type: (str) -> int
    value = int(digits)
    if value > MAX_SERIAL:
        raise ValueError("%s does not fit in 32 bits" % (digits))
    return value


def DateOnlyFromString(text):
    # type: (Optional[str]) -> Optional[DateOnly]
    """Parse YYYY-MM-DD into a DateOnly, or None if it does not parse."""
    if text is None:
        return None
    if not isinstance(text, str):
        _log.debug("not a string: %r", text)
        return None
    m = _DASHES.match(text)
    if m is None:
        _log.debug("not a YYYY-MM-DD date: %r", text)
        return None
    try:
        return DateOnly.from_ymd(_parse_int32(m.group(1)),
                                 _parse_int32(m.group(2)),
                                 _parse_int32(m.group(3)))
    except ValueError as ex:
        _log.debug("cannot parse %r: %s", text, ex)
        return None


def SerialFromString(text, default=None):
    # type: (Optional[str], Optional[T]) -> Union[int, Optional[T]]
    """Convert YYYY-MM-DD to a serial day.

    Returns default if text does not parse or the date is out of range.
    1900-01-00 is day 0, not the default.
    """
    date = DateOnlyFromString(text)
    if date is None:
        return default
    serial = ymd2day(*date)
    if serial == INVALID:
        _log.debug("date out of range: %r", text)
        return default
    return serial


def SerialToString(serial):
    # type: (Optional[int]) -> str
    """Convert a serial day to YYYY-MM-DD.  None is taken as day 0."""
    year, month, day = day2ymd(serial if serial is not None else 0)
    return "%04d-%02d-%02d" % (year, month, day)
