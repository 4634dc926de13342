"""A module to convert dates to and from spreadsheet serial day numbers.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to the number
of days from the start of 1900, as spreadsheets count them:

  - 1900-01-00 is day 0.  It means "no date" and is not a valid date.
  - 1900-01-01 is day 1.
  - 1900-02-29 is day 60.  It never existed, but 1900 is treated as a
    leap year for backward compatibility with Lotus 1-2-3.
  - 1900-03-01 is day 61.
  - 9999-12-31 is day 2958465, the last date spreadsheets accept.
  - 5881510-07-10 is day 2147483647, the largest signed 32-bit value
    and the last date these functions accept.

Apart from the 1900 leap day the proleptic Gregorian calendar is used.
Only integer arithmetic and a few lookup tables are involved; the tables
are built once at import and never modified, so every function here may
be called from any number of threads.
"""
from typing import Tuple  # pylint: disable=unused-import

EPOCH_YEAR = 1900

MAX_YEAR = 5881510
MAX_MONTH = 7
MAX_DAY = 10
MAX_SERIAL = 2147483647

# 9999-12-31
MAX_EXCEL_SERIAL = 2958465

ZERO = 0
INVALID = -1

CYCLE_YEARS = 400
CYCLE_DAYS = (400 * 365
              + 100     # every fourth year is a leap year,
              - 4       # except the multiples of 100,
              + 1)      # but the multiple of 400 is

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year):
    # type: (int) -> bool
    """Return True if year is a leap year in the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _build_tables():
    # type: () -> Tuple[Tuple[int, ...], Tuple[int, ...]]
    """
    Return (month_offsets, cycle_offsets):
      month_offsets - days before each month in a non-leap year
      cycle_offsets - days before each year of a 400-year cycle that
                      starts on EPOCH_YEAR
    """
    month_offsets = [0] * 12
    for i in range(1, 12):
        month_offsets[i] = month_offsets[i - 1] + MONTH_DAYS[i - 1]

    cycle_offsets = [0] * CYCLE_YEARS
    for i in range(1, CYCLE_YEARS):
        cycle_offsets[i] = (cycle_offsets[i - 1] +
                            (366 if is_leap_year(EPOCH_YEAR + i - 1) else 365))

    return tuple(month_offsets), tuple(cycle_offsets)


MONTH_OFFSETS, CYCLE_OFFSETS = _build_tables()


def ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to a serial day number.
      year  - between 1900-5881510
      month - 1 - 12
      day   - 1 - 31

    Returns 0 for 1900-01-00 and -1 when the date is out of range.  The
    day is not checked against the length of the month: 2020-02-31 is
    converted as 2020-03-02.
    """
    if year == EPOCH_YEAR and month == 1 and day == 0:
        return ZERO

    if (year < EPOCH_YEAR or year > MAX_YEAR or
            month < 1 or month > 12 or
            day < 1 or day > 31):
        return INVALID

    if year == MAX_YEAR and (month > MAX_MONTH or
                             (month == MAX_MONTH and day > MAX_DAY)):
        return INVALID

    leap = is_leap_year(year)

    month -= 1
    day -= 1
    year -= EPOCH_YEAR

    daynum = (year // CYCLE_YEARS) * CYCLE_DAYS + CYCLE_OFFSETS[year % CYCLE_YEARS]
    daynum += MONTH_OFFSETS[month] + day

    if leap and month > 1:
        daynum += 1

    # Lotus 1-2-3 leap day: everything from 1900-03-01 on is one day later.
    if year > 0 or month > 1:
        daynum += 1

    return daynum + 1


def day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given serial day number to a tuple (year,month,day).

       +------------+------------------+
       |     daynum | (year,month,day) |
       |------------+------------------|
       |       <= 0 | (1900,1,0)       |
       |          1 | (1900,1,1)       |
       |         60 | (1900,2,29)      |
       |         61 | (1900,3,1)       |
       |    2958465 | (9999,12,31)     |
       | 2147483647 | (5881510,7,10)   |
       +------------+------------------+

    Every integer maps to some tuple; use is_valid_ymd() to check the
    result when daynum comes from an untrusted source.
    """
    if daynum < 1:
        return EPOCH_YEAR, 1, 0

    if daynum <= 31:
        return EPOCH_YEAR, 1, daynum

    if daynum <= 60:
        return EPOCH_YEAR, 2, daynum - 31

    # 0-based day, past the 1900 leap day
    day = daynum - 2

    year = (day // CYCLE_DAYS) * CYCLE_YEARS
    day %= CYCLE_DAYS

    cycle_year = day // 366
    if cycle_year < CYCLE_YEARS - 1 and day >= CYCLE_OFFSETS[cycle_year + 1]:
        cycle_year += 1

    year += cycle_year + EPOCH_YEAR
    day -= CYCLE_OFFSETS[cycle_year]

    month = 0
    leap = is_leap_year(year)

    if day >= 60 or not leap:
        if leap:
            day -= 1

        month = day // 31
        if month < 11 and day >= MONTH_OFFSETS[month + 1]:
            month += 1

        day -= MONTH_OFFSETS[month]
    elif day >= 31:
        month = 1
        day -= 31

    return year, month + 1, day + 1


def is_valid_ymd(year, month, day):
    # type: (int, int, int) -> bool
    """
    Return True if year, month, day is a real calendar date that
    ymd2day() can convert.  1900-02-29 is valid; 1900-01-00 is not.
    Unlike ymd2day() the day must fit in the month.
    """
    if (year < EPOCH_YEAR or year > MAX_YEAR or
            month < 1 or month > 12 or
            day < 1):
        return False

    if year == MAX_YEAR and (month > MAX_MONTH or
                             (month == MAX_MONTH and day > MAX_DAY)):
        return False

    if day <= MONTH_DAYS[month - 1]:
        return True

    return (month == 2 and day == 29 and
            (is_leap_year(year) or year == EPOCH_YEAR))


def weekday(daynum):
    # type: (int) -> int
    """
    Return the day of the week of a serial day number, Monday is 0 and
    Sunday is 6.  Days before 1900-03-01 follow the spreadsheet, which
    makes 1900-01-01 a Sunday.
    """
    if daynum < 0:
        raise ValueError("Invalid daynum: %d is negative" % daynum)
    return (daynum + 5) % 7
