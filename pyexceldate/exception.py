"""Classes containing the exceptions for reporting errors.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

The converters in pyexceldate.calendar never raise: they report invalid
dates with the serial day -1.  These exceptions are raised by the adapters
that translate to and from other date representations.
"""

__all__ = ['Error', 'DataError', 'ProgrammingError']


class Error(Exception):
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class DataError(Error):
    """A value has no counterpart in the requested representation."""

    def __init__(self, value):
        Error.__init__(self, value)


class ProgrammingError(Error):
    """A function was called with an argument of the wrong type."""

    def __init__(self, value):
        Error.__init__(self, value)
