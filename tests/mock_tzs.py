# -*- coding: utf-8 -*-
"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from datetime import datetime, timedelta, timezone, tzinfo  # pylint: disable=unused-import

UTC = timezone.utc


def fixed_zone(hours, minutes=0):
    # type: (int, int) -> tzinfo
    """ a zone with a constant offset from UTC """
    return timezone(timedelta(hours=hours, minutes=minutes))


def ticks(dt):
    # type: (datetime) -> float
    """ seconds since 1970-01-01 UTC of an aware datetime """
    return (dt - datetime(1970, 1, 1, tzinfo=UTC)).total_seconds()
