"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
import pytest

try:
    from typing import List, Tuple  # pylint: disable=unused-import
except ImportError:
    pass

from . import DATE_PAIRS

_log = logging.getLogger("pyexceldatetest")


def pytest_addoption(parser):
    # type: (pytest.Parser) -> None
    parser.addoption("--quick", action="store_true", default=False,
                     help="Skip the exhaustive date range tests")


def pytest_configure(config):
    # type: (pytest.Config) -> None
    config.addinivalue_line("markers",
                            "exhaustive: walks millions of dates (skipped by --quick)")


def pytest_collection_modifyitems(config, items):
    # type: (pytest.Config, List[pytest.Item]) -> None
    if not config.getoption("--quick"):
        return
    skip = pytest.mark.skip(reason="--quick given")
    for item in items:
        if "exhaustive" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def date_pairs():
    # type: () -> List[Tuple[str, int]]
    """Known (YYYY-MM-DD, serial day) pairs."""
    _log.info("Using %d known date pairs", len(DATE_PAIRS))
    return list(DATE_PAIRS)
