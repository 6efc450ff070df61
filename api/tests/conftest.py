#!/usr/bin/env python3
"""Expose the shared XSD documents as fixtures."""

import pytest

from tests.fixtures.xsd_fixtures import (
    ORDER_XSD,
    PERSON_XSD,
    NO_ROOT_XSD,
    RECURSIVE_XSD,
    MALFORMED_XSD,
)


@pytest.fixture
def order_xsd():
    return ORDER_XSD


@pytest.fixture
def person_xsd():
    return PERSON_XSD


@pytest.fixture
def no_root_xsd():
    return NO_ROOT_XSD


@pytest.fixture
def recursive_xsd():
    return RECURSIVE_XSD


@pytest.fixture
def malformed_xsd():
    return MALFORMED_XSD
