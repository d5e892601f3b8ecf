"""Shared test fixtures."""

import pytest

from time_capsule import TimeCapsuleContract
from time_capsule.stores import InMemoryStore

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
NON_OWNER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def owner():
    return OWNER


@pytest.fixture
def non_owner():
    return NON_OWNER


@pytest.fixture
def contract(store):
    return TimeCapsuleContract(OWNER, store=store)
