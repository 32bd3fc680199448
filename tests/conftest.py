"""Pytest configuration for the list algorithm tests."""

import sys
from pathlib import Path

import pytest

# The modules live at the repository root, not in a package.
sys.path.insert(0, str(Path(__file__).parent.parent))

import arena
import chain
from LinkedList import LinkedList

BUILDERS = {
    "LinkedList": LinkedList,
    "chain": chain.fromIterable,
    "arena": arena.build,
}


@pytest.fixture(params=sorted(BUILDERS))
def build(request):
    """Turn a Python iterable into each kind of list the algorithms accept."""
    return BUILDERS[request.param]


class Poisoned:
    """A one-node list whose tail must never be looked at."""

    def __init__(self, head):
        self.head = head

    @property
    def tail(self):
        raise AssertionError("tail of a poisoned node was forced")


@pytest.fixture
def poisoned():
    return Poisoned
