# tests/conftest.py
"""Shared networks for tests."""

import pytest

from bnet.core.network import parse_network


TWO_NODE = """
A: [] [0.5]
B: [A] [0.1 0.9]
"""

# P(C) = 0.553, P(A | C) = 0.231 / 0.553
COLLIDER = """
A: [] [0.3]
B: [] [0.6]
C: [A B] [0.1 0.5 0.7 0.95]
"""


@pytest.fixture
def two_node():
    return parse_network(TWO_NODE)


@pytest.fixture
def collider():
    return parse_network(COLLIDER)
