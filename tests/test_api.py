"""
Integration tests for the bnet API.
Requires server running: uvicorn bnet.server.main:app --port 8000
"""

import pytest
import httpx

from bnet.cli import client as bnet_client

BASE_URL = "http://localhost:8000/api"

TWO_NODE = "A: [] [0.5]\nB: [A] [0.1 0.9]\n"


@pytest.fixture
def server():
    try:
        httpx.get("http://localhost:8000/", timeout=2)
    except httpx.HTTPError:
        pytest.skip("bnet server not running on localhost:8000")
    return BASE_URL


class TestRemote:
    def test_parse_network(self, server):
        data = bnet_client.parse_network(TWO_NODE, base_url=server)
        assert data["leaf_nodes"] == ["B"]

    def test_estimate(self, server):
        data = bnet_client.estimate(TWO_NODE, "-,?", 5000, seed=3, base_url=server)
        assert data["results"]["likelihood"]["probability"] == pytest.approx(0.5, abs=0.05)

    def test_bad_network(self, server):
        with pytest.raises(httpx.HTTPStatusError):
            bnet_client.parse_network("X: [] [0.3 0.4]", base_url=server)
