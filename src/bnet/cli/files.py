# src/bnet/cli/files.py
"""
Reading network and query files.
"""

from pathlib import Path

from bnet.core.network import Network, parse_network
from bnet.core.query import apply_query


def read_file(path: str) -> str:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return p.read_text()


def load_network(network_path: str, query_path: str | None = None) -> Network:
    network = parse_network(read_file(network_path))
    if query_path:
        apply_query(network, read_file(query_path))
    return network
