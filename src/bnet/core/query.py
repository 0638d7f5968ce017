# src/bnet/core/query.py
"""
Query line: one comma-separated symbol per node, in network order.

  ?  or q   query node
  t         evidence, observed true
  f         evidence, observed false
  -         unassigned

Example for a three node network:
  -,t,?
"""

import re

from bnet.core.errors import MalformedInput, RoleCountMismatch
from bnet.core.network import Network, Role

SYMBOL_PATTERNS = [
    (Role.QUERY, re.compile(r"\?|q")),
    (Role.EVIDENCE_TRUE, re.compile(r"t")),
    (Role.EVIDENCE_FALSE, re.compile(r"f")),
    (Role.UNASSIGNED, re.compile(r"-")),
]

ROLE_SYMBOLS = {
    Role.QUERY: "?",
    Role.EVIDENCE_TRUE: "t",
    Role.EVIDENCE_FALSE: "f",
    Role.UNASSIGNED: "-",
}


def parse_symbol(symbol: str) -> Role:
    for role, pattern in SYMBOL_PATTERNS:
        if pattern.fullmatch(symbol):
            return role
    raise ValueError(f"Unknown query symbol: {symbol!r}")


def parse_query(text: str) -> list[Role]:
    """Roles from the first non-blank line of text."""
    numbered = ((i, l.strip()) for i, l in enumerate(text.splitlines(), 1))
    line_num, line = next(((i, l) for i, l in numbered if l), (None, ""))
    if not line:
        raise MalformedInput("Query is empty")

    try:
        return [parse_symbol(s.strip()) for s in line.split(",")]
    except ValueError as e:
        raise MalformedInput(str(e), line_num, line)


def assign_roles(network: Network, roles: list[Role]) -> None:
    """Set every node's role. Nothing is assigned if the counts differ."""
    if len(roles) != len(network):
        raise RoleCountMismatch(len(network), len(roles))

    for i, role in enumerate(roles):
        network.assign_role(i, role)


def apply_query(network: Network, text: str) -> None:
    assign_roles(network, parse_query(text))


def format_query(network: Network) -> str:
    return ",".join(ROLE_SYMBOLS[n.role] for n in network.nodes)
