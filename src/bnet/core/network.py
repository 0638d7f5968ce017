# src/bnet/core/network.py
"""
Bayesian network of binary nodes, built from a line-per-node DSL.

Syntax:
  <name>: [<parent> <parent> ...] [<p0> <p1> ... <p(2^k - 1)>]
  # comment

cpt[i] is P(node = true | parents), where bit j of i is set
when parents[j] is true. k is the number of distinct parents.

Example:
  A: [] [0.5]
  B: [A] [0.1 0.9]
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from bnet.core.errors import MalformedInput, MultipleQueryNodes, NoQueryNode, UnknownParent

log = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r"(\w+)\s*:\s*\[([^\[\]]*)\]\s*\[([^\[\]]*)\]", re.ASCII)
NAME_PATTERN = re.compile(r"\w+", re.ASCII)
PROB_PATTERN = re.compile(r"\d\.\d+", re.ASCII)


class Role(Enum):
    QUERY = "query"
    EVIDENCE_TRUE = "true"
    EVIDENCE_FALSE = "false"
    UNASSIGNED = "unassigned"

    @property
    def is_evidence(self) -> bool:
        return self in (Role.EVIDENCE_TRUE, Role.EVIDENCE_FALSE)


@dataclass(eq=False)
class Node:
    """A binary random variable. Hashes by identity so it can key an event."""
    name: str
    parent_names: list[str]
    cpt: list[float]
    role: Role = Role.UNASSIGNED
    parents: list["Node"] = field(default_factory=list, repr=False)

    @property
    def is_evidence(self) -> bool:
        return self.role.is_evidence

    @property
    def evidence_value(self) -> bool:
        """Declared value of an evidence node."""
        return self.role == Role.EVIDENCE_TRUE

    def cpt_index(self, event: dict["Node", bool]) -> int:
        """Bitmask of parent values. Every parent must already be in the event."""
        index = 0
        for i, parent in enumerate(self.parents):
            if event[parent]:
                index |= 1 << i
        return index

    def prob_true(self, event: dict["Node", bool]) -> float:
        return self.cpt[self.cpt_index(event)]


class Network:
    """Nodes in source order. Only node roles change after construction."""

    def __init__(self, nodes: list[Node]):
        self.nodes = nodes
        self._by_name = {node.name: node for node in nodes}

        for node in nodes:
            node.parents = []
            for parent_name in node.parent_names:
                if parent_name not in self._by_name:
                    raise UnknownParent(node.name, parent_name)
                node.parents.append(self._by_name[parent_name])

        has_children = {id(parent) for node in nodes for parent in node.parents}
        self.leaf_nodes = [node for node in nodes if id(node) not in has_children]

        log.debug("Built network: %d nodes, %d leaves", len(nodes), len(self.leaf_nodes))

    @classmethod
    def from_text(cls, text: str) -> "Network":
        return parse_network(text)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Network(nodes={[n.name for n in self.nodes]})"

    def get_node(self, name: str) -> Node:
        return self._by_name[name]

    # === Roles ===

    def assign_role(self, index: int, role: Role) -> None:
        self.nodes[index].role = role

    def reset_roles(self) -> None:
        for node in self.nodes:
            node.role = Role.UNASSIGNED

    def query_node(self) -> Node:
        queries = [n for n in self.nodes if n.role == Role.QUERY]
        if not queries:
            raise NoQueryNode()
        if len(queries) > 1:
            raise MultipleQueryNodes([n.name for n in queries])
        return queries[0]

    def evidence_nodes(self) -> list[Node]:
        return [n for n in self.nodes if n.is_evidence]

    # === Output ===

    def to_dsl(self) -> str:
        return "\n".join(format_node(node) for node in self.nodes)

    def to_dict(self) -> dict:
        leaves = set(id(n) for n in self.leaf_nodes)
        return {
            "nodes": [
                {
                    "name": n.name,
                    "role": n.role.value,
                    "parents": list(n.parent_names),
                    "cpt": list(n.cpt),
                    "leaf": id(n) in leaves,
                }
                for n in self.nodes
            ],
            "leaf_nodes": [n.name for n in self.leaf_nodes],
        }

    def stats(self) -> dict:
        return {
            "nodes": len(self.nodes),
            "leaves": len(self.leaf_nodes),
            "edges": sum(len(n.parents) for n in self.nodes),
            "evidence": len(self.evidence_nodes()),
        }


class NetworkParser:
    def parse(self, text: str) -> Network:
        nodes: list[Node] = []
        seen: set[str] = set()

        for i, line in enumerate(text.splitlines(), 1):
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            try:
                node = self.parse_line(line)
            except ValueError as e:
                raise MalformedInput(str(e), i, line)

            if node.name in seen:
                raise MalformedInput(f"Duplicate node: {node.name}", i, line)
            seen.add(node.name)
            nodes.append(node)

        if not nodes:
            raise MalformedInput("Network has no nodes")

        return Network(nodes)

    def parse_line(self, line: str) -> Node:
        match = LINE_PATTERN.fullmatch(line)
        if not match:
            raise ValueError("Expected: name: [parents ...] [p0 p1 ...]")

        name, parents_str, cpt_str = match.groups()

        parent_names: list[str] = []
        for token in parents_str.split():
            if not NAME_PATTERN.fullmatch(token):
                raise ValueError(f"Bad parent name: {token}")
            if token not in parent_names:
                parent_names.append(token)

        cpt = []
        for token in cpt_str.split():
            if not PROB_PATTERN.fullmatch(token):
                raise ValueError(f"Bad probability: {token}")
            p = float(token)
            if p > 1.0:
                raise ValueError(f"Probability above 1: {token}")
            cpt.append(p)

        expected = 1 << len(parent_names)
        if len(cpt) != expected:
            raise ValueError(
                f"CPT for {name} has {len(cpt)} entries, expected {expected} "
                f"for {len(parent_names)} parents"
            )

        return Node(name=name, parent_names=parent_names, cpt=cpt)


def parse_network(text: str) -> Network:
    parser = NetworkParser()
    return parser.parse(text)


def format_prob(p: float) -> str:
    s = f"{p:.10f}".rstrip("0")
    return s + "0" if s.endswith(".") else s


def format_node(node: Node) -> str:
    parents = " ".join(node.parent_names)
    cpt = " ".join(format_prob(p) for p in node.cpt)
    return f"{node.name}: [{parents}] [{cpt}]"
