"""
Show a parsed network.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bnet.core.errors import BNetError
from bnet.core.network import format_prob
from bnet.cli.files import load_network

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("show", help="Show nodes, roles and CPTs of a network")
    parser.add_argument("network", help="Path to network definition file")
    parser.add_argument("query", nargs="?", help="Optional query file to assign roles")
    parser.add_argument("--dsl", action="store_true", help="Print normalized definition text instead")
    parser.set_defaults(func=run_show)


def run_show(args):
    try:
        network = load_network(args.network, args.query)
    except (FileNotFoundError, BNetError) as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    if args.dsl:
        console.print(network.to_dsl(), markup=False, highlight=False)
        return

    stats = network.stats()
    console.print(
        f"[dim]Network: {stats['nodes']} nodes, {stats['edges']} edges, "
        f"{stats['leaves']} leaves, {stats['evidence']} evidence[/dim]"
    )

    leaves = set(id(n) for n in network.leaf_nodes)

    table = Table()
    table.add_column("#", justify="right")
    table.add_column("node", style="bold")
    table.add_column("role")
    table.add_column("parents")
    table.add_column("cpt")
    table.add_column("leaf")

    for i, node in enumerate(network.nodes):
        table.add_row(
            str(i),
            node.name,
            node.role.value,
            " ".join(node.parent_names) or "-",
            " ".join(format_prob(p) for p in node.cpt),
            "✓" if id(node) in leaves else "",
        )

    console.print(table)
