"""
Sampling commands.
"""

import random
import sys

from rich.console import Console
from rich.markup import escape

from bnet.config import DEFAULT_CHECKPOINT
from bnet.core.errors import BNetError, EstimationError
from bnet.core.sampling import ESTIMATORS, METHOD_TITLES
from bnet.core.trace import ConvergenceTrace
from bnet.cli.files import load_network

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("sample", help="Estimate the query probability by sampling")
    parser.add_argument("network", help="Path to network definition file")
    parser.add_argument("query", help="Path to query file (one line of ?,t,f,- symbols)")
    parser.add_argument("samples", type=int, help="Number of samples per method")
    parser.add_argument(
        "-m", "--method",
        choices=list(ESTIMATORS) + ["both"],
        default="both",
        help="Sampling method (default: both)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible estimates")
    parser.add_argument("--every", type=int, default=DEFAULT_CHECKPOINT, help="Trace checkpoint interval")
    parser.add_argument("--trace", action="store_true", help="Show convergence table")
    parser.add_argument("--csv", dest="csv_out", help="Write convergence trace to CSV")
    parser.set_defaults(func=run_sample)


def run_sample(args):
    if args.samples < 1:
        console.print(f"[red]✗ Sample count must be at least 1, got {args.samples}[/red]")
        sys.exit(1)

    if args.every < 1:
        console.print(f"[red]✗ Checkpoint interval must be at least 1, got {args.every}[/red]")
        sys.exit(1)

    try:
        network = load_network(args.network, args.query)
        query = network.query_node()
    except (FileNotFoundError, BNetError) as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    methods = list(ESTIMATORS) if args.method == "both" else [args.method]
    trace = ConvergenceTrace(every=args.every) if (args.trace or args.csv_out) else None

    failed = False
    for method in methods:
        # One generator per method, seeded identically
        rng = random.Random(args.seed)
        console.print(METHOD_TITLES[method])
        try:
            p = ESTIMATORS[method](network, args.samples, rng=rng, trace=trace)
            console.print(f"Probability of {query.name} with {args.samples:,} samples: {p:f}")
        except EstimationError as e:
            failed = True
            console.print(f"[yellow]✗ {escape(str(e))}. Try more samples.[/yellow]")

    if trace and args.trace:
        console.print()
        trace.print_table(console)

    if trace and args.csv_out:
        trace.to_csv(args.csv_out)
        console.print(f"[dim]Wrote {args.csv_out}[/dim]")

    if failed:
        sys.exit(1)
