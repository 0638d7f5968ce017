"""
bnet CLI.
"""

import argparse
import logging

from rich.logging import RichHandler

from bnet.cli.commands import sample, show, plot, remote


def setup_logging(verbose: int = 0) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="bnet", description="Bayesian network sampling CLI")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    subparsers = parser.add_subparsers(dest="command")

    sample.add_subparser(subparsers)
    show.add_subparser(subparsers)
    plot.add_subparser(subparsers)
    remote.add_subparser(subparsers)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
