"""
Run estimation on the API server.
"""

import sys

import httpx

from bnet.config import BASE_URL
from bnet.core.sampling import METHOD_TITLES
from bnet.cli import client
from bnet.cli.files import read_file


def add_subparser(subparsers):
    parser = subparsers.add_parser("remote", help="Estimate on a running bnet server")
    parser.add_argument("network", help="Path to network definition file")
    parser.add_argument("query", help="Path to query file")
    parser.add_argument("samples", type=int, help="Number of samples per method")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--url", default=BASE_URL, help=f"API base URL (default: {BASE_URL})")
    parser.set_defaults(func=run_remote)


def error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return response.text


def run_remote(args):
    try:
        dsl = read_file(args.network)
        query = read_file(args.query)
        result = client.estimate(dsl, query, args.samples, seed=args.seed, base_url=args.url)
    except FileNotFoundError as e:
        print(f"✗ {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"✗ Error: {error_detail(e.response)}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    for method, outcome in result["results"].items():
        print(METHOD_TITLES.get(method, method))
        if outcome["error"]:
            print(f"✗ {outcome['error']}")
        else:
            print(f"Probability of {result['query_node']} with {result['samples']:,} samples: {outcome['probability']:f}")
