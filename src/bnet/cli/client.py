"""
HTTP client for the bnet API.
"""

import httpx

from bnet.config import BASE_URL


def parse_network(dsl: str, base_url: str = BASE_URL) -> dict:
    r = httpx.post(f"{base_url}/networks/parse", json={"dsl": dsl})
    r.raise_for_status()
    return r.json()


def estimate(
    dsl: str,
    query: str,
    samples: int,
    seed: int | None = None,
    methods: list[str] | None = None,
    base_url: str = BASE_URL,
) -> dict:
    payload = {"dsl": dsl, "query": query, "samples": samples, "seed": seed}
    if methods:
        payload["methods"] = methods
    r = httpx.post(f"{base_url}/estimate", json=payload, timeout=120)
    r.raise_for_status()
    return r.json()
