"""
Estimation routes: /api/estimate
"""

import random
from typing import Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from bnet.config import DEFAULT_SAMPLES
from bnet.core.errors import BNetError, EstimationError
from bnet.core.network import parse_network
from bnet.core.query import apply_query
from bnet.core.sampling import ESTIMATORS


router = APIRouter(prefix="/api/estimate", tags=["estimate"])


class EstimateRequest(BaseModel):
    dsl: str
    query: str
    samples: int = Field(default=DEFAULT_SAMPLES, ge=1)
    seed: int | None = None
    methods: list[Literal["rejection", "likelihood"]] = ["rejection", "likelihood"]


@router.post("")
def estimate(req: EstimateRequest):
    """Estimate P(query = true | evidence) with each requested method."""
    try:
        network = parse_network(req.dsl)
        apply_query(network, req.query)
        query = network.query_node()
    except BNetError as e:
        raise HTTPException(status_code=400, detail=str(e))

    results = {}
    for method in req.methods:
        rng = random.Random(req.seed)
        try:
            p = ESTIMATORS[method](network, req.samples, rng=rng)
            results[method] = {"probability": p, "error": None}
        except EstimationError as e:
            results[method] = {"probability": None, "error": str(e)}

    return {
        "query_node": query.name,
        "samples": req.samples,
        "seed": req.seed,
        "results": results,
    }
