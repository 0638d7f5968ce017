"""
Network routes: /api/networks
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from bnet.core.errors import BNetError
from bnet.core.network import parse_network


router = APIRouter(prefix="/api/networks", tags=["networks"])


class ParseNetworkRequest(BaseModel):
    dsl: str


@router.post("/parse")
async def parse(req: ParseNetworkRequest):
    """Parse a network definition and return its nodes."""
    try:
        network = parse_network(req.dsl)
    except BNetError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {**network.to_dict(), "stats": network.stats(), "dsl": network.to_dsl()}
