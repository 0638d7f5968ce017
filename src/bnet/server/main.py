"""
bnet API Server.

  uvicorn bnet.server.main:app --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bnet.config import CORS_ORIGINS
from bnet.server.routes import networks, estimate


app = FastAPI(title="bnet API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(networks.router)
app.include_router(estimate.router)


@app.get("/")
async def root():
    return {"name": "bnet API", "version": "0.1.0"}
