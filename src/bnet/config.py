# src/bnet/config.py
"""
Defaults shared by the CLI, server and client.
"""

import os

DEFAULT_SAMPLES = 10_000
DEFAULT_CHECKPOINT = 1_000

BASE_URL = os.environ.get("BNET_API_URL", "http://localhost:8000/api")

# Local UI dev servers
CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]
