# src/api/lambda_handler.py
"""
AWS Lambda handler for FastAPI using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/health, /rules, /premium)
- Response is returned back to API Gateway

The rating engine is built at import time (cold start) unless
PRELOAD_ENGINE is set to false.
"""

from __future__ import annotations

import os

from mangum import Mangum

from src.api.app import app
from src.quote.service import get_engine


_PRELOAD_ENGINE = os.getenv("PRELOAD_ENGINE", "true").lower() in {"1", "true", "yes"}

if _PRELOAD_ENGINE:
    get_engine()


handler = Mangum(app)
