# src/api/app.py
"""
FastAPI service for the Insurance Rating Engine (thin API wrapper).

Endpoints:
- GET  /health
- GET  /rules    -> rule names in evaluation order
- POST /premium  -> base rate + adjustments + total (+ warnings)

The API layer stays thin:
- validates input
- calls src.quote.service
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from src.quote.service import get_engine, premium_from_profile_dict
from src.utils.log import configure_logging


app = FastAPI(title="Insurance Rating Engine", version="0.1.0")


# Configure logging and build the engine once at startup
@app.on_event("startup")
def _startup() -> None:
    configure_logging()
    get_engine()


# -----------------------------
# Schemas
# -----------------------------
class ProfileInput(BaseModel):
    age: int = Field(ge=0)
    vehicle_make: str = Field(min_length=1)
    vehicle_model: str = Field(min_length=1)
    accidents_in_last_five_years: int = Field(default=0, ge=0)


class AdjustmentOut(BaseModel):
    label: str
    amount: float
    explanation: str


class PremiumOut(BaseModel):
    currency: str
    vehicle_category: Optional[str] = None
    base_rate: float
    adjustments: List[AdjustmentOut] = Field(default_factory=list)
    total: float
    warnings: list[str] = Field(default_factory=list)


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    eng = get_engine()
    return {"status": "ok", "rules": str(len(eng.rules))}


@app.get("/rules")
def rules() -> Dict[str, Any]:
    return {"rules": list(get_engine().rule_names)}


@app.post("/premium", response_model=PremiumOut)
def premium(profile: ProfileInput) -> PremiumOut:
    out = premium_from_profile_dict(profile.model_dump(), engine=get_engine())
    return PremiumOut(**out)
