from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .plan import Plan


class GeneratePlanRequest(BaseModel):
    """Body of POST /api/generate.

    `input` is validated separately as a Brief so that a bad brief maps to 422
    while a malformed envelope maps to 400.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    input: Any = None
    credential: Optional[StrictStr] = Field(default=None, alias="apiKey")
    model: Optional[StrictStr] = None


class GeneratePlanResponse(BaseModel):
    plan: Plan
    usedRemote: bool


class ErrorResponse(BaseModel):
    error: str
    errorCode: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    plan: Optional[Plan] = None
    usedRemote: Optional[bool] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    tones: List[str]
    platforms: List[str]


__all__ = [
    "GeneratePlanRequest",
    "GeneratePlanResponse",
    "ErrorResponse",
    "HealthResponse",
]
