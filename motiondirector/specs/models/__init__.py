from __future__ import annotations

from typing import Dict, Type

from pydantic import BaseModel

from .brief import Brief, parse_brief
from .plan import AiAssets, Plan, PlanMetadata, Scene, Soundtrack, validate_plan
from .http import ErrorResponse, GeneratePlanRequest, GeneratePlanResponse, HealthResponse


# Registry mapping output schema filenames to models for generation
SCHEMA_MODELS: Dict[str, Type[BaseModel]] = {
    "brief.schema.json": Brief,
    "scene.schema.json": Scene,
    "plan.schema.json": Plan,
    "generate.request.schema.json": GeneratePlanRequest,
    "generate.response.schema.json": GeneratePlanResponse,
    "error.response.schema.json": ErrorResponse,
    "health.response.schema.json": HealthResponse,
}

__all__ = [
    "Brief",
    "parse_brief",
    "Scene",
    "Soundtrack",
    "AiAssets",
    "PlanMetadata",
    "Plan",
    "validate_plan",
    "GeneratePlanRequest",
    "GeneratePlanResponse",
    "ErrorResponse",
    "HealthResponse",
    "SCHEMA_MODELS",
]
