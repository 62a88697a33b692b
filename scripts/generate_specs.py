#!/usr/bin/env python3
"""
Generate JSON Schemas, YAML variants, and OpenAPI from Pydantic models.

Outputs under motiondirector/specs/:
 - schemas/*.json (and *.yaml)
 - schemas/agent.plan.contract.json (structured-output contract sent to the remote agent)
 - openapi.yaml and openapi.json
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

try:
    import yaml  # type: ignore
except Exception as exc:  # pragma: no cover
    print("PyYAML is required: pip install pyyaml", file=sys.stderr)
    raise


ROOT = Path(__file__).resolve().parents[1]
SPECS = ROOT / "motiondirector" / "specs"
SCHEMAS_DIR = SPECS / "schemas"

sys.path.insert(0, str(ROOT))

from motiondirector.specs.agents.plan_agent_instructions import PLAN_SCHEMA  # noqa: E402
from motiondirector.specs.models import (  # noqa: E402
    SCHEMA_MODELS,
    Brief,
    ErrorResponse,
    GeneratePlanRequest,
    GeneratePlanResponse,
    HealthResponse,
)


def write_json_yaml(obj: dict, json_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
    yaml_path = json_path.with_suffix(".yaml")
    with yaml_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def generate_model_schemas(out_dir: Path = SCHEMAS_DIR) -> None:
    for filename, model in SCHEMA_MODELS.items():
        schema = model.model_json_schema()
        write_json_yaml(schema, out_dir / filename)
    write_json_yaml(PLAN_SCHEMA, out_dir / "agent.plan.contract.json")


def _json_content(ref: str) -> dict:
    return {"application/json": {"schema": {"$ref": f"#/components/schemas/{ref}"}}}


def build_openapi() -> dict:
    # Inline the model schemas as OpenAPI components
    components = {
        "schemas": {
            "GeneratePlanRequest": GeneratePlanRequest.model_json_schema(),
            "Brief": Brief.model_json_schema(),
            "GeneratePlanResponse": GeneratePlanResponse.model_json_schema(),
            "ErrorResponse": ErrorResponse.model_json_schema(),
            "HealthResponse": HealthResponse.model_json_schema(),
        }
    }

    spec = {
        "openapi": "3.0.3",
        "info": {
            "title": "MotionDirector Functions API",
            "version": "0.1.0",
            "description": "HTTP endpoints exposed by the MotionDirector Azure Functions app.",
        },
        "servers": [
            {"url": "http://localhost:7071/api", "description": "Local Functions host"}
        ],
        "paths": {
            "/generate": {
                "post": {
                    "summary": "Generate a multi-scene video production plan from a brief",
                    "operationId": "generatePlan",
                    "requestBody": {
                        "required": True,
                        "content": _json_content("GeneratePlanRequest"),
                    },
                    "responses": {
                        "200": {
                            "description": "Plan produced; usedRemote tells which path built it. "
                            "An advisory `error` accompanies a fallback plan.",
                            "content": _json_content("GeneratePlanResponse"),
                        },
                        "400": {
                            "description": "Body is not a JSON object or the envelope is malformed",
                            "content": _json_content("ErrorResponse"),
                        },
                        "422": {
                            "description": "Brief failed validation; no plan returned",
                            "content": _json_content("ErrorResponse"),
                        },
                    },
                }
            },
            "/health": {
                "get": {
                    "summary": "Liveness check listing supported tones and platforms",
                    "operationId": "health",
                    "responses": {
                        "200": {"description": "Service is up", "content": _json_content("HealthResponse")}
                    },
                }
            },
        },
        "components": components,
    }
    return spec


def generate_openapi(out_dir: Path = SPECS) -> None:
    spec = build_openapi()
    write_json_yaml(spec, out_dir / "openapi.json")


def main() -> None:
    generate_model_schemas()
    generate_openapi()
    print("Specs generated under motiondirector/specs/")


if __name__ == "__main__":
    main()
