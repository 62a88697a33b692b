import uuid

import azure.functions as func
from pydantic import BaseModel, ValidationError

from motiondirector.functions.generate_plan import generate_plan
from motiondirector.shared.logging_utils import error as log_error, info as log_info
from motiondirector.specs.common.enums import Platform, Tone
from motiondirector.specs.common.errors import InvalidInputError
from motiondirector.specs.models.http import (
    ErrorResponse,
    GeneratePlanRequest,
    GeneratePlanResponse,
    HealthResponse,
)


bp = func.Blueprint()


def _json_response(model: BaseModel, status_code: int) -> func.HttpResponse:
    return func.HttpResponse(
        body=model.model_dump_json(exclude_none=True),
        mimetype="application/json",
        status_code=status_code,
    )


async def handle_generate(req: func.HttpRequest) -> func.HttpResponse:
    request_id = uuid.uuid4().hex
    try:
        data = req.get_json()
    except ValueError:
        log_error(request_id, "generate:invalid_json")
        return _json_response(ErrorResponse(error="Invalid request body."), 400)

    if not isinstance(data, dict):
        log_error(request_id, "generate:invalid_body", received=type(data).__name__)
        return _json_response(ErrorResponse(error="Invalid request body."), 400)

    try:
        parsed = GeneratePlanRequest.model_validate(data)
    except ValidationError as ex:
        fields = [".".join(str(p) for p in err.get("loc", ())) for err in ex.errors(include_url=False)]
        log_error(request_id, "generate:invalid_request", fields=fields)
        return _json_response(ErrorResponse(error="Invalid request body.", details={"fields": fields}), 400)

    try:
        result = await generate_plan(
            parsed.input,
            parsed.credential,
            parsed.model,
            request_id=request_id,
        )
    except InvalidInputError as exc:
        log_error(request_id, "generate:invalid_input", error=exc.to_dict())
        err = ErrorResponse(error="Invalid agent input payload.", errorCode=exc.code, details=exc.details)
        return _json_response(err, 422)

    if result.error:
        return _json_response(ErrorResponse(error=result.error, plan=result.plan, usedRemote=False), 200)
    return _json_response(GeneratePlanResponse(plan=result.plan, usedRemote=result.used_remote), 200)


def handle_health(req: func.HttpRequest) -> func.HttpResponse:
    log_info(None, "health:request")
    resp = HealthResponse(
        tones=[t.value for t in Tone],
        platforms=[p.value for p in Platform],
    )
    return _json_response(resp, 200)


@bp.function_name(name="generate_plan")
@bp.route(route="generate", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
async def generate(req: func.HttpRequest) -> func.HttpResponse:
    return await handle_generate(req)


@bp.function_name(name="health")
@bp.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health(req: func.HttpRequest) -> func.HttpResponse:
    return handle_health(req)
