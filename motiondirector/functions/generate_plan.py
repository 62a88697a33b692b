"""
Plan generation orchestration.

Validates the brief, tries the remote plan agent when the caller supplied a
credential, and falls back to deterministic synthesis otherwise. Once the brief
is valid a plan is always returned; only an invalid brief raises.

Request: raw brief payload + optional credential/model
Response: PlanResult (plan, used_remote, optional advisory error)
"""
import uuid
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Optional

import httpx

from motiondirector.agents.plan_agent import (
    Deadline,
    RemoteFailed,
    RemoteSucceeded,
    synthesize_remote_plan,
)
from motiondirector.planning.plan_assembler import build_plan, build_single_scene_plan
from motiondirector.shared.logging_utils import error as log_error, info as log_info
from motiondirector.specs.common.enums import GatewayState
from motiondirector.specs.models.brief import Brief, parse_brief
from motiondirector.specs.models.plan import Plan

FALLBACK_MESSAGE = "Failed to generate plan. Returning deterministic fallback."


@dataclass(frozen=True)
class PlanResult:
    plan: Plan
    used_remote: bool
    error: Optional[str] = None


def _best_effort_plan(brief: Brief, request_id: str) -> Plan:
    try:
        return build_plan(brief)
    except Exception as exc:
        log_error(request_id, "generate:deterministic_failed", error=str(exc))
        return build_single_scene_plan(brief)


async def generate_plan(
    payload: Any,
    credential: Optional[str] = None,
    model: Optional[str] = None,
    *,
    deadline: Optional[Deadline] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    request_id: Optional[str] = None,
) -> PlanResult:
    """Produce a plan for a raw brief payload.

    Raises InvalidInputError (or its OutOfRangeError subclass) when the brief
    does not validate. Every later failure is absorbed into a deterministic plan.
    """
    request_id = request_id or uuid.uuid4().hex
    start = perf_counter()
    brief = parse_brief(payload)
    log_info(
        request_id,
        "generate:accepted",
        platform=brief.platform.value,
        tone=brief.tone.value,
        durationSeconds=brief.durationSeconds,
        remoteRequested=bool(credential),
    )

    try:
        if credential:
            outcome = await synthesize_remote_plan(
                brief,
                credential,
                model=model,
                deadline=deadline,
                transport=transport,
                request_id=request_id,
            )
        else:
            outcome = RemoteFailed(reason="missing_credential", state=GatewayState.IDLE)

        match outcome:
            case RemoteSucceeded(plan=plan):
                result = PlanResult(plan=plan, used_remote=True)
            case RemoteFailed(reason=reason):
                result = PlanResult(plan=build_plan(brief), used_remote=False)
                log_info(request_id, "generate:deterministic", reason=reason)
    except Exception as exc:
        log_error(request_id, "generate:fallback", error=str(exc), errorType=type(exc).__name__)
        return PlanResult(plan=_best_effort_plan(brief, request_id), used_remote=False, error=FALLBACK_MESSAGE)

    duration_ms = int((perf_counter() - start) * 1000)
    log_info(request_id, "generate:completed", usedRemote=result.used_remote, durationMs=duration_ms)
    return result
