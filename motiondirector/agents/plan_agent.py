import asyncio
import json
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from motiondirector.shared.config import DEFAULT_MODEL, REMOTE_TIMEOUT_SECONDS, RESPONSES_URL
from motiondirector.shared.logging_utils import info as log_info, warning as log_warning
from motiondirector.specs.agents.plan_agent_instructions import (
    AGENT_INSTRUCTIONS,
    AGENT_NAME,
    RESPONSE_FORMAT,
    USER_PROMPT_TEMPLATE,
)
from motiondirector.specs.common.enums import GatewayState
from motiondirector.specs.common.errors import PlanValidationError, RemoteUnavailableError
from motiondirector.specs.models.brief import Brief
from motiondirector.specs.models.plan import Plan, validate_plan


@dataclass(frozen=True)
class Deadline:
    """Absolute cut-off for a remote call, measured on the monotonic clock."""

    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=time.monotonic() + seconds)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


@dataclass(frozen=True)
class RemoteSucceeded:
    plan: Plan
    model: str
    state: GatewayState = GatewayState.SUCCEEDED


@dataclass(frozen=True)
class RemoteFailed:
    reason: str
    state: GatewayState = GatewayState.FAILED


RemoteOutcome = Union[RemoteSucceeded, RemoteFailed]


def build_request_body(brief: Brief, model: str) -> Dict[str, Any]:
    return {
        "model": model,
        "input": [
            {"role": "system", "content": AGENT_INSTRUCTIONS},
            {
                "role": "user",
                "content": USER_PROMPT_TEMPLATE.format(brief_json=brief.model_dump_json(indent=2)),
            },
        ],
        "text": {"format": RESPONSE_FORMAT},
        "metadata": {"agent": AGENT_NAME},
    }


def extract_output_text(data: Any) -> str:
    """Pull the generated text out of a Responses API reply."""
    if not isinstance(data, dict):
        raise RemoteUnavailableError("malformed_reply", details={"error": "reply is not an object"})
    direct = data.get("output_text")
    if isinstance(direct, str) and direct.strip():
        return direct
    for item in data.get("output") or []:
        if not isinstance(item, dict):
            continue
        for content in item.get("content") or []:
            if isinstance(content, dict) and content.get("type") == "output_text" and isinstance(content.get("text"), str):
                return content["text"]
    raise RemoteUnavailableError("malformed_reply", details={"error": "no output_text in reply"})


async def _request_plan(
    brief: Brief,
    credential: str,
    model: str,
    deadline: Deadline,
    transport: Optional[httpx.AsyncBaseTransport],
) -> Plan:
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {credential}",
    }
    async with httpx.AsyncClient(transport=transport, timeout=httpx.Timeout(deadline.remaining())) as client:
        try:
            response = await client.post(RESPONSES_URL, json=build_request_body(brief, model), headers=headers)
        except httpx.TimeoutException as exc:
            raise RemoteUnavailableError("timeout", details={"error": str(exc)}) from exc
        except httpx.HTTPError as exc:
            raise RemoteUnavailableError("transport_error", details={"error": str(exc)}) from exc

    if not response.is_success:
        raise RemoteUnavailableError(
            "http_status",
            details={"status": response.status_code, "body": response.text[:500]},
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise RemoteUnavailableError("malformed_reply", details={"error": str(exc)}) from exc

    text = extract_output_text(data)
    try:
        return validate_plan(text)
    except PlanValidationError as exc:
        raise RemoteUnavailableError("schema_invalid", details=exc.details) from exc


def _failed(request_id: Optional[str], reason: str, details: Optional[Dict[str, Any]] = None) -> RemoteFailed:
    log_warning(request_id, "remote:failed", reason=reason, details=json.dumps(details or {}, default=str)[:1000])
    return RemoteFailed(reason=reason)


async def synthesize_remote_plan(
    brief: Brief,
    credential: Optional[str],
    *,
    model: Optional[str] = None,
    deadline: Optional[Deadline] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    request_id: Optional[str] = None,
) -> RemoteOutcome:
    """Ask the remote generation service for a plan.

    Makes exactly one attempt, bounded by `deadline` (12 seconds from the call
    when not given). Never raises: every failure comes back as RemoteFailed, and
    only a reply that passes plan validation comes back as RemoteSucceeded.
    The credential is used for this call only.
    """
    if not credential or not credential.strip():
        return RemoteFailed(reason="missing_credential", state=GatewayState.IDLE)

    deadline = deadline or Deadline.after(REMOTE_TIMEOUT_SECONDS)
    model = (model or "").strip() or DEFAULT_MODEL
    if deadline.expired:
        return _failed(request_id, "timeout")
    log_info(
        request_id,
        "remote:requesting",
        state=GatewayState.REQUESTING.value,
        model=model,
        timeoutSec=round(deadline.remaining(), 2),
    )

    try:
        plan = await asyncio.wait_for(
            _request_plan(brief, credential.strip(), model, deadline, transport),
            timeout=deadline.remaining(),
        )
    except asyncio.TimeoutError:
        return _failed(request_id, "timeout")
    except RemoteUnavailableError as exc:
        return _failed(request_id, exc.reason, exc.details)
    except Exception as exc:  # pragma: no cover - best effort
        return _failed(request_id, "unexpected_error", {"error": str(exc)})

    log_info(request_id, "remote:succeeded", model=model, scenes=len(plan.scenes))
    return RemoteSucceeded(plan=plan, model=model)


__all__ = [
    "Deadline",
    "RemoteSucceeded",
    "RemoteFailed",
    "RemoteOutcome",
    "build_request_body",
    "extract_output_text",
    "synthesize_remote_plan",
]
