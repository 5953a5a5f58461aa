"""Helpers compartilhados pelos Steps de settings."""

from __future__ import annotations

from typing import Any, Dict

from transform_settings.core.errors import ErrorPayload, error_payload_for
from transform_settings.core.pipeline.context import RunContext
from transform_settings.core.pipeline.step import Step
from transform_settings.core.pipeline.types import StepResult, StepStatus


SETTINGS_ARTIFACT = "settings.config"
PREVIOUS_SETTINGS_ARTIFACT = "settings.previous"
WIRE_ARTIFACT = "settings.wire"


def failed_result(step: Step, ctx: RunContext, error: ErrorPayload) -> StepResult:
    """Registra o erro no log do run e devolve StepResult FAILED com `payload["error"]`."""
    ctx.log(
        step_id=step.id,
        level="error",
        message=f"{step.id} failed",
        error_type=error.type,
        error_message=error.message,
    )
    return StepResult(
        step_id=step.id,
        kind=step.kind,
        status=StepStatus.FAILED,
        summary=error.message,
        payload={"error": error.to_dict()},
    )


def failed_from_exception(step: Step, ctx: RunContext, exc: Exception) -> StepResult:
    return failed_result(step, ctx, error_payload_for(exc))


def config_section(ctx: RunContext, key: str) -> Dict[str, Any]:
    section = (ctx.config or {}).get(key) or {}
    return section if isinstance(section, dict) else {}
