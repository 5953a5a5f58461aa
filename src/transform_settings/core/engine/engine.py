# src/transform_settings/core/engine/engine.py
"""
Engine de execução dos Steps de settings.

Política de execução (v1):
    - Ordem definida por `plan_execution`
    - `steps.<id>.enabled: false` → SKIPPED ("skipped by config")
    - dependência FAILED → SKIPPED ("skipped due to failed dependency")
    - exceção não tratada no Step → FAILED com `payload["error"]`
    - `engine.fail_fast` (default true) interrompe após a primeira falha

O Engine não muta instâncias de StepResult; warnings coletados no
RunContext são incorporados criando uma nova instância.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Sequence

from transform_settings.core.errors import engine_configuration_error, error_payload_for
from transform_settings.core.pipeline.context import RunContext
from transform_settings.core.pipeline.step import Step
from transform_settings.core.pipeline.types import StepResult, StepStatus

from .planner import plan_execution


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução."""

    steps: Dict[str, StepResult] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return all(r.status is not StepStatus.FAILED for r in self.steps.values())


class Engine:
    """Planner + executor dos Steps de settings."""

    def __init__(self, *, steps: Sequence[Step], ctx: RunContext):
        self.steps: List[Step] = list(steps)
        self.ctx: RunContext = ctx

    def _is_enabled(self, step_id: str) -> bool:
        steps_cfg = (self.ctx.config or {}).get("steps", {}) or {}
        step_cfg = steps_cfg.get(step_id, {}) or {}
        return bool(step_cfg.get("enabled", True))

    def _fail_fast(self) -> bool:
        engine_cfg = (self.ctx.config or {}).get("engine", {}) or {}
        return bool(engine_cfg.get("fail_fast", True))

    def _with_ctx_warnings(self, result: StepResult) -> StepResult:
        merged: List[str] = []
        for msg in list(result.warnings) + list(self.ctx.warnings.get(result.step_id, [])):
            if msg not in merged:
                merged.append(msg)
        return replace(result, warnings=merged)

    def _mk_result(self, step: Step, status: StepStatus, summary: str, **payload) -> StepResult:
        return StepResult(
            step_id=step.id,
            kind=step.kind,
            status=status,
            summary=summary,
            payload=dict(payload),
        )

    def run(self) -> RunResult:
        ordered = plan_execution(self.steps)
        results: Dict[str, StepResult] = {}

        for step in ordered:
            sid = step.id

            if not self._is_enabled(sid):
                results[sid] = self._mk_result(step, StepStatus.SKIPPED, "skipped by config")
                continue

            deps = list(getattr(step, "depends_on", []) or [])
            if any(results.get(d) is not None and results[d].status == StepStatus.FAILED for d in deps):
                results[sid] = self._mk_result(step, StepStatus.SKIPPED, "skipped due to failed dependency")
                continue

            try:
                step_result = step.run(self.ctx)
                if not isinstance(step_result, StepResult):
                    error = engine_configuration_error(
                        message="Step retornou tipo inválido",
                        details={
                            "step_id": sid,
                            "expected": "StepResult",
                            "received": type(step_result).__name__,
                        },
                    )
                    step_result = self._mk_result(step, StepStatus.FAILED, error.message, error=error.to_dict())
            except Exception as e:
                error = error_payload_for(e)
                self.ctx.log(
                    step_id=sid,
                    level="error",
                    message="step raised",
                    error_type=error.type,
                    exception_class=e.__class__.__name__,
                )
                step_result = self._mk_result(step, StepStatus.FAILED, error.message, error=error.to_dict())

            results[sid] = self._with_ctx_warnings(step_result)

            if results[sid].status == StepStatus.FAILED and self._fail_fast():
                break

        return RunResult(steps=results)
