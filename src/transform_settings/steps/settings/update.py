"""Step canônico: settings.update (v1).

Aplica o update parcial `settings_update` sobre o artifact `settings.config`.

Semântica do update (por campo):
- ausente → mantém o valor atual
- `null`  → remove o override (campo volta a UNSET)
- valor   → sobrescreve

O documento de update é sempre parseado no modo estrito: um campo
desconhecido em um update é tratado como erro do chamador.

Payload mínimo esperado:
payload:
  settings: dict
  changed_fields: list[str]
  settings_hash: string
  previous_settings_hash: string
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from transform_settings.core.config.errors import ConfigError
from transform_settings.core.errors import engine_configuration_error
from transform_settings.core.pipeline.context import RunContext
from transform_settings.core.pipeline.step import Step
from transform_settings.core.pipeline.types import StepKind, StepResult, StepStatus
from transform_settings.core.settings import (
    FIELD_NAMES,
    SettingsBuilder,
    SettingsError,
    SettingsLimits,
    ensure_valid,
    from_document,
    settings_hash,
    to_document,
)

from ._common import (
    PREVIOUS_SETTINGS_ARTIFACT,
    SETTINGS_ARTIFACT,
    failed_from_exception,
    failed_result,
)


@dataclass
class SettingsUpdateStep(Step):
    """Merge de update parcial sobre as settings carregadas."""

    id: str = "settings.update"
    kind: StepKind = StepKind.MERGE
    depends_on: List[str] = field(default_factory=lambda: ["settings.load"])

    def run(self, ctx: RunContext) -> StepResult:
        cfg = ctx.config or {}
        if "settings_update" not in cfg:
            ctx.log(step_id=self.id, level="info", message="no settings update requested")
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SKIPPED,
                summary="no settings update requested",
            )

        if not ctx.has_artifact(SETTINGS_ARTIFACT):
            return failed_result(
                self,
                ctx,
                engine_configuration_error(
                    message="Artifact settings.config ausente",
                    details={"expected_artifact": SETTINGS_ARTIFACT, "required_by": self.id},
                    hint="Execute settings.load antes de settings.update.",
                ),
            )

        base = ctx.get_artifact(SETTINGS_ARTIFACT)
        update_doc = cfg.get("settings_update")
        if update_doc is None:
            update_doc = {}

        try:
            limits = SettingsLimits.from_config(cfg)
            partial = from_document(update_doc, lenient=False)
            # builder privado a este merge
            merged = SettingsBuilder(base).update(partial).build()
            ensure_valid(merged, limits)
        except (SettingsError, ConfigError) as e:
            return failed_from_exception(self, ctx, e)

        changed = [name for name in FIELD_NAMES if getattr(base, name) != getattr(merged, name)]
        warnings: List[str] = []
        if not changed:
            warnings.append("settings update changed nothing")
            ctx.add_warning(step_id=self.id, message=warnings[-1])

        ctx.set_artifact(PREVIOUS_SETTINGS_ARTIFACT, base)
        ctx.set_artifact(SETTINGS_ARTIFACT, merged)

        digest = settings_hash(merged)
        previous_digest = settings_hash(base)
        ctx.log(
            step_id=self.id,
            level="info",
            message="settings updated",
            changed_fields=changed,
            settings_hash=digest,
            previous_settings_hash=previous_digest,
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(changed)} settings field(s) changed",
            metrics={"changed": len(changed)},
            warnings=warnings,
            artifacts={"settings": SETTINGS_ARTIFACT, "previous": PREVIOUS_SETTINGS_ARTIFACT},
            payload={
                "settings": to_document(merged),
                "changed_fields": changed,
                "settings_hash": digest,
                "previous_settings_hash": previous_digest,
            },
        )
