"""Step canônico: settings.load (v1).

Responsabilidades:
- Ler o documento `settings` da configuração de runtime.
- Materializar `SettingsConfig` (estrito ou leniente, via `settings_parsing.lenient`).
- Validar contra os limites injetados (`limits`).
- Publicar o artifact `settings.config`.

Payload mínimo esperado:
payload:
  settings: dict          # documento textual (apenas overrides)
  settings_hash: string   # SHA-256 do documento

Limites explícitos (v1):
- NÃO aplica updates parciais (ver settings.update).
- NÃO serializa para peers (ver settings.encode).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from transform_settings.core.config.errors import ConfigError
from transform_settings.core.pipeline.context import RunContext
from transform_settings.core.pipeline.step import Step
from transform_settings.core.pipeline.types import StepKind, StepResult, StepStatus
from transform_settings.core.settings import (
    FIELD_NAMES,
    SettingsError,
    SettingsLimits,
    ensure_valid,
    from_document,
    settings_hash,
    to_document,
)

from ._common import SETTINGS_ARTIFACT, config_section, failed_from_exception


@dataclass
class SettingsLoadStep(Step):
    """Carrega e valida as settings declaradas na configuração."""

    id: str = "settings.load"
    kind: StepKind = StepKind.PARSE
    depends_on: List[str] = field(default_factory=list)

    def run(self, ctx: RunContext) -> StepResult:
        cfg = ctx.config or {}
        lenient = bool(config_section(ctx, "settings_parsing").get("lenient", False))
        document: Any = cfg.get("settings")
        if document is None:
            document = {}

        try:
            limits = SettingsLimits.from_config(cfg)
            settings = ensure_valid(from_document(document, lenient=lenient), limits)
        except (SettingsError, ConfigError) as e:
            return failed_from_exception(self, ctx, e)

        warnings: List[str] = []
        if lenient and isinstance(document, Mapping):
            for key in document:
                if key not in FIELD_NAMES:
                    warnings.append(f"unknown settings field [{key}] ignored")
                    ctx.add_warning(step_id=self.id, message=warnings[-1])

        ctx.set_artifact(SETTINGS_ARTIFACT, settings)

        doc = to_document(settings)
        digest = settings_hash(settings)
        ctx.log(
            step_id=self.id,
            level="info",
            message="settings loaded",
            overrides=len(doc),
            settings_hash=digest,
            lenient=lenient,
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="settings loaded",
            metrics={"overrides": len(doc)},
            warnings=warnings,
            artifacts={"settings": SETTINGS_ARTIFACT},
            payload={"settings": doc, "settings_hash": digest},
        )
