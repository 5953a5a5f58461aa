"""Step canônico: settings.encode (v1).

Serializa o artifact `settings.config` para o wire binário na versão do
peer (`transport.peer_version`, default: versão corrente) e publica o
artifact `settings.wire`.

Campos com override que a versão do peer não carrega não são enviados;
cada um gera um warning (o peer vai operar no default desses campos).

Payload mínimo esperado:
payload:
  peer_version: string
  bytes: int
  dropped_fields: list[str]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from transform_settings.core.errors import engine_configuration_error
from transform_settings.core.pipeline.context import RunContext
from transform_settings.core.pipeline.step import Step
from transform_settings.core.pipeline.types import StepKind, StepResult, StepStatus
from transform_settings.core.settings import CURRENT, SettingsError, TransportVersion, encode_settings
from transform_settings.core.settings.wire import dropped_fields

from ._common import SETTINGS_ARTIFACT, WIRE_ARTIFACT, config_section, failed_from_exception, failed_result


@dataclass
class SettingsEncodeStep(Step):
    """Encode versionado das settings para um peer."""

    id: str = "settings.encode"
    kind: StepKind = StepKind.ENCODE
    depends_on: List[str] = field(default_factory=lambda: ["settings.load", "settings.update"])

    def run(self, ctx: RunContext) -> StepResult:
        raw_version = config_section(ctx, "transport").get("peer_version")
        try:
            peer = CURRENT if raw_version is None else TransportVersion.of(raw_version)
        except (TypeError, ValueError) as e:
            return failed_result(
                self,
                ctx,
                engine_configuration_error(
                    message="Versão de peer inválida",
                    details={"peer_version": repr(raw_version), "reason": str(e)},
                    hint="Informe transport.peer_version no formato major.minor.patch.",
                ),
            )

        if not ctx.has_artifact(SETTINGS_ARTIFACT):
            return failed_result(
                self,
                ctx,
                engine_configuration_error(
                    message="Artifact settings.config ausente",
                    details={"expected_artifact": SETTINGS_ARTIFACT, "required_by": self.id},
                    hint="Execute settings.load antes de settings.encode.",
                ),
            )

        settings = ctx.get_artifact(SETTINGS_ARTIFACT)

        try:
            data = encode_settings(settings, peer)
        except SettingsError as e:
            return failed_from_exception(self, ctx, e)

        dropped = dropped_fields(settings, peer)
        warnings: List[str] = []
        for name in dropped:
            warnings.append(f"{name} is not supported by peer version {peer} and was not sent")
            ctx.add_warning(step_id=self.id, message=warnings[-1])

        ctx.set_artifact(WIRE_ARTIFACT, data)
        ctx.log(
            step_id=self.id,
            level="info",
            message="settings encoded",
            peer_version=str(peer),
            bytes=len(data),
            dropped_fields=dropped,
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"settings encoded for {peer}",
            metrics={"bytes": len(data), "dropped": len(dropped)},
            warnings=warnings,
            artifacts={"wire": WIRE_ARTIFACT},
            payload={"peer_version": str(peer), "bytes": len(data), "dropped_fields": dropped},
        )
