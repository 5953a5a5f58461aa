"""
Transform Settings: Canonical Error Payloads (v1)

Este módulo define o payload canônico de erro usado quando uma falha das
settings precisa cruzar a fronteira de um Step (ou de uma API de update).
Erros são artefatos de contrato, devendo ser:

- explícitos
- serializáveis
- acionáveis

A camada `core.settings` levanta exceções tipadas; este módulo apenas as
traduz para um formato estável. Nenhuma decisão implícita é tomada aqui.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from transform_settings.core.config.errors import ConfigError
from transform_settings.core.settings.errors import (
    SettingsError,
    SettingsFieldTypeError,
    SettingsParseError,
    SettingsValidationError,
    SettingsWireError,
    UnknownSettingsFieldError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta e objetiva
    - details: dados estruturados para diagnóstico
    - hint: ação sugerida ao operador
    - decision_required: o chamador precisa decidir antes de reexecutar
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

SETTINGS_PARSE_ERROR = "SETTINGS_PARSE_ERROR"
SETTINGS_UNKNOWN_FIELD = "SETTINGS_UNKNOWN_FIELD"
SETTINGS_FIELD_TYPE = "SETTINGS_FIELD_TYPE"
SETTINGS_VALIDATION_ERROR = "SETTINGS_VALIDATION_ERROR"
SETTINGS_WIRE_ERROR = "SETTINGS_WIRE_ERROR"

CONFIG_ERROR = "CONFIG_ERROR"

ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def settings_unknown_field(
    *,
    field: str,
    hint: str = "Remova o campo desconhecido ou use o parser leniente.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SETTINGS_UNKNOWN_FIELD,
        message=f"Campo de settings desconhecido: {field}",
        details={"field": field},
        hint=hint,
    )


def settings_field_type(
    *,
    field: str,
    expected: str,
    actual: str,
    hint: str = "Ajuste o tipo do valor informado para o campo.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SETTINGS_FIELD_TYPE,
        message=f"Tipo inválido para o campo de settings {field}",
        details={"field": field, "expected": expected, "actual": actual},
        hint=hint,
    )


def settings_parse_error(*, message: str) -> ErrorPayload:
    return ErrorPayload(
        type=SETTINGS_PARSE_ERROR,
        message="Documento de settings inválido",
        details={"reason": message},
        hint="Informe um objeto JSON/YAML com os campos de settings.",
    )


def settings_validation_failed(
    *,
    errors: List[str],
    hint: str = "Corrija os valores fora da faixa antes de aplicar as settings.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SETTINGS_VALIDATION_ERROR,
        message="Settings fora das faixas permitidas",
        details={"errors": list(errors)},
        hint=hint,
        decision_required=True,
    )


def settings_wire_error(*, message: str) -> ErrorPayload:
    return ErrorPayload(
        type=SETTINGS_WIRE_ERROR,
        message="Falha no codec binário de settings",
        details={"reason": message},
        hint="Verifique a versão negociada com o peer e os valores das settings.",
    )


def engine_configuration_error(
    *,
    message: str = "Configuração inválida para execução",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise a configuração dos steps antes de reexecutar.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )


def error_payload_for(exc: Exception) -> ErrorPayload:
    """
    Traduz uma exceção em `ErrorPayload`.

    Exceções desconhecidas viram ENGINE_EXECUTION_ERROR sem stack trace.
    """
    if isinstance(exc, UnknownSettingsFieldError):
        return settings_unknown_field(field=exc.field)
    if isinstance(exc, SettingsFieldTypeError):
        return settings_field_type(field=exc.field, expected=exc.expected, actual=exc.actual)
    if isinstance(exc, SettingsParseError):
        return settings_parse_error(message=str(exc))
    if isinstance(exc, SettingsValidationError):
        return settings_validation_failed(errors=exc.errors)
    if isinstance(exc, SettingsWireError):
        return settings_wire_error(message=str(exc))
    if isinstance(exc, SettingsError):
        return ErrorPayload(type=SETTINGS_PARSE_ERROR, message=str(exc) or "Erro de settings", details={})
    if isinstance(exc, ConfigError):
        return ErrorPayload(
            type=CONFIG_ERROR,
            message=str(exc) or "Erro de configuração",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise os arquivos de configuração de runtime.",
        )
    return ErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante execução",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log de eventos do run para diagnosticar a falha.",
    )
