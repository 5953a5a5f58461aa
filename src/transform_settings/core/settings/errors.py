# src/transform_settings/core/settings/errors.py
"""
Exceções canônicas da camada de settings.

Hierarquia:
    SettingsError
    ├── SettingsParseError
    │   ├── UnknownSettingsFieldError
    │   └── SettingsFieldTypeError
    ├── SettingsWireError
    └── SettingsValidationError

Princípios fundamentais:
    - Falhas de parse e de validação são resultados inspecionáveis
    - Incompatibilidade de versão de protocolo nunca é erro
    - A camada de settings não loga, não tenta novamente e não faz recovery

Limites explícitos:
    - Não representa erro de configuração do runtime (ver core.config.errors)
    - Não representa falha de execução de Step
"""

from __future__ import annotations

from typing import List, Sequence


class SettingsError(Exception):
    """Exceção base para erros das settings de um transform."""


class SettingsParseError(SettingsError):
    """
    Documento de settings estruturalmente inválido.

    Exemplos:
        - raiz do documento não é um mapa
        - JSON ou YAML malformado
    """


class UnknownSettingsFieldError(SettingsParseError):
    """Campo desconhecido presente no documento (modo estrito)."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"[transform_config_settings] unknown field [{field}]")


class SettingsFieldTypeError(SettingsParseError):
    """Campo conhecido com tipo incompatível."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"[transform_config_settings] failed to parse field [{field}]: "
            f"expected {expected}, got {actual}"
        )


class SettingsWireError(SettingsError):
    """
    Payload binário que não pode ser escrito ou lido.

    Cobre stream truncado, valor fora de int32, slot booleano inválido e
    valores que colidem com a sentinela de default no wire.
    """


class SettingsValidationError(SettingsError):
    """
    Objeto acumulador de violações de validação.

    Carrega uma mensagem por restrição violada. Só é levantado por
    `ensure_valid`; `validate_settings` apenas retorna a lista.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__(self._render(self.errors))

    @staticmethod
    def _render(errors: Sequence[str]) -> str:
        lines = "".join(f"{i}: {msg};" for i, msg in enumerate(errors, start=1))
        return f"Validation Failed: {lines}"

    def validation_errors(self) -> List[str]:
        return list(self.errors)
