# src/transform_settings/__init__.py
"""
Transform Settings: settings tri-state e versionadas de um transform.

Um transform é um job de processamento de dados de longa duração. Suas
settings opcionais (tamanho de página, throttling, formato de datas,
alinhamento de checkpoints) podem estar:

    - não definidas (UNSET, vale o default do sistema)
    - explicitamente resetadas (DEFAULT)
    - definidas com um valor (VALUE)

Arquitetura em alto nível:
    - core.settings → modelo, validação, codecs textual e binário, builder
    - core.config   → configuração de runtime (loader, merge, hashing)
    - core.pipeline → contrato de Step e RunContext
    - core.engine   → execução dos Steps
    - steps.settings → settings.load, settings.update, settings.encode
"""

from .core.settings import (
    SettingsBuilder,
    SettingsConfig,
    SettingsLimits,
    TransportVersion,
    TriState,
    decode_settings,
    encode_settings,
    ensure_valid,
    from_document,
    to_document,
    validate_settings,
)

__version__ = "0.1.0"

__all__ = [
    "SettingsBuilder",
    "SettingsConfig",
    "SettingsLimits",
    "TransportVersion",
    "TriState",
    "decode_settings",
    "encode_settings",
    "ensure_valid",
    "from_document",
    "to_document",
    "validate_settings",
]
