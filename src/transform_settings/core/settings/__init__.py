# src/transform_settings/core/settings/__init__.py
"""
Modelo de settings tri-state de um transform.

Componentes:
    - tristate   → TriState (UNSET | DEFAULT | VALUE) e sentinela RESET
    - model      → SettingsConfig imutável e nomes canônicos dos campos
    - validation → SettingsLimits, validate_settings, ensure_valid
    - versions   → TransportVersion e tabela de capacidades do wire
    - wire       → codec binário versionado
    - document   → codec textual (documento chave-valor, JSON, YAML)
    - builder    → SettingsBuilder (staging e merge de updates parciais)
    - errors     → hierarquia de exceções
"""

from .builder import SettingsBuilder
from .document import (
    from_document,
    from_json,
    from_yaml,
    load_settings,
    settings_hash,
    to_document,
    to_json,
    to_yaml,
)
from .errors import (
    SettingsError,
    SettingsFieldTypeError,
    SettingsParseError,
    SettingsValidationError,
    SettingsWireError,
    UnknownSettingsFieldError,
)
from .model import FIELD_NAMES, SettingsConfig
from .tristate import DEFAULT, RESET, UNSET, TriState, TriStateKind
from .validation import SettingsLimits, ensure_valid, validate_settings
from .versions import CURRENT, V_7_11_0, V_7_15_0, TransportVersion, supported_fields
from .wire import StreamInput, StreamOutput, decode_settings, encode_settings, read_settings, write_settings

__all__ = [
    "CURRENT",
    "DEFAULT",
    "FIELD_NAMES",
    "RESET",
    "SettingsBuilder",
    "SettingsConfig",
    "SettingsError",
    "SettingsFieldTypeError",
    "SettingsLimits",
    "SettingsParseError",
    "SettingsValidationError",
    "SettingsWireError",
    "StreamInput",
    "StreamOutput",
    "TransportVersion",
    "TriState",
    "TriStateKind",
    "UNSET",
    "UnknownSettingsFieldError",
    "V_7_11_0",
    "V_7_15_0",
    "decode_settings",
    "encode_settings",
    "ensure_valid",
    "from_document",
    "from_json",
    "from_yaml",
    "load_settings",
    "read_settings",
    "settings_hash",
    "supported_fields",
    "to_document",
    "to_json",
    "to_yaml",
    "validate_settings",
    "write_settings",
]
