# src/transform_settings/core/settings/document.py
"""
Codec textual (documento chave-valor) das settings de um transform.

Encode:
    - Apenas campos em VALUE são emitidos
    - UNSET e DEFAULT são omitidos da mesma forma; o leitor não tem como
      distinguir depois qual dos dois estava presente (perda aceita)
    - Booleanos são emitidos como `true`/`false`

Decode:
    - chave ausente   → UNSET
    - `null` explícito → DEFAULT
    - valor tipado    → VALUE (faixa verificada depois, pelo validator)
    - chave desconhecida → erro no modo estrito, ignorada no modo leniente
    - tipo incompatível → erro em ambos os modos
    - NaN e infinitos em `docs_per_second` → erro de tipo

Formatos auxiliares:
    - JSON (stdlib `json`)
    - YAML (PyYAML, `safe_load` / `safe_dump`)
    - arquivos `.json`, `.yaml`, `.yml` via leitor da camada de configuração
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Union

import yaml  # PyYAML

from transform_settings.core.config.hashing import compute_config_hash
from transform_settings.core.config.loader import read_mapping_file

from .errors import SettingsFieldTypeError, SettingsParseError, UnknownSettingsFieldError
from .model import (
    ALIGN_CHECKPOINTS,
    DATES_AS_EPOCH_MILLIS,
    DOCS_PER_SECOND,
    FIELD_NAMES,
    MAX_PAGE_SEARCH_SIZE,
    SettingsConfig,
)
from .tristate import TriState


STRICT = False
LENIENT = True


def _type_name(raw: Any) -> str:
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return "boolean"
    if isinstance(raw, int):
        return "integer"
    if isinstance(raw, float):
        return "float"
    if isinstance(raw, str):
        return "string"
    if isinstance(raw, (list, tuple)):
        return "array"
    if isinstance(raw, dict):
        return "object"
    return type(raw).__name__


def _parse_int_or_null(field: str, raw: Any) -> TriState[int]:
    if raw is None:
        return TriState.default()
    # bool é subclasse de int e não conta como número aqui
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SettingsFieldTypeError(field, "integer or null", _type_name(raw))
    return TriState.of(raw)


def _parse_float_or_null(field: str, raw: Any) -> TriState[float]:
    if raw is None:
        return TriState.default()
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SettingsFieldTypeError(field, "float or null", _type_name(raw))
    try:
        value = float(raw)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        raise SettingsFieldTypeError(field, "finite float or null", "non-finite float")
    return TriState.of(value)


def _parse_bool_or_null(field: str, raw: Any) -> TriState[bool]:
    if raw is None:
        return TriState.default()
    if not isinstance(raw, bool):
        raise SettingsFieldTypeError(field, "boolean or null", _type_name(raw))
    return TriState.of(raw)


_FIELD_PARSERS: Dict[str, Callable[[str, Any], TriState[Any]]] = {
    MAX_PAGE_SEARCH_SIZE: _parse_int_or_null,
    DOCS_PER_SECOND: _parse_float_or_null,
    DATES_AS_EPOCH_MILLIS: _parse_bool_or_null,
    ALIGN_CHECKPOINTS: _parse_bool_or_null,
}

_FIELD_RENDERERS: Dict[str, Callable[[Any], Any]] = {
    MAX_PAGE_SEARCH_SIZE: int,
    DOCS_PER_SECOND: float,
    DATES_AS_EPOCH_MILLIS: bool,
    ALIGN_CHECKPOINTS: bool,
}


def to_document(settings: SettingsConfig) -> Dict[str, Any]:
    """Documento ordenado contendo apenas os campos com override."""
    doc: Dict[str, Any] = {}
    for name in FIELD_NAMES:
        state = getattr(settings, name)
        if state.has_override:
            doc[name] = _FIELD_RENDERERS[name](state.value)
    return doc


def from_document(fields: Mapping[str, Any], lenient: bool = STRICT) -> SettingsConfig:
    """
    Materializa `SettingsConfig` a partir de um documento chave-valor.

    Raises:
        SettingsParseError: se o documento não for um mapa.
        UnknownSettingsFieldError: chave desconhecida no modo estrito.
        SettingsFieldTypeError: valor com tipo incompatível.
    """
    if not isinstance(fields, Mapping):
        raise SettingsParseError(
            f"[transform_config_settings] expected an object, got {_type_name(fields)}"
        )

    states: Dict[str, TriState[Any]] = {}
    for key, raw in fields.items():
        parser = _FIELD_PARSERS.get(key)
        if parser is None:
            if lenient:
                continue
            raise UnknownSettingsFieldError(str(key))
        states[key] = parser(key, raw)

    return SettingsConfig(**states)


# -----------------------------
# JSON / YAML / arquivo
# -----------------------------
def to_json(settings: SettingsConfig, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(to_document(settings), indent=2, ensure_ascii=False)
    return json.dumps(to_document(settings), separators=(",", ":"), ensure_ascii=False)


def from_json(text: str, lenient: bool = STRICT) -> SettingsConfig:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsParseError(f"[transform_config_settings] invalid JSON: {e}") from e
    return from_document(data, lenient=lenient)


def to_yaml(settings: SettingsConfig) -> str:
    return yaml.safe_dump(to_document(settings), sort_keys=False, default_flow_style=False)


def from_yaml(text: str, lenient: bool = STRICT) -> SettingsConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SettingsParseError(f"[transform_config_settings] invalid YAML: {e}") from e
    if data is None:
        data = {}
    return from_document(data, lenient=lenient)


def load_settings(path: Union[str, Path], lenient: bool = STRICT) -> SettingsConfig:
    """
    Carrega settings de um arquivo `.json`, `.yaml` ou `.yml`.

    Erros de arquivo (inexistente, formato, raiz) propagam como `ConfigError`;
    erros de conteúdo propagam como `SettingsParseError`.
    """
    return from_document(read_mapping_file(Path(path)), lenient=lenient)


def settings_hash(settings: SettingsConfig) -> str:
    """Identidade estável (SHA-256) do documento textual das settings."""
    return compute_config_hash(to_document(settings))
