# src/transform_settings/core/settings/wire.py
"""
Codec binário das settings, com compatibilidade entre versões de protocolo.

Layout (big-endian):
    optional int32   max_page_search_size
    optional float64 docs_per_second
    optional int32   dates_as_epoch_millis   (somente se versão >= 7.11.0)
    optional int32   align_checkpoints       (somente se versão >= 7.15.0)

"optional" = 1 byte de presença (0/1) seguido do payload quando presente.
Dentro do payload, a sentinela -1 (-1.0 no float) representa DEFAULT;
booleanos viajam como 0/1.

Política de compatibilidade:
    - Encode omite campos que a versão do peer não entende
    - Decode de um peer antigo sintetiza DEFAULT (não UNSET) para campos
      que a versão dele não carrega: esses peers sempre operaram no default
    - Bytes excedentes após os campos conhecidos são ignorados

Limites explícitos:
    - Não negocia a versão; ela chega pronta do transporte
    - Não valida faixas (ver `validation`)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from .errors import SettingsWireError
from .model import (
    ALIGN_CHECKPOINTS,
    DATES_AS_EPOCH_MILLIS,
    DOCS_PER_SECOND,
    MAX_PAGE_SEARCH_SIZE,
    SettingsConfig,
)
from .tristate import TriState
from .versions import CURRENT, WIRE_ORDER, TransportVersion, supported_fields


_BYTE = struct.Struct(">B")
_INT = struct.Struct(">i")
_DOUBLE = struct.Struct(">d")

MAX_INT32 = 2 ** 31 - 1
DEFAULT_INT_SENTINEL = -1
DEFAULT_FLOAT_SENTINEL = -1.0


class StreamOutput:
    """Buffer de escrita associado à versão do peer de destino."""

    def __init__(self, version: Union[TransportVersion, str] = CURRENT) -> None:
        self.version = TransportVersion.of(version)
        self._buf = bytearray()

    def write_bool(self, value: bool) -> None:
        self._buf += _BYTE.pack(1 if value else 0)

    def write_int(self, value: int) -> None:
        try:
            self._buf += _INT.pack(value)
        except struct.error as e:
            raise SettingsWireError(f"value [{value}] does not fit in int32") from e

    def write_double(self, value: float) -> None:
        self._buf += _DOUBLE.pack(value)

    def write_optional_int(self, value: Optional[int]) -> None:
        if value is None:
            self.write_bool(False)
            return
        self.write_bool(True)
        self.write_int(value)

    def write_optional_double(self, value: Optional[float]) -> None:
        if value is None:
            self.write_bool(False)
            return
        self.write_bool(True)
        self.write_double(value)

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class StreamInput:
    """Leitor sequencial associado à versão do peer de origem."""

    def __init__(self, data: bytes, version: Union[TransportVersion, str] = CURRENT) -> None:
        self.version = TransportVersion.of(version)
        self._data = bytes(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, codec: struct.Struct) -> Any:
        end = self._pos + codec.size
        if end > len(self._data):
            raise SettingsWireError(
                f"unexpected end of stream: need {codec.size} bytes at offset {self._pos}, "
                f"have {self.remaining}"
            )
        (value,) = codec.unpack_from(self._data, self._pos)
        self._pos = end
        return value

    def read_bool(self) -> bool:
        b = self._take(_BYTE)
        if b not in (0, 1):
            raise SettingsWireError(f"unexpected byte [{b:#04x}] for boolean")
        return b == 1

    def read_int(self) -> int:
        return self._take(_INT)

    def read_double(self) -> float:
        return self._take(_DOUBLE)

    def read_optional_int(self) -> Optional[int]:
        return self.read_int() if self.read_bool() else None

    def read_optional_double(self) -> Optional[float]:
        return self.read_double() if self.read_bool() else None


# -----------------------------
# Slots por tipo de campo
# -----------------------------
def _write_int_state(out: StreamOutput, field: str, state: TriState[int]) -> None:
    if state.is_unset:
        out.write_optional_int(None)
    elif state.is_default:
        out.write_optional_int(DEFAULT_INT_SENTINEL)
    else:
        if state.value == DEFAULT_INT_SENTINEL:
            raise SettingsWireError(f"{field} value [{state.value}] collides with the default sentinel")
        out.write_optional_int(state.value)


def _read_int_state(inp: StreamInput, field: str) -> TriState[int]:
    raw = inp.read_optional_int()
    if raw is None:
        return TriState.unset()
    if raw == DEFAULT_INT_SENTINEL:
        return TriState.default()
    return TriState.of(raw)


def _write_float_state(out: StreamOutput, field: str, state: TriState[float]) -> None:
    if state.is_unset:
        out.write_optional_double(None)
    elif state.is_default:
        out.write_optional_double(DEFAULT_FLOAT_SENTINEL)
    else:
        if state.value == DEFAULT_FLOAT_SENTINEL:
            raise SettingsWireError(f"{field} value [{state.value}] collides with the default sentinel")
        out.write_optional_double(float(state.value))


def _read_float_state(inp: StreamInput, field: str) -> TriState[float]:
    raw = inp.read_optional_double()
    if raw is None:
        return TriState.unset()
    if raw == DEFAULT_FLOAT_SENTINEL:
        return TriState.default()
    return TriState.of(raw)


def _write_bool_state(out: StreamOutput, field: str, state: TriState[bool]) -> None:
    if state.is_unset:
        out.write_optional_int(None)
    elif state.is_default:
        out.write_optional_int(DEFAULT_INT_SENTINEL)
    else:
        out.write_optional_int(1 if state.value else 0)


def _read_bool_state(inp: StreamInput, field: str) -> TriState[bool]:
    raw = inp.read_optional_int()
    if raw is None:
        return TriState.unset()
    if raw == DEFAULT_INT_SENTINEL:
        return TriState.default()
    if raw < 0:
        raise SettingsWireError(f"{field} has invalid boolean slot value [{raw}]")
    return TriState.of(raw > 0)


@dataclass(frozen=True)
class _Slot:
    write: Callable[[StreamOutput, str, TriState[Any]], None]
    read: Callable[[StreamInput, str], TriState[Any]]


_SLOTS: Dict[str, _Slot] = {
    MAX_PAGE_SEARCH_SIZE: _Slot(_write_int_state, _read_int_state),
    DOCS_PER_SECOND: _Slot(_write_float_state, _read_float_state),
    DATES_AS_EPOCH_MILLIS: _Slot(_write_bool_state, _read_bool_state),
    ALIGN_CHECKPOINTS: _Slot(_write_bool_state, _read_bool_state),
}


# -----------------------------
# API pública
# -----------------------------
def write_settings(out: StreamOutput, settings: SettingsConfig) -> None:
    """Escreve as settings no stream, respeitando a versão do destino."""
    fields = supported_fields(out.version)
    for name in WIRE_ORDER:
        if name in fields:
            _SLOTS[name].write(out, name, getattr(settings, name))


def read_settings(inp: StreamInput) -> SettingsConfig:
    """Lê as settings do stream, sintetizando DEFAULT para campos ausentes na versão de origem."""
    fields = supported_fields(inp.version)
    states: Dict[str, TriState[Any]] = {}
    for name in WIRE_ORDER:
        if name in fields:
            states[name] = _SLOTS[name].read(inp, name)
        else:
            states[name] = TriState.default()
    return SettingsConfig(**states)


def encode_settings(settings: SettingsConfig, version: Union[TransportVersion, str] = CURRENT) -> bytes:
    out = StreamOutput(version)
    write_settings(out, settings)
    return out.getvalue()


def decode_settings(data: bytes, version: Union[TransportVersion, str] = CURRENT) -> SettingsConfig:
    return read_settings(StreamInput(data, version))


def dropped_fields(settings: SettingsConfig, version: Union[TransportVersion, str]) -> list:
    """Campos com override (VALUE) que não chegam ao peer da versão informada."""
    fields = supported_fields(version)
    return [
        name
        for name in WIRE_ORDER
        if name not in fields and getattr(settings, name).has_override
    ]
