# src/transform_settings/core/settings/versions.py
"""
Versões de protocolo e tabela de capacidades do wire de settings.

Em vez de espalhar `if version >= X` pelo encode/decode, cada operação
consulta uma única vez `supported_fields(version)` e recebe o conjunto de
campos que o peer consegue ler e escrever naquela versão.

Tabela (v1):
    - 0.0.0   → max_page_search_size, docs_per_second
    - 7.11.0  → + dates_as_epoch_millis
    - 7.15.0  → + align_checkpoints

Invariantes:
    - A ordem dos slots no wire é fixa (`WIRE_ORDER`)
    - Um campo suportado em uma versão é suportado em todas as posteriores
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union

from .model import (
    ALIGN_CHECKPOINTS,
    DATES_AS_EPOCH_MILLIS,
    DOCS_PER_SECOND,
    MAX_PAGE_SEARCH_SIZE,
)


_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, order=True)
class TransportVersion:
    """Versão negociada entre dois nós (major.minor.patch)."""

    major: int
    minor: int
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "TransportVersion":
        m = _VERSION_RE.match(text.strip())
        if m is None:
            raise ValueError(f"invalid transport version: {text!r}")
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    @classmethod
    def of(cls, value: Union["TransportVersion", str]) -> "TransportVersion":
        if isinstance(value, TransportVersion):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"expected TransportVersion or str, got {type(value).__name__}")

    def on_or_after(self, other: "TransportVersion") -> bool:
        return self >= other

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


V_7_0_0 = TransportVersion(7, 0, 0)
V_7_11_0 = TransportVersion(7, 11, 0)
V_7_15_0 = TransportVersion(7, 15, 0)
CURRENT = V_7_15_0

WIRE_ORDER: Tuple[str, ...] = (
    MAX_PAGE_SEARCH_SIZE,
    DOCS_PER_SECOND,
    DATES_AS_EPOCH_MILLIS,
    ALIGN_CHECKPOINTS,
)

_CAPABILITIES: Tuple[Tuple[TransportVersion, FrozenSet[str]], ...] = (
    (TransportVersion(0, 0, 0), frozenset({MAX_PAGE_SEARCH_SIZE, DOCS_PER_SECOND})),
    (V_7_11_0, frozenset({DATES_AS_EPOCH_MILLIS})),
    (V_7_15_0, frozenset({ALIGN_CHECKPOINTS})),
)


def supported_fields(version: Union[TransportVersion, str]) -> FrozenSet[str]:
    """Campos de settings que existem no wire da versão informada."""
    version = TransportVersion.of(version)
    out: set = set()
    for introduced_in, names in _CAPABILITIES:
        if version.on_or_after(introduced_in):
            out |= names
    return frozenset(out)


def introduced_in(field: str) -> TransportVersion:
    """Primeira versão cujo wire carrega o campo."""
    for version, names in _CAPABILITIES:
        if field in names:
            return version
    raise KeyError(field)
