# src/transform_settings/core/settings/model.py
"""
Entidade imutável de settings de um transform.

`SettingsConfig` agrega os quatro tunables opcionais de um transform, cada
um representado por um `TriState`:

    - max_page_search_size  → TriState[int]   (tamanho do lote de busca)
    - docs_per_second       → TriState[float] (throttling; 0/ausente = sem limite)
    - dates_as_epoch_millis → TriState[bool]
    - align_checkpoints     → TriState[bool]

Acessores:
    - Os atributos `TriState` são a forma raw, usada pelo merge
    - Os métodos `get_*` devolvem a visão de negócio (`None` quando UNSET)

Assimetria preservada:
    `align_checkpoints` em DEFAULT é lido como `True`, enquanto
    `dates_as_epoch_millis` em DEFAULT é lido como `False`.

Invariantes:
    - Uma instância nunca muda após criada; "updates" produzem nova instância
    - O construtor não valida faixas (ver `validation.validate_settings`)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Optional, Tuple

from .tristate import TriState, UNSET


MAX_PAGE_SEARCH_SIZE = "max_page_search_size"
DOCS_PER_SECOND = "docs_per_second"
DATES_AS_EPOCH_MILLIS = "dates_as_epoch_millis"
ALIGN_CHECKPOINTS = "align_checkpoints"

FIELD_NAMES: Tuple[str, ...] = (
    MAX_PAGE_SEARCH_SIZE,
    DOCS_PER_SECOND,
    DATES_AS_EPOCH_MILLIS,
    ALIGN_CHECKPOINTS,
)

DOCUMENT_NAME = "transform_config_settings"

# visão de negócio do estado DEFAULT para campos booleanos
DATES_AS_EPOCH_MILLIS_DEFAULT = False
ALIGN_CHECKPOINTS_DEFAULT = True


@dataclass(frozen=True)
class SettingsConfig:
    """Settings opcionais de um transform (imutável, hashable)."""

    max_page_search_size: TriState[int] = UNSET
    docs_per_second: TriState[float] = UNSET
    dates_as_epoch_millis: TriState[bool] = UNSET
    align_checkpoints: TriState[bool] = UNSET

    def __post_init__(self) -> None:
        for f in fields(self):
            if not isinstance(getattr(self, f.name), TriState):
                raise TypeError(
                    f"{f.name} must be a TriState, got {type(getattr(self, f.name)).__name__}"
                )

    @classmethod
    def from_values(
        cls,
        max_page_search_size: Optional[int] = None,
        docs_per_second: Optional[float] = None,
        dates_as_epoch_millis: Optional[bool] = None,
        align_checkpoints: Optional[bool] = None,
    ) -> "SettingsConfig":
        """Atalho: `None` vira UNSET, qualquer outro valor vira VALUE."""
        return cls(
            max_page_search_size=TriState.from_raw(max_page_search_size),
            docs_per_second=TriState.from_raw(docs_per_second),
            dates_as_epoch_millis=TriState.from_raw(dates_as_epoch_millis),
            align_checkpoints=TriState.from_raw(align_checkpoints),
        )

    # -----------------------------
    # Visão de negócio
    # -----------------------------
    def get_max_page_search_size(self) -> Optional[int]:
        return self.max_page_search_size.get()

    def get_docs_per_second(self) -> Optional[float]:
        return self.docs_per_second.get()

    def get_dates_as_epoch_millis(self) -> Optional[bool]:
        return self.dates_as_epoch_millis.get(DATES_AS_EPOCH_MILLIS_DEFAULT)

    def get_align_checkpoints(self) -> Optional[bool]:
        return self.align_checkpoints.get(ALIGN_CHECKPOINTS_DEFAULT)

    # -----------------------------
    # Visão raw (somente merge)
    # -----------------------------
    def get_dates_as_epoch_millis_for_update(self) -> TriState[bool]:
        return self.dates_as_epoch_millis

    def get_align_checkpoints_for_update(self) -> TriState[bool]:
        return self.align_checkpoints

    def states(self) -> Dict[str, TriState[Any]]:
        """Estados raw por nome de campo, na ordem canônica."""
        return {name: getattr(self, name) for name in FIELD_NAMES}

    def check_for_deprecations(
        self, config_id: str, on_deprecation: Callable[[Dict[str, Any]], None]
    ) -> None:
        """Ponto de extensão para avisos de depreciação; nenhuma setting está depreciada."""

    def __str__(self) -> str:
        from .document import to_json

        return to_json(self, pretty=True)
