# src/transform_settings/core/settings/builder.py
"""
Builder mutável de settings e merge de updates parciais.

O builder é um objeto de staging: nasce vazio (tudo UNSET) ou a partir dos
estados raw de uma base, acumula atribuições e produz um novo
`SettingsConfig` imutável via `build()`.

Semântica de `update(partial)`, campo a campo, sobre o estado raw:
    - UNSET   → campo do builder não é tocado
    - DEFAULT → campo do builder volta a UNSET (o reset limpa o override,
                não fixa a sentinela de default no resultado)
    - VALUE   → campo do builder é sobrescrito

Limites explícitos:
    - Não é seguro para uso concorrente; cada merge usa sua própria instância
    - Não valida faixas
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .model import FIELD_NAMES, SettingsConfig
from .tristate import TriState


class SettingsBuilder:
    """Staging de um novo `SettingsConfig`."""

    def __init__(self, base: Optional[SettingsConfig] = None) -> None:
        self._states: Dict[str, TriState[Any]] = {name: TriState.unset() for name in FIELD_NAMES}
        if base is not None:
            self._states.update(base.states())

    def set_max_page_search_size(self, max_page_search_size: Optional[int]) -> "SettingsBuilder":
        """
        Tamanho máximo de página usado ao buscar dados na origem.

        Valores válidos ficam entre 10 e o limite injetado; `None` reseta
        para o default.
        """
        self._states["max_page_search_size"] = TriState.from_nullable(max_page_search_size)
        return self

    def set_docs_per_second(self, docs_per_second: Optional[float]) -> "SettingsBuilder":
        """Throttling em documentos por segundo; 0 desliga o throttling, `None` reseta."""
        if docs_per_second is not None:
            docs_per_second = float(docs_per_second)
        self._states["docs_per_second"] = TriState.from_nullable(docs_per_second)
        return self

    def set_dates_as_epoch_millis(self, dates_as_epoch_millis: Optional[bool]) -> "SettingsBuilder":
        self._states["dates_as_epoch_millis"] = TriState.from_nullable(dates_as_epoch_millis)
        return self

    def set_align_checkpoints(self, align_checkpoints: Optional[bool]) -> "SettingsBuilder":
        self._states["align_checkpoints"] = TriState.from_nullable(align_checkpoints)
        return self

    def update(self, partial: SettingsConfig) -> "SettingsBuilder":
        """Aplica um update parcial usando os estados raw de `partial`."""
        for name, state in partial.states().items():
            if state.is_unset:
                continue
            if state.is_default:
                self._states[name] = TriState.unset()
            else:
                self._states[name] = state
        return self

    def build(self) -> SettingsConfig:
        return SettingsConfig(**self._states)
