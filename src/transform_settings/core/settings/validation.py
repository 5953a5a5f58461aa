# src/transform_settings/core/settings/validation.py
"""
Validação de faixas das settings de um transform.

A validação é uma passada separada da construção: um `SettingsConfig` pode
carregar transitoriamente um VALUE fora da faixa, e por isso esta checagem
deve rodar antes que as settings sejam persistidas ou aplicadas.

Política (v1):
    - Violações são acumuladas, nunca fail-fast
    - UNSET e DEFAULT são sempre válidos
    - O limite superior de `max_page_search_size` é injetado (`SettingsLimits`)
    - `docs_per_second` precisa ser finito e diferente da sentinela -1.0 do wire

Limites explícitos:
    - Não levanta exceção para input inválido (exceto `ensure_valid`)
    - Não decide se violações bloqueiam a operação; isso cabe ao chamador
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from transform_settings.core.config.errors import InvalidLimitsError

from .errors import SettingsValidationError
from .model import MAX_PAGE_SEARCH_SIZE, SettingsConfig
from .wire import DEFAULT_FLOAT_SENTINEL, MAX_INT32


MIN_PAGE_SEARCH_SIZE = 10
DEFAULT_MAX_BUCKETS = 65536


@dataclass(frozen=True)
class SettingsLimits:
    """Limites injetados na validação."""

    max_page_search_size: int = DEFAULT_MAX_BUCKETS

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "SettingsLimits":
        """
        Lê `limits` da configuração efetiva.

        Ausência de `limits` (ou da chave) mantém o default.

        Raises:
            InvalidLimitsError: se `limits` não for um mapa ou o limite não
                for um inteiro entre MIN_PAGE_SEARCH_SIZE e MAX_INT32.
        """
        limits = (config or {}).get("limits")
        if limits is None:
            return cls()
        if not isinstance(limits, dict):
            raise InvalidLimitsError(
                f"limits deve ser dict, recebido: {type(limits).__name__}"
            )

        upper = limits.get(MAX_PAGE_SEARCH_SIZE, DEFAULT_MAX_BUCKETS)
        if isinstance(upper, bool) or not isinstance(upper, int):
            raise InvalidLimitsError(
                f"limits.{MAX_PAGE_SEARCH_SIZE} deve ser int, recebido: {type(upper).__name__}"
            )
        if upper < MIN_PAGE_SEARCH_SIZE:
            raise InvalidLimitsError(
                f"limits.{MAX_PAGE_SEARCH_SIZE} deve ser >= {MIN_PAGE_SEARCH_SIZE}, recebido: {upper}"
            )
        if upper > MAX_INT32:
            raise InvalidLimitsError(
                f"limits.{MAX_PAGE_SEARCH_SIZE} deve caber em int32 (<= {MAX_INT32}), recebido: {upper}"
            )
        return cls(max_page_search_size=upper)


def _check_max_page_search_size(settings: SettingsConfig, limits: SettingsLimits, errors: List[str]) -> None:
    state = settings.max_page_search_size
    if not state.is_value:
        return
    value = state.value
    if value < MIN_PAGE_SEARCH_SIZE or value > limits.max_page_search_size:
        errors.append(
            f"settings.max_page_search_size [{value}] is out of range. "
            f"The minimum value is {MIN_PAGE_SEARCH_SIZE} and the maximum is {limits.max_page_search_size}"
        )


def _check_docs_per_second(settings: SettingsConfig, limits: SettingsLimits, errors: List[str]) -> None:
    state = settings.docs_per_second
    if not state.is_value:
        return
    value = state.value
    if not math.isfinite(value):
        errors.append(f"settings.docs_per_second [{value}] must be a finite number")
    elif value == DEFAULT_FLOAT_SENTINEL:
        # -1.0 é a sentinela de DEFAULT no wire
        errors.append(
            f"settings.docs_per_second [{value}] is reserved. Use null to reset to the default"
        )


_CHECKS: List[Callable[[SettingsConfig, SettingsLimits, List[str]], None]] = [
    _check_max_page_search_size,
    _check_docs_per_second,
]


def validate_settings(
    settings: SettingsConfig,
    limits: Optional[SettingsLimits] = None,
    errors: Optional[List[str]] = None,
) -> List[str]:
    """
    Valida as settings e retorna a lista (possivelmente vazia) de violações.

    Quando `errors` é informado, as novas violações são acrescentadas a ele e
    a mesma lista é retornada, permitindo acumular validações de camadas
    diferentes em um único resultado.
    """
    limits = limits or SettingsLimits()
    acc: List[str] = errors if errors is not None else []
    for check in _CHECKS:
        check(settings, limits, acc)
    return acc


def ensure_valid(settings: SettingsConfig, limits: Optional[SettingsLimits] = None) -> SettingsConfig:
    """
    Retorna as próprias settings se válidas.

    Raises:
        SettingsValidationError: com todas as violações encontradas.
    """
    errors = validate_settings(settings, limits)
    if errors:
        raise SettingsValidationError(errors)
    return settings
