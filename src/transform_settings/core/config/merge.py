# src/transform_settings/core/config/merge.py
"""
Deep-merge canônico da configuração de runtime.

Resolve a configuração efetiva a partir dos defaults e de um override
local. Note que este merge atua sobre o dicionário de runtime inteiro; o
merge campo a campo das settings de um transform (com semântica tri-state)
é responsabilidade de `core.settings.builder`.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - `None` no override → sobrescrita direta (preserva o `null` explícito
      de documentos de settings aninhados)
    - conflito de tipos → `ConfigTypeConflictError`

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novo dicionário resultante.

    Raises:
        ConfigTypeConflictError: Se uma chave tiver tipos incompatíveis.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        if isinstance(override_value, list) or override_value is None or base_value is None:
            result[key] = deepcopy(override_value)
            continue

        # int -> float é aceito (ex.: docs_per_second: 100 -> 12.5)
        numeric = (int, float)
        if (
            isinstance(base_value, numeric)
            and isinstance(override_value, numeric)
            and not isinstance(base_value, bool)
            and not isinstance(override_value, bool)
        ):
            result[key] = override_value
            continue

        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
