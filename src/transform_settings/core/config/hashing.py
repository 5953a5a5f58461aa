# src/transform_settings/core/config/hashing.py
"""
Hashing canônico de configuração e de documentos de settings.

O hash representa a identidade estrutural de um mapa (configuração
resolvida ou documento textual de settings) e é registrado nos payloads
dos Steps para rastreabilidade.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256 em hexadecimal (64 caracteres)

Invariantes:
    - Mapas estruturalmente equivalentes produzem o mesmo hash
    - A ordem original das chaves não afeta o resultado
"""


import json
import hashlib
from typing import Any, Mapping


def compute_config_hash(config: Mapping[str, Any]) -> str:
    """
    Gera o hash SHA-256 do JSON canônico de um dicionário.

    Args:
        config (Mapping[str, Any]): Mapa a ser identificado.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se o objeto fornecido não for um mapa.
    """

    if not isinstance(config, Mapping):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        dict(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
