# src/transform_settings/core/pipeline/types.py
"""
Tipos canônicos dos Steps de settings.

Componentes principais:
    - StepKind   → classificação semântica (parse, merge, encode)
    - StepStatus → estados finais (SUCCESS, SKIPPED, FAILED)
    - StepResult → resultado imutável de um Step

Invariantes:
    - Enums possuem valores textuais estáveis (serializáveis em JSON)
    - StepResult é imutável
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    """
    Classificação semântica de um Step.

    Tipos definidos:
        - PARSE: materializa settings a partir de um documento
        - MERGE: aplica um update parcial sobre settings existentes
        - ENCODE: serializa settings para um peer

    O tipo é puramente informativo; o Engine não decide nada com base nele.
    """
    PARSE = "parse"
    MERGE = "merge"
    ENCODE = "encode"


class StepStatus(str, Enum):
    """Estados finais da execução de um Step."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_id: identificador único do Step
        - kind: tipo semântico do Step
        - status: estado final
        - summary: resumo textual
        - metrics: métricas numéricas
        - warnings: avisos não fatais
        - artifacts: referências a artefatos produzidos
        - payload: dados adicionais (ex.: documento de settings, `error`)
    """
    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, str] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)
