# src/transform_settings/core/pipeline/step.py
"""
Contrato canônico de Step.

Um Step é a menor unidade executável que consome ou produz settings:
parse de documento, merge de update parcial ou encode para um peer.

Princípios fundamentais:
    - Steps não conhecem o Engine
    - Comunicação entre Steps é mediada pelo RunContext
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - Cada Step possui um `id` único
    - Cada Step declara explicitamente suas dependências
    - `run` retorna sempre um `StepResult`
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable, List

from .context import RunContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    """
    Interface mínima de um Step executável pelo Engine.

    Atributos obrigatórios:
        - id: identificador único e estável
        - kind: classificação semântica (`StepKind`)
        - depends_on: ids dos Steps dos quais depende
    """

    id: str
    kind: StepKind
    depends_on: List[str]

    def run(self, ctx: RunContext) -> StepResult:
        """Executa a etapa uma única vez usando exclusivamente o RunContext."""
        ...
