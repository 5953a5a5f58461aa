# src/transform_settings/core/pipeline/__init__.py
"""
# Pipeline Core: Steps de settings

Contratos e estruturas compartilhadas pelos Steps que carregam, atualizam
e serializam as settings de um transform.

## Componentes

- **types**: `StepStatus`, `StepKind`, `StepResult`
- **step**: `Step` (Protocol)
- **context**: `RunContext` (artefatos, eventos de log, warnings)

## Invariantes

- Cada Step possui um `id` único
- Estado compartilhado é sempre explícito e rastreável via `RunContext`
"""

from .context import RunContext
from .step import Step
from .types import StepKind, StepResult, StepStatus

__all__ = ["RunContext", "Step", "StepKind", "StepResult", "StepStatus"]
