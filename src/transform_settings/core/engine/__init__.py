# src/transform_settings/core/engine/__init__.py
"""
Engine dos Steps de settings.

Componentes principais:
    - planner → ordem topológica determinística e validações estruturais
    - engine  → execução coordenada com políticas explícitas (skip, fail-fast)

Invariantes:
    - Steps só são executados após suas dependências
    - Cada Step é executado no máximo uma vez por run
"""

from .engine import Engine, RunResult
from .planner import CycleDetectedError, UnknownDependencyError, plan_execution

__all__ = ["Engine", "RunResult", "CycleDetectedError", "UnknownDependencyError", "plan_execution"]
