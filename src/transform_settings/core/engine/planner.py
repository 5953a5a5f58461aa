# src/transform_settings/core/engine/planner.py
"""
Planner de execução dos Steps de settings.

Produz uma ordem topológica determinística (Kahn, desempate lexicográfico
por `step.id`) e rejeita grafos inválidos antes de qualquer execução.

Invariantes:
    - Nenhum Step aparece antes de suas dependências
    - A mesma entrada sempre produz a mesma ordem
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

from transform_settings.core.pipeline.step import Step


class UnknownDependencyError(ValueError):
    """Um Step declarou em `depends_on` um id que não foi registrado."""


class CycleDetectedError(ValueError):
    """O grafo de dependências contém um ciclo."""


def plan_execution(steps: Iterable[Step]) -> List[Step]:
    """
    Valida os Steps e devolve a ordem de execução.

    Raises:
        ValueError: Se algum Step possuir `id` inválido ou duplicado.
        UnknownDependencyError: Se um Step declarar dependência inexistente.
        CycleDetectedError: Se houver ciclo no grafo.
    """
    by_id: Dict[str, Step] = {}
    for s in steps:
        sid = getattr(s, "id", None)
        if not isinstance(sid, str) or not sid.strip():
            raise ValueError("step.id must be a non-empty string")
        if sid in by_id:
            raise ValueError(f"Duplicate step id: {sid}")
        by_id[sid] = s

    incoming: Dict[str, int] = {}
    outgoing: Dict[str, Set[str]] = {sid: set() for sid in by_id}
    for sid, s in by_id.items():
        deps = list(getattr(s, "depends_on", []) or [])
        for dep in deps:
            if dep not in by_id:
                raise UnknownDependencyError(f"Step '{sid}' depends on unknown step '{dep}'")
            outgoing[dep].add(sid)
        incoming[sid] = len(deps)

    ready: List[str] = sorted(sid for sid, n in incoming.items() if n == 0)
    order: List[str] = []
    while ready:
        sid = ready.pop(0)
        order.append(sid)
        for child in outgoing[sid]:
            incoming[child] -= 1
            if incoming[child] == 0:
                ready.append(child)
        ready.sort()

    if len(order) != len(by_id):
        raise CycleDetectedError("Cycle detected in step dependency graph")

    return [by_id[sid] for sid in order]
