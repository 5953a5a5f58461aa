# src/transform_settings/core/settings/tristate.py
"""
Valor tri-state canônico das settings de um transform.

Cada tunable opcional de um transform pode estar em exatamente um de três
estados:

    - UNSET   → o usuário não opinou; vale o default do sistema
    - DEFAULT → o usuário pediu explicitamente o default do sistema
    - VALUE   → o usuário definiu um valor concreto

Componentes principais:
    - TriStateKind → enum textual dos três estados
    - TriState     → união etiquetada (imutável) parametrizada pelo tipo do valor
    - RESET        → sentinela "raw" que representa DEFAULT fora do TriState

A forma "raw" (`None` / `RESET` / valor) é usada apenas nas bordas: pelo
builder ao aplicar updates parciais e pelo codec binário ao escrever o slot.

Invariantes:
    - Um TriState VALUE nunca carrega `None` nem `RESET`
    - UNSET e DEFAULT nunca carregam valor
    - Instâncias são imutáveis, comparáveis por valor e hashable

Limites explícitos:
    - Não valida faixas de valores (responsabilidade do validator)
    - Não conhece nomes de campos nem versões de protocolo
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar


T = TypeVar("T")
U = TypeVar("U")


class _Reset:
    """Sentinela única de reset (explicitamente "use o default")."""

    _instance: Optional["_Reset"] = None

    def __new__(cls) -> "_Reset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "RESET"

    def __reduce__(self) -> str:
        return "RESET"


RESET = _Reset()


class TriStateKind(str, Enum):
    """Estados possíveis de um campo tri-state."""

    UNSET = "unset"
    DEFAULT = "default"
    VALUE = "value"


@dataclass(frozen=True)
class TriState(Generic[T]):
    """
    União etiquetada UNSET | DEFAULT | VALUE(T).

    Construa sempre via `unset()`, `default()`, `of(value)`, `from_raw(raw)`
    ou `from_nullable(value)`; o construtor direto existe apenas para o
    dataclass e valida a combinação (kind, value).
    """

    kind: TriStateKind
    value: Optional[T] = None

    def __post_init__(self) -> None:
        if self.kind is TriStateKind.VALUE:
            if self.value is None or self.value is RESET:
                raise ValueError("TriState VALUE requires a concrete value")
        elif self.value is not None:
            raise ValueError(f"TriState {self.kind.value} must not carry a value")

    # -----------------------------
    # Construção
    # -----------------------------
    @classmethod
    def unset(cls) -> "TriState[Any]":
        return cls(TriStateKind.UNSET)

    @classmethod
    def default(cls) -> "TriState[Any]":
        return cls(TriStateKind.DEFAULT)

    @classmethod
    def of(cls, value: T) -> "TriState[T]":
        return cls(TriStateKind.VALUE, value)

    @classmethod
    def from_raw(cls, raw: Any) -> "TriState[Any]":
        """`None` → UNSET, `RESET` → DEFAULT, qualquer outro valor → VALUE."""
        if raw is None:
            return cls.unset()
        if raw is RESET:
            return cls.default()
        return cls.of(raw)

    @classmethod
    def from_nullable(cls, value: Optional[T]) -> "TriState[T]":
        """Semântica de setter: `None` significa reset explícito (DEFAULT)."""
        if value is None:
            return cls.default()
        return cls.of(value)

    # -----------------------------
    # Inspeção
    # -----------------------------
    @property
    def is_unset(self) -> bool:
        return self.kind is TriStateKind.UNSET

    @property
    def is_default(self) -> bool:
        return self.kind is TriStateKind.DEFAULT

    @property
    def is_value(self) -> bool:
        return self.kind is TriStateKind.VALUE

    @property
    def has_override(self) -> bool:
        """True apenas quando existe valor a ser escrito no documento textual."""
        return self.is_value

    @property
    def raw(self) -> Any:
        """Forma raw: `None` (UNSET), `RESET` (DEFAULT) ou o próprio valor."""
        if self.is_unset:
            return None
        if self.is_default:
            return RESET
        return self.value

    def get(self, default_view: Optional[T] = None) -> Optional[T]:
        """
        Resolve para o valor de negócio.

        UNSET resolve sempre para `None`; DEFAULT resolve para `default_view`
        (cada campo decide sua visão do default); VALUE resolve para o valor.
        """
        if self.is_unset:
            return None
        if self.is_default:
            return default_view
        return self.value

    def map(self, fn: Callable[[T], U]) -> "TriState[U]":
        """Transforma o valor preservando o estado."""
        if self.is_value:
            return TriState.of(fn(self.value))  # type: ignore[arg-type]
        return TriState(self.kind)

    def __repr__(self) -> str:
        if self.is_value:
            return f"TriState.of({self.value!r})"
        return f"TriState.{self.kind.value}()"


UNSET: TriState[Any] = TriState.unset()
DEFAULT: TriState[Any] = TriState.default()
