# tests/conftest.py
"""
Fixtures compartilhados para testes do Transform Settings.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos de configuração de runtime em YAML
- configuração mínima já resolvida
- contexto de execução controlado (RunContext)
- settings de exemplo em cada combinação relevante de estados
- Step dummy para testes de planner e engine

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa Steps reais
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config de runtime
# =====================================================

@pytest.fixture
def runtime_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao `config.defaults.yaml` de um deployment.

    Usado para validar leitura YAML, merge com override local e leitura
    de `limits`.
    """
    return """
engine:
  fail_fast: true
limits:
  max_page_search_size: 65536
transport:
  peer_version: "7.15.0"
settings_parsing:
  lenient: false
settings:
  max_page_search_size: 500
steps:
  settings.update:
    enabled: true
""".lstrip()


@pytest.fixture
def runtime_config_local_yaml() -> str:
    """Override local: reduz o limite e troca a versão do peer."""
    return """
limits:
  max_page_search_size: 10000
transport:
  peer_version: "7.11.0"
steps:
  settings.update:
    enabled: false
""".lstrip()


@pytest.fixture
def dummy_config() -> dict:
    """Configuração mínima já resolvida (sem loader, sem merge)."""
    return {
        "engine": {"fail_fast": True},
        "limits": {"max_page_search_size": 10000},
        "settings": {"max_page_search_size": 500},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    `run_id` e `created_at` são fixos para que eventos e asserts sejam
    reprodutíveis.
    """
    from transform_settings.core.pipeline.context import RunContext

    return RunContext(
        run_id="test-run-001",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def make_ctx():
    """Factory de RunContext para testes que montam a própria configuração."""
    from transform_settings.core.pipeline.context import RunContext

    def _make(config: dict, run_id: str = "test-run") -> RunContext:
        return RunContext(
            run_id=run_id,
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            config=config,
        )

    return _make


# =====================================================
# Settings de exemplo
# =====================================================

@pytest.fixture
def all_values_settings():
    """Settings com todos os campos em VALUE."""
    from transform_settings.core.settings import SettingsConfig

    return SettingsConfig.from_values(
        max_page_search_size=500,
        docs_per_second=12.5,
        dates_as_epoch_millis=True,
        align_checkpoints=False,
    )


@pytest.fixture
def all_defaults_settings():
    """Settings com todos os campos explicitamente resetados (DEFAULT)."""
    from transform_settings.core.settings import DEFAULT, SettingsConfig

    return SettingsConfig(
        max_page_search_size=DEFAULT,
        docs_per_second=DEFAULT,
        dates_as_epoch_millis=DEFAULT,
        align_checkpoints=DEFAULT,
    )


@pytest.fixture
def mixed_settings():
    """Um campo em cada estado, mais um VALUE booleano."""
    from transform_settings.core.settings import DEFAULT, UNSET, SettingsConfig, TriState

    return SettingsConfig(
        max_page_search_size=TriState.of(2000),
        docs_per_second=UNSET,
        dates_as_epoch_millis=DEFAULT,
        align_checkpoints=TriState.of(False),
    )


# =====================================================
# Step dummy
# =====================================================

@pytest.fixture
def DummyStep():
    """
    Classe de Step duck-typed para testes de planner e engine.

    `fail=True` faz o Step devolver FAILED; `raises=True` faz o Step
    levantar exceção, exercitando a conversão de erro do Engine.
    """
    from transform_settings.core.pipeline.types import StepKind, StepResult, StepStatus

    class _DummyStep:
        def __init__(self, step_id="settings.dummy", kind=StepKind.PARSE, depends_on=None, fail=False, raises=False):
            self.id = step_id
            self.kind = kind
            self.depends_on = depends_on or []
            self.fail = fail
            self.raises = raises
            self.calls = 0

        def run(self, ctx):
            self.calls += 1
            if self.raises:
                raise RuntimeError(f"{self.id} exploded")
            ctx.set_artifact(f"{self.id}.ok", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED if self.fail else StepStatus.SUCCESS,
                summary="dummy",
            )

    return _DummyStep
