# tests/core/settings/test_model.py
"""
Testes da entidade `SettingsConfig`.

Os testes asseguram que:
- todos os campos nascem UNSET
- a entidade é imutável e comparável por valor
- a visão de negócio respeita a assimetria dos booleanos
- a visão raw preserva o estado tri-state para o merge

Decisões arquiteturais:
    - A construção não valida faixas; apenas tipos de campo
    - DEFAULT numérico é lido como `None` na visão de negócio

Limites explícitos:
    - Não valida faixas (ver test_validation.py)
    - Não valida codecs (ver test_wire.py e test_document.py)
"""

import dataclasses
import json

import pytest

try:
    from transform_settings.core.settings.model import FIELD_NAMES, SettingsConfig
    from transform_settings.core.settings.tristate import DEFAULT, UNSET, TriState
except Exception as e:  # noqa: BLE001
    SettingsConfig = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing settings model. Implement:\n"
            "- src/transform_settings/core/settings/model.py (SettingsConfig)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_fresh_settings_are_all_unset():
    _require_imports()
    s = SettingsConfig()
    assert all(state == UNSET for state in s.states().values())
    assert list(s.states()) == list(FIELD_NAMES)
    assert s.get_max_page_search_size() is None
    assert s.get_docs_per_second() is None
    assert s.get_dates_as_epoch_millis() is None
    assert s.get_align_checkpoints() is None


def test_settings_are_immutable():
    _require_imports()
    s = SettingsConfig.from_values(max_page_search_size=500)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.max_page_search_size = TriState.of(1000)  # type: ignore[misc]


def test_equality_and_hash_are_structural():
    _require_imports()
    a = SettingsConfig.from_values(max_page_search_size=500, align_checkpoints=False)
    b = SettingsConfig(max_page_search_size=TriState.of(500), align_checkpoints=TriState.of(False))
    assert a == b
    assert hash(a) == hash(b)
    assert a != SettingsConfig(max_page_search_size=TriState.of(500), align_checkpoints=DEFAULT)


def test_boolean_default_views_are_asymmetric(all_defaults_settings):
    """
    Verifica a leitura de DEFAULT na visão de negócio.

    Invariantes:
        - `align_checkpoints` em DEFAULT → True
        - `dates_as_epoch_millis` em DEFAULT → False
        - campos numéricos em DEFAULT → None
    """
    _require_imports()
    s = all_defaults_settings
    assert s.get_align_checkpoints() is True
    assert s.get_dates_as_epoch_millis() is False
    assert s.get_max_page_search_size() is None
    assert s.get_docs_per_second() is None


def test_business_view_returns_values(all_values_settings):
    _require_imports()
    s = all_values_settings
    assert s.get_max_page_search_size() == 500
    assert s.get_docs_per_second() == 12.5
    assert s.get_dates_as_epoch_millis() is True
    assert s.get_align_checkpoints() is False


def test_raw_update_view_keeps_tristate(all_defaults_settings):
    _require_imports()
    assert all_defaults_settings.get_align_checkpoints_for_update() == DEFAULT
    assert all_defaults_settings.get_dates_as_epoch_millis_for_update() == DEFAULT
    assert SettingsConfig().get_align_checkpoints_for_update() == UNSET


def test_non_tristate_field_is_rejected():
    _require_imports()
    with pytest.raises(TypeError):
        SettingsConfig(max_page_search_size=500)  # type: ignore[arg-type]


def test_out_of_range_value_is_constructible():
    _require_imports()
    s = SettingsConfig.from_values(max_page_search_size=9)
    assert s.get_max_page_search_size() == 9


def test_str_renders_pretty_document(mixed_settings):
    _require_imports()
    text = str(mixed_settings)
    assert "\n" in text
    assert json.loads(text) == {"max_page_search_size": 2000, "align_checkpoints": False}


def test_check_for_deprecations_reports_nothing(all_values_settings):
    _require_imports()
    seen = []
    all_values_settings.check_for_deprecations("my-transform", seen.append)
    assert seen == []
