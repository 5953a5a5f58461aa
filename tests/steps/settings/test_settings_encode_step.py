# tests/steps/settings/test_settings_encode_step.py
"""
Testes do Step canônico `settings.encode`.

Os testes asseguram que:
- as settings são serializadas na versão do peer
- overrides que o peer não entende geram warning e não são enviados
- versão de peer inválida é erro de configuração
"""

import pytest

try:
    from transform_settings.core.pipeline.types import StepKind, StepStatus
    from transform_settings.core.settings import (
        DEFAULT,
        V_7_11_0,
        SettingsConfig,
        decode_settings,
        encode_settings,
    )
    from transform_settings.steps.settings import SettingsEncodeStep
except Exception as e:  # noqa: BLE001
    SettingsEncodeStep = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing settings.encode step. Implement:\n"
            "- src/transform_settings/steps/settings/encode.py (SettingsEncodeStep)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _ctx_with(make_ctx, config, settings):
    ctx = make_ctx(config)
    ctx.set_artifact("settings.config", settings)
    return ctx


def test_encode_for_current_peer(make_ctx, all_values_settings):
    _require_imports()
    ctx = _ctx_with(make_ctx, {}, all_values_settings)
    r = SettingsEncodeStep().run(ctx)

    assert r.status == StepStatus.SUCCESS
    assert r.kind == StepKind.ENCODE
    data = ctx.get_artifact("settings.wire")
    assert data == encode_settings(all_values_settings)
    assert decode_settings(data) == all_values_settings
    assert r.payload == {"peer_version": "7.15.0", "bytes": len(data), "dropped_fields": []}
    assert r.warnings == []


def test_old_peer_drops_overrides_with_warning(make_ctx, all_values_settings):
    """
    Verifica o encode para um peer 7.11.0.

    Invariantes:
        - align_checkpoints não é enviado
        - um warning por campo descartado
        - o peer lê DEFAULT no campo descartado
    """
    _require_imports()
    ctx = _ctx_with(make_ctx, {"transport": {"peer_version": "7.11.0"}}, all_values_settings)
    r = SettingsEncodeStep().run(ctx)

    assert r.status == StepStatus.SUCCESS
    assert r.payload["dropped_fields"] == ["align_checkpoints"]
    assert r.warnings == ["align_checkpoints is not supported by peer version 7.11.0 and was not sent"]
    assert ctx.warnings["settings.encode"] == r.warnings

    back = decode_settings(ctx.get_artifact("settings.wire"), V_7_11_0)
    assert back.align_checkpoints == DEFAULT
    assert back.dates_as_epoch_millis == all_values_settings.dates_as_epoch_millis


def test_invalid_peer_version_fails(make_ctx):
    _require_imports()
    ctx = _ctx_with(make_ctx, {"transport": {"peer_version": "latest"}}, SettingsConfig())
    r = SettingsEncodeStep().run(ctx)
    assert r.status == StepStatus.FAILED
    assert r.payload["error"]["type"] == "ENGINE_CONFIGURATION_ERROR"
    assert r.payload["error"]["details"]["peer_version"] == "'latest'"


def test_sentinel_collision_fails_with_wire_payload(make_ctx):
    _require_imports()
    ctx = _ctx_with(make_ctx, {}, SettingsConfig.from_values(docs_per_second=-1.0))
    r = SettingsEncodeStep().run(ctx)
    assert r.status == StepStatus.FAILED
    assert r.payload["error"]["type"] == "SETTINGS_WIRE_ERROR"
    assert ctx.has_artifact("settings.wire") is False


def test_missing_settings_artifact_fails(make_ctx):
    _require_imports()
    r = SettingsEncodeStep().run(make_ctx({}))
    assert r.status == StepStatus.FAILED
    assert r.payload["error"]["details"]["expected_artifact"] == "settings.config"
