# tests/core/config/test_loader.py
"""
Testes do carregador de configuração de runtime (load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional
- formatos não suportados são rejeitados
- conteúdo malformado vira `ConfigParseError`
- a configuração final é corretamente resolvida (defaults + local)

Decisões arquiteturais:
    - A configuração é declarativa e baseada em arquivos
    - Defaults representam a base canônica
    - Configuração local atua apenas como override explícito

Invariantes:
    - A configuração final é sempre um dicionário
    - Nenhuma configuração parcial é retornada em caso de erro

Limites explícitos:
    - Não valida o documento de settings (ver tests/core/settings)
    - Não valida `limits` (ver test_validation.py)
"""

import pytest
from pathlib import Path

try:
    from transform_settings.core.config.loader import load_config, read_mapping_file
    from transform_settings.core.config.errors import (
        ConfigFileNotFoundError,
        ConfigParseError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    ConfigFileNotFoundError = None
    InvalidConfigRootTypeError = None
    UnsupportedConfigFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam disponíveis.

    Decisões arquiteturais:
        - Falha antecipada e explícita quando contratos do loader estão ausentes
        - Mensagem de erro descreve exatamente os módulos esperados

    Limites explícitos:
        - Não valida comportamento do `load_config`
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/transform_settings/core/config/loader.py (load_config, read_mapping_file)\n"
            "- src/transform_settings/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que a ausência do arquivo defaults é tratada como erro fatal.

    Invariantes:
        - A exceção utilizada é específica (`ConfigFileNotFoundError`)
        - Nenhuma configuração parcial é retornada
    """
    _require_imports()
    missing = tmp_path / "defaults.yaml"
    with pytest.raises(ConfigFileNotFoundError):
        load_config(defaults_path=str(missing), local_path=None)


def test_missing_local_is_ok(tmp_path: Path, runtime_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(runtime_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["engine"]["fail_fast"] is True
    assert out["limits"]["max_page_search_size"] == 65536
    assert out["steps"]["settings.update"]["enabled"] is True


def test_load_defaults_and_local(tmp_path: Path, runtime_config_defaults_yaml, runtime_config_local_yaml):
    """
    Verifica o carregamento e merge de defaults + local.

    Invariantes:
        - Overrides locais têm precedência sobre defaults
        - Chaves não sobrescritas permanecem inalteradas
        - O documento de settings dos defaults sobrevive ao merge
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(runtime_config_defaults_yaml, encoding="utf-8")
    local.write_text(runtime_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["limits"]["max_page_search_size"] == 10000
    assert out["transport"]["peer_version"] == "7.11.0"
    assert out["steps"]["settings.update"]["enabled"] is False
    assert out["engine"]["fail_fast"] is True
    assert out["settings"] == {"max_page_search_size": 500}


def test_json_defaults_are_supported(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text('{"settings": {"align_checkpoints": null}}', encoding="utf-8")
    out = load_config(defaults_path=str(defaults))
    assert out == {"settings": {"align_checkpoints": None}}


def test_empty_file_is_empty_dict(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yml"
    defaults.write_text("", encoding="utf-8")
    assert read_mapping_file(defaults) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("engine = { fail_fast = true }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_malformed_content_raises_parse_error(tmp_path: Path):
    _require_imports()
    bad_yaml = tmp_path / "defaults.yaml"
    bad_yaml.write_text("settings: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config(defaults_path=str(bad_yaml))

    bad_json = tmp_path / "defaults.json"
    bad_json.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config(defaults_path=str(bad_json))
