# src/transform_settings/core/config/loader.py
"""
Loader canônico da configuração de runtime.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Ler arquivos YAML ou JSON como dicionários (`read_mapping_file`)
    - Resolver a configuração final via `deep_merge`
    - Garantir precedência do override local sobre defaults

O leitor de arquivos também é usado por `core.settings.document.load_settings`
para carregar documentos de settings.

Invariantes:
    - O arquivo de defaults é obrigatório
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não interpreta o documento de settings (ver `core.settings`)
    - Não valida limites (ver `SettingsLimits.from_config`)
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


def read_mapping_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo YAML/JSON e garante que a raiz é um dicionário.

    Arquivos vazios são interpretados como dicionários vazios.

    Args:
        path (Path): Caminho do arquivo.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o conteúdo não puder ser parseado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    try:
        if suffix in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

        elif suffix == ".json":
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)

        else:
            raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"Falha ao parsear {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva de runtime.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; se informado mas inexistente, é ignorado
        - Quando presente, o local sempre tem prioridade sobre defaults

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        ConfigParseError: Se algum arquivo estiver malformado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    effective = read_mapping_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, read_mapping_file(local_file))

    return effective
