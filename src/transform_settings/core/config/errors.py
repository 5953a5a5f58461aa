# src/transform_settings/core/config/errors.py
"""
Exceções canônicas da camada de configuração de runtime.

A configuração de runtime é o dicionário resolvido (defaults + overrides
locais) que carrega o documento de settings, o update parcial, os limites
injetados e a versão do peer.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao operador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção daqui representa erro no conteúdo das settings
      (ver `core.settings.errors`)

Limites explícitos:
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração de runtime.

    Permite captura genérica de falhas de carregamento, parse e resolução
    sem misturá-las com erros de settings ou de execução de Step.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Arquivo de configuração obrigatório não encontrado.

    O arquivo de defaults é obrigatório; o local é opcional e sua ausência
    não gera este erro.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class ConfigParseError(ConfigError):
    """Conteúdo YAML/JSON malformado."""


class InvalidConfigRootTypeError(ConfigError):
    """
    Raiz do arquivo não é um dicionário (`dict`).

    Listas ou escalares no root são rejeitados sem normalização.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"limits": {"max_page_search_size": 65536}}
        - override: {"limits": "10000"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidLimitsError(ConfigError):
    """Bloco `limits` ausente de forma inválida, com tipo errado ou limite abaixo do mínimo."""
