# src/transform_settings/core/config/__init__.py

"""
Camada de configuração de runtime.

Responsabilidades do pacote:
    - Leitura de arquivos YAML/JSON (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Hash canônico para rastreabilidade

A configuração de runtime transporta, entre outros, o documento de
settings (`settings`), o update parcial (`settings_update`), os limites
injetados (`limits`) e a versão do peer (`transport.peer_version`).

Limites explícitos:
    - Não interpreta settings tri-state
    - Não executa Steps
"""
