# src/transform_settings/core/__init__.py
"""
Core do Transform Settings.

Componentes principais:
    - settings → modelo tri-state, validação, codecs textual e binário, builder
    - config   → configuração de runtime (loader, merge, hashing)
    - pipeline → contrato de Step, RunContext e tipos de resultado
    - engine   → planejamento e execução dos Steps
    - errors   → payloads canônicos de erro

Princípios fundamentais:
    - `core.settings` é puro: sem I/O de rede, sem log, sem retry
    - Toda observabilidade passa pelos eventos estruturados do RunContext
"""
