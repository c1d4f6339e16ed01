# src/stepchain/core/pipeline/__init__.py
"""
# Pipeline Core — stepchain

Este pacote define a superfície pública de execução do stepchain.

## Componentes

- **types**: `Handler`, `CancelFn`, `RunStatus`, `RunEvent`
- **context**: `RunContext`, eventos estruturados por run
- **pipeline**: `Pipeline` e `create_pipeline`
- **registry**: resolução de handlers a partir de configuração

## Invariantes

- Ordem de execução == ordem de registro
- Cada run compila seus próprios runnables, com flag própria
"""
