# src/stepchain/__init__.py
"""
stepchain — executor mínimo de pipelines sequenciais.

Um Pipeline é uma lista ordenada de handlers. Cada handler recebe o
valor produzido pelo anterior e uma capacidade `cancel`; chamá-la faz
com que os passos seguintes da mesma run sejam pulados.

Arquitetura em alto nível:
    - core.pipeline → Pipeline, tipos, RunContext e resolução declarativa
    - core.engine   → compilação de runnables e fold (sync/async)
    - core.config   → carregamento e merge de configuração declarativa

Limites explícitos:
    - Não é um workflow engine (sem branching, fan-out, retry ou persistência)
    - Não interrompe um passo em execução; cancelar só pula os seguintes
"""
from .core.pipeline.pipeline import Pipeline, create_pipeline
from .core.pipeline.context import RunContext, new_run_context
from .core.pipeline.types import RunStatus
from .core.pipeline.registry import pipeline_from_config, resolve_handler
from .core.config.loader import load_config

__all__ = [
    "Pipeline",
    "create_pipeline",
    "RunContext",
    "new_run_context",
    "RunStatus",
    "load_config",
    "pipeline_from_config",
    "resolve_handler",
]
