# tests/conftest.py
"""
Fixtures compartilhados para testes do stepchain.

Este módulo define fixtures reutilizáveis que fornecem:
- handlers dummy com registro de chamadas
- RunContext determinístico para testes de eventos
- conteúdos YAML de configuração (defaults e local)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Handlers dummy utilizam duck typing, sem mocks
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa pipeline
    - Nenhuma fixture realiza I/O

Este módulo existe como infraestrutura de teste e não
como validação funcional do stepchain.
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Handlers
# =====================================================

@pytest.fixture
def RecordingHandler():
    """
    Fixture factory que fornece a classe de handler com registro de chamadas.

    Retorna a *classe* (não uma instância), permitindo que cada teste
    configure valor de retorno, cancelamento, exceção e modo assíncrono.

    Returns:
        type: Classe RecordingHandler.
    """
    from tests.fixtures.handlers import RecordingHandler as _RecordingHandler

    return _RecordingHandler


# =====================================================
# RunContext
# =====================================================

@pytest.fixture
def dummy_ctx():
    """
    Fixture que fornece um RunContext determinístico para testes.

    Decisões arquiteturais:
        - `run_id` e `created_at` são fixos para garantir determinismo
        - O import é lazy para expor erros de import com clareza

    Returns:
        RunContext: Contexto isolado, com status PENDING e sem eventos.
    """
    from stepchain.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        meta={"source": "pytest"},
    )


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) declarando um pipeline de dois passos.

    Returns:
        str: Conteúdo de um `config.defaults.yaml`.
    """
    return """\
pipeline:
  name: numbers
  handlers:
    - tests.fixtures.handlers:double
    - tests.fixtures.handlers:add_one
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de configuração local (override) que substitui a lista de handlers.

    Listas são sobrescritas integralmente pelo deep-merge.

    Returns:
        str: Conteúdo de um `config.local.yaml`.
    """
    return """\
pipeline:
  handlers:
    - tests.fixtures.handlers:add_one
    - tests.fixtures.handlers:stop_here
    - tests.fixtures.handlers:double
"""
