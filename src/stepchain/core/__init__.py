# src/stepchain/core/__init__.py
"""
Core do stepchain.

Componentes principais:
    - pipeline → registro de handlers, tipos e contexto de eventos
    - engine   → compilação de runnables com cancelamento e fold
    - config   → configuração declarativa (defaults + local)

Princípios fundamentais:
    - Ordem de execução é sempre a ordem de registro
    - Estado de cancelamento é exclusivo de cada run
    - Exceções de handlers nunca são encapsuladas
"""
