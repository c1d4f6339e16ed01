# src/stepchain/core/config/__init__.py

"""
Camada de configuração declarativa do stepchain.

O engine não possui configuração própria; este pacote existe apenas para
declarar pipelines em arquivos (YAML/JSON), com defaults obrigatórios e
overrides locais opcionais resolvidos por deep-merge.
"""
