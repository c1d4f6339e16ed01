# src/stepchain/core/config/errors.py
"""
Exceções canônicas da camada de configuração do stepchain.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, merge e resolução de handlers de uma configuração
declarativa de pipeline.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Nenhuma exceção aqui representa falha de handler em execução

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
"""

from stepchain.core.exceptions import StepchainException


class ConfigError(StepchainException):
    """
    Exceção base para erros relacionados à configuração do stepchain.

    Permite captura genérica de erros de configuração e distingue falhas
    estruturais de falhas de handlers (que nunca são encapsuladas).
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não há criação automática de defaults
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando uma estrutura da configuração não tem o
    tipo esperado (raiz que não é `dict`, `pipeline.handlers` que não é lista).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"pipeline": {"handlers": [...]}}
        - override: {"pipeline": "disabled"}

    Limites explícitos:
        - Não realiza coerção ou conversão de tipos
    """


class HandlerResolutionError(ConfigError):
    """
    Exceção levantada quando uma referência de handler (`modulo:atributo`)
    não pode ser resolvida para um callable.
    """
